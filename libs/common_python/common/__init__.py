"""Shared helpers for the school directory services.

Dependency-light utilities reused by service entrypoints: logging setup and
SQLAlchemy engine/session construction.
"""
