"""API response schemas.

Request bodies are validated by hand in `validation.py` so each failure gets
its own message; responses are declared here for OpenAPI docs and
`response_model=...`.
"""

from pydantic import BaseModel


class SchoolWithDistance(BaseModel):
    """A stored school plus its distance (km) from the query point."""

    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    distance: float


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
