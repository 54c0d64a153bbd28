"""
Announcer Backend — Pydantic Response Schemas
==============================================

What:  Pydantic models defining the JSON contract of the API.
How:   FastAPI serializes route return values through these models and
       documents them in the OpenAPI schema.

The list endpoint returns a bare JSON array of AnnouncementResponse
objects, which is what the browser client iterates over.
"""

from pydantic import BaseModel, Field


class AnnouncementResponse(BaseModel):
    """
    What:  One announcement as returned by GET /api/announcements.
    Who:   Rendered by the browser client as "<id>: <message>".
    """
    id: int = Field(description="Store-assigned announcement identifier")
    message: str = Field(description="Announcement text (max 255 characters)")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """Error body for failed API calls, e.g. {"error": "Database error"}."""
    error: str = Field(description="Generic error description")
