"""
Pydantic schemas for the gateway's own endpoints.

These schemas define the API contract of the host application.
No business logic belongs here.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
