"""
DevOps Pipeline App - Schemas

Pydantic models for response validation and Swagger documentation.
"""

from pydantic import BaseModel, Field

# --- Response Models ---


class RootResponse(BaseModel):
    """Service info returned by GET /."""

    message: str = Field(
        ...,
        description="Greeting message",
    )
    version: str = Field(
        ...,
        description="Application version (APP_VERSION, default 1.0.0)",
    )
    timestamp: str = Field(
        ...,
        description="Current server time, ISO-8601 UTC",
    )
    environment: str = Field(
        ...,
        description="Deployment environment label",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "message": "Hello from DevOps Pipeline!",
                "version": "1.0.0",
                "timestamp": "2026-10-18T10:00:00.000Z",
                "environment": "production",
            }
        },
    }


class MemoryUsage(BaseModel):
    """Process memory usage, in bytes except for gc_objects."""

    rss: int = Field(..., description="Current resident set size in bytes")
    peak_rss: int = Field(..., description="Peak resident set size in bytes")
    gc_objects: int = Field(..., description="Objects tracked by the garbage collector")

    model_config = {"frozen": True}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(
        ...,
        description="Service status",
    )
    uptime: float = Field(
        ...,
        description="Seconds since process start",
    )
    memory: MemoryUsage = Field(
        ...,
        description="Process memory usage snapshot",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "status": "healthy",
                "uptime": 42.17,
                "memory": {"rss": 52428800, "peak_rss": 53477376, "gc_objects": 61234},
            }
        },
    }
