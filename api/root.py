"""
DevOps Pipeline App - Root Endpoint

GET / - Returns service info and version
"""

from datetime import datetime, timezone

from config import APP_ENVIRONMENT, APP_MESSAGE, get_app_version
from fastapi import APIRouter
from schemas import RootResponse


def iso_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


router = APIRouter(tags=["Info"])


@router.api_route(
    "/",
    methods=["GET", "HEAD"],
    summary="Service info",
    description="Returns a greeting, the application version, the current time, and the environment label.",
    response_model=RootResponse,
)
async def root():
    return RootResponse(
        message=APP_MESSAGE,
        version=get_app_version(),
        timestamp=iso_timestamp(),
        environment=APP_ENVIRONMENT,
    )
