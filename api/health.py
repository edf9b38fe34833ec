"""
DevOps Pipeline App - Health Endpoint

GET /health - Returns service health status, uptime, and memory usage
"""

from config import HEALTHY_STATUS
from fastapi import APIRouter
from process_stats import memory_snapshot, uptime
from schemas import HealthResponse, MemoryUsage

router = APIRouter(tags=["Health"])


@router.api_route(
    "/health",
    methods=["GET", "HEAD"],
    summary="Health check",
    description="Returns the health status of the service with process uptime and memory usage.",
    response_model=HealthResponse,
)
async def health():
    return HealthResponse(
        status=HEALTHY_STATUS,
        uptime=uptime(),
        memory=MemoryUsage(**memory_snapshot()),
    )
