"""
API Routes - combines all route modules
"""

from api.health import router as health_router
from api.root import router as root_router
from fastapi import APIRouter

router = APIRouter()
router.include_router(root_router)
router.include_router(health_router)
