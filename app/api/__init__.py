# API endpoints and routers

from .guide_endpoints import router as guide_router
from .admin_endpoints import router as admin_router
from .advisor_endpoints import router as advisor_router
from .health_endpoints import router as health_router

__all__ = [
    "guide_router",
    "admin_router",
    "advisor_router",
    "health_router",
]
