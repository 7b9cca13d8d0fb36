from .teams import router as teams_router
from .invite import router as invite_router
from .config import router as config_router
from .health import router as health_router
from .manage import router as manage_router

__all__ = ["teams_router", "invite_router", "config_router", "health_router", "manage_router"]
