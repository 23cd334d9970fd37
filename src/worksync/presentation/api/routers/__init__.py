"""API routers."""

from worksync.presentation.api.routers.auth import router as auth_router
from worksync.presentation.api.routers.schedule import router as schedule_router
from worksync.presentation.api.routers.shifts import router as shifts_router
from worksync.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "schedule_router",
    "shifts_router",
    "users_router",
]
