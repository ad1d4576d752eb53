"""API routers package."""

from .formatting import router as formatting_router
from .system import router as system_router

__all__ = [
    "formatting_router",
    "system_router",
]
