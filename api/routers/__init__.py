"""API routers package."""

from .auth import router as auth_router
from .books import router as books_router
from .catalog import router as catalog_router
from .common import router as common_router
from .me import router as me_router

__all__ = [
    "auth_router",
    "books_router",
    "catalog_router",
    "common_router",
    "me_router",
]
