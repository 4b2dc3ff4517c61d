# src/access_time/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .contract import router as contract_router
from .orders import router as orders_router
from .packages import router as packages_router
from .sessions import router as sessions_router
from .system import router as system_router

__all__ = [
    "contract_router",
    "orders_router",
    "packages_router",
    "sessions_router",
    "system_router",
]
