# src/access_time/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    contract_router,
    orders_router,
    packages_router,
    sessions_router,
    system_router,
)

__all__ = [
    "contract_router",
    "orders_router",
    "packages_router",
    "sessions_router",
    "system_router",
]
