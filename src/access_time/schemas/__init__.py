# src/access_time/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .catalog import ContractInit, ContractResponse, PackageResponse, PackageUpsert
from .order import GrantResponse, OrderCreate, OrderCreated, OrderResponse
from .session import SessionResponse, SessionTransition

__all__ = [
    "ContractInit", "ContractResponse",
    "PackageResponse", "PackageUpsert",
    "GrantResponse", "OrderCreate", "OrderCreated", "OrderResponse",
    "SessionResponse", "SessionTransition",
]
