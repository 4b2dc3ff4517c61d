# src/access_time/models/__init__.py
"""SQLAlchemy models for the Access Time service."""

from .audit_event import AuditEvent
from .catalog import ContractConfig, Package
from .order import Order, OrderCounter
from .replay_protection import NonceReplay
from .session import AccessSession
from .token_balance import TokenBalance

__all__ = [
    "AccessSession",
    "AuditEvent",
    "ContractConfig", "Package",
    "NonceReplay",
    "Order", "OrderCounter",
    "TokenBalance",
]
