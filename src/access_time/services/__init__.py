# src/access_time/services/__init__.py
"""Business logic services for the Access Time application."""

from .access_time import AccessTimeService
from .auth import Authorization, SignatureAuthenticator
from .catalog import Catalog
from .orders import OrderLedger
from .purchase import PurchaseProtocol
from .sessions import SessionAccountant

__all__ = [
    "AccessTimeService",
    "Authorization",
    "Catalog",
    "OrderLedger",
    "PurchaseProtocol",
    "SessionAccountant",
    "SignatureAuthenticator",
]
