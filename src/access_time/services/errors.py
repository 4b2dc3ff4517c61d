"""Error kinds raised by Access Time operations.

Every error aborts the whole operation; none are retried internally. The
numeric codes are stable and shared with API clients.
"""

from __future__ import annotations


class AccessTimeError(RuntimeError):
    """Base exception for all user-facing Access Time failures."""

    code: int = 0
    kind: str = "AccessTimeError"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.kind)
        self.detail = detail or self.kind


class AlreadyInitializedError(AccessTimeError):
    """Raised when ``init`` runs a second time."""

    code = 1
    kind = "AlreadyInitialized"


class NotInitializedError(AccessTimeError):
    """Raised when an operation needs the admin or token before ``init``."""

    code = 2
    kind = "NotInitialized"


class UnauthorizedError(AccessTimeError):
    """Raised when the acting principal is not allowed or cannot be verified."""

    code = 3
    kind = "Unauthorized"


class ReplayedRequestError(UnauthorizedError):
    """Raised when a signed request reuses a nonce already consumed."""


class PackageNotFoundError(AccessTimeError):
    code = 4
    kind = "PackageNotFound"


class InsufficientBalanceError(AccessTimeError):
    """Advisory pre-check failure; the token ledger may reject on its own."""

    code = 5
    kind = "InsufficientBalance"


class OrderNotFoundError(AccessTimeError):
    code = 6
    kind = "OrderNotFound"


class AlreadyGrantedError(AccessTimeError):
    """Raised when an order has already been credited."""

    code = 7
    kind = "AlreadyGranted"


class OrderInvariantError(RuntimeError):
    """Raised when an order would be written over an existing one.

    Order ids are never reused, so this signals a bug, not a user error.
    """
