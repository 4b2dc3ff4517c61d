"""Authentication of the principal named by each operation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from sqlalchemy.orm import Session

from access_time.core.security import (
    SIGNATURE_HEX_LENGTH,
    canonical_message,
    hash_nonce,
    is_principal,
    verify_signature,
)
from access_time.models import NonceReplay
from access_time.services.errors import ReplayedRequestError, UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Authorization:
    """Proof presented by a caller: who signed, with which nonce, and the signature."""

    principal: str
    nonce: str
    signature: str


class Authenticator(Protocol):
    """Verifies that ``principal`` authorized ``action`` with ``params``."""

    def require_auth(
        self,
        db: Session,
        authorization: Authorization | None,
        principal: str,
        action: str,
        params: Mapping[str, Any],
    ) -> None: ...


class SignatureAuthenticator:
    """Ed25519 request signatures with single-use nonces.

    Nonces are recorded in the caller's transaction, so a request whose
    operation later aborts may be resubmitted with the same nonce.
    """

    def require_auth(
        self,
        db: Session,
        authorization: Authorization | None,
        principal: str,
        action: str,
        params: Mapping[str, Any],
    ) -> None:
        if authorization is None:
            logger.warning("Rejected %s: no authorization for %s", action, principal)
            raise UnauthorizedError(f"{action} requires authorization by {principal}")
        if authorization.principal != principal or not is_principal(principal):
            logger.warning(
                "Rejected %s: signed by %s, expected %s",
                action,
                authorization.principal,
                principal,
            )
            raise UnauthorizedError(f"{action} must be authorized by {principal}")
        if not authorization.nonce:
            raise UnauthorizedError("Missing request nonce")
        if len(authorization.signature) != SIGNATURE_HEX_LENGTH:
            logger.warning("Rejected %s: malformed signature from %s", action, principal)
            raise UnauthorizedError("Malformed request signature")

        message = canonical_message(action, principal, authorization.nonce, params)
        if not verify_signature(principal, message, authorization.signature):
            logger.warning("Rejected %s: bad signature from %s", action, principal)
            raise UnauthorizedError("Invalid request signature")

        nonce_hash = hash_nonce(authorization.nonce)
        if db.get(NonceReplay, (principal, nonce_hash)) is not None:
            logger.warning("Rejected %s: replayed nonce from %s", action, principal)
            raise ReplayedRequestError("Request has already been processed")
        db.add(NonceReplay(principal=principal, nonce_hash_hex=nonce_hash, action=action))
        db.flush()
