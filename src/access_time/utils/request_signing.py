"""Client-side helpers for signing Access Time requests."""

from __future__ import annotations

import secrets
from collections.abc import Mapping
from typing import Any

from nacl.signing import SigningKey

from access_time.core.security import canonical_message
from access_time.services.auth import Authorization


def principal_of(signing_key: SigningKey) -> str:
    """Return the principal id (hex public key) for ``signing_key``."""
    return signing_key.verify_key.encode().hex()


def sign_request(
    signing_key: SigningKey,
    action: str,
    params: Mapping[str, Any],
    nonce: str | None = None,
) -> Authorization:
    """Sign ``action`` with ``params`` and return the resulting authorization.

    A fresh random nonce is used unless one is given.
    """
    principal = principal_of(signing_key)
    nonce = nonce or secrets.token_hex(16)
    message = canonical_message(action, principal, nonce, params)
    signature = signing_key.sign(message).signature.hex()
    return Authorization(principal=principal, nonce=nonce, signature=signature)


def auth_headers(authorization: Authorization) -> dict[str, str]:
    """Render an authorization as the HTTP headers the API expects."""
    return {
        "X-Principal": authorization.principal,
        "X-Nonce": authorization.nonce,
        "X-Signature": authorization.signature,
    }
