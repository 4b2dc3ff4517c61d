"""Signature utilities built on Ed25519 primitives."""
from __future__ import annotations

import binascii
import hashlib
import json
from collections.abc import Mapping
from typing import Any

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

PRINCIPAL_HEX_LENGTH = 64  # 32-byte Ed25519 public key
SIGNATURE_HEX_LENGTH = 128  # 64-byte Ed25519 signature


def verify_signature(pubkey_hex: str, message: bytes, signature_hex: str) -> bool:
    """Verify an Ed25519 signature.

    Args:
        pubkey_hex: Hex-encoded 32-byte public key.
        message: Exact bytes that were signed on the client.
        signature_hex: Hex-encoded 64-byte signature.

    Returns:
        True if the signature is valid for `message` under `pubkey_hex`; False otherwise.
    """
    try:
        pubkey = VerifyKey(binascii.unhexlify(pubkey_hex))
        signature = binascii.unhexlify(signature_hex)
        pubkey.verify(message, signature)
        return True
    except (BadSignatureError, binascii.Error, ValueError, TypeError):
        return False


def is_principal(value: str) -> bool:
    """Return True if `value` looks like a hex-encoded Ed25519 public key."""
    if len(value) != PRINCIPAL_HEX_LENGTH:
        return False
    try:
        bytes.fromhex(value)
    except ValueError:
        return False
    return value == value.lower()


def canonical_message(
    action: str,
    principal: str,
    nonce: str,
    params: Mapping[str, Any],
) -> bytes:
    """Return the exact bytes a principal signs to authorize `action`.

    Compact JSON with sorted keys; integers are encoded as decimal strings so
    that clients in any language produce identical bytes for u128 values.
    """
    body = {
        "action": action,
        "principal": principal,
        "nonce": nonce,
        "params": {key: str(value) for key, value in params.items()},
    }
    return json.dumps(body, sort_keys=True, separators=(",", ":")).encode("utf-8")


def hash_nonce(nonce: str) -> str:
    """Return a SHA-256 hex digest of a client nonce."""
    return hashlib.sha256(nonce.encode("utf-8")).hexdigest()
