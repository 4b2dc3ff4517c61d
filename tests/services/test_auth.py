"""Tests for signed-request authentication and replay protection."""

import pytest

from access_time.models import NonceReplay
from access_time.services.auth import Authorization, SignatureAuthenticator
from access_time.services.errors import (
    PackageNotFoundError,
    ReplayedRequestError,
    UnauthorizedError,
)
from access_time.utils.request_signing import sign_request


@pytest.fixture()
def authenticator():
    return SignatureAuthenticator()


def test_valid_signature_records_nonce(authenticator, db_session, user_key, user):
    auth = sign_request(user_key, "start", {"owner": user}, nonce="n-1")
    authenticator.require_auth(db_session, auth, user, "start", {"owner": user})
    row = db_session.query(NonceReplay).one()
    assert (row.principal, row.action) == (user, "start")
    assert row.nonce_hash_hex != "n-1"


def test_missing_authorization(authenticator, db_session, user):
    with pytest.raises(UnauthorizedError):
        authenticator.require_auth(db_session, None, user, "start", {"owner": user})


def test_signer_must_be_the_named_principal(authenticator, db_session, user_key, other):
    auth = sign_request(user_key, "start", {"owner": other})
    with pytest.raises(UnauthorizedError):
        authenticator.require_auth(db_session, auth, other, "start", {"owner": other})


def test_signature_binds_action_and_params(authenticator, db_session, user_key, user):
    auth = sign_request(user_key, "purchase", {"owner": user, "package_id": 1})
    with pytest.raises(UnauthorizedError):
        authenticator.require_auth(
            db_session, auth, user, "purchase", {"owner": user, "package_id": 2}
        )
    with pytest.raises(UnauthorizedError):
        authenticator.require_auth(
            db_session, auth, user, "grant", {"owner": user, "package_id": 1}
        )


def test_tampered_signature(authenticator, db_session, user_key, user):
    auth = sign_request(user_key, "start", {"owner": user})
    flipped = ("0" if auth.signature[0] != "0" else "1") + auth.signature[1:]
    tampered = Authorization(principal=user, nonce=auth.nonce, signature=flipped)
    with pytest.raises(UnauthorizedError):
        authenticator.require_auth(db_session, tampered, user, "start", {"owner": user})


def test_empty_nonce_rejected(authenticator, db_session, user_key, user):
    auth = sign_request(user_key, "start", {"owner": user}, nonce="x")
    blank = Authorization(principal=user, nonce="", signature=auth.signature)
    with pytest.raises(UnauthorizedError):
        authenticator.require_auth(db_session, blank, user, "start", {"owner": user})


def test_replayed_request_rejected(authenticator, db_session, user_key, user):
    auth = sign_request(user_key, "start", {"owner": user})
    authenticator.require_auth(db_session, auth, user, "start", {"owner": user})
    with pytest.raises(ReplayedRequestError) as exc_info:
        authenticator.require_auth(db_session, auth, user, "start", {"owner": user})
    assert exc_info.value.code == 3


def test_nonce_released_when_operation_aborts(add_package, initialized, user_key, user):
    # Package 9 does not exist, so the purchase aborts and its nonce is not consumed.
    auth = sign_request(user_key, "purchase", {"owner": user, "package_id": 9}, nonce="retry-me")
    with pytest.raises(PackageNotFoundError):
        initialized.purchase(auth, user, 9)

    add_package(9, 1, 60)
    assert initialized.purchase(auth, user, 9) == 1
    with pytest.raises(ReplayedRequestError):
        initialized.purchase(auth, user, 9)


def test_signature_of_wrong_length_rejected(authenticator, db_session, user_key, user):
    auth = sign_request(user_key, "start", {"owner": user})
    truncated = Authorization(principal=user, nonce=auth.nonce, signature=auth.signature[:-2])
    with pytest.raises(UnauthorizedError):
        authenticator.require_auth(db_session, truncated, user, "start", {"owner": user})
    assert db_session.query(NonceReplay).count() == 0
