"""Tests that read-then-write steps lock the rows they depend on."""

import pytest

from access_time.models import AccessSession, Order, OrderCounter, TokenBalance


@pytest.fixture()
def locked(db_session, monkeypatch):
    """Record the entity of every ``Session.get`` issued with ``with_for_update``."""
    seen: list[type] = []
    original = db_session.get

    def _get(entity, ident, **kwargs):
        if kwargs.get("with_for_update"):
            seen.append(entity)
        return original(entity, ident, **kwargs)

    monkeypatch.setattr(db_session, "get", _get)
    return seen


def test_grant_locks_order_and_session(add_package, initialized, locked, sign, user_key, user):
    add_package(1, 10, 600)
    order_id = initialized.purchase(sign(user_key, "purchase", owner=user, package_id=1), user, 1)
    locked.clear()

    initialized.grant(
        sign(user_key, "grant", caller=user, owner=user, order_id=order_id), user, user, order_id
    )

    assert Order in locked
    assert AccessSession in locked
    assert locked.index(Order) < locked.index(AccessSession)


def test_purchase_locks_balances_and_counter(add_package, initialized, locked, sign, user_key, user):
    add_package(1, 10, 600)
    locked.clear()

    initialized.purchase(sign(user_key, "purchase", owner=user, package_id=1), user, 1)

    assert TokenBalance in locked
    assert OrderCounter in locked


def test_start_and_pause_lock_session(initialized, locked, sign, user_key, user):
    initialized.sessions.credit(user, 60)
    locked.clear()

    initialized.start(sign(user_key, "start", owner=user), user, 1_000)
    assert AccessSession in locked

    locked.clear()
    initialized.pause(sign(user_key, "pause", owner=user), user, 1_030)
    assert AccessSession in locked
