"""Tests for the SQL-backed reference token ledger."""

import pytest

from access_time.db.types import U64_MAX
from access_time.services.token_ledger import (
    InsufficientFundsError,
    InvalidAmountError,
    SqlTokenLedger,
    sql_token_clients,
)


def test_unknown_account_has_zero_balance(ledger):
    assert ledger.balance("nobody") == 0


def test_mint_and_transfer(ledger):
    ledger.mint("alice", 100)
    ledger.transfer("alice", "bob", 40)
    assert ledger.balance("alice") == 60
    assert ledger.balance("bob") == 40


def test_transfer_more_than_held(ledger):
    ledger.mint("alice", 10)
    with pytest.raises(InsufficientFundsError):
        ledger.transfer("alice", "bob", 11)
    assert ledger.balance("alice") == 10


def test_negative_amounts_rejected(ledger):
    with pytest.raises(InvalidAmountError):
        ledger.mint("alice", -1)
    with pytest.raises(InvalidAmountError):
        ledger.transfer("alice", "bob", -1)


def test_zero_transfer_from_empty_account(ledger):
    ledger.transfer("alice", "bob", 0)
    assert ledger.balance("bob") == 0


def test_balances_are_per_token(db_session):
    xlm = SqlTokenLedger(db_session, "XLM")
    usdc = SqlTokenLedger(db_session, "USDC")
    xlm.mint("alice", 5)
    assert usdc.balance("alice") == 0


def test_large_balances_are_exact(ledger):
    ledger.mint("alice", U64_MAX * 3)
    ledger.transfer("alice", "bob", U64_MAX)
    assert ledger.balance("alice") == U64_MAX * 2


def test_factory_binds_token(db_session):
    client = sql_token_clients(db_session)("XLM")
    assert client.token == "XLM"
