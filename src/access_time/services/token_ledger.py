"""Token ledger collaborator contract and a SQL-backed reference ledger.

Access Time never moves funds itself. It asks a token client bound to the
configured token to transfer the package price from the buyer to the
administrator, and lets any failure of that transfer propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from sqlalchemy.orm import Session

from access_time.models import TokenBalance

logger = logging.getLogger(__name__)


class TokenLedgerError(RuntimeError):
    """Base exception raised by the reference token ledger."""


class InsufficientFundsError(TokenLedgerError):
    """Raised when the sender holds less than the transfer amount."""


class InvalidAmountError(TokenLedgerError):
    """Raised for negative amounts."""


class TokenClient(Protocol):
    """Client for one token: ``transfer`` and ``balance``."""

    token: str

    def transfer(self, sender: str, recipient: str, amount: int) -> None: ...

    def balance(self, account: str) -> int: ...


TokenClientFactory = Callable[[str], TokenClient]


class SqlTokenLedger:
    """Token client storing balances in the ``token_balance`` table.

    Runs inside the caller's transaction, so a transfer made by an operation
    that later aborts is rolled back with it. Sender authorization is the
    caller's signed request; this ledger only enforces solvency.
    """

    def __init__(self, db: Session, token: str) -> None:
        self.db = db
        self.token = token

    def _row(self, account: str) -> TokenBalance:
        row = self.db.get(TokenBalance, (self.token, account), with_for_update=True)
        if row is None:
            row = TokenBalance(token=self.token, account=account, amount=0)
            self.db.add(row)
        return row

    def balance(self, account: str) -> int:
        row = self.db.get(TokenBalance, (self.token, account))
        return row.amount if row is not None else 0

    def mint(self, account: str, amount: int) -> int:
        """Credit ``amount`` to ``account`` and return the new balance."""
        if amount < 0:
            raise InvalidAmountError(f"Cannot mint a negative amount: {amount}")
        row = self._row(account)
        row.amount = row.amount + amount
        self.db.flush()
        logger.info("Minted %d of %s to %s", amount, self.token, account)
        return row.amount

    def transfer(self, sender: str, recipient: str, amount: int) -> None:
        """Move ``amount`` from ``sender`` to ``recipient``.

        Raises:
            InvalidAmountError: If ``amount`` is negative.
            InsufficientFundsError: If ``sender`` cannot cover ``amount``.
        """
        if amount < 0:
            raise InvalidAmountError(f"Cannot transfer a negative amount: {amount}")
        available = self.balance(sender)
        if available < amount:
            raise InsufficientFundsError(
                f"{sender} holds {available} of {self.token}, needs {amount}"
            )
        if amount == 0 or sender == recipient:
            return
        source = self._row(sender)
        target = self._row(recipient)
        source.amount = source.amount - amount
        target.amount = target.amount + amount
        self.db.flush()
        logger.debug("Transferred %d of %s from %s to %s", amount, self.token, sender, recipient)


def sql_token_clients(db: Session) -> TokenClientFactory:
    """Return a factory binding :class:`SqlTokenLedger` clients to ``db``."""

    def _factory(token: str) -> TokenClient:
        return SqlTokenLedger(db, token)

    return _factory
