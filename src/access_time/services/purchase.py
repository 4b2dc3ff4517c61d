"""Two-phase purchase and grant.

``purchase`` settles payment and records a pending order; ``grant`` credits
the order's package duration to the owner's session exactly once. Keeping
the phases apart means a settled payment is always on record even before it
is credited, and crediting can be done by the owner or the administrator
without touching the payment again.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from access_time.services.auth import Authenticator, Authorization
from access_time.services.catalog import Catalog
from access_time.services.errors import (
    AlreadyGrantedError,
    InsufficientBalanceError,
    UnauthorizedError,
)
from access_time.services.events import EventSink
from access_time.services.orders import OrderLedger
from access_time.services.sessions import SessionAccountant
from access_time.services.token_ledger import TokenClientFactory

logger = logging.getLogger(__name__)


class PurchaseProtocol:
    """Couples the catalog, token ledger, order ledger and session accountant."""

    def __init__(
        self,
        db: Session,
        *,
        catalog: Catalog,
        orders: OrderLedger,
        sessions: SessionAccountant,
        token_clients: TokenClientFactory,
        events: EventSink,
        authenticator: Authenticator,
        precheck_balance: bool = False,
    ) -> None:
        self.db = db
        self.catalog = catalog
        self.orders = orders
        self.sessions = sessions
        self.token_clients = token_clients
        self.events = events
        self.authenticator = authenticator
        self.precheck_balance = precheck_balance

    def purchase(self, authorization: Authorization | None, owner: str, package_id: int) -> int:
        """Pay for ``package_id`` and record a pending order; return its id.

        Token ledger failures propagate unchanged. Buying never grants time by
        itself.
        """
        self.authenticator.require_auth(
            self.db, authorization, owner, "purchase", {"owner": owner, "package_id": package_id}
        )
        config = self.catalog.config()
        package = self.catalog.get_package(package_id)

        token = self.token_clients(config.token)
        if self.precheck_balance:
            available = token.balance(owner)
            if available < package.price:
                raise InsufficientBalanceError(
                    f"{owner} holds {available}, package {package_id} costs {package.price}"
                )
        token.transfer(owner, config.admin, package.price)

        order_id = self.orders.next_sequence(owner)
        self.orders.record_order(owner, order_id, package_id)

        self.events.publish(
            "purchase_created",
            {
                "owner": owner,
                "package_id": package_id,
                "order_id": order_id,
                "price": package.price,
            },
        )
        logger.info("Order %d of %s created for package %d", order_id, owner, package_id)
        return order_id

    def grant(
        self,
        authorization: Authorization | None,
        caller: str,
        owner: str,
        order_id: int,
    ) -> int:
        """Credit order ``order_id`` of ``owner``; return the new balance.

        ``caller`` must be the owner or the administrator. A second grant of
        the same order fails with :class:`AlreadyGrantedError`.
        """
        admin = self.catalog.get_admin()
        if caller not in (admin, owner):
            logger.warning("Rejected grant of %s/%d by %s", owner, order_id, caller)
            raise UnauthorizedError(f"{caller} may not grant orders of {owner}")
        self.authenticator.require_auth(
            self.db,
            authorization,
            caller,
            "grant",
            {"caller": caller, "owner": owner, "order_id": order_id},
        )

        # Locked so concurrent grants of one order serialize on the credited flag.
        order = self.orders.get_order(owner, order_id, for_update=True)
        if order.credited:
            raise AlreadyGrantedError(f"Order {order_id} of {owner} was already granted")

        # Resolved now, not at purchase time: catalog edits apply to pending orders.
        package = self.catalog.get_package(order.package_id)
        remaining = self.sessions.credit(owner, package.duration_secs)
        self.orders.mark_credited(owner, order_id)

        self.events.publish(
            "grant", {"owner": owner, "order_id": order_id, "remaining_secs": remaining}
        )
        logger.info("Order %d of %s granted, balance now %ds", order_id, owner, remaining)
        return remaining
