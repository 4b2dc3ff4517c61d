"""Top-level Access Time service.

Each mutating method is one all-or-nothing unit of work: it commits when the
operation succeeds and rolls back every change, audit events and token
transfers included, when any step raises.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from access_time.core.settings import settings
from access_time.db.session import atomic
from access_time.models import Order, Package
from access_time.services.auth import Authenticator, Authorization, SignatureAuthenticator
from access_time.services.catalog import Catalog
from access_time.services.events import EventSink, OutboxEventSink
from access_time.services.orders import OrderLedger
from access_time.services.purchase import PurchaseProtocol
from access_time.services.sessions import Access, SessionAccountant, SessionState
from access_time.services.token_ledger import TokenClientFactory, sql_token_clients


class AccessTimeService:
    """Operations exposed to callers, bound to one database session."""

    def __init__(
        self,
        db: Session,
        *,
        authenticator: Authenticator | None = None,
        token_clients: TokenClientFactory | None = None,
        events: EventSink | None = None,
        precheck_balance: bool | None = None,
    ) -> None:
        self.db = db
        self.authenticator = authenticator or SignatureAuthenticator()
        self.events = events or OutboxEventSink(db)
        self.catalog = Catalog(db, self.events, self.authenticator)
        self.orders = OrderLedger(db)
        self.sessions = SessionAccountant(db, self.events, self.authenticator)
        self.protocol = PurchaseProtocol(
            db,
            catalog=self.catalog,
            orders=self.orders,
            sessions=self.sessions,
            token_clients=token_clients or sql_token_clients(db),
            events=self.events,
            authenticator=self.authenticator,
            precheck_balance=(
                settings.precheck_balance if precheck_balance is None else precheck_balance
            ),
        )

    # --- Catalog ---------------------------------------------------------------------
    def init(self, authorization: Authorization | None, admin: str, token: str) -> None:
        with atomic(self.db):
            self.catalog.init(authorization, admin, token)

    def set_package(
        self,
        authorization: Authorization | None,
        package_id: int,
        price: int,
        duration_secs: int,
    ) -> Package:
        with atomic(self.db):
            return self.catalog.set_package(authorization, package_id, price, duration_secs)

    def get_package(self, package_id: int) -> Package:
        return self.catalog.get_package(package_id)

    def list_packages(self) -> Sequence[Package]:
        return self.catalog.list_packages()

    def get_admin(self) -> str:
        return self.catalog.get_admin()

    def get_token(self) -> str:
        return self.catalog.get_token()

    # --- Purchase / grant ------------------------------------------------------------
    def purchase(self, authorization: Authorization | None, owner: str, package_id: int) -> int:
        with atomic(self.db):
            return self.protocol.purchase(authorization, owner, package_id)

    def grant(
        self,
        authorization: Authorization | None,
        caller: str,
        owner: str,
        order_id: int,
    ) -> int:
        with atomic(self.db):
            return self.protocol.grant(authorization, caller, owner, order_id)

    def get_order(self, owner: str, order_id: int) -> Order:
        return self.orders.get_order(owner, order_id)

    def list_orders(self, owner: str) -> Sequence[Order]:
        return self.orders.list_orders(owner)

    # --- Sessions --------------------------------------------------------------------
    def start(self, authorization: Authorization | None, owner: str, now: int) -> bool:
        with atomic(self.db):
            return self.sessions.start(authorization, owner, now)

    def pause(self, authorization: Authorization | None, owner: str, now: int) -> bool:
        with atomic(self.db):
            return self.sessions.pause(authorization, owner, now)

    def get_session(self, owner: str) -> SessionState:
        return self.sessions.get_session(owner)

    def remaining(self, owner: str, now: int) -> int:
        return self.sessions.remaining(owner, now)

    def is_active(self, owner: str, now: int) -> bool:
        return self.sessions.is_active(owner, now)

    def get_access(self, owner: str) -> Access:
        return self.sessions.get_access(owner)
