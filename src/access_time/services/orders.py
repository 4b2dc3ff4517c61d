"""Order ledger and per-owner order sequence."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from access_time.models import Order, OrderCounter
from access_time.services.errors import OrderInvariantError, OrderNotFoundError


class OrderLedger:
    """Insert-only purchase orders keyed by ``(owner, order_id)``."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def next_sequence(self, owner: str) -> int:
        """Return the owner's next order id: 1, 2, 3, ... with no reuse."""
        counter = self.db.get(OrderCounter, owner, with_for_update=True)
        if counter is None:
            counter = OrderCounter(owner=owner, last_order_id=0)
            self.db.add(counter)
        counter.last_order_id = counter.last_order_id + 1
        self.db.flush()
        return counter.last_order_id

    def record_order(self, owner: str, order_id: int, package_id: int) -> Order:
        if self.db.get(Order, (owner, order_id)) is not None:
            raise OrderInvariantError(f"Order {order_id} of {owner} already exists")
        order = Order(owner=owner, order_id=order_id, package_id=package_id, credited=False)
        self.db.add(order)
        self.db.flush()
        return order

    def mark_credited(self, owner: str, order_id: int) -> Order:
        # Grant checks ``credited`` before calling this.
        order = self.get_order(owner, order_id)
        order.credited = True
        self.db.flush()
        return order

    def get_order(self, owner: str, order_id: int, *, for_update: bool = False) -> Order:
        """Return the order, row-locked until commit when ``for_update`` is set."""
        order = self.db.get(Order, (owner, order_id), with_for_update=for_update)
        if order is None:
            raise OrderNotFoundError(f"Order {order_id} of {owner} not found")
        return order

    def list_orders(self, owner: str) -> Sequence[Order]:
        orders = self.db.scalars(select(Order).where(Order.owner == owner)).all()
        # order_id is stored as text, so sort numerically here.
        return sorted(orders, key=lambda order: order.order_id)
