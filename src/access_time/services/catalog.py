"""Catalog: singleton configuration and the package table."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from access_time.db.types import U32_MAX, U128_MAX
from access_time.models import ContractConfig, Package
from access_time.models.catalog import CONFIG_ROW_ID
from access_time.services.auth import Authenticator, Authorization
from access_time.services.errors import (
    AlreadyInitializedError,
    NotInitializedError,
    PackageNotFoundError,
)
from access_time.services.events import EventSink

logger = logging.getLogger(__name__)


class Catalog:
    """Administrator, token reference and package catalog."""

    def __init__(self, db: Session, events: EventSink, authenticator: Authenticator) -> None:
        self.db = db
        self.events = events
        self.authenticator = authenticator

    def init(self, authorization: Authorization | None, admin: str, token: str) -> ContractConfig:
        """Install ``admin`` and ``token``. Only ever succeeds once."""
        if self.db.get(ContractConfig, CONFIG_ROW_ID) is not None:
            raise AlreadyInitializedError("Contract is already initialized")
        self.authenticator.require_auth(
            self.db, authorization, admin, "init", {"admin": admin, "token": token}
        )
        config = ContractConfig(id=CONFIG_ROW_ID, admin=admin, token=token)
        self.db.add(config)
        self.db.flush()
        self.events.publish("init", {"admin": admin, "token": token})
        logger.info("Initialized with admin %s and token %s", admin, token)
        return config

    def config(self) -> ContractConfig:
        config = self.db.get(ContractConfig, CONFIG_ROW_ID)
        if config is None:
            raise NotInitializedError("Contract has not been initialized")
        return config

    def get_admin(self) -> str:
        return self.config().admin

    def get_token(self) -> str:
        return self.config().token

    def set_package(
        self,
        authorization: Authorization | None,
        package_id: int,
        price: int,
        duration_secs: int,
    ) -> Package:
        """Insert or overwrite a package. Administrator only."""
        admin = self.get_admin()
        self.authenticator.require_auth(
            self.db,
            authorization,
            admin,
            "set_package",
            {"package_id": package_id, "price": price, "duration_secs": duration_secs},
        )
        _check_range("package_id", package_id, U32_MAX)
        _check_range("price", price, U128_MAX)
        _check_range("duration_secs", duration_secs, U32_MAX)

        package = self.db.get(Package, package_id)
        if package is None:
            package = Package(package_id=package_id)
            self.db.add(package)
        package.price = price
        package.duration_secs = duration_secs
        self.db.flush()

        self.events.publish(
            "package_set",
            {"package_id": package_id, "price": price, "duration_secs": duration_secs},
        )
        logger.info("Package %d set: price=%d duration=%ds", package_id, price, duration_secs)
        return package

    def get_package(self, package_id: int) -> Package:
        package = self.db.get(Package, package_id)
        if package is None:
            raise PackageNotFoundError(f"Package {package_id} not found")
        return package

    def list_packages(self) -> Sequence[Package]:
        return self.db.scalars(select(Package).order_by(Package.package_id)).all()


def _check_range(name: str, value: int, upper: int) -> None:
    if value < 0 or value > upper:
        raise ValueError(f"{name} must be between 0 and {upper}, got {value}")
