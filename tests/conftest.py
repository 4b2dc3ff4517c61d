# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from nacl.signing import SigningKey
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")

from access_time.api.v1.dependencies import get_clock
from access_time.db.session import Base, atomic
from access_time.db.session import get_db as app_get_session
from access_time.main import app as fastapi_app
from access_time.services.access_time import AccessTimeService
from access_time.services.auth import Authorization
from access_time.services.clock import FixedClock
from access_time.services.token_ledger import SqlTokenLedger
from access_time.utils.request_signing import principal_of, sign_request

TEST_DB_URL = "sqlite://"
TOKEN = "XLM"
STARTING_FUNDS = 1_000


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def admin_key() -> SigningKey:
    return SigningKey.generate()


@pytest.fixture()
def user_key() -> SigningKey:
    return SigningKey.generate()


@pytest.fixture()
def other_key() -> SigningKey:
    return SigningKey.generate()


@pytest.fixture()
def admin(admin_key: SigningKey) -> str:
    return principal_of(admin_key)


@pytest.fixture()
def user(user_key: SigningKey) -> str:
    return principal_of(user_key)


@pytest.fixture()
def other(other_key: SigningKey) -> str:
    return principal_of(other_key)


@pytest.fixture()
def sign() -> Callable[..., Authorization]:
    """Return ``sign(key, action, **params)`` producing a fresh authorization."""

    def _sign(key: SigningKey, action: str, **params: Any) -> Authorization:
        return sign_request(key, action, params)

    return _sign


@pytest.fixture()
def service(db_session: Session) -> AccessTimeService:
    return AccessTimeService(db_session, precheck_balance=False)


@pytest.fixture()
def ledger(db_session: Session) -> SqlTokenLedger:
    return SqlTokenLedger(db_session, TOKEN)


@pytest.fixture()
def initialized(
    service: AccessTimeService,
    db_session: Session,
    ledger: SqlTokenLedger,
    admin_key: SigningKey,
    admin: str,
    user: str,
    sign: Callable[..., Authorization],
) -> AccessTimeService:
    """Service initialized with ``admin`` and TOKEN, and ``user`` holding funds."""
    service.init(sign(admin_key, "init", admin=admin, token=TOKEN), admin, TOKEN)
    with atomic(db_session):
        ledger.mint(user, STARTING_FUNDS)
    return service


@pytest.fixture()
def add_package(
    initialized: AccessTimeService,
    admin_key: SigningKey,
    sign: Callable[..., Authorization],
) -> Callable[[int, int, int], None]:
    """Return ``add_package(package_id, price, duration_secs)`` signed by the admin."""

    def _add(package_id: int, price: int, duration_secs: int) -> None:
        initialized.set_package(
            sign(
                admin_key,
                "set_package",
                package_id=package_id,
                price=price,
                duration_secs=duration_secs,
            ),
            package_id,
            price,
            duration_secs,
        )

    return _add


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(1_000)


@pytest.fixture()
def app(db_session: Session, clock: FixedClock) -> Iterator[FastAPI]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    fastapi_app.dependency_overrides[app_get_session] = _get_session_override
    fastapi_app.dependency_overrides[get_clock] = lambda: clock
    try:
        yield fastapi_app
    finally:
        fastapi_app.dependency_overrides.pop(app_get_session, None)
        fastapi_app.dependency_overrides.pop(get_clock, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client
