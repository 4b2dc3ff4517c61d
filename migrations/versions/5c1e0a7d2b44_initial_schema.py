"""initial schema

Revision ID: 5c1e0a7d2b44
Revises:
Create Date: 2026-10-19 09:12:40.118203

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5c1e0a7d2b44"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Decimal-string widths of 2**64 - 1 and 2**128 - 1 (see db.types.UnsignedInteger).
U64_DIGITS = 20
U128_DIGITS = 39


def upgrade() -> None:
    """Create the catalog, order, session, replay, outbox and ledger tables."""
    op.create_table(
        "contract_config",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("admin", sa.Text(), nullable=False),
        sa.Column("token", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "package",
        sa.Column("package_id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("price", sa.String(length=U128_DIGITS), nullable=False),
        sa.Column("duration_secs", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("package_id"),
    )
    op.create_table(
        "access_session",
        sa.Column("owner", sa.Text(), nullable=False),
        sa.Column("remaining_secs", sa.String(length=U64_DIGITS), nullable=False),
        sa.Column("started_at", sa.String(length=U64_DIGITS), nullable=False),
        sa.PrimaryKeyConstraint("owner"),
    )
    op.create_table(
        "purchase_order",
        sa.Column("owner", sa.Text(), nullable=False),
        sa.Column("order_id", sa.String(length=U128_DIGITS), nullable=False),
        sa.Column("package_id", sa.BigInteger(), nullable=False),
        sa.Column("credited", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("owner", "order_id"),
    )
    op.create_table(
        "order_counter",
        sa.Column("owner", sa.Text(), nullable=False),
        sa.Column("last_order_id", sa.String(length=U128_DIGITS), nullable=False),
        sa.PrimaryKeyConstraint("owner"),
    )
    op.create_table(
        "nonce_replay",
        sa.Column("principal", sa.Text(), nullable=False),
        sa.Column("nonce_hash_hex", sa.Text(), nullable=False),
        sa.Column("action", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("principal", "nonce_hash_hex"),
    )
    op.create_table(
        "audit_event",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("topic", sa.Text(), nullable=False),
        sa.Column("payload", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "token_balance",
        sa.Column("token", sa.Text(), nullable=False),
        sa.Column("account", sa.Text(), nullable=False),
        sa.Column("amount", sa.String(length=U128_DIGITS), nullable=False),
        sa.PrimaryKeyConstraint("token", "account"),
    )


def downgrade() -> None:
    """Drop every table created by this revision."""
    for table in (
        "token_balance",
        "audit_event",
        "nonce_replay",
        "order_counter",
        "purchase_order",
        "access_session",
        "package",
        "contract_config",
    ):
        op.drop_table(table)
