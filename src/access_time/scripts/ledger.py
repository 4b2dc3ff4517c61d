# src/access_time/scripts/ledger.py
"""Operator tooling for local deployments using the reference token ledger.

Examples:
    python -m access_time.scripts.ledger keygen
    python -m access_time.scripts.ledger mint --token XLM --account <hex> --amount 1000
    python -m access_time.scripts.ledger balance --token XLM --account <hex>
"""
from __future__ import annotations

import argparse
import sys

from nacl.signing import SigningKey

from access_time.db.session import SessionLocal, atomic, create_tables
from access_time.services.token_ledger import SqlTokenLedger
from access_time.utils.request_signing import principal_of


def _keygen(_: argparse.Namespace) -> int:
    signing_key = SigningKey.generate()
    print(f"principal:   {principal_of(signing_key)}")
    print(f"signing key: {signing_key.encode().hex()}")
    return 0


def _mint(args: argparse.Namespace) -> int:
    db = SessionLocal()
    try:
        with atomic(db):
            balance = SqlTokenLedger(db, args.token).mint(args.account, args.amount)
    finally:
        db.close()
    print(f"{args.account} now holds {balance} {args.token}")
    return 0


def _balance(args: argparse.Namespace) -> int:
    db = SessionLocal()
    try:
        balance = SqlTokenLedger(db, args.token).balance(args.account)
    finally:
        db.close()
    print(balance)
    return 0


def _create_tables(_: argparse.Namespace) -> int:
    create_tables()
    print("Database tables created.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Access Time reference ledger tooling")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("keygen", help="Generate an Ed25519 principal").set_defaults(func=_keygen)
    sub.add_parser("create-tables", help="Create all tables").set_defaults(func=_create_tables)

    mint = sub.add_parser("mint", help="Credit tokens to an account")
    mint.add_argument("--token", required=True)
    mint.add_argument("--account", required=True)
    mint.add_argument("--amount", type=int, required=True)
    mint.set_defaults(func=_mint)

    balance = sub.add_parser("balance", help="Show an account balance")
    balance.add_argument("--token", required=True)
    balance.add_argument("--account", required=True)
    balance.set_defaults(func=_balance)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
