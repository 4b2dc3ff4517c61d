"""Tests for the reference ledger command-line tooling."""

import pytest
from sqlalchemy.orm import sessionmaker

from access_time.core.security import is_principal
from access_time.scripts import ledger as ledger_cli


@pytest.fixture()
def cli_sessions(engine, monkeypatch):
    monkeypatch.setattr(ledger_cli, "SessionLocal", sessionmaker(bind=engine, expire_on_commit=False))


def test_keygen_prints_principal(capsys) -> None:
    assert ledger_cli.main(["keygen"]) == 0
    lines = capsys.readouterr().out.splitlines()
    principal = lines[0].split(":", 1)[1].strip()
    assert is_principal(principal)


def test_mint_then_balance(cli_sessions, capsys) -> None:
    account = "ab" * 32
    assert ledger_cli.main(["mint", "--token", "XLM", "--account", account, "--amount", "250"]) == 0
    assert "now holds 250 XLM" in capsys.readouterr().out

    assert ledger_cli.main(["balance", "--token", "XLM", "--account", account]) == 0
    assert capsys.readouterr().out.strip() == "250"


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        ledger_cli.build_parser().parse_args([])
