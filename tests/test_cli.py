"""
Tests for the administration CLI.
"""

import pytest
from typer.testing import CliRunner

from indicacoes.cli import main as cli
from indicacoes.domain.enums import Cargo
from indicacoes.models import User

runner = CliRunner()


@pytest.fixture
def cli_db(db_session, monkeypatch):
    monkeypatch.setattr(cli, "get_db", lambda: db_session)
    return db_session


class TestCreateUser:
    def test_creates_staff_user(self, cli_db):
        result = runner.invoke(
            cli.app,
            ["create-user", "Fin@Example.com", "Fernanda", "--password", "segredo", "--cargo", "Financeiro"],
        )

        assert result.exit_code == 0, result.output
        user = cli_db.query(User).one()
        assert user.email == "fin@example.com"
        assert user.job == Cargo.FINANCEIRO

    def test_rejects_unknown_cargo(self, cli_db):
        result = runner.invoke(
            cli.app,
            ["create-user", "a@example.com", "Ana", "--password", "x", "--cargo", "Gerente"],
        )

        assert result.exit_code == 1
        assert cli_db.query(User).count() == 0

    def test_rejects_duplicate_email(self, cli_db, make_user):
        make_user(email="a@example.com")
        result = runner.invoke(cli.app, ["create-user", "a@example.com", "Ana", "--password", "x"])

        assert result.exit_code == 1


class TestSetCargo:
    def test_updates_every_account_with_email(self, cli_db, make_user):
        make_user(email="dup@example.com", job=Cargo.VENDEDOR_EXTERNO)
        make_user(email="dup@example.com", job=Cargo.VENDEDOR_EXTERNO)

        result = runner.invoke(cli.app, ["set-cargo", "dup@example.com", "Vendedor Interno"])

        assert result.exit_code == 0, result.output
        jobs = {u.job for u in cli_db.query(User).all()}
        assert jobs == {Cargo.VENDEDOR_INTERNO}

    def test_matches_email_ignoring_case(self, cli_db, make_user):
        """Test Discord accounts stored with capital letters can be promoted."""
        user_id = make_user(email="Nelly.Souza@Example.com", provider="discord", job=Cargo.VENDEDOR_EXTERNO).id

        result = runner.invoke(cli.app, ["set-cargo", "nelly.souza@example.com", "Vendedor Interno"])

        assert result.exit_code == 0, result.output
        assert cli_db.get(User, user_id).job == Cargo.VENDEDOR_INTERNO

    def test_unknown_email(self, cli_db):
        result = runner.invoke(cli.app, ["set-cargo", "ninguem@example.com", "Admin"])
        assert result.exit_code == 1


class TestStatusOptions:
    def test_prints_table(self):
        result = runner.invoke(cli.app, ["status-options", "Financeiro"])

        assert result.exit_code == 0
        assert "Aguardando Pagamento" in result.output
        assert "Pago" in result.output

    def test_unknown_role(self):
        result = runner.invoke(cli.app, ["status-options", "Gerente"])

        assert result.exit_code == 0
        assert "No statuses configured" in result.output


class TestPurgeSessions:
    def test_deletes_only_expired(self, cli_db, financeiro_user):
        from datetime import timedelta

        from indicacoes.core.security import utcnow
        from indicacoes.models import UserSession

        cli_db.add(UserSession(id="old", user_id=financeiro_user.id, expires_at=utcnow() - timedelta(days=1)))
        cli_db.add(UserSession(id="new", user_id=financeiro_user.id, expires_at=utcnow() + timedelta(days=1)))
        cli_db.commit()

        result = runner.invoke(cli.app, ["purge-sessions"])

        assert result.exit_code == 0, result.output
        assert [s.id for s in cli_db.query(UserSession).all()] == ["new"]
