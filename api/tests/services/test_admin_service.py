"""Tests for services.admin_service.authenticate_admin."""

import pytest

from services.admin_service import InvalidCredentialsError, authenticate_admin
from services.crud_service import CrudService
from services.entities import ADMIN

pytestmark = pytest.mark.integration


@pytest.fixture
async def admin(db_session):
    result = await CrudService(db_session, ADMIN).create(
        {
            "nome_admin": "Ana Souza",
            "email_admin": "ana@abrigos.org",
            "senha_admin": "segredo123",
        }
    )
    return result.data


class TestAuthenticateAdmin:
    async def test_valid_credentials(self, db_session, admin):
        result = await authenticate_admin(db_session, "ana@abrigos.org", "segredo123")

        assert result.status_code == 200
        assert result.data["id_admin"] == admin["id_admin"]
        assert result.data["senha_admin"] == ""

    async def test_email_is_trimmed(self, db_session, admin):
        result = await authenticate_admin(
            db_session, "  ana@abrigos.org ", "segredo123"
        )

        assert result.status_code == 200

    async def test_wrong_password(self, db_session, admin):
        with pytest.raises(InvalidCredentialsError, match="E-mail ou senha inválidos."):
            await authenticate_admin(db_session, "ana@abrigos.org", "errada123")

    async def test_unknown_email(self, db_session, admin):
        with pytest.raises(InvalidCredentialsError):
            await authenticate_admin(db_session, "ninguem@abrigos.org", "segredo123")
