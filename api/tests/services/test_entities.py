"""Tests for services.entities descriptors."""

import pytest

from models import Abrigo, Pet
from services.entities import ABRIGO, ADMIN, ADOTANTE, ENDERECO, PET, EntitySpec
from services.validation import validate_nome

pytestmark = pytest.mark.unit


class TestEntitySpec:
    def test_rejects_unknown_columns(self):
        with pytest.raises(ValueError, match="unknown columns"):
            EntitySpec(model=Pet, label="Pet", rules={"nome": validate_nome})

    def test_rejects_unknown_secret(self):
        with pytest.raises(ValueError, match="senha_abrigo"):
            EntitySpec(
                model=Abrigo, label="Abrigo", secret_fields=frozenset({"senha_abrigo"})
            )

    def test_rules_are_read_only(self):
        with pytest.raises(TypeError):
            ABRIGO.rules["nome_abrigo"] = validate_nome

    def test_pk_name(self):
        assert ABRIGO.pk_name == "id_abrigo"
        assert PET.pk_name == "id_pet"


class TestDescriptors:
    def test_secret_fields(self):
        assert ADOTANTE.secret_fields == {"senha_adotante"}
        assert ADMIN.secret_fields == {"senha_admin"}
        assert not ABRIGO.secret_fields
        assert not PET.secret_fields
        assert not ENDERECO.secret_fields

    def test_email_fields(self):
        assert ADMIN.email_field == "email_admin"
        assert ADOTANTE.email_field == "email_adotante"
        assert PET.email_field is None

    def test_admin_registration_date_is_optional(self):
        assert "data_cadastro_admin" in ADMIN.date_fields
        assert "data_cadastro_admin" not in ADMIN.rules

    def test_pet_owner_fields_are_not_validated(self):
        assert set(PET.rules) == {"nome_pet", "data_nascimento_pet"}
