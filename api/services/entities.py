"""Entity descriptors consumed by the generic CRUD layer.

Each entity is described by data instead of a subclass: its model, which
columns are secrets, which hold dates, which column is the login e-mail and
which validators guard its fields. Descriptors are checked against the model
columns when they are built, so a typo fails at import time.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from core.database import Base
from models import Abrigo, Admin, Adotante, Endereco, Pet
from services.validation import (
    FieldValidator,
    text_validator,
    validate_celular,
    validate_cep,
    validate_data_cadastro,
    validate_data_nascimento,
    validate_email,
    validate_nome,
    validate_senha,
    validate_uf,
)


@dataclass(frozen=True)
class EntitySpec:
    """Capabilities of one entity type."""

    model: type[Base]
    label: str
    rules: Mapping[str, FieldValidator] = field(default_factory=dict)
    secret_fields: frozenset[str] = frozenset()
    date_fields: frozenset[str] = frozenset()
    email_field: str | None = None

    def __post_init__(self) -> None:
        columns = set(self.columns)
        declared = set(self.rules) | self.secret_fields | self.date_fields
        if self.email_field is not None:
            declared.add(self.email_field)
        unknown = declared - columns
        if unknown:
            raise ValueError(
                f"{self.label}: unknown columns {sorted(unknown)} "
                f"(model {self.model.__name__} has {sorted(columns)})"
            )
        # Freeze the rules mapping along with the dataclass
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    @property
    def columns(self) -> list[str]:
        return [column.key for column in self.model.__table__.columns]

    @property
    def pk_name(self) -> str:
        return self.model.__mapper__.primary_key[0].key


ABRIGO = EntitySpec(
    model=Abrigo,
    label="Abrigo",
    rules={
        "nome_abrigo": validate_nome,
        "email_abrigo": validate_email,
        "celular_abrigo": validate_celular,
        "data_cadastro_abrigo": validate_data_cadastro,
    },
    date_fields=frozenset({"data_cadastro_abrigo"}),
    email_field="email_abrigo",
)

ENDERECO = EntitySpec(
    model=Endereco,
    label="Endereco",
    rules={
        "logradouro": text_validator(150),
        "numero": text_validator(10),
        "bairro": text_validator(100),
        "cidade": text_validator(100),
        "estado": validate_uf,
        "cep": validate_cep,
    },
)

ADOTANTE = EntitySpec(
    model=Adotante,
    label="Adotante",
    rules={
        "nome_adotante": validate_nome,
        "email_adotante": validate_email,
        "celular_adotante": validate_celular,
        "senha_adotante": validate_senha,
        "data_cadastro_adotante": validate_data_cadastro,
    },
    secret_fields=frozenset({"senha_adotante"}),
    date_fields=frozenset({"data_cadastro_adotante"}),
    email_field="email_adotante",
)

PET = EntitySpec(
    model=Pet,
    label="Pet",
    rules={
        "nome_pet": validate_nome,
        "data_nascimento_pet": validate_data_nascimento,
    },
    date_fields=frozenset({"data_nascimento_pet"}),
)

ADMIN = EntitySpec(
    model=Admin,
    label="Admin",
    rules={
        "nome_admin": validate_nome,
        "email_admin": validate_email,
        "senha_admin": validate_senha,
    },
    secret_fields=frozenset({"senha_admin"}),
    date_fields=frozenset({"data_cadastro_admin"}),
    email_field="email_admin",
)
