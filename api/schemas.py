"""Pydantic schemas for API request/response validation.

Request bodies only check shape (types, unknown keys). Field rules
(required, format, length) run in the service layer so that every field
error is reported together in a single 400 response.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Pagination(BaseModel):
    """Pagination metadata returned by list endpoints."""

    total: int
    limit: int
    page: int


class Envelope(BaseModel):
    """Uniform response wrapper.

    Serialized as ``{statusCode, message, data?, paginacao?}``; optional keys
    are only present when the service set them.
    """

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    message: str
    data: Any = None
    paginacao: Pagination | None = None


class ErrorEnvelope(BaseModel):
    """Error body produced by the application exception handlers."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    message: str
    errors: list[str] | None = None
    data: Any = None


class _Payload(BaseModel):
    model_config = ConfigDict(extra="forbid")


# =============================================================================
# Abrigo
# =============================================================================


class AbrigoCreate(_Payload):
    nome_abrigo: str | None = None
    email_abrigo: str | None = None
    celular_abrigo: str | None = None
    data_cadastro_abrigo: str | None = None


class AbrigoUpdate(AbrigoCreate):
    """Partial update; only the keys sent are validated and written."""


# =============================================================================
# Endereco
# =============================================================================


class EnderecoCreate(_Payload):
    logradouro: str | None = None
    numero: str | None = None
    complemento: str | None = None
    bairro: str | None = None
    cidade: str | None = None
    estado: str | None = None
    cep: str | None = None
    abrigo_id: int | None = None


class EnderecoUpdate(EnderecoCreate):
    """Partial update; only the keys sent are validated and written."""


# =============================================================================
# Adotante
# =============================================================================


class AdotanteCreate(_Payload):
    nome_adotante: str | None = None
    email_adotante: str | None = None
    celular_adotante: str | None = None
    senha_adotante: str | None = None
    data_cadastro_adotante: str | None = None


class AdotanteUpdate(AdotanteCreate):
    """Partial update; a new senha_adotante is hashed before it is stored."""


# =============================================================================
# Pet
# =============================================================================


class PetCreate(_Payload):
    nome_pet: str | None = None
    especie: str | None = Field(default=None, max_length=50)
    data_nascimento_pet: str | None = None
    adotante_id: int | None = None
    abrigo_id: int | None = None


class PetUpdate(PetCreate):
    """Partial update; send ``adotante_id: null`` to return a pet to the shelter."""


# =============================================================================
# Admin
# =============================================================================


class AdminCreate(_Payload):
    nome_admin: str | None = None
    email_admin: str | None = None
    senha_admin: str | None = None
    data_cadastro_admin: str | None = None


class AdminUpdate(AdminCreate):
    """Partial update; a new senha_admin is hashed before it is stored."""


class AdminLoginRequest(BaseModel):
    """Credentials checked against the stored admin hash."""

    email: str = Field(max_length=150)
    senha: str = Field(max_length=50)


# =============================================================================
# Health
# =============================================================================


class HealthResponse(BaseModel):
    status: str
    service: str


class PoolStatusResponse(BaseModel):
    pool_size: int
    checked_out: int
    overflow: int
    checked_in: int


class DetailedHealthResponse(BaseModel):
    status: str
    service: str
    database: bool
    pool: PoolStatusResponse | None = None
