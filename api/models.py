"""SQLAlchemy models for the shelter management API."""

from datetime import UTC, date, datetime
from typing import Any

from sqlalchemy import Date, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base


def today() -> date:
    """Return current UTC date."""
    return datetime.now(UTC).date()


class SerializableMixin:
    """Column-level dict view of a row (no relationship loading)."""

    def to_dict(self) -> dict[str, Any]:
        return {column.key: getattr(self, column.key) for column in self.__table__.columns}


class Abrigo(SerializableMixin, Base):
    """Animal shelter."""

    __tablename__ = "abrigos"

    id_abrigo: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome_abrigo: Mapped[str] = mapped_column(String(100), nullable=False)
    email_abrigo: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    celular_abrigo: Mapped[str] = mapped_column(String(20), nullable=False)
    data_cadastro_abrigo: Mapped[date] = mapped_column(Date, nullable=False)


class Endereco(SerializableMixin, Base):
    """Address owned by a shelter; removed together with it."""

    __tablename__ = "enderecos"

    id_endereco: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    logradouro: Mapped[str] = mapped_column(String(150), nullable=False)
    numero: Mapped[str] = mapped_column(String(10), nullable=False)
    complemento: Mapped[str | None] = mapped_column(String(100), nullable=True)
    bairro: Mapped[str] = mapped_column(String(100), nullable=False)
    cidade: Mapped[str] = mapped_column(String(100), nullable=False)
    estado: Mapped[str] = mapped_column(String(2), nullable=False)
    cep: Mapped[str] = mapped_column(String(9), nullable=False)
    abrigo_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("abrigos.id_abrigo", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


class Adotante(SerializableMixin, Base):
    """Adopter account."""

    __tablename__ = "adotantes"

    id_adotante: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome_adotante: Mapped[str] = mapped_column(String(100), nullable=False)
    email_adotante: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    celular_adotante: Mapped[str] = mapped_column(String(20), nullable=False)
    senha_adotante: Mapped[str] = mapped_column(String(255), nullable=False)
    data_cadastro_adotante: Mapped[date] = mapped_column(Date, nullable=False)


class Pet(SerializableMixin, Base):
    """Pet; adotante_id stays NULL until the pet is adopted.

    An adopter that still has pets cannot be deleted (RESTRICT), the service
    layer checks this first and answers 409.
    """

    __tablename__ = "pets"

    id_pet: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome_pet: Mapped[str] = mapped_column(String(100), nullable=False)
    especie: Mapped[str | None] = mapped_column(String(50), nullable=True)
    data_nascimento_pet: Mapped[date] = mapped_column(Date, nullable=False)
    adotante_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("adotantes.id_adotante", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )
    abrigo_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("abrigos.id_abrigo", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )


class Admin(SerializableMixin, Base):
    """Back-office administrator."""

    __tablename__ = "admins"

    id_admin: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome_admin: Mapped[str] = mapped_column(String(100), nullable=False)
    email_admin: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    senha_admin: Mapped[str] = mapped_column(String(255), nullable=False)
    data_cadastro_admin: Mapped[date] = mapped_column(
        Date, nullable=False, default=today, server_default=func.current_date()
    )
