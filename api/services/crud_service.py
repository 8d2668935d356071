"""Generic CRUD orchestration shared by every entity.

CrudService combines the repository, the validators and the secret-field
policy, and shapes every result into the response envelope. Failures are
raised as typed exceptions; main.py turns them into envelope-shaped bodies.
"""

from collections.abc import Mapping
from datetime import date
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import get_settings
from core.database import Base
from core.logger import get_logger
from repositories.crud_repository import CrudRepository
from schemas import Envelope, Pagination
from services.entities import EntitySpec
from services.passwords import hash_secrets, sanitize
from services.validation import FieldValidationError, parse_date, run_validators

logger = get_logger(__name__)

UPDATE_ERROR_MESSAGE = "Erro ao atualizar o registro."
CREATE_ERROR_MESSAGE = "Bad Request Exception"


class RecordNotFoundError(Exception):
    """No row with the requested id. Surfaced as 404."""


class RecordConflictError(Exception):
    """The operation would orphan dependent rows. Surfaced as 409."""


class PersistenceError(Exception):
    """Storage-engine failure wrapped at the service boundary. Surfaced as 400."""

    def __init__(self, message: str, errors: list[str]):
        self.message = message
        self.errors = errors
        super().__init__(message)


def parse_positive_int(value: Any, default: int) -> int:
    """Query-string number; absent, non-numeric or non-positive -> default."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _storage_message(exc: Exception) -> str:
    # DBAPI errors carry the driver message on .orig; the str() includes SQL
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class CrudService:
    """CRUD operations for one entity, described by an EntitySpec."""

    def __init__(self, db: AsyncSession, entity: EntitySpec):
        self.db = db
        self.entity = entity
        self.repository = CrudRepository(db, entity.model)

    # ------------------------------------------------------------------
    # Outbound shaping
    # ------------------------------------------------------------------

    def public(self, records: Base | list[Base]) -> dict[str, Any] | list[dict[str, Any]]:
        """Rows as dicts with secret fields blanked."""
        if isinstance(records, list):
            return sanitize([r.to_dict() for r in records], self.entity.secret_fields)
        return sanitize(records.to_dict(), self.entity.secret_fields)

    # ------------------------------------------------------------------
    # Inbound preparation
    # ------------------------------------------------------------------

    def _coerce_dates(self, data: dict[str, Any], message: str) -> None:
        errors: list[str] = []
        for field in self.entity.date_fields:
            if field not in data:
                continue
            if data[field] is None and field not in self.entity.rules:
                # Optional date left to the column default
                data.pop(field)
                continue
            parsed = parse_date(data[field])
            if parsed is None:
                errors.append(f'Campo "{field}" deve conter uma data válida.')
            else:
                data[field] = parsed
        if errors:
            raise FieldValidationError(errors, message=message)

    def _filters(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """Equality filters restricted to non-secret columns, typed per column."""
        table = self.entity.model.__table__
        filters: dict[str, Any] = {}
        errors: list[str] = []
        for name, value in raw.items():
            if name not in table.columns or name in self.entity.secret_fields:
                errors.append(f'Filtro "{name}" não é permitido.')
                continue
            try:
                python_type = table.columns[name].type.python_type
            except NotImplementedError:
                python_type = str
            if value is None or isinstance(value, python_type):
                filters[name] = value
            elif python_type is date:
                parsed = parse_date(value)
                if parsed is None:
                    errors.append(f'Filtro "{name}" deve conter uma data válida.')
                filters[name] = parsed
            else:
                try:
                    filters[name] = python_type(value)
                except (TypeError, ValueError):
                    errors.append(f'Filtro "{name}" possui valor inválido.')
        if errors:
            raise FieldValidationError(errors)
        return filters

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def find_all(self, query: Mapping[str, Any] | None = None) -> Envelope:
        """Paginated, filtered listing. ``page``/``limit`` come out of ``query``."""
        settings = get_settings()
        raw = dict(query or {})
        page = parse_positive_int(raw.pop("page", None), 1)
        limit = min(
            parse_positive_int(raw.pop("limit", None), settings.default_page_size),
            settings.max_page_size,
        )
        filters = self._filters(raw)

        items, total = await self.repository.find_all(filters, page, limit)

        return Envelope(
            status_code=200,
            message="Registros retornados com sucesso.",
            data=self.public(items),
            paginacao=Pagination(total=total, limit=limit, page=page),
        )

    async def get_or_raise(self, record_id: Any) -> Base:
        record = await self.repository.find_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(f"Registro {record_id} não encontrado.")
        return record

    async def find_one(self, record_id: Any) -> Envelope:
        record = await self.get_or_raise(record_id)
        return Envelope(
            status_code=200,
            message=f"Registro {record_id} retornado com sucesso.",
            data=self.public(record),
        )

    async def create(self, data: Mapping[str, Any]) -> Envelope:
        """Validate, hash secrets, insert. Any failure becomes a 400."""
        payload = dict(data)
        payload.pop(self.entity.pk_name, None)

        run_validators(self.entity.rules, payload, message=CREATE_ERROR_MESSAGE)
        self._coerce_dates(payload, CREATE_ERROR_MESSAGE)

        try:
            await hash_secrets(payload, self.entity.secret_fields)
            created = await self.repository.create(payload)
        except (SQLAlchemyError, ValueError) as e:
            await self._rollback()
            logger.warning(
                "record.create.failed", entity=self.entity.label, error=_storage_message(e)
            )
            raise PersistenceError(CREATE_ERROR_MESSAGE, [_storage_message(e)]) from e

        record_id = getattr(created, self.entity.pk_name)
        logger.info("record.created", entity=self.entity.label, id=record_id)
        return Envelope(
            status_code=201,
            message="Registro criado com sucesso.",
            data=self.public(created),
        )

    async def update(self, record_id: Any, data: Mapping[str, Any]) -> Envelope:
        """Partial update; only the fields present are validated and written."""
        payload = dict(data)
        payload.pop(self.entity.pk_name, None)

        run_validators(
            self.entity.rules, payload, partial=True, message=UPDATE_ERROR_MESSAGE
        )
        self._coerce_dates(payload, UPDATE_ERROR_MESSAGE)

        try:
            await hash_secrets(payload, self.entity.secret_fields)
            updated = await self.repository.update(record_id, payload)
        except (SQLAlchemyError, ValueError) as e:
            await self._rollback()
            logger.warning(
                "record.update.failed",
                entity=self.entity.label,
                id=record_id,
                error=_storage_message(e),
            )
            raise PersistenceError(UPDATE_ERROR_MESSAGE, [_storage_message(e)]) from e

        if updated is None:
            raise RecordNotFoundError("Registro não encontrado.")

        logger.info(
            "record.updated", entity=self.entity.label, id=record_id, fields=sorted(payload)
        )
        return Envelope(
            status_code=200,
            message=f"Registro {record_id} atualizado com sucesso.",
        )

    async def remove(self, record_id: Any) -> Envelope:
        try:
            deleted = await self.repository.delete(record_id)
        except IntegrityError as e:
            # A RESTRICT foreign key still points at the row
            await self._rollback()
            logger.info(
                "record.remove.conflict",
                entity=self.entity.label,
                id=record_id,
                error=_storage_message(e),
            )
            raise RecordConflictError(
                f"Registro {record_id} possui registros vinculados e não pode ser removido."
            ) from e
        except SQLAlchemyError as e:
            await self._rollback()
            raise PersistenceError(
                f"Erro ao remover o registro {record_id}.", [_storage_message(e)]
            ) from e
        if not deleted:
            raise RecordNotFoundError(f"Registro {record_id} não encontrado para remoção.")

        logger.info("record.removed", entity=self.entity.label, id=record_id)
        return Envelope(
            status_code=200,
            message=f"Registro {record_id} removido com sucesso.",
        )

    async def find_by_email(self, email: str) -> Base | None:
        """Raw row (secrets included) for credential checks; never sent to clients."""
        if self.entity.email_field is None:
            raise ValueError(f"{self.entity.label} has no e-mail field")
        return await self.repository.find_one_by(self.entity.email_field, email)

    async def _rollback(self) -> None:
        try:
            await self.db.rollback()
        except SQLAlchemyError as rollback_err:
            logger.warning("db.rollback.failed", error=str(rollback_err))
