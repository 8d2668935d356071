"""Entity-agnostic repository for single-table CRUD."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import Base
from repositories.utils import log_slow_query


class CrudRepository[ModelT: Base]:
    """Repository for any mapped model with a single-column primary key.

    Holds no validation logic: filters are expected to be valid column names
    with values already coerced to the column type.
    """

    def __init__(self, db: AsyncSession, model: type[ModelT]):
        self.db = db
        self.model = model
        self.pk_column = model.__mapper__.primary_key[0]

    @property
    def pk_name(self) -> str:
        return self.pk_column.key

    @log_slow_query("crud_find_all")
    async def find_all(
        self, filters: Mapping[str, Any], page: int, limit: int
    ) -> tuple[list[ModelT], int]:
        """Equality-filtered page in primary-key order, plus the filtered total."""
        page = max(page, 1)
        stmt = select(self.model)
        for name, value in filters.items():
            stmt = stmt.where(getattr(self.model, name) == value)

        total = await self.db.scalar(
            select(func.count()).select_from(stmt.subquery())
        )
        result = await self.db.execute(
            stmt.order_by(self.pk_column).offset((page - 1) * limit).limit(limit)
        )
        return list(result.scalars().all()), total or 0

    @log_slow_query("crud_find_by_id")
    async def find_by_id(self, record_id: Any) -> ModelT | None:
        return await self.db.get(self.model, record_id)

    @log_slow_query("crud_find_one_by")
    async def find_one_by(self, field: str, value: Any) -> ModelT | None:
        """First row whose ``field`` equals ``value``."""
        result = await self.db.execute(
            select(self.model).where(getattr(self.model, field) == value).limit(1)
        )
        return result.scalar_one_or_none()

    @log_slow_query("crud_create")
    async def create(self, data: Mapping[str, Any]) -> ModelT:
        """Insert a row. Flushes so the generated primary key is populated."""
        instance = self.model(**data)
        self.db.add(instance)
        await self.db.flush()
        await self.db.refresh(instance)
        return instance

    @log_slow_query("crud_update")
    async def update(self, record_id: Any, data: Mapping[str, Any]) -> ModelT | None:
        """Apply a partial update. Returns None when the row does not exist."""
        instance = await self.db.get(self.model, record_id)
        if instance is None:
            return None
        for name, value in data.items():
            if name == self.pk_name:
                continue
            setattr(instance, name, value)
        await self.db.flush()
        return instance

    @log_slow_query("crud_delete")
    async def delete(self, record_id: Any) -> bool:
        """Delete by primary key. Returns False when nothing was removed.

        Issued as a bulk DELETE so dependent rows are handled by the
        database's ON DELETE rules.
        """
        result = await self.db.execute(
            delete(self.model).where(self.pk_column == record_id)
        )
        return bool(result.rowcount)
