"""Router factory mapping HTTP verbs to the generic CRUD service.

    GET    /<entity>?page&limit&<filters>   -> CrudService.find_all
    GET    /<entity>/{record_id}            -> CrudService.find_one
    POST   /<entity>                        -> CrudService.create
    PATCH  /<entity>/{record_id}            -> CrudService.update
    PUT    /<entity>/{record_id}            -> CrudService.update
    DELETE /<entity>/{record_id}            -> CrudService.remove (or a hook)
"""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, Request
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import DbSession
from core.ratelimit import READ_LIMIT, WRITE_LIMIT, limiter
from schemas import Envelope, ErrorEnvelope
from services.crud_service import CrudService
from services.entities import EntitySpec

RemoveHook = Callable[[AsyncSession, int], Awaitable[Envelope]]

_BAD_REQUEST = {400: {"model": ErrorEnvelope, "description": "Invalid fields or storage error"}}
_NOT_FOUND = {404: {"model": ErrorEnvelope, "description": "Record not found"}}


def build_crud_router(
    entity: EntitySpec,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    *,
    prefix: str,
    tag: str,
    remove: RemoveHook | None = None,
    extra_responses: dict[int, dict[str, Any]] | None = None,
) -> APIRouter:
    """Build the five CRUD endpoints for ``entity`` under ``prefix``.

    ``remove`` replaces the default delete (used to enforce reference
    policies). ``extra_responses`` documents additional DELETE outcomes.
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    slug = prefix.strip("/").replace("/", "_")

    def limited(name: str, limit: str, func: Callable) -> Callable:
        # Distinct names keep rate-limit buckets and OpenAPI operation ids per entity
        func.__name__ = func.__qualname__ = f"{slug}_{name}"
        return limiter.limit(limit)(func)

    async def find_all(request: Request, db: DbSession) -> Envelope:
        """Paginated listing; any other query parameter is an equality filter."""
        return await CrudService(db, entity).find_all(request.query_params)

    async def find_one(request: Request, record_id: int, db: DbSession) -> Envelope:
        return await CrudService(db, entity).find_one(record_id)

    async def create(request: Request, payload: create_schema, db: DbSession) -> Envelope:
        return await CrudService(db, entity).create(payload.model_dump(exclude_unset=True))

    async def update(
        request: Request, record_id: int, payload: update_schema, db: DbSession
    ) -> Envelope:
        """Partial update: only the keys present in the body are written."""
        return await CrudService(db, entity).update(
            record_id, payload.model_dump(exclude_unset=True)
        )

    async def replace(
        request: Request, record_id: int, payload: update_schema, db: DbSession
    ) -> Envelope:
        """PUT behaves like PATCH: fields left out of the body are kept."""
        return await CrudService(db, entity).update(
            record_id, payload.model_dump(exclude_unset=True)
        )

    async def delete(request: Request, record_id: int, db: DbSession) -> Envelope:
        if remove is not None:
            return await remove(db, record_id)
        return await CrudService(db, entity).remove(record_id)

    envelope_options: dict[str, Any] = {
        "response_model": Envelope,
        "response_model_exclude_unset": True,
    }

    router.add_api_route(
        "",
        limited("find_all", READ_LIMIT, find_all),
        methods=["GET"],
        responses=_BAD_REQUEST,
        **envelope_options,
    )
    router.add_api_route(
        "/{record_id}",
        limited("find_one", READ_LIMIT, find_one),
        methods=["GET"],
        responses=_NOT_FOUND,
        **envelope_options,
    )
    router.add_api_route(
        "",
        limited("create", WRITE_LIMIT, create),
        methods=["POST"],
        status_code=201,
        responses=_BAD_REQUEST,
        **envelope_options,
    )
    router.add_api_route(
        "/{record_id}",
        limited("update", WRITE_LIMIT, update),
        methods=["PATCH"],
        responses={**_BAD_REQUEST, **_NOT_FOUND},
        **envelope_options,
    )
    router.add_api_route(
        "/{record_id}",
        limited("replace", WRITE_LIMIT, replace),
        methods=["PUT"],
        responses={**_BAD_REQUEST, **_NOT_FOUND},
        **envelope_options,
    )
    router.add_api_route(
        "/{record_id}",
        limited("delete", WRITE_LIMIT, delete),
        methods=["DELETE"],
        responses={**_NOT_FOUND, **(extra_responses or {})},
        **envelope_options,
    )

    return router
