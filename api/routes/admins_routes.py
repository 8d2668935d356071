"""Admin endpoints and credential check."""

from fastapi import Request

from core.database import DbSession
from core.ratelimit import AUTH_LIMIT, limiter
from routes.crud import build_crud_router
from schemas import AdminCreate, AdminLoginRequest, AdminUpdate, Envelope, ErrorEnvelope
from services.admin_service import authenticate_admin
from services.entities import ADMIN

router = build_crud_router(
    ADMIN,
    AdminCreate,
    AdminUpdate,
    prefix="/admins",
    tag="admins",
)


@router.post(
    "/login",
    response_model=Envelope,
    response_model_exclude_unset=True,
    responses={401: {"model": ErrorEnvelope, "description": "Invalid credentials"}},
)
@limiter.limit(AUTH_LIMIT)
async def login(request: Request, body: AdminLoginRequest, db: DbSession) -> Envelope:
    """Verify an admin's e-mail and password. No session or token is issued."""
    return await authenticate_admin(db, body.email, body.senha)
