"""Admin credential verification."""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from core.logger import get_logger
from core.security import verify_password
from schemas import Envelope
from services.crud_service import CrudService
from services.entities import ADMIN

logger = get_logger(__name__)


class InvalidCredentialsError(Exception):
    """E-mail unknown or password mismatch. Surfaced as 401."""


async def authenticate_admin(db: AsyncSession, email: str, senha: str) -> Envelope:
    """Check an admin's e-mail/password pair.

    No token or session is issued; callers only learn whether the pair is
    valid. The error does not say which half was wrong.
    """
    service = CrudService(db, ADMIN)
    admin = await service.find_by_email(email.strip())

    stored_hash = admin.senha_admin if admin is not None else None
    valid = await asyncio.to_thread(verify_password, senha, stored_hash)
    if admin is None or not valid:
        logger.info("admin.login.failed", email_known=admin is not None)
        raise InvalidCredentialsError("E-mail ou senha inválidos.")

    logger.info("admin.login.succeeded", id=admin.id_admin)
    return Envelope(
        status_code=200,
        message="Credenciais válidas.",
        data=service.public(admin),
    )
