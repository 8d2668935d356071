"""Adopter removal policy."""

from sqlalchemy.ext.asyncio import AsyncSession

from core.logger import get_logger
from repositories.pet_repository import PetRepository
from schemas import Envelope
from services.crud_service import CrudService, RecordConflictError
from services.entities import ADOTANTE

logger = get_logger(__name__)


async def remove_adotante(db: AsyncSession, adotante_id: int) -> Envelope:
    """Delete an adopter, refusing while any pet still references it.

    The pets are never detached implicitly; they must be reassigned or
    returned to the shelter (``adotante_id: null``) first.
    """
    service = CrudService(db, ADOTANTE)
    await service.get_or_raise(adotante_id)

    linked = await PetRepository(db).count_by_adotante(adotante_id)
    if linked:
        logger.info("adotante.remove.rejected", id=adotante_id, pets=linked)
        raise RecordConflictError(
            f"Adotante {adotante_id} possui {linked} pet(s) vinculado(s) "
            "e não pode ser removido."
        )

    return await service.remove(adotante_id)
