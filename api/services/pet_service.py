"""Pet listings beyond generic CRUD."""

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.pet_repository import PetRepository
from schemas import Envelope
from services.crud_service import CrudService
from services.entities import ADOTANTE, PET


async def list_pets_by_adotante(db: AsyncSession, adotante_id: int) -> Envelope:
    """Pets adopted by ``adotante_id``; 404 if the adopter does not exist."""
    await CrudService(db, ADOTANTE).get_or_raise(adotante_id)

    pets = await PetRepository(db).list_by_adotante(adotante_id)
    return Envelope(
        status_code=200,
        message=f"Pets do adotante {adotante_id} retornados com sucesso.",
        data=CrudService(db, PET).public(pets),
    )
