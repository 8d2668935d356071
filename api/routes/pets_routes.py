"""Pet endpoints, plus the per-adopter listing."""

from fastapi import Request

from core.database import DbSession
from core.ratelimit import READ_LIMIT, limiter
from routes.crud import build_crud_router
from schemas import Envelope, ErrorEnvelope, PetCreate, PetUpdate
from services.entities import PET
from services.pet_service import list_pets_by_adotante

router = build_crud_router(
    PET,
    PetCreate,
    PetUpdate,
    prefix="/pets",
    tag="pets",
)


@router.get(
    "/adotante/{adotante_id}",
    response_model=Envelope,
    response_model_exclude_unset=True,
    responses={404: {"model": ErrorEnvelope, "description": "Adopter not found"}},
)
@limiter.limit(READ_LIMIT)
async def get_pets_by_adotante(
    request: Request, adotante_id: int, db: DbSession
) -> Envelope:
    """Pets adopted by the given adopter."""
    return await list_pets_by_adotante(db, adotante_id)
