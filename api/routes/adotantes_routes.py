"""Adopter endpoints."""

from routes.crud import build_crud_router
from schemas import AdotanteCreate, AdotanteUpdate, ErrorEnvelope
from services.adotante_service import remove_adotante
from services.entities import ADOTANTE

router = build_crud_router(
    ADOTANTE,
    AdotanteCreate,
    AdotanteUpdate,
    prefix="/adotantes",
    tag="adotantes",
    remove=remove_adotante,
    extra_responses={
        409: {"model": ErrorEnvelope, "description": "Adopter still has pets"},
    },
)
