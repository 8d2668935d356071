"""Shelter endpoints."""

from routes.crud import build_crud_router
from schemas import AbrigoCreate, AbrigoUpdate
from services.entities import ABRIGO

router = build_crud_router(
    ABRIGO,
    AbrigoCreate,
    AbrigoUpdate,
    prefix="/abrigos",
    tag="abrigos",
)
