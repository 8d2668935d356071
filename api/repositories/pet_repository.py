"""Pet-specific queries on top of the generic CRUD repository."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models import Pet
from repositories.utils import log_slow_query


class PetRepository:
    """Repository for Pet queries that the generic CRUD layer does not cover."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @log_slow_query("pet_list_by_adotante")
    async def list_by_adotante(self, adotante_id: int) -> list[Pet]:
        """Pets adopted by the given adopter, in id order."""
        result = await self.db.execute(
            select(Pet).where(Pet.adotante_id == adotante_id).order_by(Pet.id_pet)
        )
        return list(result.scalars().all())

    @log_slow_query("pet_count_by_adotante")
    async def count_by_adotante(self, adotante_id: int) -> int:
        """Number of pets still referencing the adopter (guards adopter deletion)."""
        count = await self.db.scalar(
            select(func.count()).select_from(Pet).where(Pet.adotante_id == adotante_id)
        )
        return count or 0
