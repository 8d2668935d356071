"""Tests for PetRepository."""

import pytest

from repositories.pet_repository import PetRepository
from tests.factories import AdotanteFactory, PetFactory, create_async

pytestmark = pytest.mark.integration


class TestPetRepository:
    async def test_list_and_count_by_adotante(self, db_session):
        adotante = await create_async(AdotanteFactory, db_session)
        first = await create_async(
            PetFactory, db_session, adotante_id=adotante.id_adotante
        )
        second = await create_async(
            PetFactory, db_session, adotante_id=adotante.id_adotante
        )
        await create_async(PetFactory, db_session)
        repo = PetRepository(db_session)

        pets = await repo.list_by_adotante(adotante.id_adotante)

        assert [p.id_pet for p in pets] == [first.id_pet, second.id_pet]
        assert await repo.count_by_adotante(adotante.id_adotante) == 2

    async def test_unknown_adopter(self, db_session):
        repo = PetRepository(db_session)

        assert await repo.list_by_adotante(999) == []
        assert await repo.count_by_adotante(999) == 0
