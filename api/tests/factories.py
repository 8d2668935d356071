"""Factory Boy factories for generating test data.

Factories build model instances with valid defaults. Secrets are stored as
given, so use the services when a test needs a real bcrypt hash.

Usage:
    abrigo = AbrigoFactory.build()  # In-memory only
    abrigo = await create_async(AbrigoFactory, db_session)  # Persisted

    # Related objects
    pet = await create_async(PetFactory, db_session, adotante_id=adotante.id_adotante)
"""

from datetime import date, timedelta

import factory
from faker import Faker
from sqlalchemy.ext.asyncio import AsyncSession

from models import Abrigo, Admin, Adotante, Endereco, Pet

fake = Faker("pt_BR")


def _celular() -> str:
    return f"({fake.random_int(11, 99)}) 9{fake.random_int(1000, 9999)}-{fake.random_int(1000, 9999)}"


# =============================================================================
# Async Factory Helpers
# =============================================================================


async def create_async(
    factory_class: type[factory.Factory], db: AsyncSession, **kwargs
):
    """Create an instance using a factory and persist to database.

    Usage:
        abrigo = await create_async(AbrigoFactory, db_session, nome_abrigo="Lar")
    """
    instance = factory_class.build(**kwargs)
    db.add(instance)
    await db.flush()
    await db.refresh(instance)
    return instance


async def create_batch_async(
    factory_class: type[factory.Factory], db: AsyncSession, size: int, **kwargs
):
    """Create multiple instances and persist to database."""
    instances = factory_class.build_batch(size, **kwargs)
    for instance in instances:
        db.add(instance)
    await db.flush()
    for instance in instances:
        await db.refresh(instance)
    return instances


# =============================================================================
# Factories
# =============================================================================


class AbrigoFactory(factory.Factory):
    class Meta:
        model = Abrigo

    nome_abrigo = factory.LazyAttribute(lambda _: f"Abrigo {fake.city()}"[:100])
    email_abrigo = factory.Sequence(lambda n: f"abrigo{n}@example.com")
    celular_abrigo = factory.LazyFunction(_celular)
    data_cadastro_abrigo = factory.LazyFunction(date.today)


class EnderecoFactory(factory.Factory):
    """Requires ``abrigo_id``."""

    class Meta:
        model = Endereco

    logradouro = factory.LazyAttribute(lambda _: fake.street_name()[:150])
    numero = factory.LazyAttribute(lambda _: str(fake.random_int(1, 9999)))
    complemento = None
    bairro = factory.LazyAttribute(lambda _: fake.bairro()[:100])
    cidade = factory.LazyAttribute(lambda _: fake.city()[:100])
    estado = factory.LazyAttribute(lambda _: fake.estado_sigla())
    cep = factory.LazyAttribute(lambda _: fake.postcode())


class AdotanteFactory(factory.Factory):
    class Meta:
        model = Adotante

    nome_adotante = factory.LazyAttribute(lambda _: fake.name()[:100])
    email_adotante = factory.Sequence(lambda n: f"adotante{n}@example.com")
    celular_adotante = factory.LazyFunction(_celular)
    senha_adotante = "not-a-real-hash"
    data_cadastro_adotante = factory.LazyFunction(date.today)


class PetFactory(factory.Factory):
    class Meta:
        model = Pet

    nome_pet = factory.LazyAttribute(lambda _: fake.first_name())
    especie = factory.Iterator(["Cachorro", "Gato", "Coelho"])
    data_nascimento_pet = factory.LazyFunction(
        lambda: date.today() - timedelta(days=fake.random_int(30, 3650))
    )
    adotante_id = None
    abrigo_id = None


class AdminFactory(factory.Factory):
    class Meta:
        model = Admin

    nome_admin = factory.LazyAttribute(lambda _: fake.name()[:100])
    email_admin = factory.Sequence(lambda n: f"admin{n}@example.com")
    senha_admin = "not-a-real-hash"
    data_cadastro_admin = factory.LazyFunction(date.today)
