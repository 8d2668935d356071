"""Repository layer for database operations.

Repositories encapsulate all database queries, keeping services free of
SQL and routes focused on HTTP handling. The generic CrudRepository serves
every entity; entity repositories only add bespoke queries.
"""

from repositories.crud_repository import CrudRepository
from repositories.pet_repository import PetRepository
from repositories.utils import log_slow_query

__all__ = [
    "CrudRepository",
    "PetRepository",
    "log_slow_query",
]
