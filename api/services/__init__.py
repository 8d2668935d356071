"""Service layer for business logic.

Services encapsulate validation, the secret-field policy and response
shaping, keeping routes thin and focused on HTTP handling.

Layer hierarchy:
    Routes (HTTP) -> Services (Business Logic) -> Repositories (Database)

Services should:
- Run the entity's field validators before any write
- Hash secret fields before they reach a repository
- Blank secret fields in everything they return
- Raise typed exceptions (RecordNotFoundError, PersistenceError, ...) that
  the application maps to status codes

Services should NOT:
- Directly execute SQL queries (use repositories)
- Know about HTTP request/response details
"""

from services.crud_service import (
    CrudService,
    PersistenceError,
    RecordConflictError,
    RecordNotFoundError,
)
from services.entities import ABRIGO, ADMIN, ADOTANTE, ENDERECO, PET, EntitySpec
from services.validation import FieldValidationError

__all__ = [
    "ABRIGO",
    "ADMIN",
    "ADOTANTE",
    "CrudService",
    "ENDERECO",
    "EntitySpec",
    "FieldValidationError",
    "PET",
    "PersistenceError",
    "RecordConflictError",
    "RecordNotFoundError",
]
