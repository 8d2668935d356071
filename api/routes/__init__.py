"""API route modules."""

from .abrigos_routes import router as abrigos_router
from .admins_routes import router as admins_router
from .adotantes_routes import router as adotantes_router
from .enderecos_routes import router as enderecos_router
from .health_routes import router as health_router
from .pets_routes import router as pets_router

__all__ = [
    "abrigos_router",
    "admins_router",
    "adotantes_router",
    "enderecos_router",
    "health_router",
    "pets_router",
]
