"""Address endpoints. Addresses are removed together with their shelter."""

from routes.crud import build_crud_router
from schemas import EnderecoCreate, EnderecoUpdate
from services.entities import ENDERECO

router = build_crud_router(
    ENDERECO,
    EnderecoCreate,
    EnderecoUpdate,
    prefix="/enderecos",
    tag="enderecos",
)
