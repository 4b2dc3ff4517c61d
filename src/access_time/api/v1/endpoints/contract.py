"""Contract initialization endpoints."""

from fastapi import APIRouter, status

from access_time.api.v1.dependencies import AuthorizationDep, ServiceDep
from access_time.schemas.catalog import ContractInit, ContractResponse

router = APIRouter(prefix="/contract", tags=["contract"])


@router.post("/init", status_code=status.HTTP_201_CREATED)
async def init_contract(
    body: ContractInit,
    authorization: AuthorizationDep,
    service: ServiceDep,
) -> ContractResponse:
    """Initialize the contract; the signer becomes the administrator."""
    admin = authorization.principal
    service.init(authorization, admin, body.token)
    return ContractResponse(admin=admin, token=body.token)


@router.get("")
async def get_contract(service: ServiceDep) -> ContractResponse:
    """Return the configured administrator and token."""
    return ContractResponse(admin=service.get_admin(), token=service.get_token())
