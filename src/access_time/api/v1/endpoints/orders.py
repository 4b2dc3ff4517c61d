"""Purchase and grant endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path, status

from access_time.api.v1.dependencies import AuthorizationDep, ServiceDep
from access_time.db.types import U128_MAX
from access_time.schemas.order import GrantResponse, OrderCreate, OrderCreated, OrderResponse

router = APIRouter(prefix="/orders", tags=["orders"])

OrderIdPath = Annotated[int, Path(ge=1, le=U128_MAX)]


@router.post("", status_code=status.HTTP_201_CREATED)
async def purchase(
    body: OrderCreate,
    authorization: AuthorizationDep,
    service: ServiceDep,
) -> OrderCreated:
    """Pay for a package as the signer and record a pending order.

    The order is not credited until it is granted.
    """
    owner = authorization.principal
    order_id = service.purchase(authorization, owner, body.package_id)
    return OrderCreated(owner=owner, order_id=order_id)


@router.post("/{owner}/{order_id}/grant")
async def grant(
    owner: str,
    order_id: OrderIdPath,
    authorization: AuthorizationDep,
    service: ServiceDep,
) -> GrantResponse:
    """Credit an order to its owner's session. Signed by the owner or the administrator."""
    remaining = service.grant(authorization, authorization.principal, owner, order_id)
    return GrantResponse(owner=owner, order_id=order_id, remaining_secs=remaining)


@router.get("/{owner}/{order_id}")
async def get_order(owner: str, order_id: OrderIdPath, service: ServiceDep) -> OrderResponse:
    return OrderResponse.model_validate(service.get_order(owner, order_id))


@router.get("/{owner}")
async def list_orders(owner: str, service: ServiceDep) -> list[OrderResponse]:
    return [OrderResponse.model_validate(order) for order in service.list_orders(owner)]
