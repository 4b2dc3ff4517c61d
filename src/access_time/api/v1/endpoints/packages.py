"""Package catalog endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path

from access_time.api.v1.dependencies import AuthorizationDep, ServiceDep
from access_time.db.types import U32_MAX
from access_time.schemas.catalog import PackageResponse, PackageUpsert

router = APIRouter(prefix="/packages", tags=["packages"])

PackageIdPath = Annotated[int, Path(ge=0, le=U32_MAX)]


@router.put("/{package_id}")
async def set_package(
    package_id: PackageIdPath,
    body: PackageUpsert,
    authorization: AuthorizationDep,
    service: ServiceDep,
) -> PackageResponse:
    """Create or overwrite a package. Must be signed by the administrator."""
    package = service.set_package(authorization, package_id, body.price, body.duration_secs)
    return PackageResponse.model_validate(package)


@router.get("/{package_id}")
async def get_package(package_id: PackageIdPath, service: ServiceDep) -> PackageResponse:
    return PackageResponse.model_validate(service.get_package(package_id))


@router.get("")
async def list_packages(service: ServiceDep) -> list[PackageResponse]:
    return [PackageResponse.model_validate(package) for package in service.list_packages()]
