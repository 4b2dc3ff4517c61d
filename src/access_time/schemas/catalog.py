# src/access_time/schemas/catalog.py
"""Catalog-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from access_time.db.types import U32_MAX, U128_MAX


class ContractInit(BaseModel):
    """Schema for initializing the contract. The signer becomes administrator."""

    token: str = Field(..., min_length=1, description="Identifier of the payment token")


class ContractResponse(BaseModel):
    admin: str
    token: str


class PackageUpsert(BaseModel):
    """Schema for creating or overwriting a package."""

    price: int = Field(..., ge=0, le=U128_MAX, description="Price in token base units")
    duration_secs: int = Field(..., ge=0, le=U32_MAX, description="Seconds granted per purchase")


class PackageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    package_id: int
    price: int
    duration_secs: int
