# src/access_time/schemas/order.py
"""Order-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from access_time.db.types import U32_MAX


class OrderCreate(BaseModel):
    """Schema for purchasing a package."""

    package_id: int = Field(..., ge=0, le=U32_MAX)


class OrderCreated(BaseModel):
    owner: str
    order_id: int


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    owner: str
    order_id: int
    package_id: int
    credited: bool


class GrantResponse(BaseModel):
    owner: str
    order_id: int
    remaining_secs: int
