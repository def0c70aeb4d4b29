"""Application DTOs for Order operations."""

from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field

from ordering.domain.entities.order import Order
from ordering.domain.enums import OrderStatus
from ordering.settings import get_app_settings


def _default_currency() -> str:
    return get_app_settings().default_currency


class MoneyDTO(BaseModel):
    """DTO for a monetary amount."""

    amount: Decimal = Field(..., description="Amount")
    currency: str = Field(..., min_length=1, description="Currency code")

    model_config = {"frozen": True}


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an order."""

    customer_id: str = Field(..., description="External customer reference")
    amount: Decimal = Field(..., description="Order total amount")
    currency: str = Field(default_factory=_default_currency, min_length=1, description="Currency code")

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: UUID = Field(..., description="Order ID")
    customer_id: str = Field(..., description="External customer reference")
    status: OrderStatus = Field(..., description="Order status")
    total_amount: MoneyDTO = Field(..., description="Order total")

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            status=order.status,
            total_amount=MoneyDTO(
                amount=order.total_amount.amount,
                currency=order.total_amount.currency,
            ),
        )


class OrderListDTO(BaseModel):
    """DTO for listing orders."""

    orders: List[OrderDTO] = Field(default_factory=list, description="List of orders")
    total: int = Field(..., ge=0, description="Total count")

    model_config = {"frozen": True}
