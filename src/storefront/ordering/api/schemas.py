"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Cart Schemas ---


class AddCartItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"product_id": "5d3b1b0e-7c2f-4f6e-9d55-7a8b2c4e1f00", "quantity": 2}]}
    }

    product_id: str
    quantity: int = Field(1, ge=1)


class UpdateCartItemRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"quantity": 3}]}}

    # Zero or less removes the item
    quantity: int


class CartLineResponse(BaseModel):
    item_id: str
    product_id: str
    name: str
    price: float
    quantity: int
    line_total: float
    image_url: str | None = None


class CartResponse(BaseModel):
    cart_id: str
    user_id: str
    items: list[CartLineResponse] = Field(default_factory=list)
    total_items: int = 0
    total_price: float = 0.0


class CartItemIdResponse(BaseModel):
    item_id: str


# --- Order Schemas ---


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "a1c2e3f4-0000-4000-8000-000000000001",
                    "cart_id": "b1c2e3f4-0000-4000-8000-000000000002",
                    "shipping_address": "742 Evergreen Terrace, Springfield",
                }
            ]
        }
    }

    user_id: str
    cart_id: str
    shipping_address: str | None = None


class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "processing"}]}}

    status: str


class OrderLineResponse(BaseModel):
    item_id: str
    product_id: str
    name: str
    quantity: int
    price: float
    line_total: float
    current_price: float


class OrderResponse(BaseModel):
    order_id: str
    user_id: str
    status: str
    total_amount: float
    shipping_address: str | None = None
    order_date: datetime | None = None
    items: list[OrderLineResponse] = Field(default_factory=list)


class OrderIdResponse(BaseModel):
    order_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
