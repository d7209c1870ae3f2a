"""FastAPI endpoints for carts and orders."""

from fastapi import APIRouter, HTTPException
from protean.utils.globals import current_domain

from storefront.identity.user.user import User
from storefront.ordering.api.schemas import (
    AddCartItemRequest,
    CartItemIdResponse,
    CartLineResponse,
    CartResponse,
    OrderIdResponse,
    OrderLineResponse,
    OrderResponse,
    PlaceOrderRequest,
    StatusResponse,
    UpdateCartItemRequest,
    UpdateOrderStatusRequest,
)
from storefront.ordering.cart.cart import Cart
from storefront.ordering.cart.management import AddToCart, ClearCart, RemoveCartItem, UpdateCartItemQuantity
from storefront.ordering.order.order import Order
from storefront.ordering.order.placement import PlaceOrder
from storefront.ordering.order.status import UpdateOrderStatus
from storefront.shared.money import sum_amounts

cart_router = APIRouter(prefix="/carts", tags=["carts"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
customer_router = APIRouter(prefix="/users", tags=["users"])


def _cart(cart) -> CartResponse:
    lines = current_domain.repository_for(Cart).items_with_products(cart.id)
    return CartResponse(
        cart_id=str(cart.id),
        user_id=str(cart.user_id),
        items=[
            CartLineResponse(
                item_id=line.item_id,
                product_id=line.product_id,
                name=line.name,
                price=line.price,
                quantity=line.quantity,
                line_total=float(line.line_total),
                image_url=line.image_url,
            )
            for line in lines
        ],
        total_items=sum(line.quantity for line in lines),
        total_price=float(sum_amounts(line.line_total for line in lines)),
    )


def _order(order, with_items=True) -> OrderResponse:
    items = []
    if with_items:
        items = [
            OrderLineResponse(
                item_id=line.item_id,
                product_id=line.product_id,
                name=line.name,
                quantity=line.quantity,
                price=line.price,
                line_total=float(line.line_total),
                current_price=line.current_price,
            )
            for line in current_domain.repository_for(Order).items_with_products(order.id)
        ]
    return OrderResponse(
        order_id=str(order.id),
        user_id=str(order.user_id),
        status=order.status,
        total_amount=order.total_amount,
        shipping_address=order.shipping_address,
        order_date=order.order_date,
        items=items,
    )


# --- Cart endpoints ---


@customer_router.get("/{user_id}/cart", response_model=CartResponse)
async def get_user_cart(user_id: str) -> CartResponse:
    """Return the user's cart, creating an empty one on first use."""
    user = current_domain.repository_for(User).get(user_id)
    return _cart(current_domain.repository_for(Cart).get_or_create(user.id))


@cart_router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str) -> CartResponse:
    return _cart(current_domain.repository_for(Cart).get(cart_id))


@cart_router.post("/{cart_id}/items", status_code=201, response_model=CartItemIdResponse)
async def add_cart_item(cart_id: str, body: AddCartItemRequest) -> CartItemIdResponse:
    command = AddToCart(cart_id=cart_id, product_id=body.product_id, quantity=body.quantity)
    result = current_domain.process(command, asynchronous=False)
    return CartItemIdResponse(item_id=result)


@cart_router.put("/{cart_id}/items/{item_id}", response_model=StatusResponse)
async def update_cart_item(cart_id: str, item_id: str, body: UpdateCartItemRequest) -> StatusResponse:
    command = UpdateCartItemQuantity(cart_id=cart_id, item_id=item_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{cart_id}/items/{item_id}", response_model=StatusResponse)
async def remove_cart_item(cart_id: str, item_id: str) -> StatusResponse:
    current_domain.process(RemoveCartItem(cart_id=cart_id, item_id=item_id), asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{cart_id}/items", response_model=StatusResponse)
async def clear_cart(cart_id: str) -> StatusResponse:
    current_domain.process(ClearCart(cart_id=cart_id), asynchronous=False)
    return StatusResponse()


# --- Order endpoints ---


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def place_order(body: PlaceOrderRequest) -> OrderIdResponse:
    command = PlaceOrder(
        user_id=body.user_id,
        cart_id=body.cart_id,
        shipping_address=body.shipping_address,
    )
    result = current_domain.process(command, asynchronous=False)
    if result is None:
        raise HTTPException(status_code=400, detail="Cart is empty")
    return OrderIdResponse(order_id=result)


@order_router.get("", response_model=list[OrderResponse])
async def list_orders() -> list[OrderResponse]:
    return [_order(o, with_items=False) for o in current_domain.repository_for(Order).find_all()]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return _order(current_domain.repository_for(Order).get(order_id))


@order_router.put("/{order_id}/status", response_model=StatusResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> StatusResponse:
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return StatusResponse()


@customer_router.get("/{user_id}/orders", response_model=list[OrderResponse])
async def list_user_orders(user_id: str) -> list[OrderResponse]:
    user = current_domain.repository_for(User).get(user_id)
    return [_order(o, with_items=False) for o in current_domain.repository_for(Order).find_by_user(user.id)]
