"""StorefrontSession: the signed-in user and their cart, held in memory.

Every cart mutation dispatches a domain command and then re-reads the cart
from the repository, replacing the snapshot wholesale. Failures are logged
and surfaced as a message on the snapshot instead of propagating to the
caller.
"""

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.identity.user.authentication import authenticate
from storefront.identity.user.registration import RegisterUser
from storefront.identity.user.user import User
from storefront.ordering.cart.cart import Cart
from storefront.ordering.cart.management import AddToCart, ClearCart, RemoveCartItem, UpdateCartItemQuantity
from storefront.ordering.order.placement import PlaceOrder
from storefront.session.state import AuthState, CartState

logger = structlog.get_logger(__name__)

EMPTY_CART = "Cart is empty"


def _first_message(exc: ValidationError, default: str) -> str:
    messages = getattr(exc, "messages", None) or {}
    for errors in messages.values():
        if errors:
            return errors[0] if isinstance(errors, list | tuple) else str(errors)
    return default


class StorefrontSession:
    def __init__(self, domain):
        self.domain = domain
        self.auth = AuthState()
        self.cart = CartState()

    @property
    def user(self):
        return self.auth.user

    @property
    def is_authenticated(self) -> bool:
        return self.auth.is_authenticated

    # -------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------
    def login(self, email: str, password: str) -> bool:
        with self.domain.domain_context():
            result = authenticate(email, password)
            if not result.success:
                self.auth = AuthState(error=result.message)
                self.cart = CartState()
                return False

            self.auth = AuthState(user=result.user)
            self._reload_cart()
            return True

    def register(self, username: str, email: str, password: str, name: str | None = None) -> bool:
        """Create an account and sign straight into it."""
        with self.domain.domain_context():
            try:
                user_id = self.domain.process(
                    RegisterUser(username=username, email=email, password=password, name=name),
                    asynchronous=False,
                )
            except ValidationError as exc:
                logger.info("registration_rejected", email=email, errors=exc.messages)
                self.auth = AuthState(error=_first_message(exc, "Registration failed"))
                return False

            self.auth = AuthState(user=self.domain.repository_for(User).get(user_id))
            self._reload_cart()
            return True

    def logout(self) -> None:
        self.auth = AuthState()
        self.cart = CartState()

    # -------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------
    def refresh(self) -> CartState:
        if self.is_authenticated:
            with self.domain.domain_context():
                self._reload_cart()
        return self.cart

    def add_to_cart(self, product_id, quantity: int = 1) -> CartState:
        return self._mutate_cart(
            lambda cart_id: AddToCart(cart_id=cart_id, product_id=product_id, quantity=quantity),
            "Failed to add item to cart",
        )

    def update_quantity(self, item_id, quantity: int) -> CartState:
        return self._mutate_cart(
            lambda cart_id: UpdateCartItemQuantity(cart_id=cart_id, item_id=item_id, quantity=quantity),
            "Failed to update item quantity",
        )

    def remove_from_cart(self, item_id) -> CartState:
        return self._mutate_cart(
            lambda cart_id: RemoveCartItem(cart_id=cart_id, item_id=item_id),
            "Failed to remove item from cart",
        )

    def clear_cart(self) -> CartState:
        return self._mutate_cart(lambda cart_id: ClearCart(cart_id=cart_id), "Failed to clear cart")

    def checkout(self, shipping_address: str | None = None) -> str | None:
        """Place an order from the current cart; returns the order id."""
        if not self.is_authenticated:
            return None

        with self.domain.domain_context():
            cart = self._cart()
            try:
                order_id = self.domain.process(
                    PlaceOrder(
                        user_id=self.auth.user_id,
                        cart_id=str(cart.id),
                        shipping_address=shipping_address,
                    ),
                    asynchronous=False,
                )
            except (ValidationError, ObjectNotFoundError) as exc:
                logger.warning("checkout_failed", user_id=self.auth.user_id, error=str(exc))
                self._reload_cart(error="Failed to place order")
                return None
            except Exception:
                logger.exception("checkout_error", user_id=self.auth.user_id)
                self._reload_cart(error="Failed to place order")
                return None

            self._reload_cart(error=None if order_id else EMPTY_CART)
            return order_id

    # -------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------
    def _cart(self) -> Cart:
        repo = self.domain.repository_for(Cart)
        return repo.get_or_create(self.auth.user_id)

    def _reload_cart(self, error: str | None = None) -> None:
        cart = self._cart()
        lines = self.domain.repository_for(Cart).items_with_products(cart.id)
        self.cart = CartState(cart_id=str(cart.id), lines=tuple(lines), error=error)

    def _mutate_cart(self, build_command, failure_message: str) -> CartState:
        if not self.is_authenticated:
            return self.cart

        with self.domain.domain_context():
            cart = self._cart()
            try:
                self.domain.process(build_command(str(cart.id)), asynchronous=False)
            except (ValidationError, ObjectNotFoundError) as exc:
                logger.warning("cart_update_failed", user_id=self.auth.user_id, error=str(exc))
                self._reload_cart(error=failure_message)
                return self.cart
            except Exception:
                logger.exception("cart_update_error", user_id=self.auth.user_id)
                self._reload_cart(error=failure_message)
                return self.cart

            self._reload_cart()
            return self.cart
