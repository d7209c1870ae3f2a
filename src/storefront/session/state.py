"""Immutable snapshots held by a storefront session."""

from dataclasses import dataclass
from decimal import Decimal

from storefront.ordering.lines import CartLine
from storefront.shared.money import sum_amounts


@dataclass(frozen=True)
class AuthState:
    user: object | None = None
    error: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def user_id(self) -> str | None:
        return str(self.user.id) if self.user is not None else None


@dataclass(frozen=True)
class CartState:
    """A cart as last read from the repository.

    Totals are derived from ``lines`` on every access, never stored.
    """

    cart_id: str | None = None
    lines: tuple[CartLine, ...] = ()
    error: str | None = None

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def total_price(self) -> Decimal:
        return sum_amounts(line.line_total for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def line_for_product(self, product_id) -> CartLine | None:
        return next((line for line in self.lines if line.product_id == str(product_id)), None)
