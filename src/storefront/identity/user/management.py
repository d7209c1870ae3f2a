"""Account administration: commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.shared.password import check_password_strength
from storefront.identity.user.user import User, UserRole
from storefront.ordering.cart.cart import Cart
from storefront.ordering.order.order import Order


@storefront.command(part_of="User")
class UpdateUser:
    """Partial update: fields left unset keep their stored values."""

    user_id: Identifier(required=True)
    name: String(max_length=100, sanitize=False)
    username: String(min_length=3, max_length=50, sanitize=False)
    email: String(max_length=254, sanitize=False)
    password: String(max_length=128, sanitize=False)
    role: String(choices=UserRole)


@storefront.command(part_of="User")
class DeleteUser:
    user_id: Identifier(required=True)


@storefront.command_handler(part_of=User)
class ManageUserHandler:
    @handle(UpdateUser)
    def update_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        changes = {
            field: getattr(command, field)
            for field in ("name", "username", "email", "password", "role")
            if getattr(command, field) is not None
        }
        if "password" in changes:
            check_password_strength(changes["password"])
        repo.ensure_available(
            email=changes.get("email"),
            username=changes.get("username"),
            exclude_id=user.id,
        )

        repo.update(user.id, **changes)

    @handle(DeleteUser)
    def delete_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        if current_domain.repository_for(Order).find_by_user(user.id):
            raise ValidationError({"user_id": ["User has orders and cannot be deleted"]})
        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.find_by_user(user.id)
        if cart is not None and cart.items:
            raise ValidationError({"user_id": ["User has items in their cart and cannot be deleted"]})

        # An empty cart goes with its owner
        if cart is not None:
            cart_repo.delete(cart.id)
        repo.delete(user.id)
