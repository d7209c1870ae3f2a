"""User registration: command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.shared.password import check_password_strength
from storefront.identity.user.user import User


@storefront.command(part_of="User")
class RegisterUser:
    """Open a new customer account."""

    username: String(required=True, min_length=3, max_length=50, sanitize=False)
    email: String(required=True, max_length=254, sanitize=False)
    password: String(required=True, max_length=128, sanitize=False)
    name: String(max_length=100, sanitize=False)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        check_password_strength(command.password)

        repo = current_domain.repository_for(User)
        repo.ensure_available(email=command.email, username=command.username)

        user = repo.create(
            username=command.username,
            email=command.email,
            password=command.password,
            name=command.name,
        )
        return str(user.id)
