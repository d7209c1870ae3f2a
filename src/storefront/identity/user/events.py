"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A new account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    username: String(required=True, max_length=50, sanitize=False)
    email: String(required=True, max_length=254, sanitize=False)
    role: String(required=True, max_length=20, sanitize=False)
    registered_at: DateTime(required=True)


@storefront.event(part_of="User")
class UserDetailsUpdated:
    __version__ = 1

    user_id: Identifier(required=True)
    username: String(required=True, max_length=50, sanitize=False)
    email: String(required=True, max_length=254, sanitize=False)
    name: String(max_length=100, sanitize=False)
    role: String(required=True, max_length=20, sanitize=False)


@storefront.event(part_of="User")
class PasswordChanged:
    __version__ = 1

    user_id: Identifier(required=True)
    changed_at: DateTime(required=True)
