"""User aggregate root: storefront accounts for customers and administrators."""

from datetime import datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from storefront.domain import storefront
from storefront.identity.shared.email import validate_email_address
from storefront.identity.shared.password import hash_password, verify_password
from storefront.identity.user.events import PasswordChanged, UserDetailsUpdated, UserRegistered

_EDITABLE_FIELDS = ("name", "username", "email", "role", "password")


class UserRole(Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"


@storefront.aggregate(schema_name="user")
class User:
    """A person who can sign in, fill a cart and place orders.

    Only a salted bcrypt hash of the password is ever stored. Email
    addresses are normalized to lower case so lookups are case-insensitive.
    """

    name: String(max_length=100, sanitize=False)
    username: String(required=True, min_length=3, max_length=50, unique=True, sanitize=False)
    email: String(required=True, max_length=254, unique=True, sanitize=False)
    password_hash: String(required=True, max_length=255, sanitize=False)
    role: String(choices=UserRole, default=UserRole.CUSTOMER.value)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, username, email, password, name=None, role=UserRole.CUSTOMER.value):
        if not password:
            raise ValidationError({"password": ["is required"]})

        now = datetime.now()
        user = cls(
            name=name,
            username=username,
            email=validate_email_address(email),
            password_hash=hash_password(password),
            role=role,
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                username=user.username,
                email=user.email,
                role=user.role,
                registered_at=now,
            )
        )
        return user

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    def check_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)

    def update_details(self, **changes):
        unknown = sorted(set(changes) - set(_EDITABLE_FIELDS))
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in unknown})

        password = changes.pop("password", None)
        if "email" in changes:
            changes["email"] = validate_email_address(changes["email"])

        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = datetime.now()

        if password:
            self.password_hash = hash_password(password)
            self.raise_(PasswordChanged(user_id=self.id, changed_at=self.updated_at))

        if changes:
            self.raise_(
                UserDetailsUpdated(
                    user_id=self.id,
                    username=self.username,
                    email=self.email,
                    name=self.name,
                    role=self.role,
                )
            )
