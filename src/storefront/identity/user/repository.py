"""Repository for the User aggregate."""

from protean.exceptions import ValidationError

from storefront.domain import storefront
from storefront.identity.user.user import User
from storefront.shared.repository import CrudRepository


@storefront.repository(part_of=User)
class UserRepository(CrudRepository):
    default_ordering = "username"

    def find_by_email(self, email: str) -> User | None:
        if not email:
            return None
        return self._dao.query.filter(email=email.strip().lower()).all().first

    def find_by_username(self, username: str) -> User | None:
        if not username:
            return None
        return self._dao.query.filter(username=username).all().first

    def ensure_available(self, email=None, username=None, exclude_id=None) -> None:
        """Reject an email or username already held by another account."""
        if email:
            holder = self.find_by_email(email)
            if holder is not None and holder.id != exclude_id:
                raise ValidationError({"email": ["Email already in use"]})
        if username:
            holder = self.find_by_username(username)
            if holder is not None and holder.id != exclude_id:
                raise ValidationError({"username": ["Username already taken"]})
