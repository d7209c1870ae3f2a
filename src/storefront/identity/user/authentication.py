"""Credential checks for signing in."""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from storefront.identity.user.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass(frozen=True)
class AuthResult:
    success: bool
    user: User | None = None
    message: str | None = None


def authenticate(email: str, password: str) -> AuthResult:
    """Check ``email``/``password`` against the stored account.

    Unknown emails and wrong passwords produce the same message so callers
    cannot tell which accounts exist.
    """
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not user.check_password(password):
        logger.info("login_failed", email=email)
        return AuthResult(success=False, message=INVALID_CREDENTIALS)

    logger.info("login_succeeded", user_id=user.id)
    return AuthResult(success=True, user=user)
