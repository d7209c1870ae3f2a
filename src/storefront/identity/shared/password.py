"""Password strength rules and bcrypt hashing."""

import os
import re

import bcrypt
from protean.exceptions import ValidationError

MIN_LENGTH = 8
# bcrypt only looks at the first 72 bytes of its input
MAX_BYTES = 72

_SPECIAL = re.compile(r"[^A-Za-z0-9]")


def _rounds() -> int:
    return int(os.environ.get("BCRYPT_ROUNDS", "12"))


def check_password_strength(password: str) -> None:
    errors = []
    if not password or len(password) < MIN_LENGTH:
        errors.append(f"Password must be at least {MIN_LENGTH} characters long")
    if password and len(password.encode("utf-8")) > MAX_BYTES:
        errors.append(f"Password must be at most {MAX_BYTES} bytes long")
    if not password or not any(ch.isdigit() for ch in password):
        errors.append("Password must contain at least one number")
    if not password or not _SPECIAL.search(password):
        errors.append("Password must contain at least one special character")

    if errors:
        raise ValidationError({"password": errors})


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=_rounds())
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash or over-long password
        return False
