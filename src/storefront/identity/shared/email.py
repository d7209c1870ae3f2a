"""Structural validation for email addresses."""

from protean.exceptions import ValidationError

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def _reject(email):
    raise ValidationError({"email": [f"Invalid email address: {email!r}"]})


def validate_email_address(email: str) -> str:
    """Return ``email`` normalized to lower case, or raise ``ValidationError``.

    Requires exactly one ``@``, non-empty local and domain parts without
    leading/trailing dots, a dotted domain whose labels do not start or end
    with a hyphen, no consecutive dots and no whitespace or forbidden
    punctuation.
    """
    if not email or any(ch in email for ch in (" ", "\t", "\n")):
        _reject(email)

    if email.count("@") != 1:
        _reject(email)

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        _reject(email)

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        _reject(email)

    if "." not in domain_part:
        _reject(email)

    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            _reject(email)

    if ".." in local_part or ".." in domain_part:
        _reject(email)

    if any(ch in email for ch in _FORBIDDEN):
        _reject(email)

    return email.lower()
