"""Field validation shared by the intake handler and the form client."""

import re
from typing import Mapping

from app.contact.errors import ContactValidationError

# Permissive: non-whitespace, non-@ runs around a single @, with a dot in the domain
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS = ("name", "email", "message")


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(value))


def is_blank(value) -> bool:
    return value is None or not str(value).strip()


def validate_submission(fields: Mapping[str, str]) -> None:
    """
    Check required fields, then the email format.

    Raises:
        ContactValidationError: on the first failing check.
    """
    if any(is_blank(fields.get(name)) for name in REQUIRED_FIELDS):
        raise ContactValidationError(
            "Missing required fields",
            details="Name, email, and message are required",
        )
    if not is_valid_email(fields["email"].strip()):
        raise ContactValidationError("Invalid email format")
