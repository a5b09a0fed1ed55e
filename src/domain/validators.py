"""
Field validators - Pure functions from a field value to a verdict.

Each validator returns a Verdict carrying validity and the message to show
once the field has been touched. Validators never raise for bad input and
never consult touched state; display gating is the orchestrator's concern.
"""

import re
from dataclasses import dataclass

from .exceptions import UnknownField
from .ports import FieldId

SPECIAL_CHARACTERS = "@$!%*?&"

_NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_REQUIRED = "Full name is required"
NAME_TOO_SHORT = "Name must be at least 2 characters"
NAME_CHARSET = "Name can only contain letters and spaces"
EMAIL_REQUIRED = "Email address is required"
EMAIL_FORMAT = "Please enter a valid email address"
EMAIL_TAKEN = "This email is already registered. Please use a different email."
PASSWORD_REQUIRED = "Password is required"
PASSWORD_TOO_SHORT = "Password must be at least 8 characters"
PASSWORD_COMPOSITION = (
    "Password must include uppercase, lowercase, number, and special character"
)
CONFIRM_REQUIRED = "Please confirm your password"
CONFIRM_MISMATCH = "Passwords do not match"
TERMS_REQUIRED = "You must accept the terms and conditions"

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 8


@dataclass(frozen=True)
class Verdict:
    """Outcome of validating one field value."""

    valid: bool
    message: str = ""


VALID = Verdict(valid=True)


def has_lowercase(value: str) -> bool:
    return any("a" <= c <= "z" for c in value)


def has_uppercase(value: str) -> bool:
    return any("A" <= c <= "Z" for c in value)


def has_digit(value: str) -> bool:
    return any("0" <= c <= "9" for c in value)


def has_special(value: str) -> bool:
    return any(c in SPECIAL_CHARACTERS for c in value)


def validate_name(value: str) -> Verdict:
    stripped = value.strip()
    if not stripped:
        return Verdict(False, NAME_REQUIRED)
    if len(stripped) < MIN_NAME_LENGTH:
        return Verdict(False, NAME_TOO_SHORT)
    if not _NAME_PATTERN.fullmatch(value):
        return Verdict(False, NAME_CHARSET)
    return VALID


def validate_email(value: str) -> Verdict:
    """
    Check email shape only: local@domain.tld with no whitespace.

    Availability is tracked separately and overrides this verdict.
    """
    if not value.strip():
        return Verdict(False, EMAIL_REQUIRED)
    if not _EMAIL_PATTERN.fullmatch(value):
        return Verdict(False, EMAIL_FORMAT)
    return VALID


def validate_password(value: str) -> Verdict:
    if not value:
        return Verdict(False, PASSWORD_REQUIRED)
    if len(value) < MIN_PASSWORD_LENGTH:
        return Verdict(False, PASSWORD_TOO_SHORT)
    composed = (
        has_lowercase(value)
        and has_uppercase(value)
        and has_digit(value)
        and has_special(value)
    )
    if not composed:
        return Verdict(False, PASSWORD_COMPOSITION)
    return VALID


def validate_confirm_password(value: str, password: str) -> Verdict:
    """Confirmation must equal the current password exactly (case-sensitive)."""
    if not value:
        return Verdict(False, CONFIRM_REQUIRED)
    if value != password:
        return Verdict(False, CONFIRM_MISMATCH)
    return VALID


def validate_terms(checked: bool) -> Verdict:
    if not checked:
        return Verdict(False, TERMS_REQUIRED)
    return VALID


def validate(field: FieldId, value: str | bool, password: str = "") -> Verdict:
    """
    Dispatch to the validator for a field.

    Args:
        field: Field being validated
        value: Current value (bool for terms, str otherwise)
        password: Current password, consulted only for confirm_password

    Returns:
        Verdict for the value

    Raises:
        UnknownField: If field is not a validated form field
    """
    if field is FieldId.TERMS:
        return validate_terms(bool(value))
    text = str(value)
    if field is FieldId.NAME:
        return validate_name(text)
    if field is FieldId.EMAIL:
        return validate_email(text)
    if field is FieldId.PASSWORD:
        return validate_password(text)
    if field is FieldId.CONFIRM_PASSWORD:
        return validate_confirm_password(text, password)
    raise UnknownField(str(field))
