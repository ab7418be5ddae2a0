# backend/campaignhub/core/validation.py
"""
Field checks run before any write.

Every check collects all of its failures and raises a single
ValidationFailed, so a request is never partially applied.
"""
from typing import Any, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email

from campaignhub.core.errors import ValidationFailed

MIN_PASSWORD_LENGTH = 6

FieldErrors = List[Dict[str, str]]


def is_valid_email(value: Any) -> bool:
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _require(errors: FieldErrors, data: Dict[str, Any], field: str, message: str) -> None:
    if _blank(data.get(field)):
        errors.append({"field": field, "message": message})


def _require_email(errors: FieldErrors, data: Dict[str, Any], field: str = "email") -> None:
    if not is_valid_email(data.get(field)):
        errors.append({"field": field, "message": "Please enter a valid email"})


def _raise_if_any(errors: FieldErrors) -> None:
    if errors:
        raise ValidationFailed(errors)


def validate_registration(data: Dict[str, Any]) -> None:
    errors: FieldErrors = []
    _require_email(errors, data)
    password: Optional[str] = data.get("password")
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        errors.append({
            "field": "password",
            "message": f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
        })
    _require(errors, data, "firstName", "First name is required")
    _require(errors, data, "lastName", "Last name is required")
    _raise_if_any(errors)


def validate_login(data: Dict[str, Any]) -> None:
    errors: FieldErrors = []
    _require_email(errors, data)
    if not data.get("password"):
        errors.append({"field": "password", "message": "Password is required"})
    _raise_if_any(errors)


def validate_contact(data: Dict[str, Any]) -> None:
    errors: FieldErrors = []
    _require(errors, data, "firstName", "First name is required")
    _require(errors, data, "lastName", "Last name is required")
    _require_email(errors, data)
    _raise_if_any(errors)


def validate_campaign(data: Dict[str, Any]) -> None:
    errors: FieldErrors = []
    _require(errors, data, "name", "Campaign name is required")
    _require(errors, data, "subject", "Subject is required")
    _require(errors, data, "message", "Message is required")
    _raise_if_any(errors)
