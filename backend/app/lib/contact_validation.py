import re
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_MESSAGE_LENGTH = 600

# Minimal local@domain.tld shape check. Deliberately permissive; do not tighten.
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class Submission(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "Submission":
        """Build a submission from a decoded JSON body.

        Only string values are kept; non-object payloads give an empty submission.
        """
        if not isinstance(payload, dict):
            return cls()
        fields = {}
        for key in ("firstName", "lastName", "email", "message"):
            value = payload.get(key)
            if isinstance(value, str):
                fields[key] = value
        return cls(**fields)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def validate_submission(submission: Submission) -> ValidationResult:
    errors: Dict[str, str] = {}

    if _is_blank(submission.first_name):
        errors["firstName"] = "First name is required"

    if _is_blank(submission.last_name):
        errors["lastName"] = "Last name is required"

    if submission.email is None or not EMAIL_RE.fullmatch(submission.email):
        errors["email"] = "Please enter a valid email address"

    if _is_blank(submission.message):
        errors["message"] = "Message is required"
    elif len(submission.message) > MAX_MESSAGE_LENGTH:
        errors["message"] = f"Message cannot exceed {MAX_MESSAGE_LENGTH} characters"

    return ValidationResult(valid=not errors, errors=errors)
