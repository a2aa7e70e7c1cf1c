"""Field rules and the messages reported when they fail.

Pydantic collects every violation of a payload in one pass; this module turns
those raw errors into the human-readable messages the API reports, one per
failed rule, in the order pydantic found them.
"""

from typing import Annotated, Iterable, List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from ..errors import InputValidationError

DUE_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# Largest value a 64-bit INTEGER column can hold; no row id exceeds it.
MAX_ID = 2**63 - 1

STATUS_MESSAGE = "Status must be 'pending', 'in-progress', or 'completed'"
PRIORITY_MESSAGE = "Priority must be 'low', 'medium', or 'high'"

FIELD_LABELS = {
    "name": "Name",
    "email": "Email",
    "department": "Department",
    "position": "Position",
    "title": "Title",
    "description": "Description",
    "status": "Status",
    "employeeId": "Employee ID",
    "dueDate": "Due date",
    "priority": "Priority",
}

# Per-field overrides, keyed by wire name and pydantic error type.
FIELD_MESSAGES = {
    "name": {
        "string_too_short": "Name is required",
        "string_too_long": "Name must be less than 100 characters",
    },
    "email": {"string_too_short": "Email is required"},
    "department": {"string_too_short": "Department is required"},
    "position": {"string_too_short": "Position is required"},
    "title": {
        "string_too_short": "Title is required",
        "string_too_long": "Title must be less than 200 characters",
    },
    "description": {"string_too_long": "Description must be less than 1000 characters"},
    "status": {"enum": STATUS_MESSAGE},
    "employeeId": {
        "int_type": "Employee ID must be a number",
        "int_parsing": "Employee ID must be a number",
        "int_from_float": "Employee ID must be an integer",
        "greater_than": "Employee ID must be positive",
        "less_than_equal": "Employee not found",
    },
    "dueDate": {"string_pattern_mismatch": "Due date must be in YYYY-MM-DD format"},
    "priority": {"enum": PRIORITY_MESSAGE},
}

# Python field names that differ from their wire names.
_WIRE_NAMES = {"employee_id": "employeeId", "due_date": "dueDate"}

GENERIC_MESSAGES = {
    "missing": "{label} is required",
    "string_type": "{label} must be a string",
}


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _require_number(value):
    # Reject strings and booleans instead of letting lax mode coerce them.
    if value is None:
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    return value


def _check_email(value: str) -> str:
    # A bare address only; "Name <addr>" display forms are rejected.
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("invalid_email", "Invalid email format")
    # Stored exactly as given; uniqueness is exact-match.
    return value


RequiredText = Annotated[str, Field(min_length=1)]
EmailAddress = Annotated[str, Field(min_length=1), AfterValidator(_check_email)]
EmployeeId = Annotated[int, Field(gt=0, le=MAX_ID), BeforeValidator(_require_number)]
DueDate = Annotated[str, Field(pattern=DUE_DATE_PATTERN)]


def reject_null(value, label: str):
    """Non-nullable fields may be omitted from an update but not set to null."""
    if value is None:
        raise PydanticCustomError("not_nullable", "{label} cannot be null", {"label": label})
    return value


def _field_name(loc: Iterable) -> Optional[str]:
    parts = [part for part in loc if isinstance(part, str) and part != "body"]
    if not parts:
        return None
    return _WIRE_NAMES.get(parts[0], parts[0])


def describe_error(error: dict) -> str:
    """Return the message for a single pydantic error."""
    field = _field_name(error.get("loc", ()))
    error_type = error.get("type", "")
    if field is None:
        if error_type == "missing":
            return "Request body is required"
        return "Invalid request body"

    override = FIELD_MESSAGES.get(field, {}).get(error_type)
    if override:
        return override

    label = FIELD_LABELS.get(field, field)
    generic = GENERIC_MESSAGES.get(error_type)
    if generic:
        return generic.format(label=label)
    return error.get("msg", f"{label} is invalid")


def format_validation_errors(errors: Iterable[dict]) -> List[str]:
    """Describe every error, dropping repeats but keeping first-seen order."""
    messages: List[str] = []
    for error in errors:
        message = describe_error(error)
        if message not in messages:
            messages.append(message)
    return messages


def parse_id(raw: str, message: str) -> int:
    """Parse a path or query identifier.

    Anything but a positive integer that fits a row id is rejected.
    """
    value = raw.strip()
    if not (value.isascii() and value.isdigit()) or not 0 < int(value) <= MAX_ID:
        raise InputValidationError([message])
    return int(value)
