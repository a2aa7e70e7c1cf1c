"""Error hierarchy for the task tracker API.

Every error carries a machine code and the HTTP status it maps to. Client
errors (400/404) are recoverable by correcting the request; StoreError is the
only 500-level error and never exposes driver details to the caller.
"""

from typing import List


class TaskTrackerError(Exception):
    """Base exception for all task tracker errors."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


class InputValidationError(TaskTrackerError):
    """Request input failed one or more field rules."""

    def __init__(self, messages: List[str]):
        super().__init__(", ".join(messages), "VALIDATION_ERROR", 400)
        self.messages = messages


class NotFoundError(TaskTrackerError):
    """Requested resource does not exist."""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} not found", "RESOURCE_NOT_FOUND", 404)
        self.resource_type = resource_type
        self.resource_id = resource_id


class ReferentialViolationError(TaskTrackerError):
    """A task references an employee that does not exist."""

    def __init__(self, employee_id: int):
        super().__init__("Employee not found", "EMPLOYEE_NOT_FOUND", 400)
        self.employee_id = employee_id


class DuplicateEmailError(TaskTrackerError):
    """Another employee already uses this email address."""

    def __init__(self, email: str):
        super().__init__("Email already exists", "DUPLICATE_EMAIL", 400)
        self.email = email


class StoreError(TaskTrackerError):
    """Unexpected database failure."""

    def __init__(self, operation: str):
        super().__init__("Database operation failed", "STORE_ERROR", 500)
        self.operation = operation
