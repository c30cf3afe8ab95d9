"""Templating exceptions."""

from typing import List
from dataclasses import dataclass


@dataclass
class ValidationError:
    """Single validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class DashboardValidationError(Exception):
    """Raised when a dashboard document fails validation.

    Carries every problem found so the CLI can report them together and
    map the failure to an exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            location = f" at {error.path}" if error.path else ""
            messages.append(f"Validation error{location}: {error.message}")

        super().__init__("\n".join(messages))
