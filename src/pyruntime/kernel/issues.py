"""Issue records for accumulated resolution errors."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..codes import ErrorCode


class InvariantViolation(AssertionError):
    """Raised when an internal invariant of the kernel does not hold.

    This signals a defect in the kernel, not bad user input; it is never
    converted into a RuntimeIssue.
    """
    pass


class RuntimeIssue(BaseModel):
    """A single user-facing resolution error."""
    code: ErrorCode
    attribute: Optional[str] = None  # None for rule-level errors spanning several attributes
    message: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    def render(self) -> str:
        """Format as a one-line build failure message."""
        if self.attribute:
            return f"{self.code.value}: in {self.attribute} attribute: {self.message}"
        return f"{self.code.value}: {self.message}"


def rule_error(code: ErrorCode, message: str) -> RuntimeIssue:
    return RuntimeIssue(code=code, attribute=None, message=message)


def attribute_error(code: ErrorCode, attribute: str, message: str) -> RuntimeIssue:
    return RuntimeIssue(code=code, attribute=attribute, message=message)
