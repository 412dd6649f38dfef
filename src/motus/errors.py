"""Structured errors raised by the program engine."""

from dataclasses import dataclass


@dataclass
class InputIssue:
    """A single field-level problem with caller input."""

    field: str
    reason: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"field": self.field, "reason": self.reason}


class MotusError(Exception):
    """Base class for every error the engine raises.

    Each error carries a machine-readable ``kind`` plus enough detail
    (field names, itemized issues) to drive a specific user-facing message.
    """

    kind = "error"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        issues: list[InputIssue] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.issues = list(issues or [])
        if field and not self.issues:
            self.issues.append(InputIssue(field=field, reason=message))

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "kind": self.kind,
            "message": self.message,
            "field": self.field,
            "issues": [issue.to_dict() for issue in self.issues],
        }


class InvalidInputError(MotusError, ValueError):
    """Caller input is missing, malformed, or physiologically implausible."""

    kind = "invalid_input"

    @classmethod
    def from_issues(cls, issues: list[InputIssue]) -> "InvalidInputError":
        """Build one error out of several field issues."""
        message = "; ".join(f"{i.field}: {i.reason}" for i in issues)
        field = issues[0].field if len(issues) == 1 else None
        return cls(message, field=field, issues=issues)


class AssemblyFailure(MotusError):
    """No valid program can be placed for the given profile and schedule."""

    kind = "assembly_failure"


class ProgramFormatError(MotusError, ValueError):
    """A program payload does not match the Program contract."""

    kind = "invalid_program"
