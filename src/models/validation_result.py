"""
Structured validation results.

The validator reports problems as data so the editor can render them inline;
nothing in this module raises.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class IssueCode:
    """Constants for validation issue codes."""
    CONTENT_LIMIT_EXCEEDED = "ContentLimitExceeded"
    COUNT_LIMIT_EXCEEDED = "CountLimitExceeded"


class ValidationIssue(BaseModel):
    """
    One error or warning produced by the validator.

    ``limit`` and ``current`` are set for length and count violations,
    ``field`` and ``element_id`` when the issue belongs to one element.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    code: str
    message: str
    field: Optional[str] = None
    element_id: Optional[str] = None
    limit: Optional[int] = None
    current: Optional[int] = None

    def with_prefix(self, prefix: str) -> "ValidationIssue":
        """Return a copy whose message is prefixed, e.g. with the screen title."""
        return self.model_copy(update={"message": f"{prefix}{self.message}"})


class ValidationResult(BaseModel):
    """Errors block export, warnings never do."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    errors: List[ValidationIssue] = Field(default_factory=list)
    warnings: List[ValidationIssue] = Field(default_factory=list)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def extend(self, other: "ValidationResult", prefix: str = "") -> None:
        """
        Append another result's issues to this one.

        Args:
            other: The result to fold in
            prefix: Optional text put in front of every folded message
        """
        if prefix:
            self.errors.extend(issue.with_prefix(prefix) for issue in other.errors)
            self.warnings.extend(issue.with_prefix(prefix) for issue in other.warnings)
        else:
            self.errors.extend(other.errors)
            self.warnings.extend(other.warnings)
