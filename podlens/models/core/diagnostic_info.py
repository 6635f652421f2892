"""Diagnostic hint models."""

from pydantic import BaseModel, Field

from podlens.constants.enums import Severity


class DebugHelper(BaseModel):
    """A detected pod issue with suggested next steps."""

    issue: str
    severity: Severity = Severity.INFO
    suggestions: list[str] = Field(default_factory=list)
