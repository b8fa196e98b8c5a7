"""Type definitions for scss-lint-formatter."""
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, Field


class Severity(IntEnum):
    """Severity levels reported by the linter."""

    WARNING = 1
    ERROR = 2


class Message(BaseModel):
    """Single lint violation."""

    line: int = Field(ge=1, description="1-based source line")
    column: int = Field(ge=1, description="1-based source column")
    # Compared as-is: anything other than exactly ERROR renders as a warning
    severity: Any = Field(description="1 = warning, 2 = error")
    rule_id: str = Field(alias="ruleId", description="Violated rule identifier")
    message: str = Field(description="Human-readable description")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @property
    def is_error(self) -> bool:
        """Whether this message is reported as an error."""
        return bool(self.severity == Severity.ERROR)


class FileResult(BaseModel):
    """Lint result for a single file."""

    file_path: str = Field(alias="filePath", description="Linted source file")
    messages: list[Message] = Field(default_factory=list)

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}
