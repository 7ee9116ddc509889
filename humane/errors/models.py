# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


UNKNOWN = "<unknown>"


class SourceLocation(BaseModel):
    """Where an error was annotated."""

    model_config = ConfigDict(frozen=True)

    member_name: str = Field(default=UNKNOWN, description="Function or method name")
    file_path: str = Field(default=UNKNOWN, description="Path of the source file")
    line_number: int = Field(default=0, description="Line number within the source file")


UNKNOWN_LOCATION = SourceLocation()


class AnnotationRecord(BaseModel):
    """Humane context attached to a single error instance."""

    model_config = ConfigDict(frozen=True)

    failure_mode: str = Field(..., description="What failed, from the user's perspective")
    suggestions: tuple[str, ...] = Field(
        default=(), description="Remedial actions, most actionable first"
    )
    location: SourceLocation = Field(default=UNKNOWN_LOCATION)

    @field_validator("suggestions", mode="before")
    @classmethod
    def _normalize_suggestions(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            # a lone string is one suggestion, not a sequence of characters
            return (value,)
        return value

    @property
    def member_name(self) -> str:
        return self.location.member_name

    @property
    def file_path(self) -> str:
        return self.location.file_path

    @property
    def line_number(self) -> int:
        return self.location.line_number


class ErrorContext(BaseModel):
    """An annotated error found while walking a cause chain."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error: BaseException
    record: AnnotationRecord

    @property
    def failure_mode(self) -> str:
        return self.record.failure_mode

    @property
    def suggestions(self) -> tuple[str, ...]:
        return self.record.suggestions

    @property
    def file_path(self) -> str:
        return self.record.file_path

    @property
    def line_number(self) -> int:
        return self.record.line_number
