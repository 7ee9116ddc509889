# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

"""
Attach humane annotations to error instances.

The annotation lives in the error's own attribute dictionary under a reserved
key, so it is reclaimed together with the error and works for any exception
type without subclassing or wrapping it.
"""

import inspect

from collections.abc import Iterable
from typing import TypeVar

from .models import UNKNOWN_LOCATION, AnnotationRecord, SourceLocation
from .settings import SETTINGS


# not a valid identifier, so it can't clash with regular attributes
ANNOTATION_KEY = "humane.errors.AnnotationRecord"

E = TypeVar("E", bound=BaseException)


def attach(
    error: E,
    failure_mode: str,
    suggestions: Iterable[str] | None = None,
    location: SourceLocation | None = None,
    *,
    stacklevel: int = 1,
) -> E:
    """
    Annotate an error with a failure mode and suggestions for resolving it.

    Args:
        error: The error to annotate
        failure_mode: Description of what failed, from the user's perspective
        suggestions: Remedial actions, most actionable first
        location: Where the annotation was made; captured from the caller when omitted
        stacklevel: How many frames up the caller is, when capturing the location

    Returns:
        The same error instance, so it can be raised directly

    Annotating an error again replaces the previous annotation.
    """
    if error is None:
        raise ValueError("Cannot annotate a missing error")

    if location is None:
        location = caller_location(stacklevel + 1)

    record = AnnotationRecord(
        failure_mode=failure_mode,
        suggestions=suggestions,
        location=location,
    )
    setattr(error, ANNOTATION_KEY, record)
    return error


def try_get(error: BaseException) -> AnnotationRecord | None:
    """Return the annotation attached to an error, if any."""
    record = getattr(error, ANNOTATION_KEY, None)
    if isinstance(record, AnnotationRecord):
        return record
    return None


def caller_location(stacklevel: int = 1) -> SourceLocation:
    """
    Return the source location of a frame on the current stack.

    A `stacklevel` of 1 is the function calling this one, 2 is its caller, and so on.
    """
    if not SETTINGS.capture_location:
        return UNKNOWN_LOCATION

    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return UNKNOWN_LOCATION
        return SourceLocation(
            member_name=frame.f_code.co_qualname,
            file_path=frame.f_code.co_filename,
            line_number=frame.f_lineno,
        )
    finally:
        # break the reference cycle through the frame
        del frame
