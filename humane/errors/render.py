# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

"""
Render an error chain, with its annotations, as a human-readable report.
"""

import traceback

from .chain import cause_of
from .store import try_get


CAUSED_BY = "This was caused by:"
SUGGESTIONS = "Suggestions:"
ORIGINAL = "Original Exception:"


def render(error: BaseException) -> str:
    """
    Render the humane report for an error.

    The primary cause chain is walked from `error` down, producing one entry
    per error. An exception group without a cause of its own continues into
    its first member. Suggestions from all annotations are listed once each, in the
    order they were first seen. The report ends with the untouched default
    formatting of `error`. If nothing in the chain is annotated, the default
    formatting is returned as-is.
    """
    if error is None:
        raise ValueError("Cannot render a missing error")

    causes: list[str] = []
    suggestions: dict[str, None] = {}
    annotated = False

    current: BaseException | None = error
    while current is not None:
        record = try_get(current)
        if record is None:
            causes.append(f"{type_name(current)}: {current}\n{_raise_site(current)}".rstrip())
        else:
            annotated = True
            causes.append(
                f"{type_name(current)}: {record.failure_mode} ({current})\n"
                f"   at {record.file_path}:line {record.line_number}"
            )
            suggestions.update(dict.fromkeys(record.suggestions))
        current = _next_cause(current)

    original = format_default(error)
    if not annotated:
        return original

    lines = [causes[0], ""]
    for cause in causes[1:]:
        lines.extend([CAUSED_BY, cause, ""])
    if suggestions:
        lines.extend(["", SUGGESTIONS])
        lines.extend(f"   - {suggestion}" for suggestion in suggestions)
    lines.extend(["", ORIGINAL, original.removesuffix("\n")])
    return "\n".join(lines) + "\n"


def to_humane_string(error: BaseException | None) -> str:
    """Render the humane report for an error, or an empty string for no error."""
    if error is None:
        return ""
    return render(error)


def format_default(error: BaseException) -> str:
    """The interpreter's own formatting of an error, traceback and causes included."""
    return "".join(traceback.format_exception(error))


def type_name(error: BaseException) -> str:
    """Name of the error type, as shown on the last line of a traceback."""
    cls = type(error)
    module = cls.__module__
    if module in ("builtins", "__main__"):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def _next_cause(error: BaseException) -> BaseException | None:
    # a group with no cause of its own continues into its first member
    cause = cause_of(error)
    if cause is None and isinstance(error, BaseExceptionGroup):
        return error.exceptions[0]
    return cause


def _raise_site(error: BaseException) -> str:
    # tracebacks list the raising frame last
    frames = traceback.extract_tb(error.__traceback__)
    if not frames:
        return ""
    frame = frames[-1]
    return f"   at {frame.name} in {frame.filename}:line {frame.lineno}"
