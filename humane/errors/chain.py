# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

from collections import deque
from collections.abc import Iterator

from .models import ErrorContext
from .store import try_get


def cause_of(error: BaseException) -> BaseException | None:
    """Return the single error which caused this one, as the traceback printer sees it."""
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__


def children_of(error: BaseException) -> tuple[BaseException, ...]:
    """Return the direct causes of an error: all members of a group, or its single cause."""
    if isinstance(error, BaseExceptionGroup):
        return tuple(error.exceptions)
    cause = cause_of(error)
    return (cause,) if cause is not None else ()


def collect(error: BaseException | None) -> Iterator[ErrorContext]:
    """
    Yield the annotated errors in a cause chain, breadth-first.

    Members of an exception group are visited before any of their own causes,
    so the top-level failure of each branch comes ahead of the deeper ones.
    Errors without an annotation are walked through but not yielded.
    """
    if error is None:
        return

    pending: deque[BaseException] = deque([error])
    while pending:
        current = pending.popleft()
        if (record := try_get(current)) is not None:
            yield ErrorContext(error=current, record=record)
        pending.extend(children_of(current))
