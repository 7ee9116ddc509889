# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

import inspect

from collections.abc import Awaitable, Coroutine, Iterable
from functools import wraps
from types import TracebackType
from typing import Any, Callable, TypeVar

from .models import SourceLocation
from .store import attach, caller_location


T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

ErrorTypes = type[BaseException] | tuple[type[BaseException], ...]


def humanize_after(
    awaitable: Awaitable[T],
    failure_mode: str,
    suggestions: Iterable[str] | None = None,
    *,
    error_types: ErrorTypes = Exception,
) -> Coroutine[Any, Any, T]:
    """
    Await a pending computation, annotating the error it fails with.

    The result is returned unchanged. A failure matching `error_types` is
    annotated with the location of the call to this function and re-raised as
    the same instance; any other failure propagates untouched.
    """
    location = caller_location(2)
    if isinstance(suggestions, str):
        suggestions = (suggestions,)
    suggestions = tuple(suggestions or ())

    async def annotated() -> T:
        try:
            return await awaitable
        except error_types as error:
            attach(error, failure_mode, suggestions, location)
            raise

    return annotated()


class humanized:
    """
    Annotate errors raised within a block or a function.

    Works as a context manager (sync or async) and as a decorator for both
    plain and coroutine functions::

        with humanized("Could not load the configuration", ["Check the file exists"]):
            load_config()

        @humanized("Could not sync the repository")
        async def sync(): ...

    Errors are re-raised unchanged apart from the annotation.
    """

    def __init__(
        self,
        failure_mode: str,
        suggestions: Iterable[str] | None = None,
        *,
        error_types: ErrorTypes = Exception,
    ):
        self.failure_mode = failure_mode
        if isinstance(suggestions, str):
            suggestions = (suggestions,)
        self.suggestions = tuple(suggestions or ())
        self.error_types = error_types
        self.location: SourceLocation = caller_location(2)

    def __enter__(self) -> "humanized":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc is not None and isinstance(exc, self.error_types):
            attach(exc, self.failure_mode, self.suggestions, self.location)
        # never suppress

    async def __aenter__(self) -> "humanized":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.__exit__(exc_type, exc, tb)

    def __call__(self, fn: F) -> F:
        if inspect.iscoroutinefunction(fn):

            @wraps(fn)
            async def async_wrapped(*args: Any, **kwargs: Any) -> Any:
                async with self:
                    return await fn(*args, **kwargs)

            return async_wrapped  # type: ignore[return-value]

        @wraps(fn)
        def wrapped(*args: Any, **kwargs: Any) -> Any:
            with self:
                return fn(*args, **kwargs)

        return wrapped  # type: ignore[return-value]
