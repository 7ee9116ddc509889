# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

"""
Surface humane errors from MCP tools.
"""

import inspect

from functools import wraps
from typing import Any, Callable

from fastmcp.exceptions import ToolError

from .render import render
from .report import log_report
from .settings import SETTINGS


def tool_error(error: BaseException) -> ToolError:
    """
    Create a ToolError carrying the humane report for an error.

    Args:
        error: The error which made the tool fail

    Returns:
        ToolError whose message is the rendered report, so the client sees the
        failure mode and suggestions alongside the original error
    """
    return ToolError(render(error))


def humane_tool(fn: Callable[..., Any]) -> Callable[..., Any]:
    """
    Report errors from an MCP tool function in humane form.

    Errors other than ToolError are re-raised as a ToolError built by
    `tool_error`, chained to the original. The signature is preserved so the
    tool schema is unchanged.
    """
    if inspect.iscoroutinefunction(fn):

        @wraps(fn)
        async def async_wrapped(*args: Any, **kwargs: Any) -> Any:
            try:
                return await fn(*args, **kwargs)
            except ToolError:
                raise
            except Exception as e:
                raise _reported(e) from e

        return async_wrapped

    @wraps(fn)
    def wrapped(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except ToolError:
            raise
        except Exception as e:
            raise _reported(e) from e

    return wrapped


def _reported(error: Exception) -> ToolError:
    if SETTINGS.log_reports:
        log_report(error)
    return tool_error(error)
