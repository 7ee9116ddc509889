# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

import logging
import sys

from types import TracebackType
from typing import TextIO

from fastmcp.utilities.logging import get_logger

from .render import render


logger = get_logger("humane_errors")


def log_report(
    error: BaseException, log: logging.Logger | None = None, level: int = logging.ERROR
) -> None:
    """Log the humane report for an error."""
    (log or logger).log(level, render(error))


def print_report(error: BaseException, file: TextIO | None = None) -> None:
    """Write the humane report for an error, to stderr by default."""
    print(render(error), end="", file=file or sys.stderr)


def _excepthook(
    exc_type: type[BaseException], exc: BaseException, tb: TracebackType | None
) -> None:
    print_report(exc)


def install_excepthook() -> None:
    """Report uncaught errors in humane form."""
    sys.excepthook = _excepthook


def uninstall_excepthook() -> None:
    """Restore the interpreter's default handling of uncaught errors."""
    if sys.excepthook is _excepthook:
        sys.excepthook = sys.__excepthook__
