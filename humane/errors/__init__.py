# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

"""
Attach human-readable failure modes and suggestions to errors, and render
them as a layered report alongside the original traceback.
"""

from .chain import collect
from .models import AnnotationRecord, ErrorContext, SourceLocation
from .render import render, to_humane_string
from .store import attach, try_get
from .wrappers import humanize_after, humanized


__version__ = "0.1.0"

__all__ = [
    "AnnotationRecord",
    "ErrorContext",
    "SourceLocation",
    "attach",
    "collect",
    "humanize_after",
    "humanized",
    "render",
    "to_humane_string",
    "try_get",
]
