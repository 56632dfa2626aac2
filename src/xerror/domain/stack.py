# src/xerror/domain/stack.py
# Copyright (c) xerror.
# SPDX-License-Identifier: MIT
"""Bounded call-stack capture.

Purpose:
    Snapshot the current call stack into plain-text frame descriptors of the
    form ``"path:line (function)"``, innermost (call site) first.

Layer:
    domain

Notes:
    - Leading frames that belong to the xerror package are skipped, so the
      first descriptor is always the caller's code.
    - Depth is bounded by ``Settings.max_stack_depth``; truncation is silent.
    - Invalid configuration falls back to the defaults; capture never raises.
"""

from __future__ import annotations

import os
import sys
import traceback
from itertools import dropwhile, islice
from types import FrameType

from xerror.config.settings import get_runtime_settings

__all__ = ["capture_stack", "format_frame"]

_PACKAGE_DIR = os.path.normcase(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _is_internal(frame: FrameType) -> bool:
    filename = os.path.normcase(os.path.abspath(frame.f_code.co_filename))
    return filename.startswith(_PACKAGE_DIR + os.sep)


def format_frame(frame: FrameType, lineno: int) -> str:
    """Return the textual descriptor for a single frame."""
    return f"{frame.f_code.co_filename}:{lineno} ({frame.f_code.co_name})"


def capture_stack(limit: int | None = None) -> tuple[str, ...]:
    """Capture the caller's stack.

    Args:
        limit: Maximum number of frames. Defaults to the configured
            ``max_stack_depth``.

    Returns:
        Frame descriptors, innermost first. Empty when stack capture is
        disabled in settings.
    """
    settings = get_runtime_settings()
    if not settings.capture_stack:
        return ()
    depth = settings.max_stack_depth if limit is None else max(0, min(limit, settings.max_stack_depth))

    walker = traceback.walk_stack(sys._getframe(1))
    frames = dropwhile(lambda item: _is_internal(item[0]), walker)
    return tuple(format_frame(f, lineno) for f, lineno in islice(frames, depth))
