# src/xerror/domain/classification.py
# Copyright (c) xerror.
# SPDX-License-Identifier: MIT
"""Template-based error classification for any exception.

Purpose:
    Classify exceptions by the template they were built from rather than by
    their rendered text. Augmented errors delegate to their own methods; any
    other exception is treated as a one-layer chain whose only template is
    its message.

Layer:
    domain

Notes:
    - A plain exception is compared by exactly ``str(err)``, so an exception
      with an empty message matches ``""``.
    - Patterns must be compiled by the caller. Matching uses ``search``
      semantics (anywhere in the template), not a full match.
"""

from __future__ import annotations

import re

from xerror.domain.error import AugmentedError, native_message

__all__ = [
    "contains_pattern",
    "contains_template",
    "is_pattern",
    "is_template",
]


def is_template(err: BaseException, template: str) -> bool:
    """Return True if the outermost template (or plain message) equals ``template``."""
    if isinstance(err, AugmentedError):
        return err.is_template(template)
    return native_message(err) == template


def is_pattern(err: BaseException, pattern: re.Pattern[str]) -> bool:
    """Like :func:`is_template` but matches ``pattern`` with ``search``."""
    if isinstance(err, AugmentedError):
        return err.is_pattern(pattern)
    return pattern.search(native_message(err)) is not None


def contains_template(err: BaseException, template: str) -> bool:
    """Return True if any template in the chain (or the plain message) equals ``template``."""
    if isinstance(err, AugmentedError):
        return err.contains_template(template)
    return native_message(err) == template


def contains_pattern(err: BaseException, pattern: re.Pattern[str]) -> bool:
    """Like :func:`contains_template` but matches ``pattern`` with ``search``."""
    if isinstance(err, AugmentedError):
        return err.contains_pattern(pattern)
    return pattern.search(native_message(err)) is not None
