# src/xerror/domain/formatting.py
# Copyright (c) xerror.
# SPDX-License-Identifier: MIT
"""Lenient printf-style template rendering.

Purpose:
    Count the positional placeholders of a ``%``-style template and render it
    against a list of arguments without ever raising.

Layer:
    domain

Notes:
    - Recognized placeholders are Python's printf conversions with optional
      flags, numeric width and numeric precision (``%s``, ``%-8.3f``, ...).
    - ``%%`` renders a literal ``%`` and consumes no argument.
    - Mapping keys (``%(name)s``), star widths (``%*d``) and unknown
      conversions are not placeholders; they are copied through verbatim.
    - Missing arguments render as ``%!<conv>(MISSING)``. Arguments a
      conversion cannot format render as ``%!<conv>(<type>=<value>)``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any

__all__ = [
    "count_placeholders",
    "render",
]

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(
    r"%(?P<flags>[#0\- +]*)(?P<width>\d+)?(?:\.(?P<precision>\d+))?(?P<conv>[diouxXeEfFgGcrsa%])"
)

_LITERAL_PERCENT = "%"


def count_placeholders(template: str) -> int:
    """Return the number of argument-consuming placeholders in ``template``."""
    return sum(1 for m in _PLACEHOLDER_RE.finditer(template) if m.group("conv") != "%")


def _missing(conv: str) -> str:
    return f"%!{conv}(MISSING)"


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _convert(spec: str, conv: str, value: Any) -> tuple[str, bool]:
    """Render a single placeholder, returning the text and whether it succeeded."""
    try:
        return spec % (value,), True
    except Exception:
        return f"%!{conv}({type(value).__name__}={_safe_str(value)})", False


def render(template: str, args: Sequence[Any]) -> str:
    """Render ``template`` against positional ``args``.

    Only the first ``count_placeholders(template)`` arguments are used; any
    surplus is ignored. Shortfalls and conversion failures are marked inline
    rather than raised.

    Args:
        template: printf-style template.
        args: Positional arguments, in placeholder order.

    Returns:
        The rendered string.
    """
    parts: list[str] = []
    pos = 0
    index = 0
    missing = 0
    failed = 0

    for match in _PLACEHOLDER_RE.finditer(template):
        parts.append(template[pos : match.start()])
        conv = match.group("conv")
        if conv == "%":
            parts.append(_LITERAL_PERCENT)
        elif index < len(args):
            text, ok = _convert(match.group(0), conv, args[index])
            parts.append(text)
            failed += 0 if ok else 1
            index += 1
        else:
            parts.append(_missing(conv))
            missing += 1
            index += 1
        pos = match.end()
    parts.append(template[pos:])

    if (missing or failed) and logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "template rendered with degraded placeholders",
            extra={
                "template": template,
                "placeholders": index,
                "supplied": len(args),
                "missing": missing,
                "unformattable": failed,
            },
        )

    return "".join(parts)
