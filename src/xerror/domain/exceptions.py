# src/xerror/domain/exceptions.py
# Copyright (c) xerror.
# SPDX-License-Identifier: MIT
"""Library usage exceptions.

Summary:
    Errors raised when the library itself is misused, as opposed to the
    augmented errors it produces for callers.

Layer:
    domain
"""

from __future__ import annotations

from typing import Any


class WrapTargetError(TypeError):
    """Raised when ``wrap`` is given something that is not an exception.

    Wrapping ``None`` is always a caller bug: the contract is that the
    caller has an error in hand. Failing loudly keeps that bug visible.

    Attributes:
        code:
            Stable error code suitable for mapping and metrics.
        details:
            Machine-readable diagnostic payload (the offending type).
    """

    code: str = "XERROR_INVALID_WRAP_TARGET"

    def __init__(self, target: Any) -> None:
        """Initialize a WrapTargetError for the rejected ``target``."""
        type_name = type(target).__name__
        super().__init__(f"cannot wrap {type_name}: an exception instance is required")
        self.details: dict[str, Any] = {"target_type": type_name}
