# Copyright (c) xerror.
# SPDX-License-Identifier: MIT
"""Structured error payload (Adapters Layer).

Purpose:
    Canonical Pydantic representation of an ``AugmentedError`` for JSON
    encoding and decoding. This is the only wire shape of an error:
    ``message``, ``debug`` (omitted when empty) and ``stack``.

Layer: adapters/schemas

Notes:
    - Debug values are opaque. Values that are not JSON-native are encoded
      with their string form, so a decoded payload carries the same number
      of debug values in the same order.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import to_jsonable_python

from xerror.domain.error import AugmentedError

__all__ = ["ErrorPayload"]


class ErrorPayload(BaseModel):
    """Serializable view of an augmented error.

    Attributes:
        message: Rendered error message.
        debug: Debug values, outermost layer first.
        stack: Frame descriptors, call site first.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    message: str
    debug: list[Any] = Field(default_factory=list)
    stack: list[str] = Field(default_factory=list)

    @classmethod
    def from_error(cls, err: AugmentedError) -> ErrorPayload:
        """Build a payload from ``err`` with JSON-safe debug values."""
        return cls(
            message=err.message,
            debug=[to_jsonable_python(v, serialize_unknown=True) for v in err.debug],
            stack=list(err.stack),
        )

    def model_dump_wire(self) -> dict[str, Any]:
        """Return a JSON-ready dict, omitting ``debug`` when it is empty."""
        return self.model_dump(mode="json", exclude=None if self.debug else {"debug"})

    def to_json(self) -> str:
        """Encode the payload as JSON, omitting ``debug`` when it is empty."""
        return self.model_dump_json(exclude=None if self.debug else {"debug"})
