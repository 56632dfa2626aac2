"""Public schema exports for xerror adapters."""

from __future__ import annotations

from .error_payload import ErrorPayload

__all__ = ["ErrorPayload"]
