# src/xerror/config/settings.py
# Copyright (c) xerror.
# SPDX-License-Identifier: MIT
"""xerror Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated runtime configuration for the error-augmentation
    library. Every knob is read from ``XERROR_``-prefixed environment
    variables so that host applications can tune stack capture and HTTP
    exposure without code changes.

Design:
    - Pydantic v2 BaseSettings with `extra='forbid'` to catch unknown keys.
    - Explicit field declarations with constrained ranges.
    - Singleton accessor `get_settings()` with LRU cache.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Upper bound on captured frames regardless of configuration.
MAX_STACK_DEPTH = 100


class Settings(BaseSettings):
    """Typed configuration for xerror.

    Attributes:
        max_stack_depth:
            Maximum number of frames recorded when an error captures its
            stack. Deeper stacks are truncated silently.
        capture_stack:
            When false, errors are created with an empty stack. Useful on hot
            paths where the capture cost is not wanted.
        http_expose_debug:
            Include debug values in HTTP error envelopes.
        http_expose_stack:
            Include stack frames in HTTP error envelopes.
    """

    max_stack_depth: int = Field(
        default=MAX_STACK_DEPTH,
        ge=0,
        le=MAX_STACK_DEPTH,
        description="Maximum number of stack frames captured per error.",
    )
    capture_stack: bool = Field(
        default=True,
        description="Capture a call-stack snapshot when an error is created.",
    )
    http_expose_debug: bool = Field(
        default=False,
        description="Render debug values into HTTP error envelopes.",
    )
    http_expose_stack: bool = Field(
        default=False,
        description="Render stack frames into HTTP error envelopes.",
    )

    model_config = SettingsConfigDict(
        env_prefix="XERROR_",
        extra="forbid",
        case_sensitive=False,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated library settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
        logger.debug(
            "xerror settings initialized",
            extra={
                "max_stack_depth": settings.max_stack_depth,
                "capture_stack": settings.capture_stack,
                "http": {
                    "expose_debug": settings.http_expose_debug,
                    "expose_stack": settings.http_expose_stack,
                },
            },
        )
        return settings
    except ValidationError as exc:
        logger.exception("Invalid xerror configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_runtime_settings() -> Settings:
    """Return settings for code paths that must not fail.

    Error construction and rendering cannot raise because of configuration.
    Invalid configuration is logged once and the defaults are used instead.

    Returns:
        Settings: Validated settings, or defaults when validation fails.
    """
    try:
        return get_settings()
    except RuntimeError:
        logger.warning(
            "Falling back to default xerror settings",
            extra={"max_stack_depth": MAX_STACK_DEPTH, "capture_stack": True},
        )
        return Settings.model_construct()
