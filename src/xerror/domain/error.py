# src/xerror/domain/error.py
# Copyright (c) xerror.
# SPDX-License-Identifier: MIT
"""Augmented error value.

Purpose:
    Provide ``AugmentedError``, an exception that carries an ordered chain of
    format templates, out-of-band debug values and a stack snapshot, plus the
    ``new`` and ``wrap`` constructors.

Layer:
    domain

Notes:
    - Instances are immutable. Every producing operation returns a fresh
      instance built from new tuples; nothing is aliased to caller storage.
    - The rendered message is computed once, when the layer is added.
    - The stack is captured once, by the innermost error of a chain, and is
      inherited unchanged by every wrap.
    - Debug values are ordered outermost layer first; within a layer the
      arguments keep their call order (consumed placeholders first).
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Any, Self

from xerror.domain.exceptions import WrapTargetError
from xerror.domain.formatting import render
from xerror.domain.stack import capture_stack

__all__ = [
    "AugmentedError",
    "native_message",
    "new",
    "wrap",
]

SEPARATOR = ": "


def native_message(err: BaseException) -> str:
    """Return the text a plain exception is classified and wrapped by.

    This is exactly ``str(err)``, including the empty string.
    """
    return str(err)


def _restore(
    cls: type[AugmentedError],
    templates: Sequence[str],
    debug: Sequence[Any],
    stack: Sequence[str],
    message: str,
) -> AugmentedError:
    return cls._from_parts(templates, debug, stack, message)


class AugmentedError(Exception):
    """Exception with a template chain, debug values and a stack snapshot.

    ``AugmentedError(template, *args)`` renders ``template`` with as many
    leading ``args`` as it has placeholders, keeps every argument as a debug
    value, and captures the caller's stack.

    Attributes:
        templates:
            Raw templates, outermost first. Never empty.
        debug:
            Debug values, outermost layer first.
        stack:
            Frame descriptors of the innermost error, call site first.
        message:
            Rendered message; ``str(err)`` returns the same text.
    """

    def __init__(self, template: str, *args: Any) -> None:
        message = render(template, args)
        super().__init__(message)
        self._templates: tuple[str, ...] = (template,)
        self._debug: tuple[Any, ...] = tuple(args)
        self._stack: tuple[str, ...] = capture_stack()
        self._message = message

    @classmethod
    def _from_parts(
        cls,
        templates: Iterable[str],
        debug: Iterable[Any],
        stack: Iterable[str],
        message: str,
    ) -> Self:
        err = cls.__new__(cls)
        Exception.__init__(err, message)
        err._templates = tuple(templates)
        err._debug = tuple(debug)
        err._stack = tuple(stack)
        err._message = message
        return err

    def _replace(
        self,
        *,
        templates: Iterable[str] | None = None,
        debug: Iterable[Any] | None = None,
        message: str | None = None,
    ) -> Self:
        err = self._from_parts(
            self._templates if templates is None else templates,
            self._debug if debug is None else debug,
            self._stack,
            self._message if message is None else message,
        )
        err.__cause__ = self.__cause__
        return err

    def _with_layer(self, template: str, args: Sequence[Any]) -> Self:
        head = render(template, args)
        return self._replace(
            templates=(template, *self._templates),
            debug=(*args, *self._debug),
            message=f"{head}{SEPARATOR}{self._message}",
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def templates(self) -> tuple[str, ...]:
        return self._templates

    @property
    def debug(self) -> tuple[Any, ...]:
        return self._debug

    @property
    def stack(self) -> tuple[str, ...]:
        return self._stack

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        # BaseException.__setstate__ restores both instance attributes and the cause.
        state = {**self.__dict__, "__cause__": self.__cause__}
        return (
            _restore,
            (type(self), self._templates, self._debug, self._stack, self._message),
            state,
        )

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_template(self, template: str) -> bool:
        """Return True if the outermost template equals ``template``."""
        return self._templates[0] == template

    def is_pattern(self, pattern: re.Pattern[str]) -> bool:
        """Return True if ``pattern`` matches anywhere in the outermost template."""
        return pattern.search(self._templates[0]) is not None

    def contains_template(self, template: str) -> bool:
        """Return True if any template in the chain equals ``template``."""
        return template in self._templates

    def contains_pattern(self, pattern: re.Pattern[str]) -> bool:
        """Return True if ``pattern`` matches anywhere in any template of the chain."""
        return any(pattern.search(t) is not None for t in self._templates)

    # ------------------------------------------------------------------
    # Copies
    # ------------------------------------------------------------------

    def copy(self) -> Self:
        """Return an independent copy with equal fields."""
        return self._replace()

    __copy__ = copy

    def with_messages(self, *messages: str) -> Self:
        """Return a copy with literal ``messages`` prepended to the chain.

        The messages are used verbatim, both as templates and in the rendered
        message; no placeholder substitution takes place.
        """
        return self._replace(
            templates=(*messages, *self._templates),
            message=SEPARATOR.join((*messages, self._message)),
        )

    def with_debug(self, *values: Any) -> Self:
        """Return a copy with ``values`` prepended to the debug values."""
        return self._replace(debug=(*values, *self._debug))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Return the structured representation (``message``/``debug``/``stack``).

        ``debug`` is omitted when there are no debug values.
        """
        payload: dict[str, Any] = {"message": self._message}
        if self._debug:
            payload["debug"] = list(self._debug)
        payload["stack"] = list(self._stack)
        return payload


def new(template: str, *args: Any) -> AugmentedError:
    """Create an ``AugmentedError`` from ``template`` and ``args``."""
    return AugmentedError(template, *args)


def wrap(err: BaseException, template: str | None = None, *args: Any) -> AugmentedError:
    """Wrap ``err`` with an optional new outermost layer.

    Args:
        err: Exception to wrap. An ``AugmentedError`` has its chain extended
            and its stack inherited. Any other exception becomes a one-layer
            chain whose template is its literal text, with a stack captured
            here.
        template: Template of the new outermost layer. When omitted, no layer
            is added and ``args`` (if any) are only prepended to ``debug``.
        *args: Placeholder arguments followed by extra debug values.

    Returns:
        A new ``AugmentedError``. Its ``__cause__`` is ``err`` whenever a
        layer was added or ``err`` was a plain exception; a pass-through copy
        keeps the original cause.

    Raises:
        WrapTargetError: If ``err`` is ``None`` or not an exception.
    """
    if not isinstance(err, BaseException):
        raise WrapTargetError(err)

    if isinstance(err, AugmentedError):
        if template is None:
            return err.with_debug(*args)
        base: AugmentedError = err
    else:
        text = native_message(err)
        base = AugmentedError._from_parts((text,), (), capture_stack(), text)

    if template is None:
        result = base.with_debug(*args)
    else:
        result = base._with_layer(template, args)
    result.__cause__ = err
    return result
