"""xerror: augmented exceptions with template chains, debug values and stacks.

Typical usage:
    from xerror import new, wrap, is_template

    err = new("user %s not found", user_id, request_id)
    err = wrap(err, "loading profile")
    if is_template(err, "loading profile"):
        ...
"""

from __future__ import annotations

from .domain.classification import contains_pattern, contains_template, is_pattern, is_template
from .domain.error import AugmentedError, new, wrap
from .domain.exceptions import WrapTargetError

__all__ = [
    "AugmentedError",
    "WrapTargetError",
    "contains_pattern",
    "contains_template",
    "is_pattern",
    "is_template",
    "new",
    "wrap",
]
