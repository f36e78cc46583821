from __future__ import annotations

from pathbuf.component import (
    EnsureComponentError,
    PathComponent,
    PathComponentError,
    SanitizerInvariantError,
    ensure_component,
    is_valid_component,
    sanitize_component,
    validate,
)
from pathbuf.join import (
    JoinSafeAllowFirstError,
    join_safe,
    join_safe_allow_first,
    join_sanitized,
    join_unsafe,
)

__version__ = "0.1.0"


__all__ = [
    "EnsureComponentError",
    "JoinSafeAllowFirstError",
    "PathComponent",
    "PathComponentError",
    "SanitizerInvariantError",
    "ensure_component",
    "is_valid_component",
    "join_safe",
    "join_safe_allow_first",
    "join_sanitized",
    "join_unsafe",
    "sanitize_component",
    "validate",
]
