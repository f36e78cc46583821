from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from typing_extensions import override

from pathbuf.builder import PathBuilder
from pathbuf.component import sanitize_component
from pathbuf.pathvalidate import sanitize

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from pathbuf.types import PathLike, Sanitizer


def join_unsafe(parts: Iterable[PathLike], /) -> Path:
    """Join parts into a path, without validation."""
    builder = PathBuilder()
    for part in parts:
        builder.push(part)
    return builder.finish()


##


def join_safe(parts: Iterable[PathLike], /) -> Path | None:
    """Join parts into a path, validating each one.

    Every part must be a single, normal path component. The join stops at the
    first part which is not, and returns `None`; no partial path is returned.
    No parts yield the empty path.
    """
    builder = PathBuilder()
    for part in parts:
        if not builder.push_safe(part):
            return None
    return builder.finish()


def join_safe_allow_first(parts: Iterable[PathLike], /) -> Path | None:
    """Join parts into a path, trusting the first and validating the rest.

    The first part may be absolute or contain several components. At least one
    part is required.
    """
    parts = iter(parts)
    try:
        first = next(parts)
    except StopIteration:
        raise JoinSafeAllowFirstError() from None
    builder = PathBuilder()
    builder.push(first)
    for part in parts:
        if not builder.push_safe(part):
            return None
    return builder.finish()


@dataclass(kw_only=True, slots=True)
class JoinSafeAllowFirstError(Exception):
    @override
    def __str__(self) -> str:
        return "At least one part is required when the first part is trusted"


##


def join_sanitized(
    parts: Iterable[str],
    /,
    *,
    sanitizer: Sanitizer = sanitize,
    allow_first: bool = False,
) -> Path:
    """Join parts into a path, sanitizing each one into a component."""
    parts = iter(parts)
    builder = PathBuilder()
    if allow_first:
        try:
            first = next(parts)
        except StopIteration:
            raise JoinSafeAllowFirstError() from None
        builder.push(first)
    for part in parts:
        builder.push_component(sanitize_component(part, sanitizer=sanitizer))
    return builder.finish()


__all__ = [
    "JoinSafeAllowFirstError",
    "join_safe",
    "join_safe_allow_first",
    "join_sanitized",
    "join_unsafe",
]
