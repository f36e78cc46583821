from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from os import altsep, fspath, sep
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Self

from typing_extensions import override

from pathbuf.pathvalidate import sanitize

if TYPE_CHECKING:
    from pathbuf.types import PathLike, Sanitizer

_LOGGER = getLogger(__name__)
_SEPARATORS = tuple(s for s in (sep, altsep) if s is not None)
_SPECIAL = frozenset({".", ".."})


@dataclass(frozen=True, order=True, kw_only=True, slots=True)
class PathComponent:
    """A single, normal path component.

    The wrapped name parses to exactly one part with no drive, no root, and
    is neither the current nor the parent directory marker. Instances are
    immutable, ordered & hashable by name, and implement `os.PathLike`.
    """

    name: str

    def __post_init__(self) -> None:
        if not _is_normal(self.name):
            raise PathComponentError(name=self.name)

    def __fspath__(self) -> str:
        return self.name

    @override
    def __str__(self) -> str:
        return self.name

    @property
    def path(self) -> Path:
        """The component as a relative, single-part path."""
        return Path(self.name)

    @classmethod
    def new(cls, candidate: PathLike, /) -> Self | None:
        """Construct a component, or `None` if the candidate is not normal."""
        match candidate:
            case PurePath():
                name = candidate.name
            case _:
                name = fspath(candidate)
        if _is_normal(candidate) and _is_normal(name):
            return cls(name=name)
        return None


@dataclass(kw_only=True, slots=True)
class PathComponentError(Exception):
    name: str

    @override
    def __str__(self) -> str:
        return f"{self.name!r} is not a single, normal path component"


##


def validate(candidate: PathLike, /) -> PathComponent | None:
    """Validate a candidate as a single, normal path component."""
    return PathComponent.new(candidate)


def is_valid_component(candidate: PathLike, /) -> bool:
    """Check if a candidate is a single, normal path component."""
    return _is_normal(candidate)


def ensure_component(candidate: PathLike, /) -> PathComponent:
    """Ensure a candidate is a single, normal path component."""
    if (component := validate(candidate)) is None:
        raise EnsureComponentError(candidate=candidate)
    return component


@dataclass(kw_only=True, slots=True)
class EnsureComponentError(Exception):
    candidate: PathLike

    @override
    def __str__(self) -> str:
        return f"{str(self.candidate)!r} is not a single, normal path component"


##


def sanitize_component(
    text: str, /, *, sanitizer: Sanitizer = sanitize
) -> PathComponent:
    """Sanitize arbitrary text into a path component.

    The sanitizer must always produce a normal component. If it does not,
    `SanitizerInvariantError` is raised; the failure is never reported as an
    invalid candidate.
    """
    sanitized = sanitizer(text)
    if (component := validate(sanitized)) is None:
        _LOGGER.error(
            "Sanitizer %r mapped %r to invalid component %r",
            sanitizer,
            text,
            sanitized,
        )
        raise SanitizerInvariantError(text=text, sanitized=sanitized)
    return component


@dataclass(kw_only=True, slots=True)
class SanitizerInvariantError(Exception):
    text: str
    sanitized: str

    @override
    def __str__(self) -> str:
        return (
            f"Sanitizer mapped {self.text!r} to {self.sanitized!r}, "
            "which is not a single, normal path component"
        )


##


def _is_normal(candidate: PathLike, /) -> bool:
    match candidate:
        case PurePath():
            path, text = candidate, candidate.name
        case _:
            text = fspath(candidate)
            path = PurePath(text)
    # pathlib drops '.' segments & trailing separators
    if any(s in text for s in _SEPARATORS):
        return False
    match path.parts:
        case (part,):
            return (path.drive == "") and (path.root == "") and (part not in _SPECIAL)
        case _:
            return False


__all__ = [
    "EnsureComponentError",
    "PathComponent",
    "PathComponentError",
    "SanitizerInvariantError",
    "ensure_component",
    "is_valid_component",
    "sanitize_component",
    "validate",
]
