from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from pathbuf.component import PathComponent, validate

if TYPE_CHECKING:
    from pathbuf.types import PathLike


@dataclass(kw_only=True, slots=True)
class PathBuilder:
    """Accumulate parts into a path.

    A builder is owned by a single join; `finish` assembles the parts pushed
    so far into a `Path`, using native append semantics.
    """

    parts: list[PathLike] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.parts)

    def push(self, part: PathLike, /) -> None:
        """Push a part without validation."""
        self.parts.append(part)

    def push_component(self, component: PathComponent, /) -> None:
        """Push a validated component."""
        self.parts.append(component.name)

    def push_safe(self, part: PathLike, /) -> bool:
        """Validate & push a part; return whether it was pushed."""
        if (component := validate(part)) is None:
            return False
        self.push_component(component)
        return True

    def finish(self) -> Path:
        """Assemble the path."""
        return Path(*self.parts)


__all__ = ["PathBuilder"]
