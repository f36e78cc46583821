from __future__ import annotations

from collections.abc import Callable
from os import PathLike as _OSPathLike
from pathlib import PurePath
from typing import TypeAlias

# pathlib
PathLike: TypeAlias = PurePath | str | _OSPathLike[str]


# pathvalidate
Sanitizer: TypeAlias = Callable[[str], str]


__all__ = ["PathLike", "Sanitizer"]
