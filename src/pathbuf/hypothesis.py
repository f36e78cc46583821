from __future__ import annotations

from os import altsep, sep

from hypothesis.strategies import (
    DrawFn,
    SearchStrategy,
    composite,
    just,
    sampled_from,
    text,
)

_SEPARATORS = [s for s in (sep, altsep) if s is not None]


@composite
def path_components(
    draw: DrawFn, /, *, min_size: int = 1, max_size: int = 20
) -> str:
    """Strategy for generating single, normal path components."""
    alphabet = sampled_from(
        "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_."
    )
    name = draw(text(alphabet, min_size=max(min_size, 1), max_size=max_size))
    if name in {".", ".."}:
        return f"{name}_"
    return name


@composite
def invalid_components(draw: DrawFn, /) -> str:
    """Strategy for generating text which is not a single, normal component."""
    separator = draw(sampled_from(_SEPARATORS))
    strategies: list[SearchStrategy[str]] = [
        just(""),
        just("."),
        just(".."),
        just(separator),
        path_components().map(lambda n: f"{separator}{n}"),
        path_components().map(lambda n: f"{n}{separator}"),
        path_components().map(lambda n: f"..{separator}{n}"),
        path_components().map(lambda n: f".{separator}{n}"),
    ]
    return draw(draw(sampled_from(strategies)))


__all__ = ["invalid_components", "path_components"]
