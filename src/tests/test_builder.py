from __future__ import annotations

from pathlib import Path

from hypothesis import given
from hypothesis.strategies import lists

from pathbuf.builder import PathBuilder
from pathbuf.component import PathComponent
from pathbuf.hypothesis import invalid_components, path_components


class TestPathBuilder:
    def test_empty(self) -> None:
        builder = PathBuilder()
        assert len(builder) == 0
        assert builder.finish() == Path()

    def test_push(self) -> None:
        builder = PathBuilder()
        builder.push("foo/bar")
        builder.push("baz")
        assert len(builder) == 2
        assert builder.finish() == Path("foo/bar/baz")

    def test_push_component(self) -> None:
        builder = PathBuilder()
        builder.push_component(PathComponent(name="foo"))
        builder.push_component(PathComponent(name="bar.txt"))
        assert builder.finish() == Path("foo", "bar.txt")

    @given(names=lists(path_components(), max_size=10))
    def test_push_safe(self, *, names: list[str]) -> None:
        builder = PathBuilder()
        assert all(builder.push_safe(n) for n in names)
        assert builder.finish().parts == tuple(names)

    @given(name=invalid_components())
    def test_push_safe_invalid(self, *, name: str) -> None:
        builder = PathBuilder()
        builder.push("foo")
        assert not builder.push_safe(name)
        assert builder.finish() == Path("foo")

    def test_separate_instances(self) -> None:
        first, second = PathBuilder(), PathBuilder()
        first.push("foo")
        assert len(second) == 0
