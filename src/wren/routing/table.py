"""Route table: decide which discovered route a URL belongs to.

Every endpoint directory is compiled once; :meth:`RouteTable.match`
tries them most-specific first and stops at the first hit. Nothing is
dispatched: the result names the route and carries its params.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wren.routing.match import MatchResult, match_path
from wren.routing.pattern import CompiledPattern, compile_path
from wren.routing.segments import SegmentKind

if TYPE_CHECKING:
    from wren.codegen.types import RouteNode

# Lower ranks are tried first at each position.
_RANK: dict[SegmentKind, int] = {
    SegmentKind.STATIC: 0,
    SegmentKind.DYNAMIC: 1,
    SegmentKind.CATCH_ALL: 2,
    SegmentKind.OPTIONAL_CATCH_ALL: 3,
}


@dataclass(frozen=True, slots=True)
class TableEntry:
    """One compiled route in the table."""

    path: str
    pattern: CompiledPattern


def specificity(pattern: CompiledPattern) -> tuple[tuple[int, ...], str]:
    """Sort key: per-segment kind ranks, position by position.

    ``/users/new`` sorts before ``/users/_id``, which sorts before
    ``/users/___rest``. Ties break on the path text.
    """
    ranks = tuple(_RANK[seg.kind] for seg in pattern.segments)
    return ranks, pattern.path


class RouteTable:
    """Immutable table of compiled routes.

    Usage::

        table = RouteTable(["", "users", "users/_id", "docs/_____path"])
        hit = table.match("/users/42?tab=posts")
        if hit is not None:
            path, result = hit   # "users/_id", MatchResult(params={"id": "42"}, ...)
    """

    __slots__ = ("_entries",)

    def __init__(self, paths: Iterable[str]) -> None:
        entries = [TableEntry(path=p.strip("/"), pattern=compile_path(p)) for p in paths]
        entries.sort(key=lambda entry: specificity(entry.pattern))
        self._entries: tuple[TableEntry, ...] = tuple(entries)

    @classmethod
    def from_tree(cls, root: RouteNode) -> RouteTable:
        """Build a table from every endpoint in a scanned route tree."""
        return cls(node.relative_path for node in root.walk() if node.is_endpoint)

    def __iter__(self) -> Iterator[TableEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def match(self, url: str) -> tuple[str, MatchResult] | None:
        """Return ``(route_path, result)`` for the first matching route.

        Returns ``None`` when no route matches.
        """
        for entry in self._entries:
            result = match_path(entry.pattern, entry.pattern.keys, url)
            if result is not None:
                return entry.path, result
        return None
