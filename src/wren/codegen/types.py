"""Data models produced by a route scan.

Built once per :func:`~wren.codegen.scanner.scan_routes` call and handed
to the emitter. Nothing here survives between scans.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from wren.codegen.alias import ImportBinding
from wren.routing.pattern import CompiledPattern, compile_pattern, display_path
from wren.routing.segments import Segment, SegmentKind


@dataclass(frozen=True, slots=True)
class QueryRef:
    """A query type declared by an endpoint file.

    Attributes:
        binding: The aliased import of the type.
        required: False for ``OptionalQuery``.
    """

    binding: ImportBinding
    required: bool = True


@dataclass(frozen=True, slots=True)
class ParamsField:
    """One field of a synthesized ``Params`` type."""

    name: str
    kind: SegmentKind

    @property
    def annotation(self) -> str:
        """Python annotation text for this field."""
        match self.kind:
            case SegmentKind.DYNAMIC:
                return "str"
            case SegmentKind.CATCH_ALL:
                return "list[str]"
            case SegmentKind.OPTIONAL_CATCH_ALL:
                return "list[str] | None"
            case _:
                msg = f"Static segments bind no parameter: {self.kind!r}"
                raise AssertionError(msg)


@dataclass(frozen=True, slots=True)
class ParamsDeclaration:
    """The ``Params`` type of one directory.

    Attributes:
        directory: Directory the declaration belongs to.
        relative_path: Posix path of *directory* relative to the scan root.
        fields: Every bound parameter from the root down to *directory*.
    """

    directory: Path
    relative_path: str
    fields: tuple[ParamsField, ...]


@dataclass(slots=True)
class RouteNode:
    """One directory of the scanned tree.

    Attributes:
        key: Raw directory name (``"_id"``); ``""`` for the root.
        segments: Classified segments from the root down to this node.
        relative_path: Posix path relative to the scan root.
        handlers: HTTP method (``"GET"``) -> aliased handler import.
        query: Declared query type, if any.
        params: Synthesized ``Params`` declaration, if any segment binds one.
        children: Raw child name -> node, in stable order.
    """

    key: str
    segments: tuple[Segment, ...] = ()
    relative_path: str = ""
    handlers: dict[str, ImportBinding] = field(default_factory=dict)
    query: QueryRef | None = None
    params: ParamsDeclaration | None = None
    children: dict[str, RouteNode] = field(default_factory=dict)

    @property
    def is_endpoint(self) -> bool:
        """True when an endpoint file declared at least one handler."""
        return bool(self.handlers)

    @property
    def url_path(self) -> str:
        """URL template for humans, e.g. ``/users/[id]``."""
        return display_path(self.segments)

    def pattern(self) -> CompiledPattern:
        """Compile this node's segments for matching."""
        return compile_pattern(self.segments)

    def walk(self) -> Iterator[RouteNode]:
        """Yield this node and every descendant, parents first."""
        yield self
        for child in self.children.values():
            yield from child.walk()


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Everything one scan discovered.

    Attributes:
        tree: Root node of the route tree.
        imports: One binding per unique alias, in emission order.
        params: One declaration per parameterised directory, parents first.
    """

    tree: RouteNode
    imports: tuple[ImportBinding, ...] = ()
    params: tuple[ParamsDeclaration, ...] = ()
