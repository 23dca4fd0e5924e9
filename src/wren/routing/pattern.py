"""Path pattern compiler.

Turns a sequence of classified segments into an anchored regular
expression plus the ordered list of parameters it captures.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import quote

from wren.routing.segments import Segment, SegmentKind, parse_segments

_DYNAMIC = "/([^/]+)"
_CATCH_ALL = "/([^/]+(?:/[^/]+)*)"
_OPTIONAL_CATCH_ALL = "(?:/(.*))?"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A compiled route pattern. Immutable; safe to share between threads.

    Attributes:
        regex: Anchored pattern with one group per parameter segment.
        segments: Every segment the pattern was compiled from.
        params: The parameter segments, in capture order.
    """

    regex: re.Pattern[str]
    segments: tuple[Segment, ...]
    params: tuple[Segment, ...]

    @property
    def keys(self) -> tuple[str, ...]:
        """Raw segment names of the captured parameters, in capture order."""
        return tuple(seg.raw for seg in self.params)

    @property
    def names(self) -> tuple[str, ...]:
        """Bound parameter names, in capture order."""
        return tuple(seg.name for seg in self.params)

    @property
    def path(self) -> str:
        """Route path as written on disk, e.g. ``/users/_id``."""
        return "/" + "/".join(seg.raw for seg in self.segments)


def segment_pattern(segment: Segment) -> str:
    """Return the sub-pattern for one segment, leading slash included."""
    match segment.kind:
        case SegmentKind.STATIC:
            return "/" + re.escape(quote(segment.raw, safe=""))
        case SegmentKind.DYNAMIC:
            return _DYNAMIC
        case SegmentKind.CATCH_ALL:
            return _CATCH_ALL
        case SegmentKind.OPTIONAL_CATCH_ALL:
            return _OPTIONAL_CATCH_ALL
        case _:
            msg = f"Unhandled segment kind: {segment.kind!r}"
            raise AssertionError(msg)


def compile_pattern(segments: Iterable[Segment]) -> CompiledPattern:
    """Compile classified segments into a :class:`CompiledPattern`.

    The pattern matches the whole path, allows one trailing slash, and
    matches ``/`` when *segments* is empty::

        compile_pattern(parse_segments("blog/___slug")).regex.pattern
        # '^/blog/([^/]+(?:/[^/]+)*)/?$'
    """
    segs = tuple(segments)
    body = "".join(segment_pattern(seg) for seg in segs)
    regex = re.compile(f"^{body}/?$")
    return CompiledPattern(
        regex=regex,
        segments=segs,
        params=tuple(seg for seg in segs if seg.is_param),
    )


def compile_path(path: str) -> CompiledPattern:
    """Compile a slash-separated route path such as ``"users/_id"``."""
    return compile_pattern(parse_segments(path))


def display_path(segments: Iterable[Segment]) -> str:
    """Render segments as a URL template for humans.

    ``users/_id/___slug`` -> ``/users/[id]/[...slug]``; an optional
    catch-all renders as ``[[...name]]``.
    """
    parts: list[str] = []
    for seg in segments:
        match seg.kind:
            case SegmentKind.STATIC:
                parts.append(seg.raw)
            case SegmentKind.DYNAMIC:
                parts.append(f"[{seg.name}]")
            case SegmentKind.CATCH_ALL:
                parts.append(f"[...{seg.name}]")
            case SegmentKind.OPTIONAL_CATCH_ALL:
                parts.append(f"[[...{seg.name}]]")
            case _:
                msg = f"Unhandled segment kind: {seg.kind!r}"
                raise AssertionError(msg)
    return "/" + "/".join(parts)
