"""Segment grammar: the one definition shared by scanner and matcher.

A directory name is classified by its leading underscores::

    "users"       -> Static
    "_id"         -> Dynamic           (binds ``id`` to one component)
    "___slug"     -> CatchAll          (binds ``slug`` to one or more components)
    "_____path"   -> OptionalCatchAll  (binds ``path`` to zero or more components)

The marker strings are part of the contract between the generated
route module and the runtime matcher; both sides import them from here.
"""

from dataclasses import dataclass
from enum import Enum

OPTIONAL_CATCH_ALL_PREFIX = "_____"
CATCH_ALL_PREFIX = "___"
DYNAMIC_PREFIX = "_"


class SegmentKind(Enum):
    """Kind of a path segment. Closed: consumers handle all four."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    CATCH_ALL = "catch_all"
    OPTIONAL_CATCH_ALL = "optional_catch_all"


# Longest marker first, otherwise "_____x" would read as Dynamic "____x".
_MARKERS: tuple[tuple[str, SegmentKind], ...] = (
    (OPTIONAL_CATCH_ALL_PREFIX, SegmentKind.OPTIONAL_CATCH_ALL),
    (CATCH_ALL_PREFIX, SegmentKind.CATCH_ALL),
    (DYNAMIC_PREFIX, SegmentKind.DYNAMIC),
)


@dataclass(frozen=True, slots=True)
class Segment:
    """A classified path segment.

    Static:           ``users``      (name="")
    Dynamic:          ``_id``        (name="id")
    CatchAll:         ``___slug``    (name="slug")
    OptionalCatchAll: ``_____path``  (name="path")
    """

    raw: str
    kind: SegmentKind
    name: str = ""

    @property
    def is_param(self) -> bool:
        return self.kind is not SegmentKind.STATIC

    @property
    def is_catch_all(self) -> bool:
        """True for both catch-all kinds (list-valued parameters)."""
        return self.kind in (SegmentKind.CATCH_ALL, SegmentKind.OPTIONAL_CATCH_ALL)


def classify(raw: str) -> Segment:
    """Classify a raw segment name.

    Total: every string has exactly one result. The empty string is
    Static with an empty name; callers reject it before getting here.
    """
    for prefix, kind in _MARKERS:
        if raw.startswith(prefix):
            return Segment(raw=raw, kind=kind, name=raw[len(prefix) :])
    return Segment(raw=raw, kind=SegmentKind.STATIC)


def split_path(path: str) -> list[str]:
    """Split a slash-separated route path into raw segment names.

    Empty components are dropped, so ``"/"``, ``""`` and ``"users//_id/"``
    all normalise.
    """
    return [part for part in path.replace("\\", "/").split("/") if part]


def parse_segments(path: str) -> tuple[Segment, ...]:
    """Classify every component of a route path.

    Examples::

        "users/_id"        -> (Segment("users", STATIC), Segment("_id", DYNAMIC, "id"))
        "/docs/_____path"  -> (Segment("docs", STATIC), Segment("_____path", OPTIONAL_CATCH_ALL, "path"))
    """
    return tuple(classify(part) for part in split_path(path))
