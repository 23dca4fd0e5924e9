"""Runtime path matcher.

Applies a :class:`~wren.routing.pattern.CompiledPattern` to a URL and
decodes the captures into the same shape the generated ``Params`` types
promise:

- Dynamic: ``str``
- CatchAll: ``list[str]`` (at least one element)
- OptionalCatchAll: ``list[str]``, or ``None`` when nothing was captured

Catch-all captures are split on ``/`` *before* percent-decoding, so an
encoded ``%2F`` stays inside its component.
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from urllib.parse import quote, unquote, urlencode, urlsplit

from wren.errors import MalformedURLError
from wren.routing.pattern import CompiledPattern
from wren.routing.query import parse_query
from wren.routing.segments import SegmentKind, classify
from wren.types import ParamValue, QueryValue

# Characters kept as-is when re-encoding a raw path, as a browser would.
_PATH_SAFE = "/%:@!$&'()*+,;="

_ESCAPE_RE = re.compile(r"%[0-9a-fA-F]{2}")


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of a successful match. Built fresh per call."""

    params: dict[str, ParamValue] = field(default_factory=dict)
    query: dict[str, QueryValue] = field(default_factory=dict)
    fragment: str | None = None


def safe_decode(value: str) -> str:
    """Percent-decode once; fall back to the raw text on bad UTF-8."""
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        return value


def split_url(url: str) -> tuple[str, str, str]:
    """Split *url* into ``(path, query, fragment)``, all still encoded.

    Accepts absolute URLs and root-relative paths. The path is taken as
    written: ``.`` and ``..`` components are not resolved. Non-ASCII
    characters are percent-encoded and escapes are upper-cased, so
    ``é``, ``%c3%a9`` and ``%C3%A9`` all compare equal.

    Raises:
        MalformedURLError: If *url* cannot be parsed at all.
    """
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise MalformedURLError(url, str(exc)) from exc
    path = parts.path
    if not path.startswith("/"):
        path = "/" + path
    path = quote(path, safe=_PATH_SAFE)
    path = _ESCAPE_RE.sub(lambda escape: escape.group(0).upper(), path)
    return path, parts.query, parts.fragment


def _decode_capture(kind: SegmentKind, captured: str | None) -> ParamValue:
    match kind:
        case SegmentKind.DYNAMIC:
            return safe_decode(captured or "")
        case SegmentKind.CATCH_ALL | SegmentKind.OPTIONAL_CATCH_ALL:
            if not captured:
                return None
            return [safe_decode(part) for part in captured.split("/") if part]
        case _:
            msg = f"Static segments are never captured: {kind!r}"
            raise AssertionError(msg)


def match_path(
    pattern: CompiledPattern,
    keys: Sequence[str],
    url: str,
) -> MatchResult | None:
    """Match *url* against *pattern*.

    Args:
        pattern: A compiled route pattern.
        keys: Raw segment names (``"_id"``, ``"___slug"``) for each
            capture group, in capture order. Each key is classified to
            decide the shape of its value; the bound name becomes the
            params key.
        url: Absolute URL or root-relative path with optional query
            string and fragment.

    Returns:
        A :class:`MatchResult`, or ``None`` when the path does not match.

    Raises:
        ValueError: If ``len(keys)`` disagrees with the pattern's
            capture count.
        MalformedURLError: If *url* cannot be parsed.
    """
    groups = pattern.regex.groups
    if len(keys) != groups:
        msg = (
            f"Pattern {pattern.regex.pattern!r} captures {groups} parameter(s) "
            f"but {len(keys)} key(s) were given: {list(keys)!r}"
        )
        raise ValueError(msg)

    path, query, fragment = split_url(url)
    found = pattern.regex.match(path)
    if found is None:
        return None

    params: dict[str, ParamValue] = {}
    for index, key in enumerate(keys, start=1):
        segment = classify(key)
        if not segment.is_param:
            msg = f"Key {key!r} is not a parameter segment"
            raise ValueError(msg)
        params[segment.name] = _decode_capture(segment.kind, found.group(index))

    return MatchResult(
        params=params,
        query=parse_query(query),
        fragment=safe_decode(fragment) if fragment else None,
    )


def build_path(
    pattern: CompiledPattern,
    params: Mapping[str, ParamValue] | None = None,
    *,
    query: Mapping[str, QueryValue] | None = None,
    fragment: str | None = None,
) -> str:
    """Build a URL for *pattern*: the inverse of :func:`match_path`.

    *params* is keyed by bound name. Catch-all values are encoded per
    component, so ``["a/b", "c"]`` becomes ``a%2Fb/c``. An optional
    catch-all given ``None`` or ``[]`` is left out.

    Raises:
        KeyError: If a required parameter is missing.
        ValueError: If a catch-all is given an empty list.
    """
    values = params or {}
    parts: list[str] = []
    for seg in pattern.segments:
        match seg.kind:
            case SegmentKind.STATIC:
                parts.append(quote(seg.raw, safe=""))
            case SegmentKind.DYNAMIC:
                parts.append(quote(str(values[seg.name]), safe=""))
            case SegmentKind.CATCH_ALL:
                items = _as_list(values[seg.name])
                if not items:
                    msg = f"Catch-all parameter {seg.name!r} needs at least one value"
                    raise ValueError(msg)
                parts.extend(quote(item, safe="") for item in items)
            case SegmentKind.OPTIONAL_CATCH_ALL:
                parts.extend(quote(item, safe="") for item in _as_list(values.get(seg.name)))
            case _:
                msg = f"Unhandled segment kind: {seg.kind!r}"
                raise AssertionError(msg)

    url = "/" + "/".join(parts)
    if query:
        url += "?" + urlencode(query, doseq=True)
    if fragment:
        url += "#" + quote(fragment, safe="")
    return url


def _as_list(value: ParamValue) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)
