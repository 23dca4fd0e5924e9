"""Tests for wren.routing.segments: the shared segment grammar."""

import pytest

from wren.routing.segments import (
    CATCH_ALL_PREFIX,
    DYNAMIC_PREFIX,
    OPTIONAL_CATCH_ALL_PREFIX,
    Segment,
    SegmentKind,
    classify,
    parse_segments,
    split_path,
)


class TestClassify:
    @pytest.mark.parametrize(
        ("raw", "kind", "name"),
        [
            ("_____x", SegmentKind.OPTIONAL_CATCH_ALL, "x"),
            ("___x", SegmentKind.CATCH_ALL, "x"),
            ("_x", SegmentKind.DYNAMIC, "x"),
            ("x", SegmentKind.STATIC, ""),
        ],
    )
    def test_prefix_injectivity(self, raw: str, kind: SegmentKind, name: str) -> None:
        segment = classify(raw)
        assert segment.kind is kind
        assert segment.name == name
        assert segment.raw == raw

    def test_empty_string_is_static(self) -> None:
        assert classify("") == Segment(raw="", kind=SegmentKind.STATIC, name="")

    def test_longest_marker_wins(self) -> None:
        # Four underscores: catch-all marker plus one leftover underscore.
        assert classify("____x") == Segment("____x", SegmentKind.CATCH_ALL, "_x")
        # Six underscores: optional catch-all marker plus one leftover.
        assert classify("______x") == Segment("______x", SegmentKind.OPTIONAL_CATCH_ALL, "_x")

    def test_double_underscore_is_dynamic(self) -> None:
        assert classify("__x") == Segment("__x", SegmentKind.DYNAMIC, "_x")

    def test_bare_markers_have_empty_names(self) -> None:
        assert classify(DYNAMIC_PREFIX).kind is SegmentKind.DYNAMIC
        assert classify(CATCH_ALL_PREFIX).kind is SegmentKind.CATCH_ALL
        assert classify(OPTIONAL_CATCH_ALL_PREFIX).kind is SegmentKind.OPTIONAL_CATCH_ALL
        assert classify(OPTIONAL_CATCH_ALL_PREFIX).name == ""

    def test_marker_in_middle_is_static(self) -> None:
        assert classify("user_id").kind is SegmentKind.STATIC

    def test_case_preserved(self) -> None:
        assert classify("_UserId").name == "UserId"


class TestSegmentProperties:
    def test_static_is_not_param(self) -> None:
        assert classify("users").is_param is False
        assert classify("users").is_catch_all is False

    def test_dynamic(self) -> None:
        segment = classify("_id")
        assert segment.is_param is True
        assert segment.is_catch_all is False

    @pytest.mark.parametrize("raw", ["___slug", "_____slug"])
    def test_catch_alls(self, raw: str) -> None:
        segment = classify(raw)
        assert segment.is_param is True
        assert segment.is_catch_all is True

    def test_frozen(self) -> None:
        segment = classify("_id")
        with pytest.raises(AttributeError):
            segment.name = "other"  # type: ignore[misc]


class TestParseSegments:
    def test_split_drops_empty_components(self) -> None:
        assert split_path("/users//_id/") == ["users", "_id"]
        assert split_path("/") == []
        assert split_path("") == []

    def test_split_accepts_backslashes(self) -> None:
        assert split_path("users\\_id") == ["users", "_id"]

    def test_parse(self) -> None:
        segments = parse_segments("docs/_____path")
        assert [s.kind for s in segments] == [
            SegmentKind.STATIC,
            SegmentKind.OPTIONAL_CATCH_ALL,
        ]
        assert segments[1].name == "path"

    def test_root(self) -> None:
        assert parse_segments("/") == ()
