"""Unit tests for span column name parsing."""

import pytest

from spanline.timeline.naming import NO_MATCH, SpanKind, SpanName, parse_span_name


@pytest.mark.parametrize(
    "name, kind, label",
    [
        ("LoadStartTime", SpanKind.START, "Load"),
        ("LoadEndTime", SpanKind.END, "Load"),
        ("Load StartTime", SpanKind.START, "Load"),
        ("Page Load EndTime", SpanKind.END, "Page Load"),
        ("StartTime", SpanKind.START, ""),
    ],
)
def test_parse_span_name_matches_suffix(name, kind, label):
    parsed = parse_span_name(name)
    assert parsed.kind is kind
    assert parsed.label == label
    assert parsed.is_span


@pytest.mark.parametrize(
    "name",
    ["duration", "LoadStartTimeMs", "Loadstarttime", "LoadENDTIME", "StartTime of load", ""],
)
def test_parse_span_name_no_match(name):
    """Suffix match is case-sensitive and anchored at the end."""
    assert parse_span_name(name) == NO_MATCH
    assert not parse_span_name(name).is_span


def test_parse_span_name_non_string_is_no_match():
    assert parse_span_name(None) is NO_MATCH
    assert parse_span_name(42) is NO_MATCH


def test_span_name_index():
    assert SpanName(SpanKind.START, "x").index == 0
    assert SpanName(SpanKind.END, "x").index == 1
    with pytest.raises(ValueError):
        NO_MATCH.index
