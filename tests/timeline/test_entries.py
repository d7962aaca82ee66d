"""Unit tests for entry payload decoding and grouping."""

import json
import logging

import pytest

from spanline.timeline.entries import decode_entry_payload, group_entries
from spanline.timeline.errors import EntryPayloadError

PAYLOAD = [
    {"name": "A", "timeRange": [0, 5]},
    {"name": "A", "timeRange": [5, 9]},
    {"name": "B", "timeRange": [1, 2]},
]


def test_decode_single_json_cell():
    records = decode_entry_payload("e", [json.dumps(PAYLOAD)])
    assert records == PAYLOAD


def test_decode_already_decoded_cell():
    assert decode_entry_payload("e", [PAYLOAD]) == PAYLOAD


def test_decode_bytes_cell():
    assert decode_entry_payload("e", [json.dumps(PAYLOAD).encode("utf-8")]) == PAYLOAD


@pytest.mark.parametrize("rows", [None, [], [json.dumps(PAYLOAD)] * 2, [None], ["null"]])
def test_decode_wrong_cardinality_or_null_is_empty(rows):
    assert decode_entry_payload("e", rows) == []


@pytest.mark.parametrize(
    "cell",
    [
        "not json",
        '{"name": "A"}',
        '[{"timeRange": [0, 1]}]',
        '[{"name": "A", "timeRange": [0]}]',
        '[{"name": "A", "timeRange": [0, "x"]}]',
        '[{"name": "A", "timeRange": [true, 1]}]',
        '["A"]',
    ],
)
def test_decode_malformed_lenient_returns_empty(cell, caplog):
    with caplog.at_level(logging.WARNING, logger="spanline"):
        assert decode_entry_payload("e", [cell]) == []
    assert "malformed entries payload" in caplog.text


@pytest.mark.parametrize("cell", ["not json", '{"name": "A"}', b"\xff\xfe"])
def test_decode_malformed_strict_raises(cell):
    with pytest.raises(EntryPayloadError) as exc_info:
        decode_entry_payload("e7", [cell], strict=True)
    assert exc_info.value.col_id == "e7"


def test_decode_stringifies_names():
    records = decode_entry_payload("e", ['[{"name": 1, "timeRange": [0, 1]}]'])
    assert records == [{"name": "1", "timeRange": [0, 1]}]


def test_group_entries_by_first_seen_name():
    series = group_entries(PAYLOAD)
    assert [s.label for s in series] == ["A", "B"]
    assert [seg.time_range for seg in series[0].data] == [[0, 5], [5, 9]]
    assert [seg.val for seg in series[0].data] == [5, 4]
    assert [seg.val for seg in series[1].data] == [1]


def test_group_entries_interleaved_names_keep_input_order():
    records = [
        {"name": "B", "timeRange": [0, 1]},
        {"name": "A", "timeRange": [1, 3]},
        {"name": "B", "timeRange": [3, 6]},
    ]
    series = group_entries(records)
    assert [s.label for s in series] == ["B", "A"]
    assert [seg.time_range for seg in series[0].data] == [[0, 1], [3, 6]]


def test_group_entries_empty():
    assert group_entries([]) == []
