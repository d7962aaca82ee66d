"""Unit tests for TimelineConfig serialization and tolerant loading."""

import logging

import pytest

from spanline.timeline.config import (
    DEFAULT_PERCENTILE,
    PERCENTILE_CHOICES,
    TimelineConfig,
    coerce_config,
)
from spanline.timeline.errors import PercentileError


def test_defaults():
    cfg = TimelineConfig()
    assert cfg.marks == []
    assert cfg.entries == []
    assert cfg.percentile == DEFAULT_PERCENTILE == 0.5


def test_to_dict_from_dict_roundtrip():
    cfg = TimelineConfig(marks=["a", "b"], entries=["e"], percentile=0.95)
    assert TimelineConfig.from_dict(cfg.to_dict()) == cfg


def test_from_dict_tolerates_missing_and_none():
    cfg = TimelineConfig.from_dict({"marks": None, "percentile": None})
    assert cfg == TimelineConfig()
    assert TimelineConfig.from_dict(None) == TimelineConfig()


def test_from_dict_coerces_types():
    cfg = TimelineConfig.from_dict({"marks": ("a", 2), "entries": ["e"], "percentile": "0.75"})
    assert cfg.marks == ["a", 2]
    assert cfg.percentile == 0.75


def test_from_dict_single_string_id(caplog):
    with caplog.at_level(logging.WARNING, logger="spanline"):
        cfg = TimelineConfig.from_dict({"marks": "a"})
    assert cfg.marks == ["a"]
    assert "single column id" in caplog.text


def test_from_dict_unknown_key_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="spanline"):
        cfg = TimelineConfig.from_dict({"marks": ["a"], "colour": "blue", "source": "el-1"})
    assert cfg.marks == ["a"]
    assert "colour" in caplog.text
    assert "source" not in caplog.text


def test_from_dict_bad_percentile_raises():
    with pytest.raises(PercentileError) as exc_info:
        TimelineConfig.from_dict({"percentile": "median"})
    assert exc_info.value.percentile == "median"
    assert isinstance(exc_info.value, ValueError)


def test_from_dict_keeps_non_string_ids():
    cfg = TimelineConfig.from_dict({"marks": [1, ("a", 2)], "entries": [3]})
    assert cfg.marks == [1, ("a", 2)]
    assert cfg.entries == [3]
    assert cfg == TimelineConfig(marks=[1, ("a", 2)], entries=[3])


def test_from_dict_drops_unhashable_ids(caplog):
    with caplog.at_level(logging.WARNING, logger="spanline"):
        cfg = TimelineConfig.from_dict({"marks": ["a", ["b"], "c"]})
    assert cfg.marks == ["a", "c"]
    assert "unhashable" in caplog.text


def test_percentile_is_not_enforced():
    cfg = TimelineConfig.from_dict({"percentile": 0.9})
    assert cfg.percentile == 0.9
    assert not cfg.is_standard_percentile()
    assert all(TimelineConfig(percentile=p).is_standard_percentile() for p in PERCENTILE_CHOICES)


def test_coerce_config_passthrough():
    cfg = TimelineConfig(marks=["a"])
    assert coerce_config(cfg) is cfg
    assert coerce_config({"marks": ["a"]}) == cfg
