"""Tests for the bucket schema, JSON loader, sample sets and formatting."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import numpy as np
import pytest

from bucket_chain.chains.formatting import (
    format_buckets,
    format_chains,
    format_table,
    format_timestamp,
)
from bucket_chain.data.loaders.json_buckets import load_buckets_json, parse_buckets
from bucket_chain.data.samples import create_sample_buckets, make_date_buckets
from bucket_chain.data.schema import EventData, bucket_shape, buckets_from_events

from conftest import d


class TestSchema:

    def test_buckets_from_events_sorts(self):
        groups = [
            [EventData(d(3)), EventData(d(1), payload="a")],
            [EventData(d(5))],
        ]
        assert buckets_from_events(groups) == [[d(1), d(3)], [d(5)]]

    def test_event_is_frozen(self):
        event = EventData(d(1))
        with pytest.raises(AttributeError):
            event.timestamp = d(2)

    def test_bucket_shape(self):
        assert bucket_shape([[1, 2], [], [3]]) == [2, 0, 1]
        assert bucket_shape(None) == []

    def test_bucket_shape_ndarray(self):
        assert bucket_shape(np.array([[1, 2, 3], [4, 5, 6]])) == [3, 3]
        assert bucket_shape(np.empty((0, 3))) == []


class TestSamples:

    def test_sample_buckets(self):
        buckets = create_sample_buckets()
        assert bucket_shape(buckets) == [3, 2, 2]
        assert buckets[0][0] == datetime(2023, 1, 1)

    def test_make_date_buckets(self):
        assert make_date_buckets([[1], [2, 3]], year=2020, month=2) == [
            [datetime(2020, 2, 1)],
            [datetime(2020, 2, 2), datetime(2020, 2, 3)],
        ]


class TestJsonLoader:

    def test_list_of_iso_strings(self, tmp_path: Path):
        path = tmp_path / "buckets.json"
        path.write_text(
            json.dumps([["2023-01-01", "2023-01-04T12:00:00"], ["2023-01-02"]]),
            encoding="utf-8",
        )
        buckets = load_buckets_json(path)
        assert buckets == [
            [datetime(2023, 1, 1), datetime(2023, 1, 4, 12)],
            [datetime(2023, 1, 2)],
        ]

    def test_object_with_numbers(self, tmp_path: Path):
        path = tmp_path / "buckets.json"
        path.write_text(json.dumps({"buckets": [[1.5, 2], []]}), encoding="utf-8")
        assert load_buckets_json(str(path)) == [[1.5, 2], []]

    def test_missing_key(self):
        with pytest.raises(ValueError, match="'buckets'"):
            parse_buckets({"data": []})

    def test_not_a_list(self):
        with pytest.raises(ValueError):
            parse_buckets("2023-01-01")

    def test_bucket_not_a_list(self):
        with pytest.raises(ValueError, match="Bucket 1"):
            parse_buckets([[1], 2])

    @pytest.mark.parametrize("value", [True, None, {"t": 1}])
    def test_bad_timestamp(self, value):
        with pytest.raises(ValueError):
            parse_buckets([[value]])

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_buckets_json(tmp_path / "missing.json")


class TestFormatting:

    def test_format_timestamp(self):
        assert format_timestamp(d(7)) == "2023-01-07"
        assert format_timestamp(d(7), "%d/%m") == "07/01"
        assert format_timestamp(np.datetime64("2023-01-02")) == "2023-01-02"
        assert format_timestamp(2.5) == "2.5"

    def test_format_buckets(self):
        text = format_buckets(create_sample_buckets())
        assert text.splitlines()[0] == "Bucket 0: [2023-01-01, 2023-01-04, 2023-01-05]"
        assert len(text.splitlines()) == 3

    def test_format_table(self):
        assert format_table([[0, -1], []]) == "Bucket 0: [0, -1]\nBucket 1: []"

    def test_format_chains(self):
        assert format_chains([[d(1), d(2)]]) == "[2023-01-01, 2023-01-02]"
        assert format_chains([]) == ""
