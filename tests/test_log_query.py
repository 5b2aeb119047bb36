"""
Query Engine Tests
==================

Verifies the retrieval pipeline applied to a listed snapshot:
1. after-filter (strict, lenient on malformed input)
2. contains-filter (literal, case-sensitive)
3. stable sort by timestamp
4. limit / offset pagination
"""

from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given, strategies as st

from conftest import make_entry
from runtime.models.log_models import LogQuery
from runtime.query.log_query import apply_query, matches_after, parse_timestamp


T0 = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


def ts(seconds: int) -> str:
    return (T0 + timedelta(seconds=seconds)).isoformat(timespec="microseconds")


def messages(entries):
    return [e.message for e in entries]


# =============================================================================
# parse_timestamp / matches_after
# =============================================================================

class TestParseTimestamp:

    def test_offset_timestamp_parses(self):
        parsed = parse_timestamp("2026-10-19T12:00:00.000000+00:00")
        assert parsed == T0

    def test_zulu_suffix_parses(self):
        assert parse_timestamp("2026-10-19T12:00:00Z") == T0

    def test_other_offsets_compare_in_utc(self):
        assert parse_timestamp("2026-10-19T14:00:00+02:00") == T0

    @pytest.mark.parametrize("text", [None, "", "yesterday", "2026-13-40T00:00:00Z"])
    def test_garbage_is_none(self, text):
        assert parse_timestamp(text) is None

    def test_missing_offset_is_none(self):
        assert parse_timestamp("2026-10-19T12:00:00") is None

    def test_matches_after_is_strict(self):
        entry = make_entry(ts(0), "a")
        assert not matches_after(entry, T0)
        assert matches_after(entry, T0 - timedelta(microseconds=1))

    def test_unparseable_entry_never_matches(self):
        entry = make_entry("not a time", "a")
        assert not matches_after(entry, T0 - timedelta(days=365))


# =============================================================================
# Filters
# =============================================================================

class TestFilters:

    def test_after_returns_only_later_entries(self):
        entries = [make_entry(ts(1), "a"), make_entry(ts(2), "b")]

        result = apply_query(entries, LogQuery(after=ts(1)))

        assert messages(result) == ["b"]

    def test_after_with_different_offset(self):
        entries = [make_entry(ts(0), "a"), make_entry(ts(3600), "b")]
        # 12:30 UTC written in +01:00
        result = apply_query(entries, LogQuery(after="2026-10-19T13:30:00+01:00"))
        assert messages(result) == ["b"]

    def test_unparseable_after_is_ignored(self):
        entries = [make_entry(ts(3), "c"), make_entry(ts(1), "a"), make_entry(ts(2), "b")]

        result = apply_query(entries, LogQuery(after="not-a-timestamp", limit=2))

        # Unfiltered, but still sorted and paginated
        assert messages(result) == ["a", "b"]

    def test_entry_with_bad_timestamp_dropped_only_by_after(self):
        entries = [make_entry("garbage", "bad"), make_entry(ts(5), "good")]

        assert messages(apply_query(entries, LogQuery(after=ts(0)))) == ["good"]
        assert sorted(messages(apply_query(entries, LogQuery()))) == ["bad", "good"]

    def test_contains_is_literal_substring(self):
        entries = [
            make_entry(ts(1), "hello world"),
            make_entry(ts(2), "goodbye"),
            make_entry(ts(3), "a.*b"),
        ]

        assert messages(apply_query(entries, LogQuery(contains="wor"))) == ["hello world"]
        assert messages(apply_query(entries, LogQuery(contains=".*"))) == ["a.*b"]

    def test_contains_is_case_sensitive(self):
        entries = [make_entry(ts(1), "Hello"), make_entry(ts(2), "hello")]
        assert messages(apply_query(entries, LogQuery(contains="H"))) == ["Hello"]

    def test_filters_combine(self):
        entries = [
            make_entry(ts(1), "disk full"),
            make_entry(ts(2), "disk ok"),
            make_entry(ts(3), "cpu ok"),
        ]
        result = apply_query(entries, LogQuery(after=ts(1), contains="ok"))
        assert messages(result) == ["disk ok", "cpu ok"]


# =============================================================================
# Sort + pagination
# =============================================================================

class TestSortAndPaginate:

    def test_sorted_ascending_by_timestamp(self):
        entries = [make_entry(ts(i), str(i)) for i in (4, 0, 3, 1, 2)]
        assert messages(apply_query(entries, LogQuery())) == ["0", "1", "2", "3", "4"]

    def test_limit_and_offset(self):
        entries = [make_entry(ts(i), f"m{i}") for i in (5, 3, 1, 4, 2)]

        result = apply_query(entries, LogQuery(limit=2, offset=3))

        assert messages(result) == ["m4", "m5"]

    @pytest.mark.parametrize("offset", [5, 6, 1000])
    def test_offset_past_end_is_empty(self, offset):
        entries = [make_entry(ts(i), str(i)) for i in range(5)]
        assert apply_query(entries, LogQuery(offset=offset)) == []

    def test_default_limit_is_50(self):
        entries = [make_entry(ts(i), str(i)) for i in range(60)]
        result = apply_query(entries, LogQuery())
        assert len(result) == 50
        assert result[-1].message == "49"

    def test_zero_limit_is_empty(self):
        entries = [make_entry(ts(1), "a")]
        assert apply_query(entries, LogQuery(limit=0)) == []

    def test_input_is_not_mutated(self):
        entries = [make_entry(ts(2), "b"), make_entry(ts(1), "a")]
        apply_query(entries, LogQuery(limit=1))
        assert messages(entries) == ["b", "a"]

    @given(st.lists(st.sampled_from([ts(1), ts(2), ts(3)]), max_size=40))
    def test_sort_is_stable(self, stamps):
        entries = [make_entry(stamp, str(i)) for i, stamp in enumerate(stamps)]

        result = apply_query(entries, LogQuery(limit=len(entries)))

        assert [e.timestamp for e in result] == sorted(stamps)
        for stamp in set(stamps):
            before = [e.message for e in entries if e.timestamp == stamp]
            after = [e.message for e in result if e.timestamp == stamp]
            assert before == after
