"""Tests for fulfilment reports."""

from __future__ import annotations

import pytest

from requisite import NotFulfilledError, Requirements, assert_fulfilled, check_fulfilment


def test_check_fulfilment_partitions_keys() -> None:
    """Reports should list fulfilled and missing keys in order."""

    requirements = Requirements()
    requirements.add("input_file")
    requirements.add("output_file")
    requirements.add("verbose", domain=[True, False])
    requirements.fulfil("output_file", "test.out")

    report = check_fulfilment(requirements)

    assert not report.is_complete
    assert report.missing == ("input_file", "verbose")
    assert report.fulfilled == ("output_file",)


def test_check_fulfilment_on_empty_collection_is_complete() -> None:
    """Empty collections are complete."""

    report = check_fulfilment(Requirements())

    assert report.is_complete
    assert report.missing == ()


def test_assert_fulfilled_lists_missing_keys() -> None:
    """assert_fulfilled should name every missing key."""

    requirements = Requirements()
    requirements.add("input_file")
    requirements.add("output_file")

    with pytest.raises(NotFulfilledError, match="- input_file\n- output_file") as exc_info:
        assert_fulfilled(requirements)
    assert exc_info.value.key == "input_file"

    requirements.fulfil("input_file", "a.c")
    requirements.fulfil("output_file", "a.out")
    assert_fulfilled(requirements)
