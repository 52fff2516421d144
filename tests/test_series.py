"""Golden and property tests for elapsed-time gap filling."""

from __future__ import annotations

import logging

import pytest

from analysis.series import SeriesOrderError, fill_gaps

pytestmark = pytest.mark.unit


def test_fill_gaps_carries_previous_value_forward() -> None:
    """Synthesized seconds repeat the value of the preceding original sample."""

    assert fill_gaps([(0, 1), (3, 2)]) == [(0, 1), (1, 1), (2, 1), (3, 2)]


def test_fill_gaps_returns_empty_for_empty_input() -> None:
    """An empty series stays empty."""

    assert fill_gaps([]) == []


def test_fill_gaps_returns_single_sample_unchanged() -> None:
    """A single sample is returned as-is without backward extension."""

    assert fill_gaps([(5, "x")]) == [(5, "x")]


def test_fill_gaps_does_not_extend_before_first_sample() -> None:
    """The dense series starts at the first sample, not at time zero."""

    filled = fill_gaps([(4, True), (6, False)])
    assert filled == [(4, True), (5, True), (6, False)]


def test_fill_gaps_leaves_adjacent_samples_alone() -> None:
    """Samples already one second apart get no synthesized entries."""

    series = [(10, 0), (11, 3), (12, 3), (13, 1)]
    assert fill_gaps(series) == series


def test_fill_gaps_uses_nearest_original_value_across_several_gaps() -> None:
    """Each gap is filled from the original sample that opens it."""

    filled = fill_gaps([(0, "a"), (2, "b"), (5, "c")])
    assert filled == [(0, "a"), (1, "a"), (2, "b"), (3, "b"), (4, "b"), (5, "c")]


def test_fill_gaps_does_not_mutate_input() -> None:
    """The input list is left untouched and a new list is returned."""

    series = [(0, 1.5), (4, 2.5)]
    snapshot = list(series)
    filled = fill_gaps(series)
    assert series == snapshot
    assert filled is not series


def test_fill_gaps_accepts_tuples_of_samples() -> None:
    """Any sequence of pairs is accepted, including a tuple."""

    assert fill_gaps(((1, None), (3, 7))) == [(1, None), (2, None), (3, 7)]


@pytest.mark.parametrize(
    "series",
    [
        [(0, 1), (1, 2)],
        [(3, "a"), (9, "b"), (10, "c"), (25, "d")],
        [(100, 0.0), (101, 1.0), (250, 2.0)],
    ],
)
def test_fill_gaps_output_is_dense_and_complete(series: list[tuple[int, object]]) -> None:
    """Output covers every second between the first and last sample."""

    filled = fill_gaps(series)
    first, last = series[0][0], series[-1][0]
    assert len(filled) == last - first + 1
    for current, following in zip(filled, filled[1:]):
        assert following[0] == current[0] + 1

    originals = dict(series)
    last_original = None
    for elapsed_time, value in filled:
        if elapsed_time in originals:
            assert value == originals[elapsed_time]
            last_original = value
        else:
            assert value == last_original


def test_fill_gaps_logs_synthesized_sample_count(caplog) -> None:
    """Filling gaps logs how many samples were synthesized at DEBUG."""

    with caplog.at_level(logging.DEBUG, logger="analysis.series"):
        fill_gaps([(0, 1), (3, 2), (4, 2)])
    records = [record for record in caplog.records if record.name == "analysis.series"]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert records[0].getMessage() == "Filled 2 missing samples across 3 original samples."


def test_fill_gaps_does_not_log_without_gaps(caplog) -> None:
    """Dense input synthesizes nothing and logs nothing."""

    with caplog.at_level(logging.DEBUG, logger="analysis.series"):
        fill_gaps([(0, 1), (1, 2)])
    assert not [record for record in caplog.records if record.name == "analysis.series"]


def test_fill_gaps_rejects_out_of_order_samples() -> None:
    """A timestamp that goes backwards is a precondition violation."""

    with pytest.raises(SeriesOrderError) as excinfo:
        fill_gaps([(0, 1), (5, 2), (3, 3)])
    assert excinfo.value.index == 2
    assert excinfo.value.previous == 5
    assert excinfo.value.current == 3
    assert "out-of-order" in str(excinfo.value)


def test_fill_gaps_rejects_duplicate_timestamps() -> None:
    """Two samples at the same elapsed time are rejected."""

    with pytest.raises(SeriesOrderError, match="duplicate"):
        fill_gaps([(0, 1), (2, 2), (2, 3)])


def test_series_order_error_is_a_value_error() -> None:
    """Callers catching ValueError also catch ordering violations."""

    with pytest.raises(ValueError):
        fill_gaps([(1, "a"), (0, "b")])
