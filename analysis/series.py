"""Gap filling for sparse elapsed-time series.

Combat logs record a sample only when a tracked value changes (buff stacks,
presence flags, gauge magnitudes). Charts need one point per second, so this
module expands a sparse series into a dense one by carrying the last known
value forward across gaps.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

V = TypeVar("V")

Sample = tuple[int, V]

logger = logging.getLogger(__name__)


class SeriesOrderError(ValueError):
    """Raised when a series is not strictly increasing in elapsed time."""

    def __init__(self, *, index: int, previous: int, current: int) -> None:
        """Initialize the error.

        Args:
            index: Position of the offending sample in the input series.
            previous: Elapsed time of the sample before it.
            current: Elapsed time of the offending sample.
        """

        reason = "duplicate" if current == previous else "out-of-order"
        super().__init__(
            f"Series must be strictly increasing: {reason} elapsed time {current} "
            f"at index {index} (previous {previous})."
        )
        self.index = index
        self.previous = previous
        self.current = current


def fill_gaps(series: Sequence[Sample[V]]) -> list[Sample[V]]:
    """Expand a sparse series into one sample per integer elapsed time.

    Args:
        series: Samples as `(elapsed_time, value)` pairs, strictly increasing
            in `elapsed_time`.

    Returns:
        A new list covering every integer from the first to the last elapsed
        time, inclusive. Original samples are kept unchanged; each synthesized
        sample carries the value of the nearest preceding original sample.

    Raises:
        SeriesOrderError: When two consecutive samples are out of order or
            share an elapsed time.

    Notes:
        - The output never extends before the first sample.
        - The input is never mutated.
    """

    filled: list[Sample[V]] = []
    previous_time: int | None = None
    last_value: V | None = None

    for index, sample in enumerate(series):
        elapsed_time, value = sample
        if previous_time is not None:
            if elapsed_time <= previous_time:
                raise SeriesOrderError(index=index, previous=previous_time, current=elapsed_time)
            for missing in range(previous_time + 1, elapsed_time):
                filled.append((missing, last_value))  # type: ignore[arg-type]
        filled.append(sample)
        previous_time = elapsed_time
        last_value = value

    synthesized = len(filled) - len(series)
    if synthesized:
        logger.debug("Filled %d missing samples across %d original samples.", synthesized, len(series))
    return filled
