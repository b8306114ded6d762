"""Lock-step comparison of two extractors with percentage deltas."""

import logging
import math
from typing import Iterator

from startup_metrics.errors import ZeroBaselineError
from startup_metrics.extractor import ScenarioSequenceExtractor
from startup_metrics.models import ComparisonRow

logger = logging.getLogger(__name__)

ZERO_BASELINE_POLICIES = ("na", "error")
NOT_AVAILABLE = "N/A"


def percent_change(left_ms: int, right_ms: int, zero_baseline: str = "na") -> str:
    """Change from *left_ms* to *right_ms* as ``"<int>%"``.

    Halves round toward positive infinity (``-2.5`` -> ``-2``, ``2.5`` -> ``3``).
    A zero baseline gives ``"N/A"`` or raises ZeroBaselineError, per policy.
    """
    if left_ms == 0:
        if zero_baseline == "error":
            raise ZeroBaselineError(f"cannot compute change from a 0ms baseline (right side {right_ms}ms)")
        return NOT_AVAILABLE
    change = math.floor(100 * (right_ms - left_ms) / left_ms + 0.5)
    return f"{change}%"


def compare(
    angular: ScenarioSequenceExtractor,
    react: ScenarioSequenceExtractor,
    zero_baseline: str = "na",
) -> Iterator[ComparisonRow]:
    """Yield one row per metric pair until either side completes."""
    if zero_baseline not in ZERO_BASELINE_POLICIES:
        raise ValueError(f"Unknown zero baseline policy '{zero_baseline}'")

    while not angular.is_complete() and not react.is_complete():
        left = angular.next()
        right = react.next()
        if (left.metric, left.index) != (right.metric, right.index):
            logger.warning(
                "Metric mismatch: angular %s/%d vs react %s/%d",
                left.metric, left.index, right.metric, right.index,
            )
        yield ComparisonRow(
            metric=left.metric,
            index=left.index,
            angular_time_ms=left.time_ms,
            react_time_ms=right.time_ms,
            percent_change=percent_change(left.time_ms, right.time_ms, zero_baseline),
        )
