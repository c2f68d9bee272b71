import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Sequence, Tuple

from .config import MAX_BOUND, MIN_BOUND, MIN_SAMPLE
from .exceptions import Bound, OutOfRangeError

logger = logging.getLogger(__name__)


@dataclass
class AlertRule:
    window_length: int = 3
    threshold: int = 4


def _check_bounds(field: str, value: int, low: int, high: int) -> None:
    if value < low:
        raise OutOfRangeError(field, Bound.TOO_SMALL, value, low)
    if value > high:
        raise OutOfRangeError(field, Bound.TOO_LARGE, value, high)


def validate(rule: AlertRule, samples: Sequence[int]) -> None:
    # Order matters: the first failing check is the one reported
    _check_bounds("window_length", rule.window_length, MIN_BOUND, MAX_BOUND)
    _check_bounds("threshold", rule.threshold, MIN_BOUND, MAX_BOUND)
    for i, calls in enumerate(samples):
        if calls < MIN_SAMPLE:
            raise OutOfRangeError("samples", Bound.TOO_SMALL, calls, MIN_SAMPLE, index=i)
    for i, calls in enumerate(samples):
        if calls > MAX_BOUND:
            raise OutOfRangeError("samples", Bound.TOO_LARGE, calls, MAX_BOUND, index=i)


def _windows(window_length: int, samples: Sequence[int]) -> Iterator[Tuple[int, int]]:
    # Window ending at i covers samples[i - window_length:i]; i itself is excluded
    for i in range(window_length, len(samples)):
        yield i, sum(samples[i - window_length:i])


def evaluate_windows(window_length: int, threshold: int, samples: Sequence[int]) -> List[Dict[str, Any]]:
    rule = AlertRule(window_length=window_length, threshold=threshold)
    validate(rule, samples)

    windows: List[Dict[str, Any]] = []
    for end, total in _windows(rule.window_length, samples):
        average = total / rule.window_length
        windows.append({
            "start": end - rule.window_length,
            "end": end,
            "sum": total,
            "average": average,
            "alert": rule.threshold <= average,
        })
    return windows


def count_alerts(window_length: int, threshold: int, samples: Sequence[int]) -> int:
    """
    Number of trailing windows whose average call volume reaches the threshold.

    Raises OutOfRangeError before any window is scanned if window_length,
    threshold or a sample lies outside its bounds.
    """
    rule = AlertRule(window_length=window_length, threshold=threshold)
    validate(rule, samples)

    alerts = 0
    scanned = 0
    for _, total in _windows(rule.window_length, samples):
        scanned += 1
        if rule.threshold <= total / rule.window_length:
            alerts += 1

    logger.debug(
        "Scanned %d windows of length %d over %d samples: %d alerts at threshold %d",
        scanned, rule.window_length, len(samples), alerts, rule.threshold,
    )
    return alerts
