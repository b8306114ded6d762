"""Start-time resolution by successive single-component disambiguation."""

import logging
from datetime import datetime
from typing import Callable, Iterable, Sequence, TypeVar

from startup_metrics.errors import NoTimestampsError
from startup_metrics.models import ScenarioStop

logger = logging.getLogger(__name__)

T = TypeVar("T")

Chooser = Callable[[Sequence[int]], int]

# Coarsest to finest; seconds and below are never resolved.
DATE_COMPONENTS = (
    ("year", lambda d: d.year),
    ("month", lambda d: d.month),
    ("day", lambda d: d.day),
    ("hour", lambda d: d.hour),
    ("minute", lambda d: d.minute),
)


def first_candidate(candidates: Sequence[T]) -> T:
    """Non-interactive chooser: always the first value seen."""
    return candidates[0]


def distinct_values(dates: Iterable[datetime], component: Callable[[datetime], int]) -> list[int]:
    """Distinct component values in order of first appearance."""
    values = []
    for d in dates:
        value = component(d)
        if value not in values:
            values.append(value)
    return values


def choose_component(
    dates: list[datetime],
    component: Callable[[datetime], int],
    name: str,
    choose: Chooser,
) -> tuple[int, list[datetime]]:
    """Select one value for a date component and narrow *dates* to it.

    ``choose`` is only called when more than one value is present. Choosers
    that expose ``for_component(name)`` are told which component is asked for.
    """
    candidates = distinct_values(dates, component)
    selected = candidates[0]
    if len(candidates) >= 2:
        logger.info("Which %s? %d candidates: %s", name, len(candidates), candidates)
        ask = choose.for_component(name) if hasattr(choose, "for_component") else choose
        selected = ask(candidates)
        if selected not in candidates:
            raise ValueError(f"{selected!r} is not one of the available {name} values {candidates}")
    return selected, [d for d in dates if component(d) == selected]


def resolve_start_time(timestamps: Iterable[datetime], choose: Chooser = first_candidate) -> datetime:
    """Narrow a set of timestamps down to one start time, minute precision.

    Resolution runs year, month, day, hour, minute. Each step only sees the
    timestamps that survived the previous selections.

    Raises:
        NoTimestampsError: If *timestamps* is empty.
    """
    dates = list(timestamps)
    if not dates:
        raise NoTimestampsError("no timestamps available to choose a start time from")

    selected = []
    for name, component in DATE_COMPONENTS:
        value, dates = choose_component(dates, component, name, choose)
        selected.append(value)

    start = datetime(*selected)
    logger.info("Resolved start time %s", start.isoformat())
    return start


def filter_scenarios(
    stops: Iterable[ScenarioStop],
    start_time: datetime,
    names: Iterable[str],
) -> list[ScenarioStop]:
    """Stops at or after *start_time* whose name is in *names*, in time order."""
    wanted = set(names)
    matching = [
        s for s in stops
        if s.timestamp is not None and s.timestamp >= start_time and s.scenario_name in wanted
    ]
    return sorted(matching, key=lambda s: s.timestamp)
