"""Log line decomposition and scenario-stop recognition: compiled regexes, no state."""

import logging
import re
from datetime import datetime
from typing import Iterable

from startup_metrics.models import LogEvent, ScenarioStop

logger = logging.getLogger(__name__)

TIMESTAMP_PATTERN = re.compile(
    r"^(20[0-9]{2})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})\.([0-9]{3})Z (.*)"
)

SCENARIO_STOP_PATTERN = re.compile(
    r"\[Scenario\](\w+) \[step\]\(([0-9]+)\)stop \((?:-?[0-9]+ms/)?([0-9]+)ms\)"
)

SUMMARY_PATTERN = re.compile(r"(\w+): ([0-9]+)ms")

_WHITESPACE = re.compile(r"\s+")


def decompose_line(line: str) -> LogEvent | None:
    """Parse a raw log line into a LogEvent. Returns None for anything else.

    Expected prefix:
        2023-04-12T09:15:02.125Z Inf <payload>
    """
    match = TIMESTAMP_PATTERN.match(line)
    if not match:
        return None

    *fields, rest = match.groups()
    year, month, day, hour, minute, second, millisecond = (int(f) for f in fields)
    try:
        timestamp = datetime(year, month, day, hour, minute, second, millisecond * 1000)
    except ValueError as e:
        logger.debug("Dropping line with impossible timestamp: %s", e)
        return None

    severity, payload = _split_first_token(rest)
    if not severity:
        return None

    return LogEvent(timestamp=timestamp, severity=severity, payload=payload)


def _split_first_token(text: str) -> tuple[str, str]:
    # Whitespace runs in the payload collapse to a single space.
    tokens = _WHITESPACE.split(text)
    return tokens[0], " ".join(tokens[1:])


def recognize_scenario_stop(payload: str) -> tuple[str, int] | None:
    """Return (scenario_name, scenario_time_ms) if the payload is a scenario stop."""
    match = SCENARIO_STOP_PATTERN.search(payload)
    if not match:
        return None
    scenario_name, _step_index, time_ms = match.groups()
    return scenario_name, int(time_ms)


def parse_log_line(line: str) -> ScenarioStop | None:
    """Decompose and recognize in one step."""
    event = decompose_line(line)
    if event is None:
        return None
    info = recognize_scenario_stop(event.payload)
    if info is None:
        return None
    scenario_name, time_ms = info
    return ScenarioStop(
        timestamp=event.timestamp,
        scenario_name=scenario_name,
        scenario_time_ms=time_ms,
    )


def parse_scenario_stops(lines: Iterable[str]) -> list[ScenarioStop]:
    """All scenario stops in a log, in input order. Other lines are skipped."""
    stops = []
    total = 0
    for line in lines:
        total += 1
        stop = parse_log_line(line)
        if stop is not None:
            stops.append(stop)
    logger.info("Found %d scenario stops in %d lines", len(stops), total)
    return stops


def parse_summary_line(line: str) -> ScenarioStop | None:
    """Parse a ``name: NNNms`` line as printed by the extract command."""
    match = SUMMARY_PATTERN.search(line)
    if not match:
        return None
    return ScenarioStop(
        timestamp=None,
        scenario_name=match.group(1),
        scenario_time_ms=int(match.group(2)),
    )


def load_milestones(lines: Iterable[str]) -> list[ScenarioStop]:
    """Read milestones from either a raw log or an extract summary.

    A file with any timestamped line is a raw log and only its scenario stops
    count. Otherwise every ``name: NNNms`` line is a milestone.
    """
    lines = list(lines)
    if any(TIMESTAMP_PATTERN.match(line) for line in lines):
        return parse_scenario_stops(lines)
    stops = [parse_summary_line(line) for line in lines]
    return [s for s in stops if s is not None]
