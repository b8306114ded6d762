"""Output rendering: pipe-delimited tables and scenario summary lines."""

from typing import Iterable

from startup_metrics.models import ScenarioStop

DELIMITER = "|"

COMPARISON_HEADER = ("Metric", "Index", "Angular", "React", "Change")
COMBINED_HEADER = COMPARISON_HEADER + ("Platform",)


def format_record(record: Iterable[str]) -> str:
    """Join cells with ``|``. Embedded pipes are not escaped."""
    return DELIMITER.join(record)


def format_table(records: Iterable[Iterable[str]]) -> str:
    return "\n".join(format_record(r) for r in records)


def format_scenario(stop: ScenarioStop) -> str:
    return f"{stop.scenario_name}: {stop.scenario_time_ms}ms"


def format_counts(counts: dict[str, int]) -> str:
    return "\n".join(f"{name}: {count}" for name, count in counts.items())
