"""Frozen dataclasses passed between pipeline stages."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Severity(Enum):
    WARN = "War"
    INFO = "Inf"
    ERROR = "Err"

    @classmethod
    def from_token(cls, token: str) -> "Severity | None":
        """Map a raw severity token (``Inf``, ``info``, ``Warning``...) to a member.

        Returns None for tokens outside the canonical set; callers decide
        whether that matters.
        """
        prefix = token[:3].lower()
        for member in cls:
            if member.value.lower() == prefix:
                return member
        return None


@dataclass(frozen=True)
class LogEvent:
    timestamp: datetime
    severity: str
    payload: str

    @property
    def level(self) -> Severity | None:
        return Severity.from_token(self.severity)


@dataclass(frozen=True)
class ScenarioStop:
    # None when read back from a "name: NNNms" summary line
    timestamp: datetime | None
    scenario_name: str
    scenario_time_ms: int


@dataclass(frozen=True)
class ExtractedMetric:
    metric: str
    index: int
    time_ms: int


@dataclass(frozen=True)
class ComparisonRow:
    metric: str
    index: int
    angular_time_ms: int
    react_time_ms: int
    percent_change: str

    def as_record(self) -> list[str]:
        return [
            self.metric,
            str(self.index),
            str(self.angular_time_ms),
            str(self.react_time_ms),
            self.percent_change,
        ]
