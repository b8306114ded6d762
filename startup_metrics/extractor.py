"""Per-platform milestone state machine.

Walks an ordered list of scenario stops and emits a fixed sequence of metrics:

    ALT/0, CST/0 .. CST/n-1, AST/0 .. AST/n-1

where ``n`` is the repeat count (``st_limit``). The two UI stacks name their
grid load milestone differently; that difference lives in a PlatformConfig
rather than in a subclass.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, Sequence

from startup_metrics.errors import (
    ExtractorExhaustedError,
    ExtractorProtocolError,
    MissingMilestoneError,
)
from startup_metrics.models import ExtractedMetric, ScenarioStop

logger = logging.getLogger(__name__)

DEFAULT_ST_LIMIT = 5


@dataclass(frozen=True)
class PlatformConfig:
    name: str
    grid_load_milestone: str
    launch_milestone: str = "application_launch_time"
    switch_milestone: str = "messaging_switch_channel_v2"

    @classmethod
    def from_dict(cls, name: str, d: dict) -> "PlatformConfig":
        base = PLATFORMS.get(name.lower())
        if base is None:
            if "grid_load_milestone" not in d:
                raise ValueError(f"Platform '{name}' needs a grid_load_milestone")
            base = cls(name=name.lower(), grid_load_milestone=d["grid_load_milestone"])
        fields = {
            k: d[k]
            for k in ("grid_load_milestone", "launch_milestone", "switch_milestone")
            if k in d
        }
        return replace(base, **fields)


ANGULAR = PlatformConfig(name="angular", grid_load_milestone="teams_grid_load")
REACT = PlatformConfig(name="react", grid_load_milestone="hybrid_entity_teams_grid_load")

PLATFORMS = {p.name: p for p in (ANGULAR, REACT)}


def get_platform(name: str, platforms: dict[str, PlatformConfig] | None = None) -> PlatformConfig:
    """Look up a platform by name (case-insensitive)."""
    table = platforms if platforms is not None else PLATFORMS
    try:
        return table[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown platform '{name}', expected one of {sorted(table)}"
        ) from None


class ExtractorState(Enum):
    LOOKING_FOR_ALT = "LookingForAlt"
    LOOKING_FOR_NEXT_CST = "LookingForNextCst"
    LOOKING_FOR_NEXT_AST = "LookingForNextAst"
    COMPLETE = "Complete"


class ScenarioSequenceExtractor:
    """Single-use, forward-only extractor over one platform's scenario stops.

    The scan cursor only ever moves forward; every stop is inspected at most
    once across all calls to :meth:`next`.
    """

    def __init__(
        self,
        stops: Sequence[ScenarioStop],
        platform: PlatformConfig,
        st_limit: int = DEFAULT_ST_LIMIT,
    ):
        if st_limit < 1:
            raise ValueError(f"st_limit must be at least 1, got {st_limit}")
        self._stops = tuple(stops)
        self._platform = platform
        self._st_limit = st_limit
        self._state = ExtractorState.LOOKING_FOR_ALT
        self._cursor = 0
        self._st_index = 0

    @property
    def platform(self) -> PlatformConfig:
        return self._platform

    @property
    def state(self) -> ExtractorState:
        return self._state

    @property
    def position(self) -> int:
        return self._cursor

    def is_complete(self) -> bool:
        return self._state is ExtractorState.COMPLETE

    def _is_empty(self) -> bool:
        return self._cursor >= len(self._stops)

    def _look_for_next(self, scenario_name: str) -> ScenarioStop | None:
        while not self._is_empty():
            current = self._stops[self._cursor]
            self._cursor += 1
            if current.scenario_name == scenario_name:
                return current
        return None

    def _next_repeated(self, metric: str, scenario_name: str, next_state: ExtractorState) -> ExtractedMetric:
        stop = self._look_for_next(scenario_name)
        if stop is None:
            raise MissingMilestoneError(metric, self._st_index, scenario_name)

        result = ExtractedMetric(metric=metric, index=self._st_index, time_ms=stop.scenario_time_ms)
        self._st_index += 1
        if self._st_index >= self._st_limit:
            self._st_index = 0
            self._state = next_state
        return result

    def next(self) -> ExtractedMetric:
        """Emit the next metric.

        Raises:
            ExtractorProtocolError: If already complete.
            ExtractorExhaustedError: If no input is left to scan.
            MissingMilestoneError: If the input runs out mid-scan.
        """
        if self._state is ExtractorState.COMPLETE:
            raise ExtractorProtocolError(f"{self._platform.name} extractor is already complete")
        if self._is_empty():
            raise ExtractorExhaustedError(
                f"{self._platform.name} extractor is empty in state {self._state.value}"
            )

        if self._state is ExtractorState.LOOKING_FOR_ALT:
            stop = self._look_for_next(self._platform.launch_milestone)
            if stop is None:
                raise MissingMilestoneError("ALT", 0, self._platform.launch_milestone)
            self._state = ExtractorState.LOOKING_FOR_NEXT_CST
            result = ExtractedMetric(metric="ALT", index=0, time_ms=stop.scenario_time_ms)

        elif self._state is ExtractorState.LOOKING_FOR_NEXT_CST:
            result = self._next_repeated(
                "CST", self._platform.switch_milestone, ExtractorState.LOOKING_FOR_NEXT_AST
            )
            if self._state is ExtractorState.LOOKING_FOR_NEXT_AST:
                # Returning from the last channel switch fires one grid load.
                skipped = self._look_for_next(self._platform.grid_load_milestone)
                logger.debug(
                    "%s: discarded navigation grid load %s",
                    self._platform.name,
                    skipped.scenario_time_ms if skipped else None,
                )

        else:
            result = self._next_repeated(
                "AST", self._platform.grid_load_milestone, ExtractorState.COMPLETE
            )

        logger.debug("%s: %s/%d = %dms", self._platform.name, result.metric, result.index, result.time_ms)
        return result

    def __iter__(self) -> Iterator[ExtractedMetric]:
        while not self.is_complete():
            yield self.next()
