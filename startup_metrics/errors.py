"""Exception taxonomy for extraction and comparison failures."""


class StartupMetricsError(Exception):
    """Base class for every failure that aborts a run."""


class MissingMilestoneError(StartupMetricsError):
    """Raised when the input runs out before a required milestone is found."""

    def __init__(self, metric: str, index: int, milestone: str):
        self.metric = metric
        self.index = index
        self.milestone = milestone
        super().__init__(
            f"could not find {metric} for index {index} "
            f"(no remaining '{milestone}' scenario stop)"
        )


class ExtractorProtocolError(StartupMetricsError):
    """Raised when an extractor is advanced after it has completed."""


class ExtractorExhaustedError(ExtractorProtocolError):
    """Raised when an extractor is advanced with no input left to scan."""


class NoTimestampsError(StartupMetricsError):
    """Raised when a start time is requested from an empty set of timestamps."""


class ZeroBaselineError(StartupMetricsError):
    """Raised when a percent change is computed against a 0ms baseline."""
