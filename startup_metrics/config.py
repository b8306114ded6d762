"""Configuration loading from an optional YAML file, env vars, and CLI args."""

import logging
import os
from dataclasses import dataclass, field

import yaml

from startup_metrics.comparison import ZERO_BASELINE_POLICIES
from startup_metrics.extractor import DEFAULT_ST_LIMIT, PLATFORMS, PlatformConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_PREFIX = "STARTUP_METRICS_"


@dataclass(frozen=True)
class Config:
    st_limit: int = DEFAULT_ST_LIMIT
    zero_baseline: str = "na"
    log_level: str = "WARNING"
    platforms: dict[str, PlatformConfig] = field(default_factory=lambda: dict(PLATFORMS))

    def __post_init__(self):
        if self.st_limit < 1:
            raise ValueError(f"st_limit must be at least 1, got {self.st_limit}")
        if self.zero_baseline not in ZERO_BASELINE_POLICIES:
            raise ValueError(
                f"zero_baseline must be one of {ZERO_BASELINE_POLICIES}, got '{self.zero_baseline}'"
            )
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got '{self.log_level}'")


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.info("Loaded YAML config from %s", path)
        return data
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}


def _load_platforms(yaml_data: dict) -> dict[str, PlatformConfig]:
    platforms = dict(PLATFORMS)
    for name, overrides in (yaml_data.get("platforms") or {}).items():
        platforms[name.lower()] = PlatformConfig.from_dict(name, overrides or {})
    return platforms


def load_config(cli_args=None, yaml_data: dict | None = None) -> Config:
    """Build Config from YAML data, then env vars, then explicit CLI args."""
    yaml_data = yaml_data or {}

    st_limit = yaml_data.get("st_limit", Config.st_limit)
    zero_baseline = yaml_data.get("zero_baseline", Config.zero_baseline)
    log_level = yaml_data.get("log_level", Config.log_level)

    st_limit = os.environ.get(ENV_PREFIX + "ST_LIMIT", st_limit)
    zero_baseline = os.environ.get(ENV_PREFIX + "ZERO_BASELINE", zero_baseline)
    log_level = os.environ.get(ENV_PREFIX + "LOG_LEVEL", log_level)

    if getattr(cli_args, "st_limit", None) is not None:
        st_limit = cli_args.st_limit
    if getattr(cli_args, "zero_baseline", None):
        zero_baseline = cli_args.zero_baseline
    if getattr(cli_args, "log_level", None):
        log_level = cli_args.log_level

    return Config(
        st_limit=int(st_limit),
        zero_baseline=str(zero_baseline).lower(),
        log_level=str(log_level).upper(),
        platforms=_load_platforms(yaml_data),
    )
