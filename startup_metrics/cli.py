"""startup-metrics command line: extract, compare, and combine subcommands."""

import logging
import sys
from argparse import ArgumentParser
from collections import Counter

from startup_metrics.combine import combine_tables
from startup_metrics.comparison import ZERO_BASELINE_POLICIES, compare
from startup_metrics.config import LOG_LEVELS, Config, load_config, load_yaml_config
from startup_metrics.errors import StartupMetricsError
from startup_metrics.extractor import ScenarioSequenceExtractor, get_platform
from startup_metrics.formatter import (
    COMPARISON_HEADER,
    format_counts,
    format_scenario,
    format_table,
)
from startup_metrics.parser import load_milestones, parse_scenario_stops
from startup_metrics.prompt import ConsolePrompt
from startup_metrics.reader import get_lines
from startup_metrics.resolver import filter_scenarios, first_candidate, resolve_start_time

LOG_FORMAT = "%(asctime)s [STARTUP-METRICS] %(levelname)s %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="startup-metrics",
        description="Extract and compare startup milestones from application logs.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file (st_limit, zero_baseline, platforms)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Diagnostic log level on stderr (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser(
        "extract",
        help="List scenario stops at or after a chosen start time",
    )
    extract.add_argument("logfile", help="Raw application log file")
    extract.add_argument(
        "scenarios",
        nargs="?",
        help="Comma-separated scenario names to keep (default: all)",
    )
    extract.add_argument(
        "--non-interactive",
        action="store_true",
        help="Take the first value seen in the log instead of prompting when the start time is ambiguous",
    )
    extract.add_argument(
        "--counts",
        action="store_true",
        help="Print how many times each scenario occurs instead of the stops",
    )

    comparison = subparsers.add_parser(
        "compare",
        help="Compare Angular and React milestones metric by metric",
    )
    comparison.add_argument("angular", help="Angular log or extract output")
    comparison.add_argument("react", help="React log or extract output")
    comparison.add_argument(
        "--st-limit",
        type=int,
        help="Occurrences of each repeated metric (default: 5)",
    )
    comparison.add_argument(
        "--zero-baseline",
        choices=ZERO_BASELINE_POLICIES,
        help="What to do when the Angular time is 0ms (default: na)",
    )

    combination = subparsers.add_parser(
        "combine",
        help="Union comparison tables, tagging each row desktop or web",
    )
    combination.add_argument("files", nargs="+", help="Comparison table files")
    return parser


def run_extract(args, config: Config) -> None:
    stops = parse_scenario_stops(get_lines(args.logfile))
    if not stops:
        logger.warning("No scenario stops found in %s", args.logfile)
        return

    choose = first_candidate if args.non_interactive else ConsolePrompt()
    start_time = resolve_start_time((s.timestamp for s in stops), choose)

    names = args.scenarios.split(",") if args.scenarios else {s.scenario_name for s in stops}
    selected = filter_scenarios(stops, start_time, names)

    if args.counts:
        counts = Counter(s.scenario_name for s in selected)
        print(format_counts(dict(counts.most_common())))
        return

    for stop in selected:
        print(format_scenario(stop))


def run_compare(args, config: Config) -> None:
    angular = ScenarioSequenceExtractor(
        load_milestones(get_lines(args.angular)),
        get_platform("angular", config.platforms),
        config.st_limit,
    )
    react = ScenarioSequenceExtractor(
        load_milestones(get_lines(args.react)),
        get_platform("react", config.platforms),
        config.st_limit,
    )
    # Materialize first so a failure prints nothing.
    rows = list(compare(angular, react, config.zero_baseline))
    print(format_table([COMPARISON_HEADER, *(row.as_record() for row in rows)]))


def run_combine(args, config: Config) -> None:
    print(format_table(combine_tables(args.files)))


COMMANDS = {
    "extract": run_extract,
    "compare": run_compare,
    "combine": run_combine,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level or "WARNING", format=LOG_FORMAT, stream=sys.stderr)
    try:
        config = load_config(args, load_yaml_config(args.config))
        logging.getLogger().setLevel(config.log_level)
        COMMANDS[args.command](args, config)
    except (StartupMetricsError, FileNotFoundError, ValueError, EOFError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
