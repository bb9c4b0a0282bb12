from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from orgchart.errors import OrgChartError
from orgchart.log import configure_logging
from orgchart.orchestration import OrgChartQuery, load_settings

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="orgchart-path",
        description="Print the shortest reporting path between two employees of an org chart.",
    )
    parser.add_argument("input_file", type=Path, help="Pipe-delimited org chart file")
    parser.add_argument("first_employee", help="Name of the first employee")
    parser.add_argument("second_employee", help="Name of the second employee")
    parser.add_argument("--config", type=Path, help="YAML, TOML or JSON settings file")
    parser.add_argument("--log-level", help="Diagnostics level (default: WARNING or ORGCHART_LOG_LEVEL)")
    parser.add_argument(
        "--skip-malformed",
        action="store_true",
        default=None,
        help="Skip malformed record lines instead of rejecting the file",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format for the paths (default: text)",
    )
    parser.add_argument("--show-tree", action="store_true", help="Print the organisation before the paths")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(
            args.config,
            overrides={"log_level": args.log_level, "skip_malformed": args.skip_malformed},
        )
    except (OSError, ValueError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(settings.log_level, settings.log_format)

    try:
        query = OrgChartQuery.from_path(args.input_file, settings)
        outcomes = query.shortest_paths(args.first_employee, args.second_employee)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Cannot read {args.input_file}: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except OrgChartError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_FAILURE

    if args.show_tree:
        print(query.hierarchy.render())

    if args.format == "json":
        print(json.dumps([outcome.to_dict() for outcome in outcomes], indent=2))
    else:
        for outcome in outcomes:
            print(outcome.result.render())

    logger.debug("Printed %d path(s)", len(outcomes))
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
