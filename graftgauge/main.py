"""
Command-line entry point.

Takes metric readings as KEY=VALUE pairs and prints the gauge cards for
every metric as JSON.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from graftgauge import __version__, config
from graftgauge.metrics.reference_ranges import METRIC_KEYS, REFERENCE_RANGES
from graftgauge.metrics.validation import ReferenceRangeError, validate_reference_ranges
from graftgauge.results import GaugeLayout, build_results, parse_metric_inputs

_logger = logging.getLogger(__name__)


def _reading(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    key = key.strip().upper()
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{text}'")
    if key not in METRIC_KEYS:
        raise argparse.ArgumentTypeError(
            f"unknown metric '{key}' (choose from {', '.join(METRIC_KEYS)})"
        )
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graftgauge",
        description="Render graft flow readings onto semicircle gauges (JSON output)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # All six readings
  graftgauge MF=45 PI=2.1 DF=72 BF=1.5 ACI=88 MAP=85

  # Missing readings default to 0
  graftgauge MF=12

  # Only check the reference-range table
  graftgauge --validate-only
        """,
    )
    parser.add_argument(
        "readings",
        nargs="*",
        type=_reading,
        metavar="KEY=VALUE",
        help=f"Metric reading; KEY is one of {', '.join(METRIC_KEYS)}",
    )
    parser.add_argument(
        "--size",
        type=float,
        default=config.GAUGE_SIZE,
        help="Gauge size in pixels (default: %(default)s)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: %(default)s)",
    )
    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Validate the reference-range table and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if config.VALIDATE_ON_STARTUP or args.validate_only:
        try:
            validate_reference_ranges(REFERENCE_RANGES)
        except ReferenceRangeError as e:
            _logger.error("Reference range table is invalid")
            print(f"error: {e}", file=sys.stderr)
            return 1
        if args.validate_only:
            print(f"{len(REFERENCE_RANGES)} reference ranges OK")
            return 0

    values = parse_metric_inputs(dict(args.readings))
    report = build_results(values, layout=GaugeLayout(size=args.size))
    for warning in report.warnings:
        _logger.warning(warning)
    print(report.model_dump_json(indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
