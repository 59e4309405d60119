# uastats/cli.py

import argparse
import logging
import os
import sys

from uastats.classifier import analyze
from uastats.config import settings
from uastats.errors import LogIngestionError
from uastats.ingest import process_log_file
from uastats.report import generate_report

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="uastats", description="User agent classification and access log statistics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report = subparsers.add_parser("report", help="Analyze an access log file")
    report.add_argument("path", help="Path to an access log in combined log format.")
    report.add_argument("--json", action="store_true", help="Print statistics as JSON instead of a report.")

    classify = subparsers.add_parser("classify", help="Classify one user agent string")
    classify.add_argument(
        "user_agent",
        nargs="?",
        default=None,
        help="User agent to classify (defaults to $HTTP_USER_AGENT).",
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.command == "classify":
        user_agent = args.user_agent
        if user_agent is None:
            user_agent = os.environ.get("HTTP_USER_AGENT", "")
        print(analyze(user_agent).model_dump_json(indent=2))
        return 0

    try:
        stats = process_log_file(args.path)
    except LogIngestionError as e:
        logger.error(f"Log ingestion failed for {e.path}: {e.__cause__}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(stats.model_dump_json(indent=2))
    else:
        print(generate_report(stats))
    return 0


def cli():
    sys.exit(main())
