# uastats/ingest.py

from pathlib import Path
from typing import List
from uastats.aggregator import aggregate
from uastats.config import settings
from uastats.errors import LogIngestionError
from uastats.parser import parse_log_lines
from uastats.schemas import AggregateStatistics
import logging

logger = logging.getLogger(__name__)


def read_log_lines(path) -> List[str]:
    """Read a whole access log and return its non-blank lines"""
    try:
        content = Path(path).read_text(encoding=settings.log_file_encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise LogIngestionError(path, str(e)) from e

    return [line for line in content.split("\n") if line.strip()]


def process_log_file(path) -> AggregateStatistics:
    """
    Read, parse and aggregate an access log file.

    Raises LogIngestionError if the file cannot be read.
    """
    lines = read_log_lines(path)
    logger.info(f"Processing {len(lines)} log entries from {path}")

    records = parse_log_lines(lines)
    return aggregate(records)
