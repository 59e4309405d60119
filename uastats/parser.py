# uastats/parser.py

import re
import logging
from datetime import datetime
from typing import Iterable, List, Optional

from uastats.schemas import RequestRecord

logger = logging.getLogger(__name__)

# Combined Log Format:
# IP ident user [timestamp] "method path protocol" status size "referrer" "user-agent"
LOG_PATTERN = re.compile(
    r'^(?P<ip>\S+) \S+ \S+ \[(?P<time>[^\]]+)\] "(?P<request>[^"]*)" (?P<status>\d+) (?P<size>\d+|-)'
    r' "(?P<referrer>[^"]*)" "(?P<user_agent>[^"]*)"'
)

TIME_FORMAT = "%d/%b/%Y:%H:%M:%S %z"


def _dash_to_none(value: str) -> Optional[str]:
    return None if value == "-" else value


def parse_log_line(line: str) -> Optional[RequestRecord]:
    """
    Parse one access log line.

    Returns None for lines that are not in combined log format; callers
    skip those.
    """
    match = LOG_PATTERN.match(line)
    if not match:
        return None

    # An unreadable timestamp does not invalidate the rest of the line
    ts = None
    try:
        ts = datetime.strptime(match.group("time"), TIME_FORMAT)
    except ValueError:
        logger.debug(f"Unparseable log timestamp: {match.group('time')}")

    # Missing request line parts stay None (e.g. "-" or a bare method)
    parts = match.group("request").split(" ")
    method, path, protocol = (parts + [None, None, None])[:3]

    size = match.group("size")

    return RequestRecord(
        ip=match.group("ip"),
        timestamp=ts,
        method=method or None,
        path=path,
        protocol=protocol,
        status=int(match.group("status")),
        size=0 if size == "-" else int(size),
        referrer=_dash_to_none(match.group("referrer")),
        user_agent=_dash_to_none(match.group("user_agent")),
    )


def parse_log_lines(lines: Iterable[str]) -> List[RequestRecord]:
    """Parse many lines, dropping blank and malformed ones"""
    records = []
    received = 0

    for line in lines:
        if not line.strip():
            continue
        received += 1

        record = parse_log_line(line)
        if record is not None:
            records.append(record)

    skipped = received - len(records)
    if skipped:
        logger.debug(f"Skipped {skipped} malformed log lines")

    logger.info(f"Successfully parsed {len(records)} of {received} log entries")
    return records
