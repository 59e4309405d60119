"""
Pytest configuration and shared fixtures for uastats tests
"""

import pytest
from typing import List

from uastats.schemas import RequestRecord

IPHONE_UA = "Mozilla/5.0 (iPhone; CPU iPhone OS 15_2 like Mac OS X) Safari/604.1"
GOOGLEBOT_UA = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"
CHROME_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) Chrome/96.0.4664.110"


@pytest.fixture
def sample_records() -> List[RequestRecord]:
    """Two iPhones, one Googlebot, one desktop Chrome"""
    return [
        RequestRecord(ip="192.168.1.100", path="/", user_agent=IPHONE_UA),
        RequestRecord(ip="192.168.1.101", path="/robots.txt", user_agent=GOOGLEBOT_UA),
        RequestRecord(ip="192.168.1.102", path="/about", user_agent=CHROME_UA),
        RequestRecord(ip="192.168.1.103", path="/contact", user_agent=IPHONE_UA),
    ]


@pytest.fixture
def sample_log_lines() -> List[str]:
    return [
        '192.168.1.100 - - [14/Sep/2024:09:30:15 +0000] "GET / HTTP/1.1" 200 1234 "-" '
        '"Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/96.0.4664.110"',
        '192.168.1.101 - - [14/Sep/2024:09:30:16 +0000] "GET /api/status HTTP/1.1" 200 456 "https://example.com/" '
        '"Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) Safari/605.1.15"',
        '66.249.74.123 - - [14/Sep/2024:09:30:18 +0000] "GET /robots.txt HTTP/1.1" 200 234 "-" '
        f'"{GOOGLEBOT_UA}"',
        '192.168.1.104 - - [14/Sep/2024:09:30:19 +0000] "GET /contact HTTP/1.1" 200 - "-" '
        f'"{IPHONE_UA}"',
        '192.168.1.105 - - [14/Sep/2024:09:30:20 +0000] "GET /feed HTTP/1.1" 304 0 "-" "-"',
        "invalid log line format",
    ]


@pytest.fixture
def log_file(tmp_path, sample_log_lines):
    """Access log on disk, with a blank line in the middle"""
    path = tmp_path / "access.log"
    lines = list(sample_log_lines)
    lines.insert(2, "")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
