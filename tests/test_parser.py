"""
Unit tests for access log line parsing
"""

from datetime import datetime, timedelta, timezone

import pytest

from uastats.parser import parse_log_line, parse_log_lines


class TestParseLogLine:

    def test_standard_line(self):
        line = (
            '192.168.1.100 - - [14/Sep/2024:09:30:15 +0000] "GET / HTTP/1.1" 200 1234 "-" '
            '"Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"'
        )
        record = parse_log_line(line)

        assert record.ip == "192.168.1.100"
        assert record.method == "GET"
        assert record.path == "/"
        assert record.protocol == "HTTP/1.1"
        assert record.status == 200
        assert record.size == 1234
        assert record.referrer is None
        assert record.user_agent == "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

    def test_line_with_referrer(self):
        line = (
            '192.168.1.101 - - [14/Sep/2024:09:30:16 +0000] "GET /api/status HTTP/1.1" 200 456 '
            '"https://example.com/" "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) Safari/605.1.15"'
        )
        record = parse_log_line(line)

        assert record.ip == "192.168.1.101"
        assert record.path == "/api/status"
        assert record.referrer == "https://example.com/"

    def test_bot_line(self):
        line = (
            '66.249.74.123 - - [14/Sep/2024:09:30:18 +0000] "GET /robots.txt HTTP/1.1" 200 234 "-" '
            '"Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"'
        )
        record = parse_log_line(line)

        assert record.ip == "66.249.74.123"
        assert record.size == 234
        assert record.referrer is None
        assert record.user_agent == "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"

    def test_timestamp_keeps_offset(self):
        line = '10.0.0.1 - - [14/Sep/2024:09:30:15 +0200] "GET / HTTP/1.1" 200 1 "-" "curl/8.4.0"'
        record = parse_log_line(line)

        assert record.timestamp == datetime(2024, 9, 14, 9, 30, 15, tzinfo=timezone(timedelta(hours=2)))
        assert record.timestamp == datetime(2024, 9, 14, 7, 30, 15, tzinfo=timezone.utc)

    @pytest.mark.parametrize("stamp", ["14/Sep/2024:09:30:15", "not a date"])
    def test_unreadable_timestamp_keeps_record(self, stamp):
        line = f'10.0.0.1 - - [{stamp}] "GET / HTTP/1.1" 200 1 "-" "Googlebot/2.1"'
        record = parse_log_line(line)

        assert record is not None
        assert record.timestamp is None
        assert record.status == 200
        assert record.user_agent == "Googlebot/2.1"

    def test_size_as_dash(self):
        line = '192.168.1.100 - - [14/Sep/2024:09:30:15 +0000] "GET / HTTP/1.1" 200 - "-" "Mozilla/5.0"'
        assert parse_log_line(line).size == 0

    def test_user_agent_as_dash_is_absent(self):
        line = '192.168.1.100 - - [14/Sep/2024:09:30:15 +0000] "GET / HTTP/1.1" 200 10 "-" "-"'
        assert parse_log_line(line).user_agent is None

    def test_empty_user_agent_stays_empty(self):
        line = '192.168.1.100 - - [14/Sep/2024:09:30:15 +0000] "GET / HTTP/1.1" 200 10 "-" ""'
        assert parse_log_line(line).user_agent == ""

    def test_incomplete_request_line(self):
        line = '192.168.1.100 - - [14/Sep/2024:09:30:15 +0000] "-" 400 0 "-" "-"'
        record = parse_log_line(line)

        assert record.method == "-"
        assert record.path is None
        assert record.protocol is None
        assert record.status == 400

    @pytest.mark.parametrize("line", [
        "invalid log line format",
        "",
        '192.168.1.100 - - [14/Sep/2024:09:30:15 +0000] "GET / HTTP/1.1" 200 1234',
        '192.168.1.100 - - [14/Sep/2024:09:30:15 +0000] "GET / HTTP/1.1" OK 1234 "-" "Mozilla/5.0"',
    ])
    def test_malformed_lines_return_none(self, line):
        assert parse_log_line(line) is None


class TestParseLogLines:

    def test_skips_blank_and_malformed_lines(self, sample_log_lines):
        records = parse_log_lines(sample_log_lines + ["", "   "])

        assert len(records) == 5
        assert [r.ip for r in records][:3] == ["192.168.1.100", "192.168.1.101", "66.249.74.123"]

    def test_empty_input(self):
        assert parse_log_lines([]) == []
