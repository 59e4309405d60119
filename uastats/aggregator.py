# uastats/aggregator.py

from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Set
from uastats.classifier import analyze
from uastats.config import settings
from uastats.schemas import AggregateStatistics, RecordDetail, RequestRecord
import logging

logger = logging.getLogger(__name__)


def format_percentage(count: int, total: int) -> str:
    """count/total as a percentage with two decimals. Empty input gives "0.00"."""
    if not total:
        return "0.00"
    # Half-way values round up, e.g. 1/32 -> "3.13"
    percentage = Decimal(count * 100) / Decimal(total)
    return str(percentage.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def version_key(name: str, version: str | None) -> str:
    return f"{name} {version or 'unknown'}"


class UserAgentAggregator:
    """
    Running user agent statistics for one sequence of request records.

    Not shared between runs - every aggregate() call creates its own.
    """

    def __init__(self, top_n: int | None = None):
        self.top_n = top_n if top_n is not None else settings.top_user_agents

        self.total: int = 0
        self.mobile: int = 0
        self.bots: int = 0
        self.unique_user_agents: Set[str] = set()

        # Counters keep first-seen order, which breaks ties in rankings
        self.user_agent_counts: Counter = Counter()
        self.bot_categories: Dict[str, int] = {}
        self.browsers: Dict[str, int] = {}
        self.operating_systems: Dict[str, int] = {}

        self.details: List[RecordDetail] = []

    def add(self, record: RequestRecord) -> None:
        """Fold one record into the running stats"""
        self.total += 1

        # Records without a user agent only count towards the total
        user_agent = record.user_agent
        if user_agent is None:
            return

        self.unique_user_agents.add(user_agent)
        self.user_agent_counts[user_agent] += 1

        analysis = analyze(user_agent)

        if analysis.is_mobile:
            self.mobile += 1

        if analysis.is_bot:
            self.bots += 1
            if analysis.bot_category:
                _increment(self.bot_categories, analysis.bot_category)

        _increment(self.browsers, version_key(analysis.browser.name, analysis.browser.version))
        _increment(self.operating_systems, version_key(analysis.os.name, analysis.os.version))

        self.details.append(RecordDetail(
            ip=record.ip,
            timestamp=record.timestamp,
            path=record.path,
            user_agent=user_agent,
            analysis=analysis,
        ))

    def finalize(self) -> AggregateStatistics:
        """Build the statistics snapshot"""
        if self.total == 0:
            logger.warning("No records to aggregate - reporting 0.00% mobile and bot traffic")

        # most_common() orders equal counts by first insertion
        top = dict(self.user_agent_counts.most_common(self.top_n))

        stats = AggregateStatistics(
            total=self.total,
            mobile=self.mobile,
            bots=self.bots,
            unique_user_agents=len(self.unique_user_agents),
            bot_categories=dict(self.bot_categories),
            browsers=dict(self.browsers),
            operating_systems=dict(self.operating_systems),
            top_user_agents=top,
            detailed_analysis=list(self.details),
            mobile_percentage=format_percentage(self.mobile, self.total),
            bot_percentage=format_percentage(self.bots, self.total),
        )

        logger.debug(
            f"Aggregated {stats.total} records: {stats.mobile} mobile, {stats.bots} bots, "
            f"{stats.unique_user_agents} unique user agents"
        )
        return stats


def _increment(counts: Dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


def aggregate(records: Iterable[RequestRecord], top_n: int | None = None) -> AggregateStatistics:
    """
    Analyze user agents across request records.

    Every record counts towards the total; only records carrying a user
    agent contribute to the breakdowns.
    """
    aggregator = UserAgentAggregator(top_n=top_n)
    for record in records:
        aggregator.add(record)
    return aggregator.finalize()
