# uastats/report.py

from typing import Dict, List, Tuple
from uastats.config import settings
from uastats.schemas import AggregateStatistics


def ranked(counts: Dict[str, int], limit: int | None = None) -> List[Tuple[str, int]]:
    """Entries by descending count, ties in insertion order"""
    entries = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return entries if limit is None else entries[:limit]


def _lines(entries: List[str]) -> str:
    return "\n".join(entries)


def generate_report(stats: AggregateStatistics, limit: int | None = None) -> str:
    """Render statistics as a markdown report"""
    if limit is None:
        limit = settings.report_distribution_limit

    top_user_agents = _lines([f"- {count}x: {ua}" for ua, count in stats.top_user_agents.items()])
    browsers = _lines([f"- {name}: {count}" for name, count in ranked(stats.browsers, limit)])
    bot_categories = _lines([
        f"- {category.replace('_', ' ')}: {count}"
        for category, count in ranked(stats.bot_categories)
    ])
    operating_systems = _lines([f"- {name}: {count}" for name, count in ranked(stats.operating_systems, limit)])

    report = f"""
# Access Log Analysis Report

## Summary
- Total Requests: {stats.total}
- Unique User Agents: {stats.unique_user_agents}
- Mobile Requests: {stats.mobile} ({stats.mobile_percentage}%)
- Bot Requests: {stats.bots} ({stats.bot_percentage}%)

## Top User Agents
{top_user_agents}

## Browser Distribution
{browsers}

## Bot Categories
{bot_categories}

## Operating System Distribution
{operating_systems}
"""

    return report.strip()
