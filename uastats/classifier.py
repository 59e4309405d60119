# uastats/classifier.py

import re
from datetime import datetime, timezone
from typing import Optional, Tuple

from uastats.catalog import catalog, Rule
from uastats.config import settings
from uastats.schemas import BotDetection, BrowserInfo, Classification, OSInfo


def is_mobile(user_agent: Optional[str]) -> bool:
    """True if the user agent carries a mobile device token"""
    return catalog.matches_mobile(user_agent or "")


def is_bot(user_agent: Optional[str]) -> bool:
    """True if any bot category matches"""
    return catalog.matches_any_bot(user_agent or "")


def _first_version(match: re.Match) -> Optional[str]:
    # Alternation patterns put the version in whichever group participated
    for group in match.groups():
        if group:
            return group
    return None


def _detect(rules: Tuple[Rule, ...], user_agent: Optional[str]) -> Tuple[str, Optional[str]]:
    found = catalog.first_match(rules, user_agent or "")
    if found is None:
        return "unknown", None
    name, match = found
    return name, _first_version(match)


def detect_browser(user_agent: Optional[str]) -> BrowserInfo:
    """
    Detect browser name and major version.

    Rules are tried in catalog order - first match wins.
    Returns name "unknown" with no version if nothing matches.
    """
    name, version = _detect(catalog.browsers, user_agent)
    return BrowserInfo(name=name, version=version)


def detect_os(user_agent: Optional[str]) -> OSInfo:
    """
    Detect operating system name and version.

    Same first-match-wins rule as detect_browser, over the OS rule set.
    """
    name, version = _detect(catalog.operating_systems, user_agent)
    return OSInfo(name=name, version=version)


def detect_bot_category(user_agent: Optional[str]) -> BotDetection:
    """
    Detect every bot category the user agent belongs to.

    All categories are checked (no early exit) so a user agent can belong
    to several. The primary category is the first one in catalog order.
    """
    categories = catalog.matching_bot_categories(user_agent or "")

    return BotDetection(
        is_bot=len(categories) > 0,
        categories=categories,
        primary_category=categories[0] if categories else None,
    )


def classify(user_agent: str) -> dict:
    """Timestamp-free classification fields for a user agent"""
    bot_info = detect_bot_category(user_agent)

    return {
        "user_agent": user_agent,
        "is_mobile": is_mobile(user_agent),
        "is_bot": bot_info.is_bot,
        "bot_category": bot_info.primary_category,
        "bot_categories": bot_info.categories,
        "browser": detect_browser(user_agent),
        "os": detect_os(user_agent),
    }


# Repeated user agents skip the regex work
KNOWN_USER_AGENTS: dict[str, dict] = {}


def classify_cached(user_agent: str) -> dict:
    """
    Classify with caching for repeated user agents.
    """
    if user_agent in KNOWN_USER_AGENTS:
        return KNOWN_USER_AGENTS[user_agent]

    fields = classify(user_agent)

    # Cache if we haven't exceeded limit (prevent memory issues)
    if len(KNOWN_USER_AGENTS) < settings.classification_cache_size:
        KNOWN_USER_AGENTS[user_agent] = fields

    return fields


def analyze(user_agent: Optional[str]) -> Classification:
    """
    Analyze a user agent string.

    Absent user agents are analyzed as the empty string. Everything except
    the timestamp depends only on the string and the pattern catalog.
    """
    fields = classify_cached(user_agent or "")

    # Copy so that callers never share list/model instances with the cache
    return Classification(
        **{
            **fields,
            "bot_categories": list(fields["bot_categories"]),
            "browser": fields["browser"].model_copy(),
            "os": fields["os"].model_copy(),
        },
        timestamp=datetime.now(timezone.utc),
    )
