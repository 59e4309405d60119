# uastats/catalog.py

import re
from dataclasses import dataclass, field
from typing import Tuple

Rule = Tuple[str, re.Pattern]

# Device class - vendor tokens are matched case-sensitively
MOBILE_PATTERN = re.compile(r"iPhone|iPad|iPod|Android|Windows Phone|BlackBerry|Opera Mini|IEMobile")

# Bot categories - every matching category is reported, declaration order decides the primary one
BOT_CATEGORY_PATTERNS: list[Rule] = [
    # AI/LLM agents
    ("ai_llm", re.compile(
        r"GPTBot|ChatGPT|Claude-Web|ClaudeBot|Google-Extended|CCBot|anthropic-ai|OpenAI|Perplexity"
        r"|AI2Bot|Meta-ExternalAgent|Bytespider|Claude|Bard",
        re.IGNORECASE,
    )),

    # Search engine crawlers
    ("search_engines", re.compile(
        r"Googlebot|bingbot|Baiduspider|YandexBot|DuckDuckBot|Yahoo! Slurp|Slurp|Sogou|Exabot|facebookexternalhit",
        re.IGNORECASE,
    )),

    # SEO/marketing crawlers
    ("seo_marketing", re.compile(
        r"AhrefsBot|SemrushBot|MJ12bot|DotBot|BLEXBot|SiteAuditBot|LinkpadBot|BrandVerity|DataForSeoBot",
        re.IGNORECASE,
    )),

    # Social media link previews
    ("social_media", re.compile(
        r"facebookexternalhit|Twitterbot|LinkedInBot|Pinterest|WhatsApp|Slack|Discord|Telegram"
        r"|SkypeUriPreview|Applebot|TelegramBot",
        re.IGNORECASE,
    )),

    # Security/research scanners
    ("security_research", re.compile(
        r"Shodan|Censys|ZoomBot|InternetMeasurement|ResearchScan|SecurityTracker|nuclei",
        re.IGNORECASE,
    )),

    # Uptime/monitoring probes
    ("monitoring", re.compile(
        r"UptimeRobot|Pingdom|StatusCake|Site24x7|GTmetrix|WebPageTest|Uptimebot|Monitor|CheckBot",
        re.IGNORECASE,
    )),

    # Archival crawlers
    ("archive", re.compile(
        r"archive\.org|Wayback|Internet Archive|ArchiveBot|ia_archiver|Wayback Machine",
        re.IGNORECASE,
    )),

    # Feed fetchers
    ("feed", re.compile(
        r"Feedfetcher-Google|FeedBurner|Feedly|RSS|FeedBot|PubSubHubbub|Superfeedr",
        re.IGNORECASE,
    )),

    # E-commerce/price bots
    ("ecommerce", re.compile(
        r"ShopBot|PriceBot|Shopping|Amazon|Shopify|WooCommerce|PriceSpider|Priceonomics",
        re.IGNORECASE,
    )),

    # Catch-all: generic bot tokens, headless browsers and HTTP client libraries
    ("generic", re.compile(
        r"bot|crawler|spider|scraper|PhantomJS|HeadlessChrome|Selenium|curl|wget|HTTPie|Postman"
        r"|python-requests|Go-http-client",
        re.IGNORECASE,
    )),
]

# Browsers - first match wins. Edge and Opera embed a Chrome token and
# every WebKit browser embeds a Safari token, so Safari stays after them.
BROWSER_PATTERNS: list[Rule] = [
    ("edge", re.compile(r"Edg/(\d+)")),
    ("opera", re.compile(r"OPR/(\d+)|Opera/(\d+)")),
    ("chrome", re.compile(r"Chrome/(\d+)")),
    ("firefox", re.compile(r"Firefox/(\d+)")),
    ("safari", re.compile(r"Safari/(\d+)(?!.*Chrome)")),
    ("ie", re.compile(r"MSIE (\d+)|Trident.*rv:(\d+)")),
]

# Operating systems - first match wins, most specific first.
# iOS identifiers carry a "like Mac OS X" token, Android ones a "Linux" token.
OS_PATTERNS: list[Rule] = [
    ("windows", re.compile(r"Windows NT (\d+\.\d+)")),
    ("ios", re.compile(r"OS (\d+[._]\d+) like Mac OS X")),
    ("macos", re.compile(r"Mac OS X (\d+[._]\d+)")),
    ("android", re.compile(r"Android (\d+\.?\d*)")),
    ("linux", re.compile(r"Linux")),
]


def _union(rules: Tuple[Rule, ...]) -> re.Pattern:
    return re.compile("|".join(f"(?:{pattern.pattern})" for _, pattern in rules), re.IGNORECASE)


@dataclass(frozen=True)
class PatternCatalog:
    """
    Immutable, ordered registry of matching rules.

    Rule sets are tuples of (name, pattern) pairs; their order is part of
    the contract and decides precedence wherever a first match wins.
    """

    mobile: re.Pattern = MOBILE_PATTERN
    bot_categories: Tuple[Rule, ...] = tuple(BOT_CATEGORY_PATTERNS)
    browsers: Tuple[Rule, ...] = tuple(BROWSER_PATTERNS)
    operating_systems: Tuple[Rule, ...] = tuple(OS_PATTERNS)

    # Derived once from bot_categories
    any_bot: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "any_bot", _union(self.bot_categories))

    @property
    def bot_category_names(self) -> list[str]:
        return [name for name, _ in self.bot_categories]

    @property
    def browser_names(self) -> list[str]:
        return [name for name, _ in self.browsers]

    @property
    def os_names(self) -> list[str]:
        return [name for name, _ in self.operating_systems]

    def matches_mobile(self, user_agent: str) -> bool:
        return self.mobile.search(user_agent) is not None

    def matches_any_bot(self, user_agent: str) -> bool:
        return self.any_bot.search(user_agent) is not None

    def matching_bot_categories(self, user_agent: str) -> list[str]:
        """All matching categories, in declaration order (full scan)"""
        return [name for name, pattern in self.bot_categories if pattern.search(user_agent)]

    @staticmethod
    def first_match(rules: Tuple[Rule, ...], user_agent: str) -> Tuple[str, re.Match] | None:
        """First (name, match) in rule order, or None"""
        for name, pattern in rules:
            match = pattern.search(user_agent)
            if match:
                return name, match
        return None


# Global singleton
catalog = PatternCatalog()
