# uastats/schemas.py

from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Literal
from datetime import datetime


class BrowserInfo(BaseModel):
    name: str = "unknown"
    version: Optional[str] = None


class OSInfo(BaseModel):
    name: str = "unknown"
    version: Optional[str] = None


class BotDetection(BaseModel):
    is_bot: bool
    categories: List[str] = Field(default_factory=list)
    primary_category: Optional[str] = None


class Classification(BaseModel):
    """Full analysis of a single user agent string"""

    user_agent: str
    is_mobile: bool
    is_bot: bool
    bot_category: Optional[str] = None  # Primary category
    bot_categories: List[str] = Field(default_factory=list)
    browser: BrowserInfo
    os: OSInfo

    # Capture time of the analysis (informational)
    timestamp: datetime


class RequestRecord(BaseModel):
    """One parsed access log line"""

    ip: str
    timestamp: Optional[datetime] = None

    # Request line
    method: Optional[str] = None
    path: Optional[str] = None
    protocol: Optional[str] = None

    status: int = 0
    size: int = 0

    # None when the log carries "-"
    referrer: Optional[str] = None
    user_agent: Optional[str] = None


class RecordDetail(BaseModel):
    ip: str
    timestamp: Optional[datetime] = None
    path: Optional[str] = None
    user_agent: str
    analysis: Classification


class AggregateStatistics(BaseModel):
    total: int = 0
    mobile: int = 0
    bots: int = 0
    unique_user_agents: int = 0

    # Distributions (insertion order = first seen)
    bot_categories: Dict[str, int] = Field(default_factory=dict)
    browsers: Dict[str, int] = Field(default_factory=dict)
    operating_systems: Dict[str, int] = Field(default_factory=dict)
    top_user_agents: Dict[str, int] = Field(default_factory=dict)

    detailed_analysis: List[RecordDetail] = Field(default_factory=list)

    # Two decimal places, e.g. "25.00"
    mobile_percentage: str = "0.00"
    bot_percentage: str = "0.00"


class AnalyzeRequest(BaseModel):
    user_agent: Optional[str] = None

    class Config:
        extra = "ignore"


class LogAnalysisResponse(BaseModel):
    status: Literal["ok", "partial"]
    received: int
    parsed: int
    skipped: int = 0
    statistics: AggregateStatistics


class CatalogResponse(BaseModel):
    bot_categories: List[str]
    browsers: List[str]
    operating_systems: List[str]
