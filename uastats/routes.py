# uastats/routes.py

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse
from typing import List
from uastats.aggregator import aggregate
from uastats.catalog import catalog
from uastats.classifier import analyze
from uastats.parser import parse_log_lines
from uastats.report import generate_report
from uastats.schemas import AnalyzeRequest, CatalogResponse, Classification, LogAnalysisResponse
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


async def read_log_lines(request: Request) -> List[str]:
    """
    Extract log lines from the request body.
    Accepts a list of lines, {"lines": [...]}, or one string with newlines.
    """
    try:
        body = await request.json()
    except ValueError:
        logger.warning("Rejected log payload: body is not JSON")
        raise HTTPException(status_code=400, detail="Body must be JSON")

    # Normalize to list
    if isinstance(body, dict):
        body = body.get("lines")
    if isinstance(body, str):
        body = body.split("\n")

    if not isinstance(body, list) or not all(isinstance(line, str) for line in body):
        logger.warning(f"Rejected log payload of type {type(body).__name__}")
        raise HTTPException(status_code=400, detail="Expected a list of log lines")

    return [line for line in body if line.strip()]


@router.post("/api/analyze", response_model=Classification)
async def analyze_user_agent(payload: AnalyzeRequest) -> Classification:
    """Classify a single user agent string"""
    return analyze(payload.user_agent)


@router.post("/api/logs", response_model=LogAnalysisResponse)
async def analyze_logs(request: Request) -> LogAnalysisResponse:
    """
    Parse access log lines and aggregate user agent statistics.
    Malformed lines are skipped and counted.
    """
    lines = await read_log_lines(request)
    records = parse_log_lines(lines)
    skipped = len(lines) - len(records)

    return LogAnalysisResponse(
        status="ok" if skipped == 0 else "partial",
        received=len(lines),
        parsed=len(records),
        skipped=skipped,
        statistics=aggregate(records),
    )


@router.post("/api/logs/report", response_class=PlainTextResponse)
async def log_report(request: Request) -> str:
    """Same input as /api/logs, rendered as a markdown report"""
    lines = await read_log_lines(request)
    return generate_report(aggregate(parse_log_lines(lines)))


@router.get("/api/catalog", response_model=CatalogResponse)
async def pattern_catalog() -> CatalogResponse:
    """Declared rule names, in precedence order"""
    return CatalogResponse(
        bot_categories=catalog.bot_category_names,
        browsers=catalog.browser_names,
        operating_systems=catalog.os_names,
    )


@router.get("/health")
async def health_check():
    """Simple health check endpoint"""
    return {"status": "healthy"}
