"""
PhishGuard – Analysis Orchestrator
Parses a URL, runs every threat check, aggregates the findings and builds
the AnalysisResult. Malformed input never raises: it produces the
"Invalid URL" result instead.
"""

import asyncio
import logging
import time as _time
import uuid
from datetime import datetime, timezone
from typing import Optional

from config import INVALID_URL_SCORE
from models import AnalysisResult, RiskLevel, Severity, Threat
from detector.knowledge_base import KnowledgeBase, get_knowledge_base
from detector.risk_aggregator import aggregate
from detector.threat_checks import run_checks
from detector.url_parser import MalformedURLError, parse_url

logger = logging.getLogger(__name__)

UNKNOWN_DOMAIN = "unknown"

INVALID_URL_THREAT = Threat(
    type="Invalid URL",
    severity=Severity.HIGH,
    description="The provided URL is malformed or invalid",
    recommendation="Verify the URL format and try again",
)


def _elapsed_ms(started: float) -> int:
    return int((_time.perf_counter() - started) * 1000)


def analyze_url(url: str, knowledge_base: Optional[KnowledgeBase] = None) -> AnalysisResult:
    """
    Analyze a URL for phishing indicators.

    Deterministic in everything but id, timestamp and analysis_time: the
    same URL and knowledge base always yield the same score, level,
    threats and verdict.
    """
    started = _time.perf_counter()
    kb = knowledge_base or get_knowledge_base()
    result_id = str(uuid.uuid4())
    timestamp = datetime.now(timezone.utc)

    try:
        parsed = parse_url(url)
    except MalformedURLError as e:
        logger.info("Malformed URL %r: %s", url, e)
        return AnalysisResult(
            id=result_id,
            url=url,
            timestamp=timestamp,
            risk_score=INVALID_URL_SCORE,
            risk_level=RiskLevel.CRITICAL,
            threats=(INVALID_URL_THREAT,),
            domain=UNKNOWN_DOMAIN,
            is_phishing=True,
            analysis_time=_elapsed_ms(started),
        )

    threats = run_checks(parsed, url, kb)
    risk_score, risk_level, phishing = aggregate(threats)

    analysis_time = _elapsed_ms(started)
    logger.info(
        "[PERF] analyze %s: %d threats, score %d (%s) in %dms",
        parsed.host, len(threats), risk_score, risk_level.value, analysis_time,
    )

    return AnalysisResult(
        id=result_id,
        url=url,
        timestamp=timestamp,
        risk_score=risk_score,
        risk_level=risk_level,
        threats=tuple(threats),
        domain=parsed.host,
        is_phishing=phishing,
        analysis_time=analysis_time,
    )


async def analyze_url_async(url: str, knowledge_base: Optional[KnowledgeBase] = None) -> AnalysisResult:
    """Run analyze_url on a worker thread so the event loop stays responsive."""
    return await asyncio.to_thread(analyze_url, url, knowledge_base)
