"""
PhishGuard – Risk Aggregator
Turns a list of findings into a bounded score, a risk level and a verdict.
"""

from typing import Iterable
from config import (
    SEVERITY_WEIGHTS,
    MAX_RISK_SCORE,
    RISK_LEVEL_THRESHOLDS,
    PHISHING_THRESHOLD,
)
from models import RiskLevel, Threat


def calculate_risk_score(threats: Iterable[Threat]) -> int:
    """Sum of severity weights, capped at 100."""
    total = sum(SEVERITY_WEIGHTS[threat.severity.value] for threat in threats)
    return min(total, MAX_RISK_SCORE)


def get_risk_level(score: int) -> RiskLevel:
    for minimum, level in RISK_LEVEL_THRESHOLDS:
        if score >= minimum:
            return RiskLevel(level)
    return RiskLevel.LOW


def is_phishing(score: int) -> bool:
    # HIGH and CRITICAL both count as phishing
    return score >= PHISHING_THRESHOLD


def aggregate(threats: Iterable[Threat]) -> tuple[int, RiskLevel, bool]:
    score = calculate_risk_score(threats)
    return score, get_risk_level(score), is_phishing(score)
