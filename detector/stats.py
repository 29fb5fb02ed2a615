"""
PhishGuard – History Statistics
"""

from typing import Sequence
from models import AnalysisResult, HistoryStats, RiskLevel


def _round_half_up(value: float) -> int:
    # halves round up (12.5 -> 13); values here are never negative
    return int(value + 0.5)


def compute_stats(results: Sequence[AnalysisResult]) -> HistoryStats:
    total = len(results)
    phishing = sum(1 for r in results if r.is_phishing)
    distribution = {level: 0 for level in RiskLevel}
    for r in results:
        distribution[r.risk_level] += 1

    return HistoryStats(
        total_scans=total,
        phishing_detected=phishing,
        safe_urls=total - phishing,
        average_risk_score=_round_half_up(sum(r.risk_score for r in results) / total) if total else 0,
        detection_rate=_round_half_up(phishing / total * 100) if total else 0,
        risk_distribution=distribution,
    )
