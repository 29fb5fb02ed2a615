"""
PhishGuard – Domain Similarity Scorer
Length-normalized Levenshtein similarity used for spoofing detection.
"""

from typing import Iterable, Optional
from Levenshtein import distance as levenshtein_distance
from config import SPOOF_SIMILARITY_MIN, SPOOF_SIMILARITY_MAX


def similarity(first: str, second: str) -> float:
    """
    Similarity in [0, 1]: (longest length - edit distance) / longest length.
    Two empty strings are identical (1.0). Comparison is case-sensitive;
    callers lower-case hostnames beforehand.
    """
    longest = max(len(first), len(second))
    if longest == 0:
        return 1.0
    return (longest - levenshtein_distance(first, second)) / longest


def find_similar_domain(
    host: str,
    domains: Iterable[str],
    lower: float = SPOOF_SIMILARITY_MIN,
    upper: float = SPOOF_SIMILARITY_MAX,
) -> Optional[str]:
    """Return the first domain whose similarity to host lies strictly between lower and upper."""
    for domain in domains:
        if lower < similarity(host, domain) < upper:
            return domain
    return None
