"""
PhishGuard – Knowledge Base
Read-only detection configuration shared by every threat check.
"""

from dataclasses import dataclass
from functools import lru_cache
from config import (
    URL_SHORTENERS,
    LEGITIMATE_DOMAINS,
    PHISHING_KEYWORDS,
    REDIRECT_PARAMS,
    SPOOF_SIMILARITY_MIN,
    SPOOF_SIMILARITY_MAX,
)


@dataclass(frozen=True)
class KnowledgeBase:
    # Tuples, not sets: checks report the first match in configured order.
    url_shorteners: tuple[str, ...]
    legitimate_domains: tuple[str, ...]
    phishing_keywords: tuple[str, ...]
    redirect_params: tuple[str, ...] = tuple(REDIRECT_PARAMS)
    spoof_similarity_min: float = SPOOF_SIMILARITY_MIN
    spoof_similarity_max: float = SPOOF_SIMILARITY_MAX

    def is_legitimate(self, host: str) -> bool:
        """Exact match or a subdomain of a known domain (dot boundary, so notgoogle.com is not google.com)."""
        return any(
            host == domain or host.endswith("." + domain)
            for domain in self.legitimate_domains
        )


@lru_cache(maxsize=None)
def get_knowledge_base() -> KnowledgeBase:
    """Build the process-wide knowledge base from config (once)."""
    return KnowledgeBase(
        url_shorteners=tuple(s.lower() for s in URL_SHORTENERS),
        legitimate_domains=tuple(d.lower() for d in LEGITIMATE_DOMAINS),
        phishing_keywords=tuple(k.lower() for k in PHISHING_KEYWORDS),
    )
