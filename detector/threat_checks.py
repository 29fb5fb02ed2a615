"""
PhishGuard – Threat Checks
Five independent heuristic detectors. Each takes the parsed URL, the raw
URL string and the knowledge base, and returns its findings in order.
"""

import logging
import re

from config import LONG_URL_LENGTH, MAX_HOST_LABELS, MAX_HOST_DASHES, MIN_KEYWORD_MATCHES
from models import Severity, Threat
from detector.knowledge_base import KnowledgeBase
from detector.similarity import find_similar_domain
from detector.url_parser import ParsedURL

logger = logging.getLogger(__name__)

# Dotted quad right after the scheme, at the very start of the raw string.
IP_URL_PATTERN = re.compile(r"^https?://\d+\.\d+\.\d+\.\d+")
CYRILLIC_PATTERN = re.compile(r"[\u0400-\u04FF]")
GREEK_PATTERN = re.compile(r"[αβγδεζηθικλμνξοπρστυφχψω]", re.IGNORECASE)


def check_suspicious_patterns(parsed: ParsedURL, url: str, kb: KnowledgeBase) -> list[Threat]:
    """Shorteners, raw IP hosts, deep subdomains and mixed-script hosts."""
    threats = []
    host = parsed.host

    # --- URL Shortener ---
    if any(shortener in host for shortener in kb.url_shorteners):
        threats.append(Threat(
            type="URL Shortener",
            severity=Severity.MEDIUM,
            description="URL uses a link shortening service",
            recommendation="Be cautious with shortened URLs as they can hide the true destination",
        ))

    # --- IP Address ---
    if IP_URL_PATTERN.match(url):
        threats.append(Threat(
            type="IP Address",
            severity=Severity.HIGH,
            description="URL uses IP address instead of domain name",
            recommendation="Legitimate websites typically use domain names, not IP addresses",
        ))

    # --- Suspicious Subdomain ---
    if len(host.split(".")) > MAX_HOST_LABELS:
        threats.append(Threat(
            type="Suspicious Subdomain",
            severity=Severity.MEDIUM,
            description="URL contains multiple subdomains",
            recommendation="Verify this is the legitimate website you intended to visit",
        ))

    # --- Homograph Attack ---
    if CYRILLIC_PATTERN.search(host) or GREEK_PATTERN.search(host):
        threats.append(Threat(
            type="Homograph Attack",
            severity=Severity.HIGH,
            description="Domain contains non-Latin characters that may mimic legitimate sites",
            recommendation="Verify the domain spelling carefully",
        ))

    return threats


def check_domain_reputation(parsed: ParsedURL, url: str, kb: KnowledgeBase) -> list[Threat]:
    host = parsed.host
    if kb.is_legitimate(host):
        return []

    similar = find_similar_domain(
        host,
        kb.legitimate_domains,
        lower=kb.spoof_similarity_min,
        upper=kb.spoof_similarity_max,
    )
    if similar is None:
        return []

    logger.debug("Host %s resembles %s", host, similar)
    return [Threat(
        type="Domain Spoofing",
        severity=Severity.CRITICAL,
        description=f"Domain is similar to legitimate domain: {similar}",
        recommendation="This appears to be a spoofed domain. Do not enter credentials.",
    )]


def check_url_structure(parsed: ParsedURL, url: str, kb: KnowledgeBase) -> list[Threat]:
    """Overall length, redirect-style query parameters and dash-heavy hosts."""
    threats = []

    if parsed.length > LONG_URL_LENGTH:
        threats.append(Threat(
            type="Long URL",
            severity=Severity.MEDIUM,
            description="URL is unusually long",
            recommendation="Long URLs may be used to hide malicious content",
        ))

    if parsed.param_names.intersection(kb.redirect_params):
        threats.append(Threat(
            type="Redirect Parameter",
            severity=Severity.MEDIUM,
            description="URL contains redirect parameters",
            recommendation="Be cautious of URLs that redirect to other sites",
        ))

    if parsed.host.count("-") > MAX_HOST_DASHES:
        threats.append(Threat(
            type="Suspicious Characters",
            severity=Severity.MEDIUM,
            description="Domain contains excessive dashes",
            recommendation="Legitimate domains rarely use many dashes",
        ))

    return threats


def check_phishing_keywords(parsed: ParsedURL, url: str, kb: KnowledgeBase) -> list[Threat]:
    lower_url = url.lower()
    found = [kw for kw in kb.phishing_keywords if kw in lower_url]
    if len(found) <= MIN_KEYWORD_MATCHES:
        return []

    return [Threat(
        type="Phishing Keywords",
        severity=Severity.HIGH,
        description=f"Contains suspicious keywords: {', '.join(found)}",
        recommendation="Be extremely cautious with URLs containing urgency keywords",
    )]


def check_ssl_security(parsed: ParsedURL, url: str, kb: KnowledgeBase) -> list[Threat]:
    if parsed.scheme == "https":
        return []
    return [Threat(
        type="No SSL",
        severity=Severity.HIGH,
        description="Website does not use secure HTTPS protocol",
        recommendation="Never enter sensitive information on non-HTTPS sites",
    )]


# Run order is the order findings appear in the result.
THREAT_CHECKS = (
    check_suspicious_patterns,
    check_domain_reputation,
    check_url_structure,
    check_phishing_keywords,
    check_ssl_security,
)


def run_checks(parsed: ParsedURL, url: str, kb: KnowledgeBase) -> list[Threat]:
    threats = []
    for check in THREAT_CHECKS:
        found = check(parsed, url, kb)
        if found:
            logger.debug("%s: %s", check.__name__, [t.type for t in found])
        threats.extend(found)
    return threats
