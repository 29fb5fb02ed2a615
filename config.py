"""
PhishGuard – Configuration
Loads service settings from environment variables and holds the static
detection configuration (known domains, keywords, weights, thresholds).
"""

import os
from dotenv import load_dotenv

load_dotenv()

# --- Service Settings ---
HISTORY_FILE = os.getenv("PHISHGUARD_HISTORY_FILE", "phishing-analyses.json")
HISTORY_LIMIT = int(os.getenv("PHISHGUARD_HISTORY_LIMIT", "100"))
HISTORY_STORAGE_KEY = "phishing-analyses"
LOG_LEVEL = os.getenv("PHISHGUARD_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("PHISHGUARD_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# --- Risk Score Weights ---
SEVERITY_WEIGHTS = {
    "LOW": 10,
    "MEDIUM": 25,
    "HIGH": 50,
    "CRITICAL": 100,
}
MAX_RISK_SCORE = 100

# --- Thresholds ---
# Evaluated high to low, first match wins; anything below is LOW.
RISK_LEVEL_THRESHOLDS = [
    (90, "CRITICAL"),
    (70, "HIGH"),
    (40, "MEDIUM"),
]
PHISHING_THRESHOLD = 70      # score >= 70 → phishing
INVALID_URL_SCORE = 90       # forced score for malformed input

# --- Heuristic Config ---
SPOOF_SIMILARITY_MIN = 0.7   # exclusive
SPOOF_SIMILARITY_MAX = 1.0   # exclusive, 1.0 is an exact match
LONG_URL_LENGTH = 200
MAX_HOST_LABELS = 3
MAX_HOST_DASHES = 3
MIN_KEYWORD_MATCHES = 2      # more than this many keywords → finding

URL_SHORTENERS = [
    "bit.ly", "tinyurl.com", "short.link", "ow.ly", "t.co",
]

LEGITIMATE_DOMAINS = [
    "google.com", "microsoft.com", "apple.com", "amazon.com",
    "facebook.com", "twitter.com", "instagram.com", "linkedin.com",
    "github.com", "stackoverflow.com", "wikipedia.org",
]

PHISHING_KEYWORDS = [
    "verify", "suspend", "urgent", "immediate", "confirm", "update",
    "security", "alert", "warning", "action", "required", "click",
    "limited", "expires", "temporary", "restore", "validate",
]

REDIRECT_PARAMS = [
    "redirect", "goto", "next", "url", "link", "target",
]
