"""
PhishGuard – Security Tips
Static advice served alongside analysis results.
"""

from models import SecurityTip

SECURITY_TIPS = (
    SecurityTip(
        title="Verify the URL",
        description="Always check the complete URL before clicking. Look for misspellings or unusual characters.",
    ),
    SecurityTip(
        title="Check for HTTPS",
        description="Legitimate websites use HTTPS (look for the lock icon). Never enter sensitive data on HTTP sites.",
    ),
    SecurityTip(
        title="Beware of Urgency",
        description="Phishing attempts often create false urgency. Take time to verify suspicious messages.",
    ),
    SecurityTip(
        title="Use Bookmarks",
        description="For important sites, use bookmarks instead of clicking links in emails or messages.",
    ),
    SecurityTip(
        title="Enable 2FA",
        description="Two-factor authentication adds an extra layer of security even if passwords are compromised.",
    ),
    SecurityTip(
        title="Keep Software Updated",
        description="Regular updates patch security vulnerabilities that could be exploited by malicious sites.",
    ),
)


def get_security_tips() -> list[SecurityTip]:
    return list(SECURITY_TIPS)
