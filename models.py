"""
PhishGuard – Pydantic Models
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other):
        if isinstance(other, RiskLevel):
            return self.rank < other.rank
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, RiskLevel):
            return self.rank <= other.rank
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, RiskLevel):
            return self.rank > other.rank
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, RiskLevel):
            return self.rank >= other.rank
        return NotImplemented


# Threat severities share the risk level scale.
Severity = RiskLevel


class _Record(BaseModel):
    # camelCase on the wire keeps stored records compatible with existing clients
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Threat(_Record):
    type: str = Field(..., description="Short category label, e.g. 'No SSL'")
    severity: Severity
    description: str = Field(..., description="What was detected")
    recommendation: str = Field(..., description="What the user should do about it")


class AnalysisResult(_Record):
    id: str
    url: str
    timestamp: datetime
    risk_score: int = Field(..., ge=0, le=100)
    risk_level: RiskLevel
    threats: tuple[Threat, ...] = ()
    domain: str
    is_phishing: bool
    analysis_time: int = Field(0, ge=0, description="Elapsed analysis time in milliseconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "0b6f2f7e-8a55-4d8c-9f3c-2a8e0f7b1c11",
                "url": "http://goog1e.com/verify-urgent-account-suspend-confirm",
                "timestamp": "2026-01-01T12:00:00Z",
                "riskScore": 100,
                "riskLevel": "CRITICAL",
                "threats": [
                    {
                        "type": "Domain Spoofing",
                        "severity": "CRITICAL",
                        "description": "Domain is similar to legitimate domain: google.com",
                        "recommendation": "This appears to be a spoofed domain. Do not enter credentials.",
                    }
                ],
                "domain": "goog1e.com",
                "isPhishing": True,
                "analysisTime": 1,
            }
        }
    )


class DomainInfo(_Record):
    """Reputation data for a domain, reserved for a lookup service.

    The detector does not populate this; it only fixes the shape a future
    reputation collaborator would return.
    """

    domain: str
    age: int = Field(-1, description="Domain age in days, -1 when unknown")
    registrar: str = ""
    is_legitimate: bool = False
    reputation: float = 0


class AnalyzeRequest(BaseModel):
    url: str = Field(..., description="The URL to analyze")


class HistoryStats(BaseModel):
    total_scans: int = 0
    phishing_detected: int = 0
    safe_urls: int = 0
    average_risk_score: int = 0
    detection_rate: int = Field(0, description="Percentage of scans flagged as phishing")
    risk_distribution: dict[RiskLevel, int] = {}


class SecurityTip(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str


class ClearHistoryResponse(BaseModel):
    cleared: int


class ServiceInfo(BaseModel):
    name: str
    version: str
    status: str
    endpoints: dict[str, str]
    description: Optional[str] = None
