from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from models import AnalysisResult, DomainInfo, RiskLevel, Threat


def test_risk_level_rank():
    assert [level.rank for level in RiskLevel] == [0, 1, 2, 3]
    assert RiskLevel("HIGH") is RiskLevel.HIGH


def test_accepts_camel_case_and_snake_case():
    threat = Threat(type="No SSL", severity="HIGH", description="d", recommendation="r")
    fields = dict(
        id="abc",
        url="http://x.com",
        timestamp="2026-01-01T12:00:00Z",
        threats=[threat.model_dump()],
        domain="x.com",
    )
    camel = AnalysisResult.model_validate(
        {**fields, "riskScore": 50, "riskLevel": "MEDIUM", "isPhishing": False, "analysisTime": 3}
    )
    snake = AnalysisResult(**fields, risk_score=50, risk_level="MEDIUM", is_phishing=False, analysis_time=3)
    assert camel == snake
    assert camel.timestamp == datetime(2026, 1, 1, 12, tzinfo=timezone.utc)
    assert camel.threats == (threat,)


def test_score_out_of_range_is_rejected():
    with pytest.raises(ValidationError):
        AnalysisResult(
            id="abc", url="u", timestamp=datetime.now(timezone.utc), risk_score=101,
            risk_level=RiskLevel.CRITICAL, domain="d", is_phishing=True,
        )


def test_domain_info_defaults():
    info = DomainInfo(domain="example.com")
    assert info.age == -1
    assert info.is_legitimate is False
    assert info.model_dump(by_alias=True)["isLegitimate"] is False
