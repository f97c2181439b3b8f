"""
Stage sequencing: fallbacks keep the pipeline going, persistence is best-effort.
"""
import pytest

from app.schemas.financial import FinancialPlanRequest, FullAssessmentRequest
from app.schemas.profile import StatisticalData, WorkShift
from app.schemas.risk import RiskAnalysisRequest, RiskLevel
from app.services.narrative import (
    FINANCIAL_NARRATIVE_FALLBACK,
    PREVENTION_STEPS_FALLBACK,
    RISK_NARRATIVE_FALLBACK,
    EnrichmentConfig,
    NarrativeEnricher,
)
from app.services.assessment_store import AssessmentStore
from app.services.orchestrator import AssessmentOrchestrator
from tests.factories import make_environment, make_profile


class FakeEnvironment:
    def __init__(self, aqi: int = 210):
        self.aqi = aqi
        self.cities = []

    async def lookup(self, city: str):
        self.cities.append(city)
        return make_environment(aqi=self.aqi, city=city)


class RecordingStore:
    def __init__(self):
        self.saved = []

    async def save(self, user_id, profile, risk, financial) -> str:
        self.saved.append((user_id, profile, risk, financial))
        return "rec-1"


class BrokenStore:
    async def save(self, user_id, profile, risk, financial) -> str:
        raise ConnectionError("database unavailable")


class EchoGenerator:
    async def generate(self, prompt: str) -> str:
        return "1. Wear a mask outdoors\n2. Monitor blood sugar"


@pytest.fixture
def orchestrator():
    return AssessmentOrchestrator(
        NarrativeEnricher(EnrichmentConfig(api_key="")),
        FakeEnvironment(),
        RecordingStore(),
    )


def _risky_profile():
    return make_profile(
        age=45,
        occupation="Construction Worker",
        city="Delhi",
        health_condition="Diabetes",
        work_shift=WorkShift.NIGHT,
    )


class TestRiskStage:
    async def test_fallback_narratives(self, orchestrator):
        response = await orchestrator.analyze_risk(RiskAnalysisRequest(profile=_risky_profile()))

        assert response.narrative == RISK_NARRATIVE_FALLBACK
        assert response.narrative_is_fallback is True
        assert [s.action for s in response.prevention_steps] == list(PREVENTION_STEPS_FALLBACK)

    async def test_fetches_environment_when_missing(self, orchestrator):
        response = await orchestrator.analyze_risk(RiskAnalysisRequest(profile=_risky_profile()))
        assert orchestrator.environment.cities == ["Delhi"]
        assert response.environmental_data.aqi == 210

    async def test_supplied_environment_used_as_is(self, orchestrator):
        request = RiskAnalysisRequest(profile=_risky_profile(), environmental=make_environment(aqi=30))
        response = await orchestrator.analyze_risk(request)
        assert orchestrator.environment.cities == []
        assert response.environmental_data.aqi == 30

    async def test_delhi_scenario(self, orchestrator):
        # Delhi: crime 1586.1/100k → capped crime term 10, health index 45 → infrastructure factor
        response = await orchestrator.analyze_risk(RiskAnalysisRequest(profile=_risky_profile()))
        assert response.risk_score == 92
        assert response.risk_level == RiskLevel.CRITICAL
        assert response.statistical_data.city_health_index == 45
        assert response.statistical_data.death_rate == 18.5
        categories = [f.category for f in response.risk_factors]
        assert "City Health Infrastructure" in categories
        assert "Environmental Stress" in categories

    async def test_statistical_override(self, orchestrator):
        request = RiskAnalysisRequest(
            profile=_risky_profile(),
            statistical=StatisticalData(city_health_index=90, death_rate=1.0),
        )
        response = await orchestrator.analyze_risk(request)
        assert "City Health Infrastructure" not in [f.category for f in response.risk_factors]

    async def test_generated_steps(self):
        orchestrator = AssessmentOrchestrator(
            NarrativeEnricher(EnrichmentConfig(api_key="k"), generator=EchoGenerator()),
            FakeEnvironment(),
        )
        response = await orchestrator.analyze_risk(RiskAnalysisRequest(profile=_risky_profile()))
        assert [s.action for s in response.prevention_steps] == [
            "Wear a mask outdoors", "Monitor blood sugar",
        ]
        assert response.narrative_is_fallback is False


class TestFinancialStage:
    async def test_persists_and_returns(self, orchestrator):
        profile = _risky_profile()
        risk = await orchestrator.analyze_risk(RiskAnalysisRequest(profile=profile))
        response = await orchestrator.plan_finances(
            FinancialPlanRequest(risk_result=risk, profile=profile),
            user_id="user-42",
        )

        assert response.narrative == FINANCIAL_NARRATIVE_FALLBACK
        assert response.insurance_plan.name == "Premium Health Shield"
        assert response.affordability is None
        assert response.auto_pay_setup.available is False

        [(user_id, saved_profile, saved_risk, saved_financial)] = orchestrator.store.saved
        assert user_id == "user-42"
        assert saved_profile == profile
        assert saved_financial == response

    async def test_no_user_no_persist(self, orchestrator):
        profile = _risky_profile()
        risk = await orchestrator.analyze_risk(RiskAnalysisRequest(profile=profile))
        await orchestrator.plan_finances(FinancialPlanRequest(risk_result=risk, profile=profile))
        assert orchestrator.store.saved == []

    async def test_persistence_failure_swallowed(self):
        orchestrator = AssessmentOrchestrator(
            NarrativeEnricher(EnrichmentConfig(api_key="")),
            FakeEnvironment(),
            BrokenStore(),
        )
        profile = _risky_profile()
        risk = await orchestrator.analyze_risk(RiskAnalysisRequest(profile=profile))
        response = await orchestrator.plan_finances(
            FinancialPlanRequest(risk_result=risk, profile=profile),
            user_id="user-42",
        )
        assert response.monthly_savings > 0

    async def test_affordability_when_income_given(self, orchestrator):
        profile = _risky_profile()
        risk = await orchestrator.analyze_risk(RiskAnalysisRequest(profile=profile))
        response = await orchestrator.plan_finances(
            FinancialPlanRequest(risk_result=risk, profile=profile, monthly_income=150_000),
        )
        assert response.affordability is not None
        assert 0 <= response.affordability.affordability_score <= 100


class TestFullAssessment:
    async def test_runs_both_stages(self, orchestrator):
        response = await orchestrator.run_full(
            FullAssessmentRequest(profile=_risky_profile()),
            user_id="user-7",
        )
        assert response.risk.risk_score == 92
        assert response.financial.insurance_plan.recommended is True
        assert len(orchestrator.store.saved) == 1


class FakeSession:
    def __init__(self):
        self.added = []
        self.commits = 0

    def add(self, record):
        self.added.append(record)

    async def commit(self):
        self.commits += 1


class TestAssessmentStore:
    async def test_save_serialises_snapshots(self, orchestrator):
        profile = _risky_profile()
        risk = await orchestrator.analyze_risk(RiskAnalysisRequest(profile=profile))
        financial = await orchestrator.plan_finances(FinancialPlanRequest(risk_result=risk, profile=profile))

        session = FakeSession()
        record_id = await AssessmentStore(session).save("user-42", profile, risk, financial)

        [record] = session.added
        assert session.commits == 1
        assert record.id == record_id
        assert record.user_id == "user-42"
        assert record.profile_data["work_shift"] == "Night Shift"
        assert record.risk_result["risk_score"] == 92
        assert isinstance(record.financial_result["timestamp"], str)
