"""
Integration tests for the full scoring engine and the planning engine.
Tests end-to-end scoring with realistic CareFund scenarios.
"""
from app.data.occupation_hazards import OCCUPATION_HAZARDS
from app.planning.engine import recommend
from app.schemas.profile import StatisticalData, WorkShift
from app.schemas.risk import RiskLevel
from app.scoring.engine import RiskInputs, level_for, score
from tests.factories import make_city, make_environment, make_profile


def _make_inputs(profile=None, aqi=40, crime_rate=200.0, health_index=80) -> RiskInputs:
    profile = profile or make_profile()
    return RiskInputs(
        profile=profile,
        environmental=make_environment(aqi=aqi),
        occupation_hazard=OCCUPATION_HAZARDS.get(profile.occupation, OCCUPATION_HAZARDS["Other"]),
        city_stats=make_city(crime_rate),
        statistical=StatisticalData(city_health_index=health_index, death_rate=2.0),
    )


class TestEndToEnd:
    def test_high_risk_construction_worker(self):
        """45y construction worker, hazardous air, diabetes, nights, high-crime city."""
        profile = make_profile(
            age=45,
            occupation="Construction Worker",
            health_condition="Diabetes",
            work_shift=WorkShift.NIGHT,
        )
        result = score(_make_inputs(profile, aqi=210, crime_rate=1200))

        # 10 base + 10 age(41-50) + 25 aqi + 17 occupation + 15 condition + 5 night + 10 crime(cap)
        assert result.score == 92
        assert result.level == RiskLevel.CRITICAL
        assert result.factors[0].category == "Air Quality"
        assert result.narrative == ""

    def test_low_risk_profile(self):
        result = score(_make_inputs())
        # 10 base + 0 age + 5 aqi + 3 occupation + 5 crime
        assert result.score == 23
        assert result.level == RiskLevel.LOW
        assert result.factors == []

    def test_score_clamped_to_100(self):
        profile = make_profile(
            age=70,
            occupation="Construction Worker",
            health_condition="Heart disease",
            addictions="Smoking",
            past_surgery="Bypass",
            work_shift=WorkShift.NIGHT,
        )
        result = score(_make_inputs(profile, aqi=400, crime_rate=2000))
        # 10+20+25+17+15+10+5+5+10 = 117 → clamped
        assert result.score == 100
        assert result.level == RiskLevel.CRITICAL

    def test_unknown_occupation_uses_default_entry(self):
        profile = make_profile(occupation="Astronaut")
        result = score(_make_inputs(profile))
        assert 0 <= result.score <= 100


class TestLevels:
    def test_boundaries_inclusive(self):
        assert level_for(80) == RiskLevel.CRITICAL
        assert level_for(79) == RiskLevel.HIGH
        assert level_for(60) == RiskLevel.HIGH
        assert level_for(59) == RiskLevel.MEDIUM
        assert level_for(40) == RiskLevel.MEDIUM
        assert level_for(39) == RiskLevel.LOW
        assert level_for(0) == RiskLevel.LOW


class TestDeterminism:
    def test_repeated_runs_identical(self):
        profile = make_profile(age=52, occupation="Driver", addictions="Tobacco")
        first = score(_make_inputs(profile, aqi=170, crime_rate=700))
        second = score(_make_inputs(profile, aqi=170, crime_rate=700))
        assert first == second

    def test_financial_stage_stable_for_fixed_risk(self):
        profile = make_profile(age=52, occupation="Driver", addictions="Tobacco")
        risk = score(_make_inputs(profile, aqi=170, crime_rate=700))
        assert recommend(risk.score, profile.age) == recommend(risk.score, profile.age)
