"""
Unit tests for individual score terms and risk-factor derivation.
"""
from app.data.occupation_hazards import OCCUPATION_HAZARDS
from app.schemas.profile import StatisticalData, WorkShift
from app.schemas.risk import RiskLevel
from app.scoring.factors import (
    crime_stress_impact, derive_risk_factors, first_above, score_addictions,
    score_age, score_aqi, score_crime_stress, score_health_condition,
    score_occupation, score_past_surgery, score_work_shift,
)
from tests.factories import make_city, make_environment, make_profile


class TestLadder:
    def test_strictly_greater(self):
        ladder = [(10, "a"), (5, "b")]
        assert first_above(10, ladder, "z") == "b"
        assert first_above(11, ladder, "z") == "a"
        assert first_above(5, ladder, "z") == "z"


class TestAge:
    def test_boundary_60_is_51_60_band(self):
        assert score_age(60).points == 15

    def test_boundary_61_is_top_band(self):
        r = score_age(61)
        assert r.band_label == ">60"
        assert r.points == 20

    def test_mid_bands(self):
        assert score_age(45).points == 10
        assert score_age(31).points == 5

    def test_young(self):
        assert score_age(30).points == 0


class TestAQI:
    def test_boundary_200(self):
        assert score_aqi(200).points == 20

    def test_boundary_201(self):
        assert score_aqi(201).points == 25

    def test_sensitive(self):
        assert score_aqi(150).points == 15
        assert score_aqi(101).points == 15

    def test_good_air_still_scores(self):
        assert score_aqi(0).points == 5
        assert score_aqi(50).points == 5
        assert score_aqi(51).points == 10


class TestOccupation:
    def test_weighted_and_rounded(self):
        assert score_occupation(OCCUPATION_HAZARDS["Construction Worker"]).points == 17

    def test_half_rounds_up(self):
        # 55 × 0.2 = 11.0; 35 × 0.2 = 7.0 → exact
        assert score_occupation(OCCUPATION_HAZARDS["Driver"]).points == 11
        assert score_occupation(OCCUPATION_HAZARDS["Engineer"]).points == 7


class TestLifestyle:
    def test_sentinel_scores_nothing(self):
        assert score_health_condition("None").points == 0
        assert score_addictions("none").points == 0
        assert score_past_surgery("").points == 0
        assert score_past_surgery(None).points == 0

    def test_present_values(self):
        assert score_health_condition("Diabetes").points == 15
        assert score_addictions("Smoking").points == 10
        assert score_past_surgery("Appendectomy").points == 5


class TestWorkShift:
    def test_night(self):
        assert score_work_shift(WorkShift.NIGHT).points == 5

    def test_rotating(self):
        assert score_work_shift(WorkShift.ROTATING).points == 3

    def test_day(self):
        assert score_work_shift(WorkShift.DAY).points == 0

    def test_short_form_accepted(self):
        assert WorkShift("Night") is WorkShift.NIGHT
        assert WorkShift("rotating") is WorkShift.ROTATING


class TestCrimeStress:
    def test_score_term_capped_at_10(self):
        assert score_crime_stress(1200).points == 10
        assert score_crime_stress(600).points == 10

    def test_impact_uncapped(self):
        assert crime_stress_impact(1200) == 20
        assert crime_stress_impact(600) == 15
        assert crime_stress_impact(301) == 10
        assert crime_stress_impact(300) == 5

    def test_low_crime_floor(self):
        assert score_crime_stress(100).points == 5


class TestRiskFactors:
    def _derive(self, profile=None, aqi=40, crime_rate=200.0, health_index=80):
        profile = profile or make_profile()
        return derive_risk_factors(
            profile,
            make_environment(aqi=aqi),
            OCCUPATION_HAZARDS.get(profile.occupation, OCCUPATION_HAZARDS["Other"]),
            make_city(crime_rate),
            StatisticalData(city_health_index=health_index, death_rate=2.0),
        )

    def test_low_risk_profile_has_no_factors(self):
        assert self._derive() == []

    def test_air_quality_levels(self):
        [critical] = self._derive(aqi=201)
        assert critical.level == RiskLevel.CRITICAL
        assert critical.impact == 25

        [high] = self._derive(aqi=151)
        assert high.level == RiskLevel.HIGH
        assert high.impact == 20

        [medium] = self._derive(aqi=101)
        assert medium.level == RiskLevel.MEDIUM
        assert medium.impact == 15

    def test_age_factor_only_above_50(self):
        assert self._derive(make_profile(age=50)) == []
        [f] = self._derive(make_profile(age=61))
        assert f.category == "Age Factor"
        assert f.level == RiskLevel.HIGH

    def test_occupation_factor_uses_unrounded_impact(self):
        [f] = self._derive(make_profile(occupation="Construction Worker"))
        assert f.category == "Occupational Hazard"
        assert f.level == RiskLevel.CRITICAL
        assert f.impact == 17.0
        assert "18.5 per 100,000" in f.description

    def test_rotating_shift_emits_no_factor(self):
        assert self._derive(make_profile(work_shift=WorkShift.ROTATING)) == []

    def test_environmental_stress_uncapped(self):
        [f] = self._derive(crime_rate=1200)
        assert f.category == "Environmental Stress"
        assert f.level == RiskLevel.HIGH
        assert f.impact == 20

    def test_city_health_index(self):
        [f] = self._derive(health_index=39)
        assert f.level == RiskLevel.HIGH
        assert self._derive(health_index=60) == []

    def test_sorted_by_impact_descending(self):
        profile = make_profile(age=61, health_condition="Asthma", addictions="Alcohol")
        found = self._derive(profile, aqi=210, crime_rate=600)
        impacts = [f.impact for f in found]
        assert impacts == sorted(impacts, reverse=True)
        assert found[0].category == "Air Quality"

    def test_ties_keep_emission_order(self):
        # Age>60 and aqi>150 both impact 20; condition and crime>500 both 15
        profile = make_profile(age=61, health_condition="Asthma")
        found = self._derive(profile, aqi=160, crime_rate=600)
        assert [f.category for f in found] == [
            "Air Quality", "Age Factor", "Pre-existing Condition", "Environmental Stress",
        ]
