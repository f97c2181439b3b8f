"""
Prompt templates for the narrative enrichment calls.

Prompts only describe results that the deterministic engines already
produced; nothing generated from them flows back into scores or prices.
"""
from __future__ import annotations

from app.data.crime_statistics import CityStats
from app.data.occupation_hazards import OccupationHazard
from app.schemas.financial import InsuranceSelection
from app.schemas.profile import EnvironmentalReading, StatisticalData, UserProfile
from app.schemas.risk import RiskFactor, RiskLevel


def health_risk_prompt(
    profile: UserProfile,
    environmental: EnvironmentalReading,
    hazard: OccupationHazard,
    city: CityStats,
    statistical: StatisticalData,
    risk_score: int,
    level_label: str,
) -> str:
    return f"""
You are a health risk analysis expert. Analyze the following data and provide a comprehensive health risk assessment.

USER PROFILE:
- Age: {profile.age}
- Occupation: {profile.occupation}
- City: {profile.city}, Area: {profile.area}
- Work Shift: {profile.work_shift.value}
- Health Condition: {profile.health_condition}
- Addictions: {profile.addictions}
- Past Surgery: {profile.past_surgery}

ENVIRONMENTAL DATA:
- Air Quality Index (AQI): {environmental.aqi}
- Temperature: {environmental.temperature}°C
- Humidity: {environmental.humidity}%

OCCUPATION HAZARDS:
- Hazard Level: {hazard.hazard_level.value}
- Risk Score: {hazard.risk_score}
- Death Rate: {hazard.death_rate} per 100,000 workers
- Common Risks: {", ".join(hazard.common_risks)}
- Health Issues: {", ".join(hazard.health_issues)}

CITY STATISTICS:
- Crime Rate: {city.crime_rate} per 100,000 population
- Safety Index: {city.safety_index}/100
- Stress Level: {city.stress_level}
- Health Risk Impact: {city.health_risk_impact}

STATISTICAL DATA:
- City Health Index: {statistical.city_health_index}
- Death Rate: {statistical.death_rate}

COMPUTED RISK:
- Score: {risk_score}/100 ({level_label})

Please provide:
1. A detailed analysis of the major health risk factors
2. How environmental conditions affect health
3. Occupation-specific health concerns
4. Impact of lifestyle factors (work shift, addictions, etc.)
5. City-specific health risks (pollution, crime-related stress)
6. Overall health outlook

Keep the analysis professional, clear, and actionable. Focus on preventive measures and risk mitigation.
"""


def financial_plan_prompt(
    profile: UserProfile,
    risk_score: int,
    risk_level: RiskLevel,
    factors: list[RiskFactor],
    plan: InsuranceSelection,
) -> str:
    return f"""
You are a financial planning expert specializing in health insurance and medical savings. Analyze the following data and provide comprehensive financial recommendations.

USER PROFILE:
- Age: {profile.age}
- Occupation: {profile.occupation}
- City: {profile.city}

RISK ANALYSIS:
- Risk Score: {risk_score}/100
- Risk Level: {risk_level.value}
- Key Risk Factors: {", ".join(f.category for f in factors)}

RECOMMENDED INSURANCE:
- Plan: {plan.name}
- Coverage: ₹{plan.coverage:,}
- Monthly Premium: ₹{plan.premium:,}
- Features: {", ".join(plan.features[:5])}

Please provide:
1. Why this insurance plan is suitable for the user's risk profile
2. Financial planning recommendations for healthcare costs
3. Monthly savings strategy to build emergency health fund
4. Tips for optimizing insurance benefits
5. Long-term financial health security advice
6. How to prepare for unexpected medical expenses

Keep recommendations practical, India-specific, and focused on financial security. Consider the user's occupation and risk level.
"""


def prevention_steps_prompt(
    factors: list[RiskFactor],
    profile: UserProfile,
    hazard: OccupationHazard,
) -> str:
    factor_lines = "\n".join(f"- {f.category}: {f.description}" for f in factors) or "- None identified"
    return f"""
Based on the following health risk factors, provide 5-7 specific, actionable prevention steps:

RISK FACTORS:
{factor_lines}

USER CONTEXT:
- Occupation: {profile.occupation}
- Age: {profile.age}
- Health Condition: {profile.health_condition}

OCCUPATION HAZARDS:
{", ".join(hazard.common_risks)}

Provide prevention steps as a numbered list. Each step should be:
- Specific and actionable
- Relevant to the user's situation
- Practical to implement
- Focused on prevention rather than treatment

Format: Return only the numbered list, one step per line.
"""
