"""
Occupation hazard profiles based on ILO and OSHA statistics.

death_rate is per 100,000 workers; risk_score is 0-100.
"""
from __future__ import annotations

from dataclasses import dataclass

from app.schemas.risk import RiskLevel


@dataclass(frozen=True)
class OccupationHazard:
    occupation: str
    hazard_level: RiskLevel
    risk_score: int
    common_risks: tuple[str, ...]
    death_rate: float
    health_issues: tuple[str, ...]
    preventive_measures: tuple[str, ...]


DEFAULT_OCCUPATION = "Other"

OCCUPATION_HAZARDS: dict[str, OccupationHazard] = {
    "IT Professional": OccupationHazard(
        occupation="IT Professional",
        hazard_level=RiskLevel.LOW,
        risk_score=15,
        common_risks=(
            "Sedentary lifestyle",
            "Eye strain and vision problems",
            "Repetitive strain injury (RSI)",
            "Mental stress and burnout",
            "Poor posture leading to back pain",
        ),
        death_rate=2.1,
        health_issues=(
            "Cardiovascular disease risk",
            "Obesity",
            "Diabetes type 2",
            "Mental health issues",
            "Sleep disorders",
        ),
        preventive_measures=(
            "Regular breaks every hour",
            "Ergonomic workspace setup",
            "Regular exercise (30 min daily)",
            "Eye exercises and proper lighting",
            "Stress management techniques",
        ),
    ),
    "Healthcare Worker": OccupationHazard(
        occupation="Healthcare Worker",
        hazard_level=RiskLevel.HIGH,
        risk_score=65,
        common_risks=(
            "Infectious disease exposure",
            "Needlestick injuries",
            "Chemical exposure",
            "Physical strain from lifting patients",
            "High stress and long hours",
        ),
        death_rate=8.7,
        health_issues=(
            "Infectious diseases (TB, Hepatitis, COVID-19)",
            "Musculoskeletal disorders",
            "Mental health issues",
            "Chronic fatigue",
            "Workplace violence injuries",
        ),
        preventive_measures=(
            "Strict PPE usage",
            "Regular health screenings",
            "Vaccination programs",
            "Proper lifting techniques",
            "Mental health support access",
        ),
    ),
    "Factory Worker": OccupationHazard(
        occupation="Factory Worker",
        hazard_level=RiskLevel.HIGH,
        risk_score=70,
        common_risks=(
            "Machinery accidents",
            "Chemical exposure",
            "Noise-induced hearing loss",
            "Respiratory issues from dust/fumes",
            "Repetitive motion injuries",
        ),
        death_rate=12.3,
        health_issues=(
            "Respiratory diseases",
            "Hearing loss",
            "Musculoskeletal disorders",
            "Skin conditions",
            "Industrial accidents",
        ),
        preventive_measures=(
            "Safety equipment usage",
            "Regular safety training",
            "Proper ventilation",
            "Hearing protection",
            "Regular health check-ups",
        ),
    ),
    "Driver": OccupationHazard(
        occupation="Driver",
        hazard_level=RiskLevel.MEDIUM,
        risk_score=55,
        common_risks=(
            "Road accidents",
            "Air pollution exposure",
            "Sedentary lifestyle",
            "Irregular sleep patterns",
            "Back and neck problems",
        ),
        death_rate=15.2,
        health_issues=(
            "Cardiovascular disease",
            "Respiratory issues",
            "Obesity",
            "Sleep disorders",
            "Musculoskeletal problems",
        ),
        preventive_measures=(
            "Defensive driving training",
            "Regular vehicle maintenance",
            "Adequate rest breaks",
            "Proper seating posture",
            "Regular health screenings",
        ),
    ),
    "Teacher": OccupationHazard(
        occupation="Teacher",
        hazard_level=RiskLevel.LOW,
        risk_score=25,
        common_risks=(
            "Voice strain",
            "Mental stress",
            "Infectious disease exposure (from students)",
            "Standing for long periods",
            "Workplace stress",
        ),
        death_rate=3.2,
        health_issues=(
            "Vocal cord problems",
            "Mental health issues",
            "Varicose veins",
            "Stress-related conditions",
            "Common infections",
        ),
        preventive_measures=(
            "Voice training and rest",
            "Stress management",
            "Regular breaks",
            "Comfortable footwear",
            "Vaccination programs",
        ),
    ),
    "Engineer": OccupationHazard(
        occupation="Engineer",
        hazard_level=RiskLevel.MEDIUM,
        risk_score=35,
        common_risks=(
            "Site accidents (for field engineers)",
            "Sedentary work (for office engineers)",
            "Mental stress",
            "Eye strain",
            "Exposure to hazardous materials (varies by field)",
        ),
        death_rate=5.4,
        health_issues=(
            "Cardiovascular issues",
            "Musculoskeletal problems",
            "Mental stress",
            "Vision problems",
            "Field-specific hazards",
        ),
        preventive_measures=(
            "Safety protocols on site",
            "Regular exercise",
            "Ergonomic workspace",
            "Stress management",
            "Field-specific safety training",
        ),
    ),
    "Business Owner": OccupationHazard(
        occupation="Business Owner",
        hazard_level=RiskLevel.MEDIUM,
        risk_score=40,
        common_risks=(
            "High mental stress",
            "Irregular work hours",
            "Sedentary lifestyle",
            "Poor work-life balance",
            "Financial stress",
        ),
        death_rate=4.8,
        health_issues=(
            "Cardiovascular disease",
            "Mental health issues",
            "Sleep disorders",
            "Hypertension",
            "Stress-related conditions",
        ),
        preventive_measures=(
            "Stress management techniques",
            "Regular exercise routine",
            "Proper sleep schedule",
            "Delegation of tasks",
            "Regular health check-ups",
        ),
    ),
    "Student": OccupationHazard(
        occupation="Student",
        hazard_level=RiskLevel.LOW,
        risk_score=10,
        common_risks=(
            "Academic stress",
            "Sedentary lifestyle",
            "Poor sleep habits",
            "Eye strain from screens",
            "Poor nutrition",
        ),
        death_rate=1.5,
        health_issues=(
            "Mental health issues",
            "Obesity",
            "Vision problems",
            "Sleep disorders",
            "Stress-related conditions",
        ),
        preventive_measures=(
            "Regular physical activity",
            "Balanced diet",
            "Adequate sleep (7-8 hours)",
            "Screen time management",
            "Stress management",
        ),
    ),
    "Construction Worker": OccupationHazard(
        occupation="Construction Worker",
        hazard_level=RiskLevel.CRITICAL,
        risk_score=85,
        common_risks=(
            "Falls from height",
            "Heavy machinery accidents",
            "Electrocution",
            "Falling objects",
            "Extreme weather exposure",
        ),
        death_rate=18.5,
        health_issues=(
            "Traumatic injuries",
            "Musculoskeletal disorders",
            "Respiratory issues",
            "Hearing loss",
            "Skin conditions",
        ),
        preventive_measures=(
            "Safety harness usage",
            "Hard hat and protective gear",
            "Regular safety training",
            "Proper equipment maintenance",
            "Weather-appropriate clothing",
        ),
    ),
    "Farmer": OccupationHazard(
        occupation="Farmer",
        hazard_level=RiskLevel.HIGH,
        risk_score=60,
        common_risks=(
            "Pesticide exposure",
            "Machinery accidents",
            "Extreme weather exposure",
            "Physical strain",
            "Animal-related injuries",
        ),
        death_rate=11.2,
        health_issues=(
            "Respiratory diseases",
            "Skin conditions",
            "Musculoskeletal disorders",
            "Heat-related illnesses",
            "Pesticide poisoning",
        ),
        preventive_measures=(
            "Protective equipment for pesticides",
            "Machinery safety training",
            "Adequate hydration",
            "Sun protection",
            "Regular health screenings",
        ),
    ),
    DEFAULT_OCCUPATION: OccupationHazard(
        occupation=DEFAULT_OCCUPATION,
        hazard_level=RiskLevel.MEDIUM,
        risk_score=30,
        common_risks=(
            "General workplace hazards",
            "Stress",
            "Sedentary or physical work risks",
            "Variable exposure to hazards",
        ),
        death_rate=5.0,
        health_issues=(
            "General health risks",
            "Stress-related conditions",
            "Occupation-specific issues",
        ),
        preventive_measures=(
            "Follow workplace safety guidelines",
            "Regular health check-ups",
            "Maintain work-life balance",
            "Stay physically active",
        ),
    ),
}
