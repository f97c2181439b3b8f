"""
Health insurance tier templates.

Tiers are ordered ascending by risk range and together cover scores 0-100.
Premiums are monthly, in INR, before age and risk adjustment.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RiskRange:
    min: int
    max: int

    def contains(self, score: int) -> bool:
        return self.min <= score <= self.max


@dataclass(frozen=True)
class InsuranceTier:
    name: str
    type: str
    min_coverage: int
    max_coverage: int
    base_premium: int
    features: tuple[str, ...]
    advantages: tuple[str, ...]
    disadvantages: tuple[str, ...]
    suitable_for: tuple[str, ...]
    risk_range: RiskRange


INSURANCE_TIERS: tuple[InsuranceTier, ...] = (
    InsuranceTier(
        name="Essential Health Cover",
        type="Basic",
        min_coverage=300_000,
        max_coverage=500_000,
        base_premium=3_500,
        features=(
            "Hospitalization coverage",
            "Pre and post hospitalization (30/60 days)",
            "Daycare procedures",
            "Ambulance charges",
            "Room rent (shared/semi-private)",
            "Annual health check-up",
        ),
        advantages=(
            "Most affordable premium - ideal for budget-conscious individuals",
            "Covers essential medical emergencies and hospitalization",
            "Quick claim settlement process",
            "No medical tests required for young, healthy individuals",
            "Tax benefits under Section 80D",
            "Suitable for those with low health risks",
        ),
        disadvantages=(
            "Limited coverage amount may not be sufficient for major illnesses",
            "Room rent restrictions (shared/semi-private only)",
            "Pre-existing diseases not covered initially",
            "No coverage for advanced treatments",
            "Limited network of hospitals",
            "No international coverage",
        ),
        suitable_for=(
            "Young professionals",
            "Low-risk occupations",
            "Good health conditions",
            "Students",
        ),
        risk_range=RiskRange(0, 40),
    ),
    InsuranceTier(
        name="Comprehensive Care Plus",
        type="Standard",
        min_coverage=500_000,
        max_coverage=1_000_000,
        base_premium=5_500,
        features=(
            "All Essential Cover features",
            "Private room coverage",
            "Pre-existing disease cover (after 2 years)",
            "Maternity coverage (optional)",
            "Critical illness rider",
            "No claim bonus (up to 50%)",
            "Worldwide emergency coverage",
            "Organ donor expenses",
        ),
        advantages=(
            "Balanced coverage with reasonable premium",
            "Private room facility for better comfort",
            "Pre-existing disease coverage after waiting period",
            "Critical illness protection included",
            "No claim bonus rewards healthy lifestyle",
            "Worldwide emergency coverage for travelers",
            "Suitable for families with optional maternity coverage",
            "Wide network of cashless hospitals",
        ),
        disadvantages=(
            "Higher premium compared to basic plans",
            "2-year waiting period for pre-existing diseases",
            "Room rent may have sub-limits",
            "Some advanced treatments may require co-payment",
            "Maternity coverage comes with additional cost",
            "May not cover all alternative treatments",
        ),
        suitable_for=(
            "Mid-career professionals",
            "Medium-risk occupations",
            "Families",
            "Those with minor health conditions",
        ),
        risk_range=RiskRange(41, 70),
    ),
    InsuranceTier(
        name="Premium Health Shield",
        type="Premium",
        min_coverage=1_000_000,
        max_coverage=2_000_000,
        base_premium=8_500,
        features=(
            "All Comprehensive Care features",
            "Deluxe room coverage",
            "Pre-existing disease cover (immediate)",
            "Mental health coverage",
            "Alternative treatments (Ayurveda, Homeopathy)",
            "International treatment coverage",
            "Home healthcare",
            "Health coaching and wellness programs",
            "Second medical opinion",
            "No room rent capping",
            "Restoration of sum insured",
        ),
        advantages=(
            "Highest coverage amount for major medical expenses",
            "Immediate pre-existing disease coverage - no waiting period",
            "Deluxe room with no rent capping",
            "Comprehensive mental health coverage",
            "Alternative treatment options (Ayurveda, Homeopathy)",
            "International treatment coverage",
            "Home healthcare and wellness programs",
            "Sum insured restoration benefit",
            "Priority claim settlement",
            "Dedicated relationship manager",
        ),
        disadvantages=(
            "Significantly higher premium cost",
            "May require detailed medical examination",
            "Not affordable for lower income groups",
            "Some benefits may have usage limits",
            "Complex policy terms and conditions",
            "Higher documentation requirements for claims",
        ),
        suitable_for=(
            "High-risk occupations",
            "Senior professionals",
            "Those with existing health conditions",
            "High-stress jobs",
        ),
        risk_range=RiskRange(71, 100),
    ),
)
