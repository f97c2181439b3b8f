"""
Financial Recommendation Engine

Maps (risk score, age) onto:
  1. Selected insurance plan + priced alternatives
  2. Monthly savings, emergency fund, yearly health budget
  3. Ordered recommendation list (5 fixed entries, then conditional riders)

Pure and synchronous; the same inputs always yield the same FinancialResult.
"""
from __future__ import annotations

import math
from typing import Optional, Sequence

import structlog

from app.data.insurance_plans import InsuranceTier
from app.data.reference import lookup_insurance_tiers
from app.planning import insurance, savings
from app.schemas.financial import FinancialRecommendation, FinancialResult, InsuranceSelection

logger = structlog.get_logger()

CRITICAL_ILLNESS_SCORE = 70
SENIOR_CARE_AGE = 45


def _inr(amount: int) -> str:
    """Indian digit grouping: 1234567 → ₹12,34,567."""
    digits = str(amount)
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    grouped = ",".join(groups + [tail]) if groups else tail
    return f"₹{grouped}"


def build_recommendations(
    plan: InsuranceSelection,
    risk_score: int,
    age: int,
    monthly_savings: int,
    emergency_fund: int,
    yearly_budget: int,
) -> list[FinancialRecommendation]:
    months_to_target = math.ceil(emergency_fund / monthly_savings) if monthly_savings > 0 else 0

    recommendations = [
        FinancialRecommendation(
            category="Insurance Premium",
            suggestion=f"Pay {_inr(plan.premium)} monthly for {plan.name}",
            amount=plan.premium,
            priority="high",
        ),
        FinancialRecommendation(
            category="Emergency Savings",
            suggestion=f"Save {_inr(monthly_savings)} monthly to build emergency health fund",
            amount=monthly_savings,
            priority="high",
        ),
        FinancialRecommendation(
            category="Emergency Fund Target",
            suggestion=f"Build emergency fund of {_inr(emergency_fund)} over {months_to_target} months",
            amount=emergency_fund,
            priority="medium",
        ),
        FinancialRecommendation(
            category="Annual Health Budget",
            suggestion=f"Allocate {_inr(yearly_budget)} annually for health expenses",
            amount=yearly_budget,
            priority="medium",
        ),
        FinancialRecommendation(
            category="Tax Benefits",
            suggestion="Claim tax deduction under Section 80D for health insurance premium",
            priority="low",
        ),
    ]

    if risk_score > CRITICAL_ILLNESS_SCORE:
        recommendations.append(FinancialRecommendation(
            category="Critical Illness Cover",
            suggestion="Consider additional critical illness rider for comprehensive protection",
            priority="low",
        ))

    if age > SENIOR_CARE_AGE:
        recommendations.append(FinancialRecommendation(
            category="Senior Care",
            suggestion="Plan for increased healthcare costs in retirement years",
            priority="low",
        ))

    return recommendations


def recommend(
    risk_score: int,
    age: int,
    tiers: Optional[Sequence[InsuranceTier]] = None,
) -> FinancialResult:
    """
    Main planning entry point.
    """
    tiers = tiers if tiers is not None else lookup_insurance_tiers()

    plan = insurance.select_plan(risk_score, age, tiers)
    alternatives = insurance.alternative_plans(risk_score, age, tiers)

    monthly = savings.monthly_savings(risk_score, plan.premium, age)
    fund = savings.emergency_fund(monthly, risk_score)
    yearly_budget = (plan.premium + monthly) * 12

    logger.info(
        "financial_plan_complete",
        risk_score=risk_score,
        age=age,
        plan=plan.name,
        premium=plan.premium,
        monthly_savings=monthly,
        emergency_fund=fund,
    )

    return FinancialResult(
        insurance_plan=plan,
        alternative_plans=alternatives,
        monthly_savings=monthly,
        emergency_fund=fund,
        yearly_health_budget=yearly_budget,
        recommendations=build_recommendations(plan, risk_score, age, monthly, fund, yearly_budget),
    )
