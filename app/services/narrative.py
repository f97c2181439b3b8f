"""
Narrative Enrichment Adapter — best-effort.

Wraps the text-generation backend (Gemini) so that every call resolves to an
Enrichment value: either generated text or a documented fallback, never an
exception. Deterministic results are only ever decorated, never altered.

Single attempt per call, bounded by the configured timeout.
"""
from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass
from typing import Generic, Optional, Protocol, TypeVar

import structlog
from google import genai
from prometheus_client import Counter

from app.core.config import Settings
from app.schemas.risk import PreventionStep

logger = structlog.get_logger()

T = TypeVar("T")

RISK_NARRATIVE_FALLBACK = "Risk analysis based on statistical data and expert guidelines."
FINANCIAL_NARRATIVE_FALLBACK = (
    "Financial recommendations based on standard planning guidelines and risk assessment."
)
PREVENTION_STEPS_FALLBACK: tuple[str, ...] = (
    "Schedule regular health check-ups every 6 months",
    "Maintain a balanced diet rich in fruits and vegetables",
    "Exercise for at least 30 minutes daily",
    "Get adequate sleep (7-8 hours per night)",
    "Practice stress management techniques",
    "Follow workplace safety guidelines",
    "Stay hydrated and avoid excessive caffeine",
)

_NUMBERED_LINE = re.compile(r"^\s*\d+\.\s*")

NARRATIVE_FALLBACKS = Counter(
    "narrative_fallback_total",
    "Narrative enrichment calls resolved to their fallback value",
    ["kind", "reason"],
)


class NarrativeGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


class GeminiGenerator:
    """Google Gen AI SDK backend."""

    def __init__(self, api_key: str, model: str):
        self._client = genai.Client(api_key=api_key)
        self._model = model

    async def generate(self, prompt: str) -> str:
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=prompt,
        )
        return response.text or ""


@dataclass(frozen=True)
class EnrichmentConfig:
    """Process-wide, read-only after startup."""
    api_key: str = ""
    model: str = "gemini-2.5-pro"
    timeout_seconds: float = 20.0

    @property
    def configured(self) -> bool:
        return bool(self.api_key.strip())

    @classmethod
    def from_settings(cls, settings: Settings) -> "EnrichmentConfig":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            timeout_seconds=settings.enrichment_timeout_seconds,
        )


@dataclass(frozen=True)
class Enrichment(Generic[T]):
    value: T
    is_fallback: bool
    reason: Optional[str] = None  # not_configured | timeout | error | empty


def parse_numbered_list(text: str) -> list[str]:
    """Keep only `N.`-prefixed lines, stripped of their numbering."""
    steps = []
    for line in text.splitlines():
        if _NUMBERED_LINE.match(line):
            step = _NUMBERED_LINE.sub("", line, count=1).strip()
            if step:
                steps.append(step)
    return steps


def to_prevention_steps(items: list[str]) -> list[PreventionStep]:
    """Display metadata: positions 0-1 high, 2-3 medium, rest low."""
    steps = []
    for index, item in enumerate(items):
        priority = "high" if index < 2 else "medium" if index < 4 else "low"
        steps.append(PreventionStep(priority=priority, action=item, description=item, frequency="Daily"))
    return steps


class NarrativeEnricher:

    def __init__(self, config: EnrichmentConfig, generator: Optional[NarrativeGenerator] = None):
        self.config = config
        if generator is None and config.configured:
            generator = GeminiGenerator(config.api_key, config.model)
        self._generator = generator

    @property
    def configured(self) -> bool:
        return self.config.configured and self._generator is not None

    async def enrich(self, prompt: str, fallback: str, kind: str) -> Enrichment[str]:
        text, reason = await self._generate(prompt, kind)
        if text is None:
            return self._fallback(fallback, kind, reason)
        return Enrichment(value=text, is_fallback=False)

    async def enrich_list(
        self,
        prompt: str,
        fallback: tuple[str, ...],
        kind: str,
    ) -> Enrichment[list[str]]:
        text, reason = await self._generate(prompt, kind)
        items = parse_numbered_list(text) if text is not None else []
        if not items:
            return self._fallback(list(fallback), kind, reason or "empty")
        return Enrichment(value=items, is_fallback=False)

    async def _generate(self, prompt: str, kind: str) -> tuple[Optional[str], Optional[str]]:
        # Checked on every call so an unconfigured process never attempts a request
        if not self.configured:
            return None, "not_configured"

        try:
            text = await asyncio.wait_for(
                self._generator.generate(prompt),
                timeout=self.config.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning("narrative_generation_timeout", kind=kind, timeout_s=self.config.timeout_seconds)
            return None, "timeout"
        except Exception as e:
            logger.warning("narrative_generation_failed", kind=kind, error=str(e))
            return None, "error"

        if not text or not text.strip():
            return None, "empty"
        return text.strip(), None

    def _fallback(self, value: T, kind: str, reason: Optional[str]) -> Enrichment[T]:
        NARRATIVE_FALLBACKS.labels(kind=kind, reason=reason or "unknown").inc()
        logger.info("narrative_fallback", kind=kind, reason=reason)
        return Enrichment(value=value, is_fallback=True, reason=reason)
