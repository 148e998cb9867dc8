"""Optional narrative insights about a projection.

The projection engine never imports this module. Providers are injected into
the Flask app; any failure surfaces as ``InsightUnavailable``.
"""

from __future__ import annotations

import abc
import json
import logging
from typing import Optional

from pydantic import ValidationError

from wealthcalc.core.formatting import format_currency, to_words
from wealthcalc.schemas.insight import Insight
from wealthcalc.schemas.projection import InvestmentInput, Mode, ProjectionResult

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash-lite"


class InsightUnavailable(RuntimeError):
    """Raised when no narrative insight could be produced."""


class InsightProvider(abc.ABC):
    @abc.abstractmethod
    def generate(self, inputs: InvestmentInput, result: ProjectionResult) -> Insight:
        """Return an insight for the plan or raise."""


def describe_plan(inputs: InvestmentInput) -> str:
    if inputs.mode == Mode.SIP:
        return f"{inputs.frequency.value} SIP"
    return "One-time Lumpsum"


def build_insight_prompt(inputs: InvestmentInput, result: ProjectionResult) -> str:
    return f"""
    Analyze the following investment plan for an Indian investor and provide a structured JSON response.
    Details:
    - Type: {describe_plan(inputs)}
    - Amount: {format_currency(inputs.amount)}
    - Return Rate: {inputs.annual_return_rate:g}% p.a.
    - Horizon: {inputs.horizon_years} years
    - Total Invested: {format_currency(result.total_invested)} ({to_words(result.total_invested)})
    - Final Value: {format_currency(result.total_value)} ({to_words(result.total_value)})

    Provide a concise analysis, one pro tip, and one warning.
    Respond with a JSON object with exactly these string keys:
    - "analysis": a brief analysis of this wealth accumulation plan in the context of Indian market trends.
    - "proTip": a single, actionable tip for an Indian investor regarding their commitment.
    - "warning": a single, realistic warning or consideration (e.g. taxation or inflation impact).
    """


def parse_insight(text: Optional[str]) -> Insight:
    """Turn the model's JSON text into an ``Insight``; raises ValueError on junk."""
    if not text or not text.strip():
        raise ValueError("empty insight response")
    try:
        payload = json.loads(text.strip())
    except json.JSONDecodeError as exc:
        raise ValueError(f"insight response is not JSON: {exc}") from exc
    try:
        return Insight.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(f"insight response has the wrong shape: {exc}") from exc


class GeminiInsightProvider(InsightProvider):
    """Insight provider backed by Google's generative AI SDK."""

    def __init__(self, api_key: str, model_name: str = DEFAULT_MODEL):
        if not api_key:
            raise InsightUnavailable("no API key configured for insights")
        self.api_key = api_key
        self.model_name = model_name

    def generate(self, inputs: InvestmentInput, result: ProjectionResult) -> Insight:
        import google.generativeai as genai

        genai.configure(api_key=self.api_key)
        model = genai.GenerativeModel(self.model_name)
        response = model.generate_content(
            build_insight_prompt(inputs, result),
            generation_config={"response_mime_type": "application/json"},
        )
        return parse_insight(response.text)


def fetch_insight(
    provider: Optional[InsightProvider],
    inputs: InvestmentInput,
    result: ProjectionResult,
) -> Insight:
    """Ask ``provider`` for an insight, collapsing every failure into one error."""
    if provider is None:
        raise InsightUnavailable("no insight provider configured")
    try:
        return provider.generate(inputs, result)
    except InsightUnavailable:
        raise
    except Exception as exc:
        logger.exception("insight provider %s failed", type(provider).__name__)
        raise InsightUnavailable("insight unavailable") from exc
