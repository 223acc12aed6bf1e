"""
Gemini API client
- generateContent REST call with a JSON response schema
- Ingredient analyzer backed by the model
"""

import json
import asyncio
import aiohttp
from typing import Any, Dict, List, Optional
from dataclasses import dataclass

from pydantic import ValidationError

from ..core.config import Settings
from ..core.exceptions import ErrorCode, ExternalServiceError, MalformedExternalResultError
from ..engine.aggregator import ReportAggregator, ScorePolicy
from ..engine.analyzer import IngredientAnalyzer
from ..engine.normalizer import NameNormalizer, split_ingredient_text
from ..guards.json_guard import JSONGuard, JSONRepairError
from ..observability import get_logger
from ..rules.reference_database import ReferenceDatabase, get_reference_database
from ..schemas.domain_models import AnalysisReport, IngredientRecord
from .schemas import ANALYSIS_RESPONSE_SCHEMA, GeminiAnalysisPayload

logger = get_logger("llm.gemini")


ANALYSIS_PROMPT = """Analyze this ingredient list: "{text}".

1. Categorize each into Risk Levels: LOW (Safe), MODERATE (Caution), HIGH (Avoid).
2. Identify specific harms: Endocrine disruption, Carcinogens, Skin Irritation.
3. Determine Pregnancy Safety: SAFE, CAUTION, AVOID.
4. Provide a 'Purity Score' (0-100) where 100 is perfectly safe.
5. Tag each ingredient with its concerns (e.g. "EDC", "Hormone Disruptor", "Irritant", "Allergen", "Acne Trigger", "Pore-Clogging", "Reprotoxic").

Reference data: Parabens, Phthalates, Bisphenols, Formaldehyde and formaldehyde releasers, Oxybenzone, Triclosan and PFAS are HIGH risk."""


@dataclass
class GeminiConfig:
    """Gemini settings"""
    api_key: str
    model: str = "gemini-2.5-flash-lite"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    temperature: float = 0.0
    timeout: float = 30.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiConfig":
        return cls(
            api_key=settings.gemini_api_key or "",
            model=settings.gemini_model,
            base_url=settings.gemini_base_url.rstrip("/"),
            timeout=settings.gemini_timeout_seconds
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"


class GeminiClient:
    """Gemini generateContent client"""

    def __init__(self, config: GeminiConfig):
        self.config = config

    def build_request(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.config.temperature,
                "responseMimeType": "application/json",
                "responseSchema": ANALYSIS_RESPONSE_SCHEMA
            }
        }

    async def generate(self, prompt: str) -> str:
        """
        Text of the first candidate

        Raises:
            ExternalServiceError: transport failure, timeout or non-200 status
            MalformedExternalResultError: response without candidate text
        """
        data = await self._post(self.build_request(prompt))
        return self.extract_text(data)

    async def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        headers = {"x-goog-api-key": self.config.api_key, "Content-Type": "application/json"}
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.config.endpoint,
                    json=payload,
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(total=self.config.timeout)
                ) as response:
                    if response.status == 429:
                        raise ExternalServiceError(
                            "Gemini API rate limit exceeded",
                            error_code=ErrorCode.RATE_LIMITED,
                            details={"status": response.status, "model": self.config.model}
                        )
                    if response.status != 200:
                        error = await response.text()
                        raise ExternalServiceError(
                            f"Gemini API error (HTTP {response.status})",
                            details={"status": response.status, "model": self.config.model, "body": error[:500]}
                        )
                    return await response.json(content_type=None)

        except asyncio.TimeoutError as e:
            logger.error("Gemini request timed out", model=self.config.model, timeout=self.config.timeout)
            raise ExternalServiceError(
                f"Gemini request timed out after {self.config.timeout}s",
                details={"model": self.config.model},
                cause=e
            )
        except aiohttp.ClientError as e:
            logger.error(f"Gemini request failed: {e}", model=self.config.model)
            raise ExternalServiceError(
                f"Gemini request failed: {e}",
                details={"model": self.config.model},
                cause=e
            )
        except json.JSONDecodeError as e:
            raise MalformedExternalResultError(
                "Gemini response body is not JSON",
                details={"model": self.config.model},
                cause=e
            )

    @staticmethod
    def extract_text(data: Dict[str, Any]) -> str:
        """
        Concatenated text parts of the first candidate

        Raises:
            MalformedExternalResultError: no candidates, unexpected shape or no text
        """
        if not isinstance(data, dict):
            raise MalformedExternalResultError(
                "Gemini response is not a JSON object",
                details={"type": type(data).__name__}
            )

        candidates = data.get("candidates")
        if not candidates:
            feedback = data.get("promptFeedback")
            block_reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
            raise MalformedExternalResultError(
                "Gemini returned no candidates",
                details={"block_reason": block_reason}
            )

        first = candidates[0] if isinstance(candidates, list) else None
        content = first.get("content") if isinstance(first, dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            raise MalformedExternalResultError(
                "Gemini candidate has an unexpected shape",
                details={"candidate": repr(first)[:200]}
            )

        text = "".join(
            part["text"] for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        )
        if not text.strip():
            raise MalformedExternalResultError(
                "Gemini candidate has no text",
                details={"finish_reason": first.get("finishReason")}
            )
        return text


class GeminiIngredientAnalyzer(IngredientAnalyzer):
    """
    Analyzer that delegates classification to Gemini.

    The model's ingredient list is validated against GeminiAnalysisPayload.
    Ingredients the reference database knows are replaced by the curated
    record; duplicates (by canonical key) keep their first occurrence. Score
    and concern percentages are recomputed from the resulting records so
    both backends score identically; the model's summary is kept.
    """

    backend = "gemini"

    def __init__(
        self,
        client: GeminiClient,
        database: Optional[ReferenceDatabase] = None,
        policy: Optional[ScorePolicy] = None,
        guard: Optional[JSONGuard] = None
    ):
        self.client = client
        self.database = database if database is not None else get_reference_database()
        self.normalizer = NameNormalizer(self.database)
        self.aggregator = ReportAggregator(policy)
        self.guard = guard or JSONGuard()

    async def analyze(self, text: str) -> AnalysisReport:
        return await self._observed(text, self._run)

    async def _run(self, text: str) -> AnalysisReport:
        if not split_ingredient_text(text):
            return self.aggregator.aggregate([])

        raw = await self.client.generate(ANALYSIS_PROMPT.format(text=text.strip()))
        payload = self.parse_payload(raw)
        records = self.merge_records(payload)

        report = self.aggregator.aggregate(records)
        summary = payload.summary.strip()
        if summary and records:
            report = report.model_copy(update={"summary": summary})
        return report

    def parse_payload(self, raw: str) -> GeminiAnalysisPayload:
        """
        Raises:
            MalformedExternalResultError: not JSON, or fails schema validation
        """
        try:
            data = self.guard.parse(raw)
        except JSONRepairError as e:
            raise MalformedExternalResultError(
                "Gemini response is not valid JSON",
                details={"preview": raw[:200] if raw else ""},
                cause=e
            )

        try:
            return GeminiAnalysisPayload.model_validate(data)
        except ValidationError as e:
            raise MalformedExternalResultError(
                "Gemini response failed schema validation",
                details={"errors": e.errors(include_url=False, include_input=False)},
                cause=e
            )

    def merge_records(self, payload: GeminiAnalysisPayload) -> List[IngredientRecord]:
        seen = set()
        records = []
        for item in payload.ingredients:
            key = self.normalizer.normalize(item.name)
            if not key or key in seen:
                continue
            seen.add(key)
            curated = self.database.lookup(key)
            records.append(curated if curated is not None else item.to_record())
        return records


__all__ = ["GeminiClient", "GeminiConfig", "GeminiIngredientAnalyzer", "ANALYSIS_PROMPT"]
