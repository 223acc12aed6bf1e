# tests/test_gemini_analyzer.py
"""
Gemini backend tests
The HTTP layer is replaced with canned responses; no network access
"""

import asyncio
import json
import pytest
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

from aiohttp import web

from purecheck.core.exceptions import (
    ErrorCode, ExternalServiceError, MalformedExternalResultError, http_status_for
)
from purecheck.engine.aggregator import EMPTY_SUMMARY, ScorePolicy
from purecheck.llm.gemini_client import GeminiClient, GeminiConfig, GeminiIngredientAnalyzer
from purecheck.llm.schemas import GeminiIngredient
from purecheck.schemas.domain_models import PregnancySafety, RiskLevel


VALID_PAYLOAD = {
    "overallScore": 90,
    "summary": "Contains one paraben of concern.",
    "ingredients": [
        {"name": "Methylparaben", "category": "Preservative", "riskLevel": "MODERATE", "harm": "Maybe."},
        {"name": "Methyl Paraben", "riskLevel": "HIGH", "harm": "Duplicate spelling."},
        {"name": "Copper Tripeptide-1", "category": "Peptide", "riskLevel": "low",
         "harm": "Signal peptide.", "pregnancySafe": "safe", "tags": ["Anti-aging"]},
    ],
    "concerns": {"endocrine": 30, "pregnancy": 30, "skin": 0, "pcos": 0}
}


class FakeClient:
    """Stands in for GeminiClient.generate"""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


def make_analyzer(database, client):
    return GeminiIngredientAnalyzer(client, database=database, policy=ScorePolicy())


class TestGeminiIngredientAnalyzer:

    @pytest.mark.asyncio
    async def test_valid_payload(self, database):
        client = FakeClient(json.dumps(VALID_PAYLOAD))
        report = await make_analyzer(database, client).analyze("Methylparaben, Copper Tripeptide-1")

        assert [r.name for r in report.ingredients] == ["Methylparaben", "Copper Tripeptide-1"]
        # Curated record wins over the model's classification
        assert report.ingredients[0].risk_level == RiskLevel.HIGH
        assert report.ingredients[1].risk_level == RiskLevel.LOW
        assert report.ingredients[1].pregnancy_safety == PregnancySafety.SAFE
        assert report.overall_score == 75
        assert report.concerns.pregnancy == 50
        assert report.summary == "Contains one paraben of concern."
        assert "Methylparaben, Copper Tripeptide-1" in client.prompts[0]

    @pytest.mark.asyncio
    async def test_fenced_payload(self, database):
        client = FakeClient("```json\n" + json.dumps(VALID_PAYLOAD) + "\n```")
        report = await make_analyzer(database, client).analyze("Methylparaben")
        assert len(report.ingredients) == 2

    @pytest.mark.asyncio
    async def test_empty_text_skips_the_model(self, database):
        client = FakeClient(json.dumps(VALID_PAYLOAD))
        report = await make_analyzer(database, client).analyze("  ")
        assert report.summary == EMPTY_SUMMARY
        assert client.prompts == []

    @pytest.mark.asyncio
    async def test_not_json(self, database):
        client = FakeClient("I cannot analyze this label.")
        with pytest.raises(MalformedExternalResultError) as exc_info:
            await make_analyzer(database, client).analyze("Aqua")
        assert exc_info.value.error_code == ErrorCode.MALFORMED_EXTERNAL_RESULT
        assert http_status_for(exc_info.value) == 502

    @pytest.mark.asyncio
    async def test_schema_violation(self, database):
        payload = dict(VALID_PAYLOAD, ingredients=[{"name": "Aqua", "harm": "no risk level"}])
        client = FakeClient(json.dumps(payload))
        with pytest.raises(MalformedExternalResultError):
            await make_analyzer(database, client).analyze("Aqua")

    @pytest.mark.asyncio
    async def test_out_of_range_score(self, database):
        client = FakeClient(json.dumps(dict(VALID_PAYLOAD, overallScore=140)))
        with pytest.raises(MalformedExternalResultError):
            await make_analyzer(database, client).analyze("Aqua")

    @pytest.mark.asyncio
    async def test_service_error_propagates(self, database):
        error = ExternalServiceError("boom", error_code=ErrorCode.RATE_LIMITED)
        with pytest.raises(ExternalServiceError) as exc_info:
            await make_analyzer(database, FakeClient(error=error)).analyze("Aqua")
        assert http_status_for(exc_info.value) == 429

    @pytest.mark.asyncio
    async def test_failure_leaves_database_untouched(self, database):
        size = len(database)
        with pytest.raises(MalformedExternalResultError):
            await make_analyzer(database, FakeClient("{}")).analyze("Aqua")
        assert len(database) == size
        assert database.lookup("copper tripeptide-1") is None


class TestGeminiIngredientSchema:

    def test_enum_case_is_normalized(self):
        item = GeminiIngredient.model_validate({"name": " Aqua ", "riskLevel": " low ", "pregnancySafe": "Safe"})
        assert item.name == "Aqua"
        assert item.riskLevel == RiskLevel.LOW

    def test_record_defaults(self):
        record = GeminiIngredient.model_validate({"name": "X", "riskLevel": "HIGH"}).to_record()
        assert record.category == "Unclassified"
        assert record.evidence_source == "Model assessment"
        assert record.pregnancy_safety == PregnancySafety.CAUTION


class TestGeminiClient:

    def setup_method(self):
        self.client = GeminiClient(GeminiConfig(api_key="test-key", model="gemini-test", base_url="https://example.invalid/v1beta"))

    def test_endpoint(self):
        assert self.client.config.endpoint == "https://example.invalid/v1beta/models/gemini-test:generateContent"

    def test_request_body(self):
        body = self.client.build_request("hello")
        assert body["contents"][0]["parts"][0]["text"] == "hello"
        assert body["generationConfig"]["temperature"] == 0.0
        assert body["generationConfig"]["responseMimeType"] == "application/json"
        assert "ingredients" in body["generationConfig"]["responseSchema"]["properties"]

    @pytest.mark.asyncio
    async def test_generate_extracts_text(self):
        self.client._post = AsyncMock(return_value={
            "candidates": [{"content": {"parts": [{"text": '{"a":'}, {"text": " 1}"}]}}]
        })
        assert await self.client.generate("prompt") == '{"a": 1}'

    def test_no_candidates(self):
        with pytest.raises(MalformedExternalResultError) as exc_info:
            GeminiClient.extract_text({"promptFeedback": {"blockReason": "SAFETY"}})
        assert exc_info.value.details["block_reason"] == "SAFETY"

    def test_empty_candidate(self):
        with pytest.raises(MalformedExternalResultError):
            GeminiClient.extract_text({"candidates": [{"content": {"parts": []}, "finishReason": "MAX_TOKENS"}]})

    @pytest.mark.parametrize("data", [
        ["not", "an", "object"],
        {"candidates": {"a": 1}},
        {"candidates": ["x"]},
        {"candidates": [{"content": "text"}]},
        {"candidates": [{"content": {"parts": "text"}}]},
        {"candidates": [{"content": {"parts": [{"text": 42}]}}]},
        {"candidates": [], "promptFeedback": "blocked"},
    ])
    def test_unexpected_shapes(self, data):
        with pytest.raises(MalformedExternalResultError) as exc_info:
            GeminiClient.extract_text(data)
        assert http_status_for(exc_info.value) == 502

    @pytest.mark.asyncio
    async def test_unexpected_shape_fails_the_analysis(self, database):
        self.client._post = AsyncMock(return_value={"candidates": ["x"]})
        analyzer = GeminiIngredientAnalyzer(self.client, database=database, policy=ScorePolicy())
        with pytest.raises(MalformedExternalResultError) as exc_info:
            await analyzer.analyze("Aqua")
        assert exc_info.value.error_code == ErrorCode.MALFORMED_EXTERNAL_RESULT


@asynccontextmanager
async def local_gemini(handler, timeout: float = 5.0):
    """GeminiClient pointed at a local aiohttp server running ``handler``"""
    app = web.Application()
    app.router.add_post("/v1beta/models/{model}", handler)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    port = runner.addresses[0][1]
    config = GeminiConfig(
        api_key="test-key",
        model="gemini-test",
        base_url=f"http://127.0.0.1:{port}/v1beta",
        timeout=timeout
    )
    try:
        yield GeminiClient(config)
    finally:
        await runner.cleanup()


class TestGeminiTransport:
    """Status, timeout and body handling of the real HTTP call"""

    @pytest.mark.asyncio
    async def test_success(self):
        seen = {}

        async def handler(request):
            seen["path"] = request.path
            seen["key"] = request.headers.get("x-goog-api-key")
            seen["body"] = await request.json()
            return web.json_response({"candidates": [{"content": {"parts": [{"text": "{}"}]}}]})

        async with local_gemini(handler) as client:
            assert await client.generate("hello") == "{}"

        assert seen["path"] == "/v1beta/models/gemini-test:generateContent"
        assert seen["key"] == "test-key"
        assert seen["body"]["contents"][0]["parts"][0]["text"] == "hello"

    @pytest.mark.asyncio
    async def test_rate_limited(self):
        async def handler(request):
            return web.json_response({"error": {"code": 429}}, status=429)

        async with local_gemini(handler) as client:
            with pytest.raises(ExternalServiceError) as exc_info:
                await client.generate("hello")

        assert exc_info.value.error_code == ErrorCode.RATE_LIMITED
        assert http_status_for(exc_info.value) == 429

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 403, 500, 503])
    async def test_error_status(self, status):
        async def handler(request):
            return web.Response(status=status, text="upstream said no")

        async with local_gemini(handler) as client:
            with pytest.raises(ExternalServiceError) as exc_info:
                await client.generate("hello")

        error = exc_info.value
        assert error.error_code == ErrorCode.EXTERNAL_SERVICE_ERROR
        assert error.details["status"] == status
        assert error.details["body"] == "upstream said no"
        assert http_status_for(error) == 502

    @pytest.mark.asyncio
    async def test_timeout(self):
        async def handler(request):
            await asyncio.sleep(1.0)
            return web.json_response({})

        async with local_gemini(handler, timeout=0.1) as client:
            with pytest.raises(ExternalServiceError) as exc_info:
                await client.generate("hello")

        assert exc_info.value.error_code == ErrorCode.EXTERNAL_SERVICE_ERROR
        assert isinstance(exc_info.value.cause, asyncio.TimeoutError)

    @pytest.mark.asyncio
    async def test_connection_refused(self):
        async def handler(request):
            return web.json_response({})

        async with local_gemini(handler) as client:
            pass

        # Server is gone once the context exits
        with pytest.raises(ExternalServiceError) as exc_info:
            await client.generate("hello")
        assert exc_info.value.error_code == ErrorCode.EXTERNAL_SERVICE_ERROR

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        async def handler(request):
            return web.Response(status=200, text="<html>maintenance</html>")

        async with local_gemini(handler) as client:
            with pytest.raises(MalformedExternalResultError) as exc_info:
                await client.generate("hello")

        assert exc_info.value.error_code == ErrorCode.MALFORMED_EXTERNAL_RESULT
        assert http_status_for(exc_info.value) == 502
