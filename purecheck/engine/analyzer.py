# purecheck/engine/analyzer.py
"""
Ingredient analyzers

``IngredientAnalyzer`` is the capability every backend implements:
``await analyzer.analyze(text) -> AnalysisReport``. The local analyzer runs
the deterministic pipeline (split -> normalize -> classify -> aggregate)
against the reference database; the Gemini analyzer in
``purecheck.llm.gemini_client`` delegates classification to the model API.
"""

from abc import ABC, abstractmethod
from typing import Optional
import asyncio
import time

from ..core.config import Settings, settings as default_settings
from ..core.exceptions import ConfigurationError, PureCheckException
from ..observability import analysis_logger, metrics_collector, get_logger, log_timing
from ..rules.reference_database import ReferenceDatabase, get_reference_database
from ..schemas.domain_models import AnalysisReport
from .aggregator import ReportAggregator, ScorePolicy
from .classifier import IngredientClassifier
from .normalizer import NameNormalizer, split_ingredient_text

logger = get_logger("analyzer")


class IngredientAnalyzer(ABC):
    """Text in, AnalysisReport out"""

    backend: str = "abstract"

    @abstractmethod
    async def analyze(self, text: str) -> AnalysisReport:
        raise NotImplementedError

    def analyze_sync(self, text: str) -> AnalysisReport:
        """Blocking wrapper for callers outside an event loop (CLI, scripts)"""
        return asyncio.run(self.analyze(text))

    async def _observed(self, text: str, run) -> AnalysisReport:
        """Run one analysis with logging and metrics around it"""
        start_time = time.time()
        try:
            report = await run(text)
        except PureCheckException as e:
            duration = time.time() - start_time
            metrics_collector.record_analysis(self.backend, success=False, duration_seconds=duration)
            analysis_logger.log_analysis(
                backend=self.backend,
                ingredient_count=0,
                overall_score=None,
                timing_ms=duration * 1000,
                success=False,
                error=f"{e.error_code.value}: {e.message}"
            )
            raise

        duration = time.time() - start_time
        metrics_collector.record_analysis(
            self.backend,
            success=True,
            duration_seconds=duration,
            ingredient_count=len(report.ingredients),
            overall_score=report.overall_score
        )
        analysis_logger.log_analysis(
            backend=self.backend,
            ingredient_count=len(report.ingredients),
            overall_score=report.overall_score,
            timing_ms=duration * 1000,
            success=True
        )
        return report


class LocalIngredientAnalyzer(IngredientAnalyzer):
    """Deterministic analyzer backed by the reference database"""

    backend = "local"

    def __init__(
        self,
        database: Optional[ReferenceDatabase] = None,
        policy: Optional[ScorePolicy] = None
    ):
        self.database = database if database is not None else get_reference_database()
        self.normalizer = NameNormalizer(self.database)
        self.classifier = IngredientClassifier(self.database)
        self.aggregator = ReportAggregator(policy or ScorePolicy.from_settings(default_settings))

    @log_timing(logger, "local_pipeline")
    def run(self, text: str) -> AnalysisReport:
        """The pipeline itself; never raises for any input string"""
        tokens = split_ingredient_text(text)
        pairs = self.normalizer.normalize_pairs(tokens)
        records = self.classifier.classify(
            [key for _, key in pairs],
            display_names=[display for display, _ in pairs]
        )
        logger.debug(
            "Local analysis pipeline",
            token_count=len(tokens),
            distinct_count=len(records)
        )
        return self.aggregator.aggregate(records)

    async def analyze(self, text: str) -> AnalysisReport:
        async def _run(value: str) -> AnalysisReport:
            return self.run(value)
        return await self._observed(text, _run)


def get_analyzer(
    backend: Optional[str] = None,
    app_settings: Optional[Settings] = None,
    database: Optional[ReferenceDatabase] = None
) -> IngredientAnalyzer:
    """
    Analyzer for the configured backend

    Raises:
        ConfigurationError: unknown backend, or Gemini without an API key
    """
    app_settings = app_settings or default_settings
    backend = (backend or app_settings.analyzer_backend).lower()

    if backend == "local":
        return LocalIngredientAnalyzer(
            database=database,
            policy=ScorePolicy.from_settings(app_settings)
        )

    if backend == "gemini":
        if not app_settings.gemini_api_key:
            raise ConfigurationError(
                "Gemini backend selected but PURECHECK_GEMINI_API_KEY is not set",
                details={"backend": backend}
            )
        from ..llm.gemini_client import GeminiClient, GeminiConfig, GeminiIngredientAnalyzer
        client = GeminiClient(GeminiConfig.from_settings(app_settings))
        return GeminiIngredientAnalyzer(
            client,
            database=database,
            policy=ScorePolicy.from_settings(app_settings)
        )

    raise ConfigurationError(f"Unknown analyzer backend '{backend}'", details={"backend": backend})


__all__ = [
    "IngredientAnalyzer",
    "LocalIngredientAnalyzer",
    "get_analyzer",
]
