# purecheck/llm/__init__.py
"""
External model backend
Gemini-backed ingredient classification with schema-validated output
"""

from .schemas import GeminiAnalysisPayload, GeminiIngredient, GeminiConcerns, ANALYSIS_RESPONSE_SCHEMA
from .gemini_client import GeminiClient, GeminiConfig, GeminiIngredientAnalyzer

__all__ = [
    "GeminiAnalysisPayload",
    "GeminiIngredient",
    "GeminiConcerns",
    "ANALYSIS_RESPONSE_SCHEMA",
    "GeminiClient",
    "GeminiConfig",
    "GeminiIngredientAnalyzer",
]
