# tests/conftest.py
"""
Shared fixtures: a small synthetic reference database and analyzers over it
"""

import pytest

from purecheck.engine.aggregator import ReportAggregator, ScorePolicy
from purecheck.engine.analyzer import LocalIngredientAnalyzer
from purecheck.rules.reference_database import ReferenceDatabase
from purecheck.schemas.domain_models import (
    IngredientRecord, PregnancySafety, RiskLevel
)


SYNTHETIC_CURATED = {
    "methylparaben": {
        "name": "Methylparaben", "category": "Paraben", "riskLevel": "HIGH",
        "harm": "Estrogen mimic.", "evidence": "SCCS", "pregnancySafe": "AVOID",
        "tags": ["EDC", "Hormone Disruptor"]
    },
    "bisphenol a": {
        "name": "Bisphenol A (BPA)", "category": "Bisphenol", "riskLevel": "HIGH",
        "harm": "Potent EDC.", "evidence": "CDC", "pregnancySafe": "AVOID",
        "tags": ["EDC", "Hormone Disruptor"]
    },
    "aqua": {
        "name": "Aqua", "category": "Solvent", "riskLevel": "LOW",
        "harm": "Safe base ingredient.", "evidence": "Inert", "pregnancySafe": "SAFE",
        "tags": ["Safe"]
    },
    "niacinamide": {
        "name": "Niacinamide", "category": "Vitamin", "riskLevel": "LOW",
        "harm": "Barrier repair.", "evidence": "Dermatology", "pregnancySafe": "SAFE",
        "tags": ["Safe"]
    },
    "fragrance": {
        "name": "Fragrance (Parfum)", "category": "Fragrance", "riskLevel": "MODERATE",
        "harm": "Undisclosed mixture.", "evidence": "AAD", "pregnancySafe": "CAUTION",
        "tags": ["Allergen", "Irritant"]
    },
    "salicylic acid": {
        "name": "Salicylic Acid", "category": "Exfoliant", "riskLevel": "LOW",
        "harm": "Unclogs pores.", "evidence": "Dermatology", "pregnancySafe": "CAUTION",
        "tags": ["Acne Treatment"]
    },
    "isopropyl myristate": {
        "name": "Isopropyl Myristate", "category": "Emollient", "riskLevel": "MODERATE",
        "harm": "Highly comedogenic.", "evidence": "Dermatology", "pregnancySafe": "SAFE",
        "tags": ["Pore-Clogging"]
    },
    "retinol": {
        "name": "Retinol", "category": "Retinoid", "riskLevel": "MODERATE",
        "harm": "Irritating active.", "evidence": "Dermatology", "pregnancySafe": "AVOID",
        "tags": ["Irritant", "Acne Treatment"]
    },
    "1,2-hexanediol": {
        "name": "1,2-Hexanediol", "category": "Solvent", "riskLevel": "LOW",
        "harm": "Humectant solvent.", "evidence": "CIR", "pregnancySafe": "SAFE",
        "tags": []
    },
}

SYNTHETIC_ALIASES = {
    "water": "aqua",
    "bpa": "bisphenol a",
    "parfum": "fragrance",
    "methyl paraben": "methylparaben",
}

# "BPA" is an alias already and must not become a monitor record
SYNTHETIC_MONITOR = ["Triclosan", "Toluene", "BPA"]


@pytest.fixture
def database():
    """Synthetic reference database"""
    return ReferenceDatabase(
        curated=SYNTHETIC_CURATED,
        aliases=SYNTHETIC_ALIASES,
        monitor_names=SYNTHETIC_MONITOR
    )


@pytest.fixture
def analyzer(database):
    """Local analyzer over the synthetic database with default penalties"""
    return LocalIngredientAnalyzer(database=database, policy=ScorePolicy())


@pytest.fixture
def aggregator():
    return ReportAggregator(ScorePolicy())


@pytest.fixture
def make_record():
    """Factory for ad-hoc ingredient records"""
    def _make(
        name: str,
        risk_level: RiskLevel = RiskLevel.LOW,
        category: str = "Test",
        pregnancy_safety: PregnancySafety = PregnancySafety.SAFE,
        tags=()
    ) -> IngredientRecord:
        return IngredientRecord(
            name=name,
            category=category,
            risk_level=risk_level,
            harm_description="",
            evidence_source="Test",
            pregnancy_safety=pregnancy_safety,
            tags=tuple(tags)
        )
    return _make
