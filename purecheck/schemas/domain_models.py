# purecheck/schemas/domain_models.py

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, FrozenSet, Iterable, Tuple
from dataclasses import dataclass, field
from enum import Enum
import logging

logger = logging.getLogger(__name__)


# ============================================================================
# Enums for Type Safety
# ============================================================================

class RiskLevel(str, Enum):
    """Hazard level of a single ingredient"""
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"
    UNKNOWN = "UNKNOWN"  # No data on record anywhere


class PregnancySafety(str, Enum):
    """Pregnancy suitability of a single ingredient"""
    SAFE = "SAFE"
    CAUTION = "CAUTION"
    AVOID = "AVOID"


class ConcernCategory(str, Enum):
    """Lenses used for percentage-based risk reporting"""
    ENDOCRINE = "endocrine"
    PREGNANCY = "pregnancy"
    SKIN = "skin"
    PCOS = "pcos"


class FilterType(str, Enum):
    """User-selectable concern filters"""
    PREGNANCY = "pregnancy"
    PCOS = "pcos"
    ACNE = "acne"
    SENSITIVE = "sensitive"


# ============================================================================
# Ingredient Record
# ============================================================================

class IngredientRecord(BaseModel):
    """
    Hazard metadata for one substance.

    Serialised with the field names existing web clients expect
    (``riskLevel``, ``harm``, ``evidence``, ``pregnancySafe``); Python code
    uses the snake_case attribute names.
    """

    name: str
    category: str = "Unclassified"
    risk_level: RiskLevel = Field(..., alias="riskLevel")
    harm_description: str = Field(default="", alias="harm")
    evidence_source: str = Field(default="", alias="evidence")
    pregnancy_safety: PregnancySafety = Field(default=PregnancySafety.CAUTION, alias="pregnancySafe")
    tags: Tuple[str, ...] = Field(default=(), description="Concern labels, e.g. 'EDC', 'Carcinogen'")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "name": "Methylparaben",
                "category": "Paraben",
                "riskLevel": "HIGH",
                "harm": "Endocrine disruption, estrogen mimic.",
                "evidence": "SCCS",
                "pregnancySafe": "AVOID",
                "tags": ["EDC", "Hormone Disruptor"]
            }
        }
    }

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Name must be non-empty after trimming"""
        v = v.strip()
        if not v:
            raise ValueError("Ingredient name must not be empty")
        return v

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Trim tags, drop blanks and repeats (first occurrence wins)"""
        seen = []
        for tag in v:
            tag = tag.strip()
            if tag and tag not in seen:
                seen.append(tag)
        return tuple(seen)

    def has_tag_matching(self, keywords: Iterable[str]) -> bool:
        """True if any tag contains any keyword (case-insensitive substring)"""
        lowered = [tag.lower() for tag in self.tags]
        return any(keyword in tag for tag in lowered for keyword in keywords)

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ============================================================================
# Analysis Report
# ============================================================================

class ConcernBreakdown(BaseModel):
    """Percentage (0-100) of ingredients matching each concern category"""

    endocrine: int = Field(default=0, ge=0, le=100)
    pregnancy: int = Field(default=0, ge=0, le=100)
    skin: int = Field(default=0, ge=0, le=100)
    pcos: int = Field(default=0, ge=0, le=100)

    model_config = {"frozen": True}

    def get(self, category: ConcernCategory) -> int:
        return getattr(self, category.value)


class AnalysisReport(BaseModel):
    """Aggregate result of classifying one submitted ingredient list"""

    overall_score: int = Field(default=100, ge=0, le=100, alias="overallScore")
    summary: str
    ingredients: Tuple[IngredientRecord, ...] = ()
    concerns: ConcernBreakdown = Field(default_factory=ConcernBreakdown)

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "overallScore": 50,
                "summary": "2 of 4 ingredients are high risk, driven mainly by Bisphenol (1) and Paraben (1).",
                "ingredients": [],
                "concerns": {"endocrine": 50, "pregnancy": 50, "skin": 0, "pcos": 50}
            }
        }
    }

    @property
    def is_empty(self) -> bool:
        return not self.ingredients

    def to_json_dict(self) -> Dict[str, Any]:
        """JSON-shaped projection (overallScore, summary, ingredients[], concerns{})"""
        return self.model_dump(mode="json", by_alias=True)


# ============================================================================
# Filter Criteria
# ============================================================================

@dataclass(frozen=True)
class FilterCriteria:
    """Set of active concern filters (UI-local, never persisted)"""

    active: FrozenSet[FilterType] = field(default_factory=frozenset)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "FilterCriteria":
        """Build criteria from raw tokens; unknown tokens are ignored"""
        active = set()
        for token in tokens or ():
            try:
                active.add(FilterType(str(token).strip().lower()))
            except ValueError:
                logger.debug(f"Ignoring unknown filter token: {token!r}")
        return cls(active=frozenset(active))

    def is_active(self, filter_type: FilterType) -> bool:
        return filter_type in self.active

    def __bool__(self) -> bool:
        return bool(self.active)

    def to_tokens(self) -> Tuple[str, ...]:
        return tuple(sorted(f.value for f in self.active))


__all__ = [
    "RiskLevel",
    "PregnancySafety",
    "ConcernCategory",
    "FilterType",
    "IngredientRecord",
    "ConcernBreakdown",
    "AnalysisReport",
    "FilterCriteria",
]
