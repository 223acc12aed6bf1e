# purecheck/llm/schemas.py
"""
Model output schemas
Pydantic models for the JSON the model API is asked to return
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional

from ..schemas.domain_models import IngredientRecord, PregnancySafety, RiskLevel


class GeminiIngredient(BaseModel):
    """One ingredient as classified by the model"""

    name: str = Field(..., min_length=1)
    category: Optional[str] = None
    riskLevel: RiskLevel
    harm: str = ""
    evidence: Optional[str] = None
    pregnancySafe: Optional[PregnancySafety] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("riskLevel", "pregnancySafe", mode="before")
    @classmethod
    def uppercase_enum(cls, v: Any) -> Any:
        """Models sometimes answer 'high' or ' Avoid '"""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Ingredient name must not be empty")
        return v

    def to_record(self) -> IngredientRecord:
        return IngredientRecord(
            name=self.name,
            category=(self.category or "").strip() or "Unclassified",
            risk_level=self.riskLevel,
            harm_description=self.harm,
            evidence_source=(self.evidence or "").strip() or "Model assessment",
            pregnancy_safety=self.pregnancySafe or PregnancySafety.CAUTION,
            tags=tuple(self.tags)
        )


class GeminiConcerns(BaseModel):
    """Concern percentages as reported by the model (informational only)"""
    endocrine: float = 0
    pregnancy: float = 0
    skin: float = 0
    pcos: float = 0


class GeminiAnalysisPayload(BaseModel):
    """Top-level analysis payload"""

    overallScore: float = Field(..., ge=0, le=100)
    summary: str
    ingredients: List[GeminiIngredient]
    concerns: GeminiConcerns = Field(default_factory=GeminiConcerns)

    model_config = {
        "json_schema_extra": {
            "example": {
                "overallScore": 50,
                "summary": "Contains a paraben and bisphenol A.",
                "ingredients": [
                    {"name": "Methylparaben", "category": "Paraben", "riskLevel": "HIGH",
                     "harm": "Endocrine disruption.", "evidence": "SCCS",
                     "pregnancySafe": "AVOID", "tags": ["EDC"]}
                ],
                "concerns": {"endocrine": 25, "pregnancy": 25, "skin": 0, "pcos": 25}
            }
        }
    }


# generateContent responseSchema (OpenAPI subset understood by the API)
ANALYSIS_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "overallScore": {"type": "NUMBER"},
        "summary": {"type": "STRING"},
        "ingredients": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "name": {"type": "STRING"},
                    "category": {"type": "STRING"},
                    "riskLevel": {"type": "STRING", "enum": ["LOW", "MODERATE", "HIGH"]},
                    "harm": {"type": "STRING"},
                    "evidence": {"type": "STRING"},
                    "pregnancySafe": {"type": "STRING", "enum": ["SAFE", "CAUTION", "AVOID"]},
                    "tags": {"type": "ARRAY", "items": {"type": "STRING"}}
                },
                "required": ["name", "riskLevel", "harm"]
            }
        },
        "concerns": {
            "type": "OBJECT",
            "properties": {
                "endocrine": {"type": "NUMBER"},
                "pregnancy": {"type": "NUMBER"},
                "skin": {"type": "NUMBER"},
                "pcos": {"type": "NUMBER"}
            }
        }
    },
    "required": ["overallScore", "summary", "ingredients", "concerns"]
}


__all__ = [
    "GeminiIngredient",
    "GeminiConcerns",
    "GeminiAnalysisPayload",
    "ANALYSIS_RESPONSE_SCHEMA",
]
