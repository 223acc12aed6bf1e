# purecheck/engine/aggregator.py
"""
Report aggregation: purity score, concern percentages and summary
"""

from typing import Dict, List, Optional, Sequence
from collections import Counter
from dataclasses import dataclass

from ..core.config import Settings
from ..schemas.domain_models import (
    AnalysisReport, ConcernBreakdown, IngredientRecord, PregnancySafety, RiskLevel
)


# Concern criteria (case-insensitive substring match on tags)
# PCOS keywords are a subset of the endocrine ones
PCOS_KEYWORDS = ("hormone", "pcos", "reprotoxic", "androgen")
ENDOCRINE_KEYWORDS = ("edc", "endocrine") + PCOS_KEYWORDS
SKIN_KEYWORDS = ("irritant", "allergen", "sensitizer")

EMPTY_SUMMARY = "No ingredients were found in the submitted text."

MAX_SUMMARY_CATEGORIES = 3


@dataclass(frozen=True)
class ScorePolicy:
    """Purity score penalty per risk level (LOW costs nothing)"""
    high: int = 25
    moderate: int = 10
    unknown: int = 3

    def __post_init__(self):
        if not (self.high > self.moderate > self.unknown > 0):
            raise ValueError(
                f"Penalties must satisfy high > moderate > unknown > 0, got {self}"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScorePolicy":
        return cls(
            high=settings.penalty_high,
            moderate=settings.penalty_moderate,
            unknown=settings.penalty_unknown
        )

    def penalty(self, level: RiskLevel) -> int:
        return {
            RiskLevel.HIGH: self.high,
            RiskLevel.MODERATE: self.moderate,
            RiskLevel.UNKNOWN: self.unknown,
        }.get(level, 0)


def _plural(count: int, singular: str, plural: Optional[str] = None) -> str:
    return f"{count} {singular if count == 1 else (plural or singular + 's')}"


def _join(parts: List[str]) -> str:
    if len(parts) <= 1:
        return "".join(parts)
    return ", ".join(parts[:-1]) + " and " + parts[-1]


class ReportAggregator:
    """Combine classified records into an AnalysisReport"""

    def __init__(self, policy: Optional[ScorePolicy] = None):
        self.policy = policy or ScorePolicy()

    def aggregate(self, records: Sequence[IngredientRecord]) -> AnalysisReport:
        records = tuple(records)
        if not records:
            return AnalysisReport(overall_score=100, summary=EMPTY_SUMMARY, ingredients=(), concerns=ConcernBreakdown())

        return AnalysisReport(
            overall_score=self.score(records),
            summary=self.summarize(records),
            ingredients=records,
            concerns=self.concerns(records)
        )

    def score(self, records: Sequence[IngredientRecord]) -> int:
        """100 minus the risk penalties, floored at 0"""
        total = 100
        for record in records:
            total = max(0, total - self.policy.penalty(record.risk_level))
        return total

    @staticmethod
    def concerns(records: Sequence[IngredientRecord]) -> ConcernBreakdown:
        if not records:
            return ConcernBreakdown()

        hits = {
            "endocrine": sum(1 for r in records if r.has_tag_matching(ENDOCRINE_KEYWORDS)),
            "pregnancy": sum(1 for r in records if r.pregnancy_safety == PregnancySafety.AVOID),
            "skin": sum(1 for r in records if r.has_tag_matching(SKIN_KEYWORDS)),
            "pcos": sum(1 for r in records if r.has_tag_matching(PCOS_KEYWORDS)),
        }
        total = len(records)
        return ConcernBreakdown(**{name: round(count * 100 / total) for name, count in hits.items()})

    @staticmethod
    def summarize(records: Sequence[IngredientRecord]) -> str:
        """
        Deterministic summary naming the dominant risk drivers.

        Categories are ranked by HIGH-risk count, ties alphabetically, so the
        text does not depend on input order.
        """
        if not records:
            return EMPTY_SUMMARY

        levels: Dict[RiskLevel, int] = Counter(r.risk_level for r in records)
        total = len(records)
        high = levels.get(RiskLevel.HIGH, 0)
        moderate = levels.get(RiskLevel.MODERATE, 0)
        unknown = levels.get(RiskLevel.UNKNOWN, 0)

        sentences = []
        if high:
            by_category = Counter(r.category for r in records if r.risk_level == RiskLevel.HIGH)
            ranked = sorted(by_category.items(), key=lambda item: (-item[1], item[0]))
            drivers = _join([f"{category} ({count})" for category, count in ranked[:MAX_SUMMARY_CATEGORIES]])
            verb = "is" if high == 1 else "are"
            sentences.append(f"{high} of {_plural(total, 'ingredient')} {verb} high risk, driven mainly by {drivers}.")
        else:
            sentences.append(f"No high-risk ingredients detected among {_plural(total, 'ingredient')}.")

        if moderate:
            sentences.append(f"{_plural(moderate, 'ingredient')} {'warrants' if moderate == 1 else 'warrant'} caution.")

        monitored = sum(1 for r in records if r.has_tag_matching(("monitor",)))
        if monitored:
            sentences.append(f"{_plural(monitored, 'ingredient')} flagged from the chemical monitor list.")

        if unknown:
            sentences.append(f"{_plural(unknown, 'ingredient')} {'has' if unknown == 1 else 'have'} no toxicology data on record.")

        if any(r.pregnancy_safety == PregnancySafety.AVOID for r in records):
            sentences.append("Not recommended during pregnancy.")

        return " ".join(sentences)


__all__ = ["ReportAggregator", "ScorePolicy", "EMPTY_SUMMARY"]
