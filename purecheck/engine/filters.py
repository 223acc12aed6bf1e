# purecheck/engine/filters.py
"""
Concern filters over a finished report
"""

from typing import Callable, Dict, Iterable, List, Union

from ..schemas.domain_models import (
    AnalysisReport, FilterCriteria, FilterType, IngredientRecord, PregnancySafety, RiskLevel
)


ACNE_KEYWORDS = ("acne", "pore", "clog")
PCOS_FILTER_KEYWORDS = ("endocrine", "hormone", "pcos")


# Each predicate decides whether a record survives one active filter
FILTER_PREDICATES: Dict[FilterType, Callable[[IngredientRecord], bool]] = {
    FilterType.PREGNANCY: lambda r: r.pregnancy_safety != PregnancySafety.AVOID,
    FilterType.ACNE: lambda r: r.has_tag_matching(ACNE_KEYWORDS),
    FilterType.PCOS: lambda r: r.has_tag_matching(PCOS_FILTER_KEYWORDS),
    FilterType.SENSITIVE: lambda r: r.risk_level != RiskLevel.HIGH,
}


def apply_filters(
    report: AnalysisReport,
    criteria: Union[FilterCriteria, Iterable[str], None] = None
) -> List[IngredientRecord]:
    """
    Records of ``report`` passing every active filter, in report order.

    ``criteria`` may be a FilterCriteria or raw filter tokens; unknown tokens
    are ignored. With no active filter the full ingredient list is returned.
    The report itself is never modified.
    """
    if not isinstance(criteria, FilterCriteria):
        criteria = FilterCriteria.from_tokens(criteria or ())

    predicates = [FILTER_PREDICATES[f] for f in sorted(criteria.active, key=lambda f: f.value)]
    return [record for record in report.ingredients if all(p(record) for p in predicates)]


__all__ = ["apply_filters", "FILTER_PREDICATES"]
