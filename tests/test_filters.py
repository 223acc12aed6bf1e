# tests/test_filters.py
"""
Filter engine tests: identity, each concern filter and conjunction
"""

import itertools
import pytest

from purecheck.engine.filters import apply_filters
from purecheck.schemas.domain_models import FilterCriteria, FilterType, PregnancySafety, RiskLevel


@pytest.fixture
def report(analyzer):
    text = "Aqua, Methylparaben, BPA, Parfum, Salicylic Acid, Isopropyl Myristate, Retinol, Mystery Extract"
    return analyzer.run(text)


def names(records):
    return [r.name for r in records]


class TestFilterCriteria:

    def test_from_tokens(self):
        criteria = FilterCriteria.from_tokens(["Pregnancy", " acne ", "bogus"])
        assert criteria.active == frozenset({FilterType.PREGNANCY, FilterType.ACNE})
        assert criteria.to_tokens() == ("acne", "pregnancy")

    def test_empty(self):
        assert not FilterCriteria.from_tokens([])
        assert not FilterCriteria.from_tokens(None)


class TestApplyFilters:

    def test_identity(self, report):
        assert apply_filters(report, FilterCriteria()) == list(report.ingredients)
        assert apply_filters(report) == list(report.ingredients)

    def test_unknown_tokens_are_ignored(self, report):
        assert apply_filters(report, ["bogus", "vegan"]) == list(report.ingredients)

    def test_pregnancy(self, report):
        filtered = apply_filters(report, ["pregnancy"])
        assert all(r.pregnancy_safety != PregnancySafety.AVOID for r in filtered)
        assert "Methylparaben" not in names(filtered)
        assert "Retinol" not in names(filtered)
        assert "Aqua" in names(filtered)

    def test_sensitive(self, report):
        filtered = apply_filters(report, ["sensitive"])
        assert all(r.risk_level != RiskLevel.HIGH for r in filtered)
        assert "Mystery Extract" in names(filtered)

    def test_acne(self, report):
        filtered = apply_filters(report, ["acne"])
        assert names(filtered) == ["Salicylic Acid", "Isopropyl Myristate", "Retinol"]

    def test_pcos(self, report):
        filtered = apply_filters(report, ["pcos"])
        assert names(filtered) == ["Methylparaben", "Bisphenol A (BPA)"]

    def test_report_is_not_modified(self, report):
        before = report.model_dump()
        apply_filters(report, ["pregnancy", "sensitive", "acne", "pcos"])
        assert report.model_dump() == before

    def test_conjunction_is_intersection(self, report):
        tokens = [f.value for f in FilterType]
        for a, b in itertools.combinations(tokens, 2):
            combined = apply_filters(report, [a, b])
            only_a = apply_filters(report, [a])
            only_b = apply_filters(report, [b])
            assert combined == [r for r in only_a if r in only_b]

    def test_order_is_preserved(self, report):
        filtered = apply_filters(report, ["sensitive"])
        positions = [list(report.ingredients).index(r) for r in filtered]
        assert positions == sorted(positions)
