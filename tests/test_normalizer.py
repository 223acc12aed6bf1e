# tests/test_normalizer.py
"""
Tokenizer and name normalizer tests
"""

import pytest

from purecheck.engine.normalizer import NameNormalizer, split_ingredient_text


class TestSplitIngredientText:

    def test_mixed_separators(self):
        tokens = split_ingredient_text("Aqua, Methylparaben; BPA\nNiacinamide")
        assert tokens == ["Aqua", "Methylparaben", "BPA", "Niacinamide"]

    def test_bullets_and_pipes(self):
        assert split_ingredient_text("Aqua • Glycerin | Panthenol") == ["Aqua", "Glycerin", "Panthenol"]

    def test_header_is_removed(self):
        assert split_ingredient_text("Ingredients: Aqua, Glycerin") == ["Aqua", "Glycerin"]
        assert split_ingredient_text("INCI - Aqua") == ["Aqua"]

    def test_parenthesised_commas_do_not_split(self):
        tokens = split_ingredient_text("Parfum (Fragrance, Limonene), Aqua")
        assert tokens == ["Parfum (Fragrance, Limonene)", "Aqua"]

    def test_numeric_commas_do_not_split(self):
        assert split_ingredient_text("1,2-Hexanediol, Aqua") == ["1,2-Hexanediol", "Aqua"]

    def test_newline_resets_unbalanced_parenthesis(self):
        assert split_ingredient_text("Aqua (water\nGlycerin, Panthenol") == ["Aqua (water", "Glycerin", "Panthenol"]

    @pytest.mark.parametrize("text", ["", "   ", None, ", , ;", "\n\n.\n"])
    def test_empty_input(self, text):
        assert split_ingredient_text(text) == []


class TestNameNormalizer:

    @pytest.fixture(autouse=True)
    def _normalizer(self, database):
        self.normalizer = NameNormalizer(database)

    def test_case_and_punctuation(self):
        assert self.normalizer.normalize("  METHYLPARABEN. ") == "methylparaben"
        assert self.normalizer.normalize("*Aqua") == "aqua"

    def test_alias(self):
        assert self.normalizer.normalize("BPA") == "bisphenol a"
        assert self.normalizer.normalize("Bisphenol A") == "bisphenol a"
        assert self.normalizer.normalize("bisphenol-a") == "bisphenol a"
        assert self.normalizer.normalize("Parfum") == "fragrance"

    def test_separator_variants(self):
        assert self.normalizer.normalize("Methyl-Paraben") == "methylparaben"
        assert self.normalizer.normalize("Methyl–paraben") == "methylparaben"
        assert self.normalizer.normalize("Methyl Paraben") == "methylparaben"

    def test_parenthetical_alternates(self):
        assert self.normalizer.normalize("Water (Aqua)") == "aqua"
        assert self.normalizer.normalize("Parfum (Fragrance)") == "fragrance"

    def test_slash_alternates(self):
        assert self.normalizer.normalize("Aqua/Water/Eau") == "aqua"

    def test_concentration_is_dropped(self):
        assert self.normalizer.normalize("Niacinamide 5%") == "niacinamide"
        assert self.normalizer.normalize("Salicylic Acid 0.5 %") == "salicylic acid"

    def test_unknown_keeps_cleaned_form(self):
        assert self.normalizer.normalize("  Mystery   Extract ") == "mystery extract"

    def test_blank(self):
        assert self.normalizer.normalize("") == ""
        assert self.normalizer.normalize(" ... ") == ""

    def test_normalize_all_drops_blanks(self):
        keys = self.normalizer.normalize_all(["Aqua", "  ", "BPA", "."])
        assert keys == ["aqua", "bisphenol a"]

    def test_pairs_keep_raw_display_text(self):
        pairs = self.normalizer.normalize_pairs(["  Dragon   Scale Extract ", ".", "BPA"])
        assert pairs == [("Dragon Scale Extract", "dragon scale extract"), ("BPA", "bisphenol a")]
