# purecheck/engine/normalizer.py
"""
Ingredient name normalization

Splits a raw label / text-box ingredient list into tokens and turns each
token into the canonical key used for reference database lookups.
"""

from typing import List, Optional, Sequence, Tuple
import re
import unicodedata

from ..rules.reference_database import ReferenceDatabase, make_key, compact_key


# Leading "Ingredients:" / "INCI:" style headers
_HEADER = re.compile(r"(?im)^\s*(?:ingredients?|ingr[ée]dients|inci|composition)\s*[:\-]\s*")

# Unicode hyphens and dashes
_DASHES = re.compile(r"[‐‑‒–—−]")

# Trailing concentration, e.g. "Niacinamide 5%"
_CONCENTRATION = re.compile(r"\s*\d+(?:[.,]\d+)?\s*%$")

_PARENTHETICAL = re.compile(r"[(\[]([^)\]]*)[)\]]")

_EDGE_CHARS = " \t.,;:!?\"'`*†‡°^•·-_/\\"

_SEPARATORS = {",", ";", "•", "·", "|"}


def split_ingredient_text(text: Optional[str]) -> List[str]:
    """
    Split a comma-, semicolon-, bullet- or line-delimited ingredient list.

    Separators inside parentheses and commas between two digits
    ("1,2-Hexanediol") do not split. Empty tokens are dropped.
    """
    if not text or not text.strip():
        return []

    text = _HEADER.sub("", text)

    tokens: List[str] = []
    current: List[str] = []
    depth = 0

    for i, ch in enumerate(text):
        if ch in "\r\n":
            tokens.append("".join(current))
            current = []
            depth = 0
            continue
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(0, depth - 1)
        elif ch in _SEPARATORS and depth == 0:
            prev_ch = text[i - 1] if i > 0 else ""
            next_ch = text[i + 1] if i + 1 < len(text) else ""
            if not (ch == "," and prev_ch.isdigit() and next_ch.isdigit()):
                tokens.append("".join(current))
                current = []
                continue
        current.append(ch)

    tokens.append("".join(current))
    return [token.strip() for token in tokens if token.strip(_EDGE_CHARS)]


class NameNormalizer:
    """
    Raw ingredient token -> canonical lookup key.

    Resolution order for each candidate form (full token, token without
    parentheticals, slash-separated parts, parenthesised alternates):
    exact key or alias, hyphens read as spaces, separator-free form.
    Tokens that resolve nowhere normalize to their cleaned lower-case form.
    """

    def __init__(self, database: ReferenceDatabase):
        self.database = database

    def normalize(self, raw_token: str) -> str:
        base = self._clean(raw_token)
        if not base:
            return ""

        for candidate in self._candidates(base):
            resolved = self._resolve(candidate)
            if resolved is not None:
                return resolved

        return base

    def normalize_all(self, raw_tokens: Sequence[str]) -> List[str]:
        """Normalize tokens in order, dropping tokens that clean to nothing"""
        return [key for _, key in self.normalize_pairs(raw_tokens)]

    def normalize_pairs(self, raw_tokens: Sequence[str]) -> List[Tuple[str, str]]:
        """(display text, key) per token; display text is the trimmed raw token"""
        pairs = []
        for token in raw_tokens:
            key = self.normalize(token)
            if key:
                display = " ".join(token.split()).strip(_EDGE_CHARS)
                pairs.append((display or key, key))
        return pairs

    @staticmethod
    def _clean(raw_token: str) -> str:
        if not raw_token:
            return ""
        text = unicodedata.normalize("NFKC", raw_token)
        text = _DASHES.sub("-", text)
        text = make_key(text).strip(_EDGE_CHARS)
        text = _CONCENTRATION.sub("", text)
        return make_key(text.strip(_EDGE_CHARS))

    @staticmethod
    def _candidates(base: str) -> List[str]:
        candidates = [base]

        main = make_key(_PARENTHETICAL.sub(" ", base)).strip(_EDGE_CHARS)
        if main:
            candidates.append(main)
            if "/" in main:
                candidates.extend(part for part in main.split("/"))

        for inner in _PARENTHETICAL.findall(base):
            for part in re.split(r"[/,;]", inner):
                part = part.strip(_EDGE_CHARS)
                if part and part != "and":
                    candidates.append(part)

        seen = []
        for candidate in candidates:
            candidate = make_key(candidate)
            if candidate and candidate not in seen:
                seen.append(candidate)
        return seen

    def _resolve(self, candidate: str) -> Optional[str]:
        resolved = self.database.resolve_key(candidate)
        if resolved is not None:
            return resolved

        if "-" in candidate:
            resolved = self.database.resolve_key(make_key(candidate.replace("-", " ")))
            if resolved is not None:
                return resolved

        return self.database.resolve_compact(compact_key(candidate))


__all__ = ["NameNormalizer", "split_ingredient_text"]
