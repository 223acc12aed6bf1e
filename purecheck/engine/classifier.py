# purecheck/engine/classifier.py
"""
Ingredient classification against the reference database
"""

from typing import List, Optional, Sequence

from ..rules.reference_database import ReferenceDatabase
from ..schemas.domain_models import IngredientRecord, RiskLevel, PregnancySafety


UNKNOWN_HARM_DESCRIPTION = "No toxicology data on record for this ingredient."


def unknown_record(name: str) -> IngredientRecord:
    """Record for an ingredient with no data anywhere (not even the monitor list)"""
    return IngredientRecord(
        name=name,
        category="Unclassified",
        risk_level=RiskLevel.UNKNOWN,
        harm_description=UNKNOWN_HARM_DESCRIPTION,
        evidence_source="None",
        pregnancy_safety=PregnancySafety.CAUTION,
        tags=()
    )


class IngredientClassifier:
    """Resolve canonical keys to records, first occurrence wins"""

    def __init__(self, database: ReferenceDatabase):
        self.database = database

    def classify(
        self,
        canonical_keys: Sequence[str],
        display_names: Optional[Sequence[str]] = None
    ) -> List[IngredientRecord]:
        """
        One record per distinct canonical key, in first-occurrence order.

        Keys on record (curated or monitor list) yield the stored record;
        anything else yields an UNKNOWN record named after the first raw
        token seen for that key (``display_names`` runs parallel to the
        keys), or the key itself. Never raises.
        """
        seen = set()
        records = []
        for index, key in enumerate(canonical_keys):
            if not key:
                continue
            canonical = self.database.resolve_key(key) or key
            if canonical in seen:
                continue
            seen.add(canonical)
            record = self.database.lookup(canonical)
            if record is None:
                name = display_names[index] if display_names and index < len(display_names) else ""
                record = unknown_record(name or key)
            records.append(record)
        return records


__all__ = ["IngredientClassifier", "unknown_record", "UNKNOWN_HARM_DESCRIPTION"]
