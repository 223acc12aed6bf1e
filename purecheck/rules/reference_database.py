# purecheck/rules/reference_database.py
"""
Ingredient hazard reference database
Canonical key / alias lookups, monitor-list fallback and wiki search
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional
from types import MappingProxyType
from pathlib import Path
import json
import re
import logging

from pydantic import ValidationError

from ..core.config import settings
from ..core.exceptions import ReferenceDataError
from ..schemas.domain_models import IngredientRecord
from .reference_data import (
    CURATED_INGREDIENTS, INGREDIENT_ALIASES, EXTENDED_MONITOR_LIST, MONITOR_RECORD_TEMPLATE
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_NON_ALNUM = re.compile(r"[^0-9a-z]+")


def make_key(name: str) -> str:
    """Lower-cased, trimmed, whitespace-collapsed lookup key"""
    return _WHITESPACE.sub(" ", name.strip().lower())


def compact_key(name: str) -> str:
    """Key with every separator removed ("Methyl-Paraben" -> "methylparaben")"""
    return _NON_ALNUM.sub("", name.lower())


class ReferenceDatabase:
    """
    Immutable mapping of canonical lookup keys (and aliases) to records.

    Built once from static reference data; every structure is exposed
    read-only so a single instance can be shared by all requests.

    Names on the extended monitor list without curated detail get a
    conservative synthesized record (HIGH risk, AVOID in pregnancy, tagged
    "Monitor"): an undocumented chemical of interest is assumed risky.
    """

    def __init__(
        self,
        curated: Optional[Mapping[str, Mapping[str, Any]]] = None,
        aliases: Optional[Mapping[str, str]] = None,
        monitor_names: Optional[Iterable[str]] = None,
        extension_path: Optional[str] = None
    ):
        records: Dict[str, IngredientRecord] = {}
        alias_map: Dict[str, str] = {}

        self._load_curated(CURATED_INGREDIENTS if curated is None else curated, records)
        if extension_path:
            self._load_extension(extension_path, records, alias_map)
        self._load_aliases(INGREDIENT_ALIASES if aliases is None else aliases, records, alias_map)
        monitor_keys = self._load_monitor_list(
            EXTENDED_MONITOR_LIST if monitor_names is None else monitor_names, records, alias_map
        )

        self._records = MappingProxyType(records)
        self._aliases = MappingProxyType(alias_map)
        self._monitor_keys = frozenset(monitor_keys)
        self._compact_index = MappingProxyType(self._build_compact_index(records, alias_map))

        logger.info(
            f"Reference database loaded: {len(records)} records "
            f"({len(self._monitor_keys)} monitor-list), {len(alias_map)} aliases"
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @staticmethod
    def _build_record(key: str, entry: Mapping[str, Any]) -> IngredientRecord:
        try:
            return IngredientRecord.model_validate(dict(entry))
        except ValidationError as e:
            raise ReferenceDataError(
                f"Invalid reference entry '{key}'",
                details={"key": key, "errors": e.errors(include_url=False)},
                cause=e
            )

    def _load_curated(self, curated: Mapping[str, Mapping[str, Any]], records: Dict[str, IngredientRecord]):
        for raw_key, entry in curated.items():
            key = make_key(raw_key)
            if key in records:
                raise ReferenceDataError(f"Duplicate reference key '{key}'", details={"key": key})
            records[key] = self._build_record(key, entry)

    def _load_extension(self, path_str: str, records: Dict[str, IngredientRecord], alias_map: Dict[str, str]):
        """Merge curated entries from a JSON file ({"ingredients": {...}, "aliases": {...}})"""
        path = Path(path_str)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ReferenceDataError(
                f"Cannot read reference data file {path}",
                details={"path": str(path)},
                cause=e
            )

        if not isinstance(data, dict) or not isinstance(data.get("ingredients", {}), dict):
            raise ReferenceDataError(
                f"Reference data file {path} must hold an 'ingredients' object",
                details={"path": str(path)}
            )

        for raw_key, entry in data.get("ingredients", {}).items():
            key = make_key(raw_key)
            if not isinstance(entry, dict):
                raise ReferenceDataError(f"Invalid reference entry '{key}'", details={"key": key})
            if key in records:
                logger.info(f"Reference entry '{key}' overridden by {path.name}")
            records[key] = self._build_record(key, entry)

        extra_aliases = data.get("aliases", {})
        if not isinstance(extra_aliases, dict):
            raise ReferenceDataError(f"'aliases' in {path} must be an object", details={"path": str(path)})
        for alias, target in extra_aliases.items():
            alias_map[make_key(alias)] = make_key(str(target))

    @staticmethod
    def _load_aliases(aliases: Mapping[str, str], records: Dict[str, IngredientRecord], alias_map: Dict[str, str]):
        for raw_alias, raw_target in aliases.items():
            alias_map.setdefault(make_key(raw_alias), make_key(raw_target))

        for alias, target in alias_map.items():
            if alias in records:
                raise ReferenceDataError(
                    f"Alias '{alias}' collides with a curated key",
                    details={"alias": alias}
                )
            if target not in records:
                raise ReferenceDataError(
                    f"Alias '{alias}' points to unknown key '{target}'",
                    details={"alias": alias, "target": target}
                )

    @staticmethod
    def _load_monitor_list(
        names: Iterable[str],
        records: Dict[str, IngredientRecord],
        alias_map: Dict[str, str]
    ) -> List[str]:
        monitor_keys = []
        for name in names:
            key = make_key(name)
            if not key or key in records or key in alias_map:
                continue
            records[key] = IngredientRecord.model_validate({"name": name.strip(), **MONITOR_RECORD_TEMPLATE})
            monitor_keys.append(key)
        return monitor_keys

    @staticmethod
    def _build_compact_index(records: Mapping[str, IngredientRecord], alias_map: Mapping[str, str]) -> Dict[str, str]:
        index: Dict[str, str] = {}
        candidates = [(key, key) for key in records] + list(alias_map.items())
        for key, canonical in candidates:
            compact = compact_key(key)
            if not compact:
                continue
            existing = index.setdefault(compact, canonical)
            if existing != canonical:
                logger.debug(f"Compact form '{compact}' is ambiguous ({existing} / {canonical}); keeping {existing}")
        return index

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def lookup(self, key: str) -> Optional[IngredientRecord]:
        """Record for a canonical key or alias; None when not on record"""
        canonical = self.resolve_key(key)
        if canonical is None:
            return None
        return self._records[canonical]

    def resolve_key(self, key: str) -> Optional[str]:
        """Canonical key for a known key or alias"""
        if key in self._records:
            return key
        return self._aliases.get(key)

    def resolve_compact(self, compact: str) -> Optional[str]:
        """Canonical key for a separator-free form"""
        return self._compact_index.get(compact)

    def is_monitored(self, key: str) -> bool:
        """True if the key resolves to a synthesized monitor-list record"""
        return self.resolve_key(key) in self._monitor_keys

    def __contains__(self, key: str) -> bool:
        return self.resolve_key(key) is not None

    def __len__(self) -> int:
        return len(self._records)

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    # ------------------------------------------------------------------
    # Wiki browsing
    # ------------------------------------------------------------------

    def categories(self) -> List[str]:
        """Sorted distinct categories"""
        return sorted({record.category for record in self._records.values()})

    def search(self, query: str = "", category: Optional[str] = None) -> List[IngredientRecord]:
        """
        Case-insensitive substring search on name or category,
        optionally restricted to one category ("All" means no restriction)
        """
        needle = query.strip().lower()
        results = []
        for record in self._records.values():
            if category and category != "All" and record.category != category:
                continue
            if needle and needle not in record.name.lower() and needle not in record.category.lower():
                continue
            results.append(record)
        return sorted(results, key=lambda r: r.name.lower())


# ============================================================================
# Global Instance
# ============================================================================

_reference_database = None


def get_reference_database() -> ReferenceDatabase:
    """Process-wide reference database, built on first use"""
    global _reference_database
    if _reference_database is None:
        _reference_database = ReferenceDatabase(extension_path=settings.reference_data_path)
    return _reference_database


__all__ = [
    "ReferenceDatabase",
    "get_reference_database",
    "make_key",
    "compact_key",
]
