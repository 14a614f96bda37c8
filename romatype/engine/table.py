"""Read-only romanization lookup."""

import json
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Sequence, Tuple

from pydantic import ValidationError

from romatype.schema import TableFile
from .hepburn import HEPBURN_TABLE


class TableError(ValueError):
    """Raised when romanization table data is malformed."""
    def __init__(self, unit_key: str, reason: str):
        super().__init__(f"Invalid romanization entry for '{unit_key}': {reason}")
        self.unit_key = unit_key
        self.reason = reason


def _validate_entry(unit_key: str, spellings: Sequence[str]) -> Tuple[str, ...]:
    if not isinstance(unit_key, str) or not 1 <= len(unit_key) <= 2:
        raise TableError(str(unit_key), "unit key must be one or two characters")
    if isinstance(spellings, str) or not spellings:
        raise TableError(unit_key, "expected a non-empty list of spellings")
    seen = set()
    for spelling in spellings:
        if not isinstance(spelling, str) or not spelling:
            raise TableError(unit_key, "spellings must be non-empty strings")
        if not spelling.isascii():
            raise TableError(unit_key, f"spelling '{spelling}' is not ASCII")
        if spelling in seen:
            raise TableError(unit_key, f"duplicate spelling '{spelling}'")
        seen.add(spelling)
    return tuple(spellings)


class RomanizationTable:
    """Maps a unit key (one kana, or a two-kana contraction) to its accepted
    spellings. The first spelling is canonical and is the one shown as a hint.
    """

    def __init__(self, entries: Mapping[str, Sequence[str]]):
        validated: Dict[str, Tuple[str, ...]] = {}
        for unit_key, spellings in entries.items():
            validated[unit_key] = _validate_entry(unit_key, spellings)
        self._entries = MappingProxyType(validated)

    @classmethod
    def from_mapping(cls, entries: Mapping[str, Sequence[str]]) -> 'RomanizationTable':
        return cls(entries)

    @classmethod
    def from_json(cls, path: str) -> 'RomanizationTable':
        """Load a table from a JSON object of ``{unit_key: [spelling, ...]}``."""
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
        try:
            data = TableFile.model_validate(raw).root
        except ValidationError as e:
            raise TableError(path, f"not a mapping of unit keys to spelling lists ({e.error_count()} errors)")
        return cls(data)

    @classmethod
    def default(cls) -> 'RomanizationTable':
        """The bundled Hepburn table (built once per process)."""
        return _default_table()

    def spellings_for(self, unit_key: str) -> Tuple[str, ...]:
        return self._entries.get(unit_key, ())

    def canonical_spelling_for(self, unit_key: str) -> str:
        spellings = self.spellings_for(unit_key)
        return spellings[0] if spellings else ""

    def keys(self):
        return self._entries.keys()

    def __contains__(self, unit_key: object) -> bool:
        return unit_key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"RomanizationTable({len(self)} units)"


@lru_cache(maxsize=1)
def _default_table() -> RomanizationTable:
    return RomanizationTable(HEPBURN_TABLE)
