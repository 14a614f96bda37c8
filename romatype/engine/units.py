"""Segmentation of a kana target into typeable units.

Units are computed on demand from a position in the target; nothing is
pre-tokenised, so the same (target, position) pair always yields the same unit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from .table import RomanizationTable

GEMINATE_MARK = 'っ'
SYLLABIC_NASAL = 'ん'
SMALL_FORMS = frozenset('ゃゅょぁぃぅぇぉ')

VOWELS = frozenset('aiueo')
GLIDE_LETTER = 'y'
NASAL_LETTER = 'n'


class UnitKind(str, Enum):
    plain = "plain"
    contracted = "contracted"
    geminate = "geminate"
    nasal = "nasal"


@dataclass(frozen=True)
class Unit:
    kind: UnitKind
    key: str
    start: int

    @property
    def length(self) -> int:
        return len(self.key)

    @property
    def end(self) -> int:
        return self.start + len(self.key)


def unit_at(target: str, pos: int) -> Optional[Unit]:
    """Return the unit starting at *pos*, or None past the end of *target*."""
    if pos < 0 or pos >= len(target):
        return None
    ch = target[pos]
    if pos + 1 < len(target) and target[pos + 1] in SMALL_FORMS:
        return Unit(UnitKind.contracted, target[pos:pos + 2], pos)
    if ch == GEMINATE_MARK:
        return Unit(UnitKind.geminate, ch, pos)
    if ch == SYLLABIC_NASAL:
        return Unit(UnitKind.nasal, ch, pos)
    return Unit(UnitKind.plain, ch, pos)


def iter_units(target: str, start: int = 0) -> Iterator[Unit]:
    pos = start
    while True:
        unit = unit_at(target, pos)
        if unit is None:
            return
        yield unit
        pos = unit.end


def unit_spellings(unit: Unit, table: RomanizationTable) -> Tuple[str, ...]:
    """Accepted spellings of *unit*, before any context rule is applied.

    Contractions accept their own table entry followed by every combination of
    the base spellings with the small-form spellings ("kya", then "kixya", ...).
    """
    direct = table.spellings_for(unit.key)
    if unit.kind is not UnitKind.contracted:
        return direct
    base, small = unit.key
    composed = tuple(
        b + s
        for b in table.spellings_for(base)
        for s in table.spellings_for(small)
    )
    return tuple(dict.fromkeys(direct + composed))


def doubling_letters(spellings: Tuple[str, ...]) -> frozenset:
    """Letters that may be doubled in front of a unit spelled *spellings*."""
    return frozenset(
        s[0] for s in spellings
        if s[0].isalpha() and s[0] not in VOWELS and s[0] != NASAL_LETTER
    )


def canonical_romaji(target: str, table: RomanizationTable, start: int = 0) -> str:
    """Canonical romaji for *target* from *start*, as shown on the guide line.

    A doubled consonant contributes a single letter here; the following unit
    supplies the rest ("っと" -> "tto"). Unknown units are kept as-is.
    """
    parts = []
    for unit in iter_units(target, start):
        spellings = unit_spellings(unit, table)
        if not spellings:
            parts.append(unit.key)
            continue
        if unit.kind is UnitKind.geminate:
            following = unit_at(target, unit.end)
            if following is not None:
                following_spellings = unit_spellings(following, table)
                if following_spellings and following_spellings[0][0] in doubling_letters(following_spellings):
                    parts.append(following_spellings[0][0])
                    continue
        parts.append(spellings[0])
    return "".join(parts)
