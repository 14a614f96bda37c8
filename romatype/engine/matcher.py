"""Keystroke-by-keystroke matcher for a kana target."""

from typing import Optional, Tuple

from romatype.logger import logger
from .base import MatchOutcome, OutcomeKind, SubmitResult
from .rules import match_geminate, match_nasal, match_plain
from .table import RomanizationTable
from .units import (
    NASAL_LETTER,
    Unit,
    UnitKind,
    canonical_romaji,
    doubling_letters,
    unit_at,
    unit_spellings,
)


class Matcher:
    """Validates romaji keystrokes against a kana target.

    The matcher owns a cursor (start offset of the unit being typed), the
    buffer of keys typed toward that unit, and hit/miss counters. Each call to
    :meth:`submit` either accepts the key (possibly completing one or more
    units) or rejects it without touching anything but ``miss_count``.

    Not thread-safe; feed keys in the order they were typed.
    """

    def __init__(self, target: str, table: Optional[RomanizationTable] = None):
        self._target = target or ""
        self._table = table if table is not None else RomanizationTable.default()
        self.reset()

    def reset(self) -> None:
        """Start over on the same target."""
        self._cursor = 0
        self._buffer = ""
        self._correct_count = 0
        self._miss_count = 0
        # Keys that may be typed once more without effect: the second "t" of "tto"
        # after a doubled consonant, or the tail of "nn" / "n'" after a bare "n"
        self._echo = ""

    @property
    def target(self) -> str:
        return self._target

    @property
    def table(self) -> RomanizationTable:
        return self._table

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def correct_count(self) -> int:
        return self._correct_count

    @property
    def miss_count(self) -> int:
        return self._miss_count

    @property
    def pending_echo(self) -> str:
        """Keys the next keystroke may repeat without effect (empty if none).

        Kept after a bare "n" finishes the target, so a caller moving on to the
        next target can still absorb the rest of "nn" or "n'".
        """
        return self._echo

    def is_finished(self) -> bool:
        return self._cursor >= len(self._target)

    def current_unit(self) -> Optional[Unit]:
        return unit_at(self._target, self._cursor)

    def submit(self, key: str) -> SubmitResult:
        """Process one typed character."""
        if not isinstance(key, str) or len(key) != 1:
            raise ValueError(f"submit() expects a single character, got {key!r}")
        if self.is_finished():
            return SubmitResult(accepted=False, unit_completed=False, sequence_completed=True)

        resolved = self._resolve(self._cursor, self._buffer + key)

        if resolved is None:
            if key in self._echo:
                self._echo = ""
                self._correct_count += 1
                return SubmitResult(accepted=True, unit_completed=False, sequence_completed=False)
            self._echo = ""
            self._miss_count += 1
            unit = self.current_unit()
            if unit is not None and not unit_spellings(unit, self._table):
                logger.debug(f"No romanization for '{unit.key}' at {unit.start} in '{self._target}'")
            return SubmitResult(accepted=False, unit_completed=False, sequence_completed=False)

        cursor, buffer, unit_completed, echo = resolved
        self._cursor = cursor
        self._buffer = buffer
        self._echo = echo
        self._correct_count += 1
        return SubmitResult(
            accepted=True,
            unit_completed=unit_completed,
            sequence_completed=self.is_finished(),
        )

    def _resolve(self, cursor: int, tentative: str) -> Optional[Tuple[int, str, bool, str]]:
        """Run *tentative* through the unit at *cursor*, cascading any spillover.

        Returns ``(cursor, buffer, unit_completed, echo)`` for the new rest
        state, or None if the keystroke must be rejected.
        """
        unit_completed = False
        echo = ""
        # Every completion advances the cursor, so this cannot run past the target
        for _ in range(len(self._target) - cursor):
            unit = unit_at(self._target, cursor)
            if unit is None:
                # Spillover with no unit left to take it
                return None
            outcome = self._evaluate(unit, tentative)
            if outcome.kind is OutcomeKind.reject:
                return None
            if outcome.kind is OutcomeKind.partial:
                return cursor, outcome.buffer, unit_completed, echo if outcome.buffer == echo else ""
            cursor += outcome.advance
            unit_completed = True
            if not outcome.leftover:
                bare_nasal = unit.kind is UnitKind.nasal and tentative == NASAL_LETTER
                return cursor, "", unit_completed, self._nasal_echo(unit) if bare_nasal else ""
            if unit.kind is UnitKind.geminate:
                echo = outcome.leftover
            tentative = outcome.leftover
        return None

    def _nasal_echo(self, unit: Unit) -> str:
        """Second letters of the two-letter nasal spellings that start with a bare "n"."""
        tails = (
            s[1] for s in unit_spellings(unit, self._table)
            if len(s) == 2 and s[0] == NASAL_LETTER
        )
        return "".join(dict.fromkeys(tails))

    def _evaluate(self, unit: Unit, tentative: str) -> MatchOutcome:
        spellings = unit_spellings(unit, self._table)
        if unit.kind in (UnitKind.geminate, UnitKind.nasal):
            following = unit_at(self._target, unit.end)
            following_spellings = unit_spellings(following, self._table) if following else ()
            if unit.kind is UnitKind.nasal:
                return match_nasal(spellings, following_spellings, tentative)
            if following is not None:
                return match_geminate(spellings, following_spellings, tentative)
        return match_plain(spellings, tentative, unit.length)

    def current_hint(self) -> str:
        """Remaining canonical spelling of the unit being typed."""
        unit = self.current_unit()
        if unit is None:
            return ""
        spellings = unit_spellings(unit, self._table)
        if not spellings:
            return unit.key
        if unit.kind is UnitKind.geminate and not self._buffer:
            letter = self._doubling_hint(unit)
            if letter:
                return letter * 2
        for spelling in spellings:
            if spelling.startswith(self._buffer):
                return spelling[len(self._buffer):]
        return spellings[0][len(self._buffer):]

    def romaji_guide(self) -> str:
        """Canonical romaji still to be typed, starting with the current unit."""
        unit = self.current_unit()
        if unit is None:
            return ""
        if unit.kind is UnitKind.geminate and not self._buffer:
            head = self._doubling_hint(unit) or self.current_hint()
        else:
            head = self.current_hint()
        return head + canonical_romaji(self._target, self._table, unit.end)

    def _doubling_hint(self, unit: Unit) -> str:
        following = unit_at(self._target, unit.end)
        if following is None:
            return ""
        following_spellings = unit_spellings(following, self._table)
        if following_spellings and following_spellings[0][0] in doubling_letters(following_spellings):
            return following_spellings[0][0]
        return ""

    def __repr__(self) -> str:
        return (
            f"Matcher(target={self._target!r}, cursor={self._cursor}, buffer={self._buffer!r}, "
            f"correct={self._correct_count}, miss={self._miss_count})"
        )
