"""Romaji matching engine.

The engine has no I/O and no third-party dependencies: a RomanizationTable
supplies the spellings, and a Matcher validates keystrokes against one target.
"""

from .base import MatchOutcome, OutcomeKind, SubmitResult
from .matcher import Matcher
from .table import RomanizationTable, TableError
from .units import Unit, UnitKind, canonical_romaji, iter_units, unit_at, unit_spellings

__all__ = [
    'Matcher',
    'MatchOutcome',
    'OutcomeKind',
    'RomanizationTable',
    'SubmitResult',
    'TableError',
    'Unit',
    'UnitKind',
    'canonical_romaji',
    'iter_units',
    'unit_at',
    'unit_spellings',
]
