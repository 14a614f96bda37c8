"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from romatype.engine.table import RomanizationTable


@pytest.fixture
def small_table():
    """Small table with the spellings used in the documented scenarios."""
    return RomanizationTable({
        'さ': ['sa'],
        'し': ['shi', 'si'],
        'ん': ['nn', "n'", 'n'],
        'っ': ['xtu', 'ltu'],
        'と': ['to'],
        'か': ['ka'],
        'な': ['na'],
        'い': ['i'],
        'う': ['u', 'wu'],
        'や': ['ya'],
        'き': ['ki'],
        'ち': ['chi', 'ti'],
        'ゃ': ['xya', 'lya'],
        'きゃ': ['kya'],
    })


@pytest.fixture
def default_table():
    """The bundled Hepburn table."""
    return RomanizationTable.default()


class FakeClock:
    """Manually advanced clock for timing-dependent code."""
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
