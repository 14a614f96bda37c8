"""Tests for speed and accuracy figures."""
import pytest

from romatype.stats import SessionStats, accuracy, words_per_minute


class TestWordsPerMinute:
    @pytest.mark.parametrize("correct, seconds, expected", [
        (50, 60, 10),
        (300, 60, 60),
        (100, 30, 40),
        (0, 60, 0),
    ])
    def test_values(self, correct, seconds, expected):
        assert words_per_minute(correct, seconds) == expected

    def test_no_elapsed_time(self):
        assert words_per_minute(40, 0) == 0
        assert words_per_minute(40, -1) == 0


class TestAccuracy:
    def test_nothing_typed_is_perfect(self):
        assert accuracy(0, 0) == 100

    def test_ratio(self):
        assert accuracy(9, 1) == 90
        assert accuracy(2, 1) == 67
        assert accuracy(0, 4) == 0


class TestSessionStats:
    def test_derived_properties(self):
        stats = SessionStats(correct=150, misses=50, elapsed_seconds=60.0, sentences_completed=3)
        assert stats.wpm == 30
        assert stats.accuracy == 75

    def test_defaults(self):
        stats = SessionStats()
        assert stats.wpm == 0
        assert stats.accuracy == 100
