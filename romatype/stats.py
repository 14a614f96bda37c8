"""Speed and accuracy derived from matcher counters."""

from dataclasses import dataclass


def words_per_minute(correct: int, elapsed_seconds: float) -> int:
    """WPM = (correct keystrokes / 5) / minutes, rounded."""
    minutes = elapsed_seconds / 60.0
    if minutes <= 0:
        return 0
    return round((correct / 5.0) / minutes)


def accuracy(correct: int, misses: int) -> int:
    """Percentage of accepted keystrokes; 100 before anything was typed."""
    total = correct + misses
    if total == 0:
        return 100
    return round(100.0 * correct / total)


@dataclass(frozen=True)
class SessionStats:
    correct: int = 0
    misses: int = 0
    elapsed_seconds: float = 0.0
    sentences_completed: int = 0

    @property
    def wpm(self) -> int:
        return words_per_minute(self.correct, self.elapsed_seconds)

    @property
    def accuracy(self) -> int:
        return accuracy(self.correct, self.misses)
