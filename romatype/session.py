"""A timed game over several sentences."""

import time
from typing import Callable, Optional

from romatype.config import DEFAULT_SENTENCES_PER_GAME
from romatype.content import SentencePicker
from romatype.engine.base import SubmitResult
from romatype.engine.matcher import Matcher
from romatype.engine.table import RomanizationTable
from romatype.logger import logger
from romatype.schema import Sentence
from romatype.stats import SessionStats


class GameSession:
    """Drives one Matcher per sentence and aggregates their counters."""

    def __init__(
        self,
        table: RomanizationTable,
        picker: SentencePicker,
        sentences_to_type: int = DEFAULT_SENTENCES_PER_GAME,
        clock: Callable[[], float] = time.monotonic,
    ):
        if sentences_to_type < 1:
            raise ValueError("sentences_to_type must be at least 1")
        self.table = table
        self.picker = picker
        self.sentences_to_type = sentences_to_type
        self._clock = clock
        self._reset()

    def _reset(self) -> None:
        self.current_sentence: Optional[Sentence] = None
        self.matcher: Optional[Matcher] = None
        self.sentences_completed = 0
        self._running = False
        self._started_at: Optional[float] = None
        self._ended_at: Optional[float] = None
        # Counters of matchers for sentences already typed
        self._done_correct = 0
        self._done_misses = 0
        # Rest of a trailing "nn" or "n'"; the guide line shows "nn", so it is
        # taken as such even when the next sentence starts with "n"
        self._carried_echo = ""

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_finished(self) -> bool:
        return self._ended_at is not None

    @property
    def progress_label(self) -> str:
        return f"{min(self.sentences_completed + 1, self.sentences_to_type)}/{self.sentences_to_type}"

    def start(self) -> Sentence:
        self._reset()
        self._running = True
        self._started_at = self._clock()
        return self._next_sentence()

    def _next_sentence(self) -> Sentence:
        self.current_sentence = self.picker.pick()
        self.matcher = Matcher(self.current_sentence.kana, self.table)
        logger.debug(f"Next sentence {self.progress_label}: {self.current_sentence.text}")
        return self.current_sentence

    def handle_key(self, key: str) -> Optional[SubmitResult]:
        """Feed one key event; non-character keys and idle sessions are ignored."""
        if not self._running or not isinstance(key, str) or len(key) != 1:
            return None

        key = key.lower()
        carried, self._carried_echo = self._carried_echo, ""
        if key in carried:
            self._done_correct += 1
            return SubmitResult(accepted=True, unit_completed=False, sequence_completed=False)

        result = self.matcher.submit(key)
        if result.sequence_completed:
            self._carried_echo = self.matcher.pending_echo
            self._done_correct += self.matcher.correct_count
            self._done_misses += self.matcher.miss_count
            self.sentences_completed += 1
            if self.sentences_completed >= self.sentences_to_type:
                self._finish()
            else:
                self._next_sentence()
        return result

    def _finish(self) -> None:
        self._running = False
        self._ended_at = self._clock()
        stats = self.stats()
        logger.info(f"🏁 Game finished: {stats.wpm} WPM, {stats.accuracy}% accuracy")

    def stats(self) -> SessionStats:
        correct, misses = self._done_correct, self._done_misses
        if self._running and self.matcher is not None:
            correct += self.matcher.correct_count
            misses += self.matcher.miss_count
        if self._started_at is None:
            elapsed = 0.0
        else:
            end = self._ended_at if self._ended_at is not None else self._clock()
            elapsed = max(0.0, end - self._started_at)
        return SessionStats(
            correct=correct,
            misses=misses,
            elapsed_seconds=elapsed,
            sentences_completed=self.sentences_completed,
        )
