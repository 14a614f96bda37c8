"""Local leaderboard kept in a JSON file."""

import json
import os
import tempfile
import time
from datetime import datetime
from typing import Callable, List, Optional

from pydantic import ValidationError

from romatype import MAX_SCORES
from romatype.logger import logger
from romatype.schema import ScoreBoard, ScoreEntry


class RankingStore:
    """Top scores, best WPM first (ties broken by accuracy)."""

    def __init__(self, path: str, max_entries: int = MAX_SCORES,
                 clock: Optional[Callable[[], float]] = None):
        self.path = path
        self.max_entries = max_entries
        self._clock = clock or time.time

    def get_scores(self) -> List[ScoreEntry]:
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
            return list(ScoreBoard.model_validate(raw).root)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"⚠️ Ignoring unreadable scores file {self.path}: {e}")
            return []

    def save_score(self, wpm: int, accuracy: int) -> bool:
        """Record a finished game; return True if it made the leaderboard."""
        now = self._clock()
        entry = ScoreEntry(
            wpm=wpm,
            accuracy=accuracy,
            date=datetime.fromtimestamp(now).strftime("%Y-%m-%d"),
            timestamp=int(now * 1000),
        )
        scores = self.get_scores()
        scores.append(entry)
        # Stable sort keeps earlier entries ahead on ties
        scores.sort(key=lambda s: (-s.wpm, -s.accuracy))
        top = scores[:self.max_entries]
        self._write(top)
        made_it = any(s is entry for s in top)
        logger.info(f"🏁 Saved score {wpm} WPM / {accuracy}% ({'ranked' if made_it else 'not ranked'})")
        return made_it

    def _write(self, scores: List[ScoreEntry]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        payload = ScoreBoard(scores).model_dump()
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except Exception:
            os.unlink(tmp_path)
            raise
