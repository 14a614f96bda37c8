"""Runtime settings read from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from romatype import DATA_DIR, SCORES_FILE

load_dotenv()

DEFAULT_SENTENCES_PER_GAME = 5


@dataclass(frozen=True)
class Settings:
    """Paths and knobs for a game run."""
    data_dir: str
    scores_path: str
    table_path: Optional[str] = None
    corpus_path: Optional[str] = None
    sentences_per_game: int = DEFAULT_SENTENCES_PER_GAME


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


def get_settings() -> Settings:
    """Build a Settings object from ROMATYPE_* environment variables."""
    data_dir = os.path.abspath(os.getenv('ROMATYPE_DATA_DIR') or DATA_DIR)
    scores_path = os.getenv('ROMATYPE_SCORES_PATH') or os.path.join(data_dir, SCORES_FILE)
    return Settings(
        data_dir=data_dir,
        scores_path=scores_path,
        table_path=os.getenv('ROMATYPE_TABLE_PATH') or None,
        corpus_path=os.getenv('ROMATYPE_CORPUS_PATH') or None,
        sentences_per_game=_get_int('ROMATYPE_SENTENCES_PER_GAME', DEFAULT_SENTENCES_PER_GAME),
    )
