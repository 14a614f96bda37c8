from typing import Dict, List

from pydantic import BaseModel, Field, RootModel, ConfigDict


class TableFile(RootModel[Dict[str, List[str]]]):
    """On-disk romanization table: {unit_key: [spelling, ...]}."""
    pass


class Sentence(BaseModel):
    text: str = Field(..., min_length=1)  # what the player sees (may contain kanji)
    kana: str = Field(..., min_length=1)  # what the player types, in hiragana
    model_config = ConfigDict(frozen=True)


class ScoreEntry(BaseModel):
    wpm: int = Field(..., ge=0)
    accuracy: int = Field(..., ge=0, le=100)
    date: str
    timestamp: int  # milliseconds since the epoch, unique per saved game


class ScoreBoard(RootModel[List[ScoreEntry]]):
    pass
