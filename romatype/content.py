"""Sentence corpus and target validation."""

import csv
import os
import random
from typing import List, Optional, Sequence

from romatype.engine.table import RomanizationTable
from romatype.engine.units import iter_units, unit_spellings
from romatype.logger import logger
from romatype.nlp.japanese import JapanesePhonetics
from romatype.schema import Sentence

# A mix of programming quotes, proverbs and cyberpunk flavour text
BUILTIN_SENTENCES: List[Sentence] = [
    Sentence(text="継続は力なり", kana="けいぞくはちからなり"),
    Sentence(text="千里の道も一歩から", kana="せんりのみちもいっぽから"),
    Sentence(text="電脳空間にダイブする", kana="でんのうくうかんにだいぶする"),
    Sentence(text="高度に発達した科学は魔法と区別がつかない", kana="こうどにはったつしたかがくはまほうとくべつがつかない"),
    Sentence(text="情報は質量を持たない", kana="じょうほうはしつりょうをもたない"),
    Sentence(text="明日は明日の風が吹く", kana="あしたはあしたのかぜがふく"),
    Sentence(text="タイピングの速度を測定中", kana="たいぴんぐのそくどをそくていちゅう"),
    Sentence(text="ネオンライトが輝く夜", kana="ねおんらいとがかがやくよる"),
    Sentence(text="全てのバグを修正せよ", kana="すべてのばぐをしゅうせいせよ"),
    Sentence(text="ハローワールド", kana="はろーわーるど"),
    Sentence(text="急がば回れ", kana="いそがばまわれ"),
    Sentence(text="人工知能の進化", kana="じんこうちのうのしんか"),
    Sentence(text="非同期処理の待機時間", kana="ひどうきしょりのたいきじかん"),
    Sentence(text="オブジェクト指向プログラミング", kana="おぶじぇくとしこうぷろぐらみんぐ"),
    Sentence(text="一期一会", kana="いちごいちえ"),
]


class UntypeableTargetError(Exception):
    """Raised when a target contains units the romanization table cannot spell."""
    def __init__(self, target: str, unknown_units: Sequence[str]):
        super().__init__(
            f"Target '{target}' cannot be typed: no romanization for "
            f"{', '.join(repr(u) for u in unknown_units)}"
        )
        self.target = target
        self.unknown_units = list(unknown_units)


def validate_target(target: str, table: RomanizationTable) -> List[str]:
    """Return the unit keys in *target* that have no spellings (in order, no repeats)."""
    unknown: List[str] = []
    for unit in iter_units(target):
        if not unit_spellings(unit, table) and unit.key not in unknown:
            unknown.append(unit.key)
    return unknown


def ensure_typeable(target: str, table: RomanizationTable) -> None:
    unknown = validate_target(target, table)
    if unknown:
        raise UntypeableTargetError(target, unknown)


def validate_sentences(sentences: Sequence[Sentence], table: RomanizationTable) -> List[Sentence]:
    """Drop (and log) sentences whose kana cannot be typed with *table*."""
    valid: List[Sentence] = []
    for sentence in sentences:
        try:
            ensure_typeable(sentence.kana, table)
        except UntypeableTargetError as e:
            logger.warning(f"⚠️ Skipping sentence '{sentence.text}': {e}")
            continue
        valid.append(sentence)
    return valid


def load_sentences(path: str, phonetics: Optional[JapanesePhonetics] = None) -> List[Sentence]:
    """Read a corpus CSV with ``text`` and ``kana`` columns.

    Rows with an empty ``kana`` get a reading generated from ``text``; kana is
    always normalised to hiragana.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Corpus file not found: {path}")

    sentences: List[Sentence] = []
    with open(path, 'r', encoding='utf-8', newline='') as csvfile:
        reader = csv.DictReader(csvfile)
        if not reader.fieldnames or 'text' not in reader.fieldnames:
            raise ValueError(f"Corpus file {path} must have a 'text' column")
        for line_no, row in enumerate(reader, start=2):
            text = (row.get('text') or "").strip()
            if not text:
                logger.warning(f"⚠️ {path}:{line_no}: empty text, skipping")
                continue
            kana = (row.get('kana') or "").strip()
            if kana:
                kana = JapanesePhonetics.to_hiragana(kana)
            else:
                if phonetics is None:
                    phonetics = JapanesePhonetics()
                kana = phonetics.reading(text)
            sentences.append(Sentence(text=text, kana=kana))

    logger.info(f"📋 Read {len(sentences)} sentences from {path}")
    return sentences


class SentencePicker:
    """Random sentence selection over a fixed corpus."""

    def __init__(self, sentences: Sequence[Sentence], rng: Optional[random.Random] = None):
        if not sentences:
            raise ValueError("Cannot pick from an empty corpus")
        self.sentences = list(sentences)
        self._rng = rng or random.Random()

    def pick(self) -> Sentence:
        return self._rng.choice(self.sentences)
