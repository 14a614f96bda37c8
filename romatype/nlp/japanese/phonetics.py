"""Japanese phonetic processing utilities."""

import re

import jaconv
import pykakasi


class JapanesePhonetics:
    """Turns display text into a hiragana typing target."""

    _kana_only_re = re.compile(r"^[ぁ-んゔゕゖァ-ヴー、。？！]+$")
    _whitespace_re = re.compile(r"\s+")

    def __init__(self):
        """Initialize the phonetics processor with pykakasi."""
        self._kks = pykakasi.kakasi()

    @staticmethod
    def to_hiragana(text: str) -> str:
        """Convert katakana in *text* to hiragana, one character for one.

        The long-vowel mark "ー" is kept as-is so that offsets into the
        converted string still line up with the original.
        """
        return jaconv.kata2hira(text)

    def is_kana_only(self, text: str) -> bool:
        """Check if text contains only kana characters (and kana punctuation)."""
        return bool(self._kana_only_re.match(text))

    def reading(self, text: str) -> str:
        """Return a hiragana reading for *text*, which may contain kanji.

        pykakasi picks one reading per word; callers who care about a
        specific reading should store it explicitly instead.
        """
        text = self._whitespace_re.sub("", text)
        if self.is_kana_only(text):
            return self.to_hiragana(text)
        hira = "".join(item["hira"] for item in self._kks.convert(text))
        return self.to_hiragana(hira)
