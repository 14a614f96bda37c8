"""Tests for the sentence corpus and target validation."""
import random

import pytest
from unittest.mock import Mock

from romatype.content import (
    BUILTIN_SENTENCES,
    SentencePicker,
    UntypeableTargetError,
    ensure_typeable,
    load_sentences,
    validate_sentences,
    validate_target,
)
from romatype.schema import Sentence


class TestValidateTarget:
    def test_typeable_target(self, small_table):
        assert validate_target("さしっと", small_table) == []

    def test_unknown_units_listed_once_in_order(self, small_table):
        assert validate_target("ぬさぬぴゃ", small_table) == ["ぬ", "ぴゃ"]

    def test_ensure_typeable_raises(self, small_table):
        with pytest.raises(UntypeableTargetError) as exc_info:
            ensure_typeable("さぬ", small_table)
        error = exc_info.value
        assert error.target == "さぬ"
        assert error.unknown_units == ["ぬ"]
        assert "ぬ" in str(error)

    def test_builtin_corpus_is_typeable(self, default_table):
        for sentence in BUILTIN_SENTENCES:
            assert validate_target(sentence.kana, default_table) == [], sentence.text

    def test_validate_sentences_drops_bad_ones(self, small_table):
        good = Sentence(text="さし", kana="さし")
        bad = Sentence(text="ぬ", kana="ぬ")
        assert validate_sentences([good, bad], small_table) == [good]


class TestLoadSentences:
    def test_load_csv(self, tmp_path):
        path = tmp_path / "sentences.csv"
        path.write_text("text,kana\n急がば回れ,いそがばまわれ\nハロー,ハロー\n", encoding="utf-8")
        sentences = load_sentences(str(path))
        assert sentences == [
            Sentence(text="急がば回れ", kana="いそがばまわれ"),
            Sentence(text="ハロー", kana="はろー"),
        ]

    def test_missing_kana_generated(self, tmp_path):
        path = tmp_path / "sentences.csv"
        path.write_text("text,kana\n一期一会,\n", encoding="utf-8")
        phonetics = Mock()
        phonetics.reading.return_value = "いちごいちえ"
        sentences = load_sentences(str(path), phonetics=phonetics)
        assert sentences[0].kana == "いちごいちえ"
        phonetics.reading.assert_called_once_with("一期一会")

    def test_rows_without_text_skipped(self, tmp_path):
        path = tmp_path / "sentences.csv"
        path.write_text("text,kana\n,あ\nさ,さ\n", encoding="utf-8")
        assert [s.text for s in load_sentences(str(path))] == ["さ"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_sentences(str(tmp_path / "nope.csv"))

    def test_missing_text_column(self, tmp_path):
        path = tmp_path / "sentences.csv"
        path.write_text("kana\nさ\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_sentences(str(path))


class TestSentencePicker:
    def test_pick_is_reproducible_with_seed(self):
        a = SentencePicker(BUILTIN_SENTENCES, random.Random(7))
        b = SentencePicker(BUILTIN_SENTENCES, random.Random(7))
        assert [a.pick() for _ in range(5)] == [b.pick() for _ in range(5)]

    def test_pick_from_corpus(self):
        picker = SentencePicker(BUILTIN_SENTENCES)
        assert picker.pick() in BUILTIN_SENTENCES

    def test_empty_corpus(self):
        with pytest.raises(ValueError):
            SentencePicker([])
