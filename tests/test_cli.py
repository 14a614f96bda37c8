"""Tests for the command line front end."""
import json

import pytest

from romatype.cli import build_parser, cmd_play, format_progress, main
from romatype.config import Settings
from romatype.engine.matcher import Matcher


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=str(tmp_path), scores_path=str(tmp_path / "scores.json"))


@pytest.fixture
def corpus(tmp_path):
    path = tmp_path / "sentences.csv"
    path.write_text("text,kana\n佐,さ\n", encoding="utf-8")
    return str(path)


def scripted_input(lines):
    """input() replacement returning *lines* in order, then EOF."""
    remaining = list(lines)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)
    return fake_input


class TestCheck:
    def test_finished_sequence(self, capsys):
        assert main(["check", "っと", "tto"]) == 0
        out = capsys.readouterr().out
        assert "correct=3 miss=0 finished=True" in out

    def test_unfinished_sequence(self, capsys):
        assert main(["check", "さしみ", "saxshi"]) == 1
        out = capsys.readouterr().out
        assert "correct=5 miss=1 finished=False" in out

    def test_katakana_target(self, capsys):
        assert main(["check", "カ", "ka"]) == 0

    def test_custom_table(self, tmp_path, capsys):
        path = tmp_path / "table.json"
        path.write_text(json.dumps({"さ": ["za"]}, ensure_ascii=False), encoding="utf-8")
        assert main(["--table", str(path), "check", "さ", "za"]) == 0

    def test_table_after_subcommand(self, tmp_path):
        path = tmp_path / "table.json"
        path.write_text(json.dumps({"さ": ["za"]}, ensure_ascii=False), encoding="utf-8")
        assert main(["check", "--table", str(path), "さ", "za"]) == 0

    def test_global_table_kept_without_subcommand_option(self):
        args = build_parser().parse_args(["--table", "custom.json", "check", "さ", "sa"])
        assert args.table == "custom.json"
        args = build_parser().parse_args(["check", "さ", "sa"])
        assert args.table is None

    def test_bad_table_reports_error(self, tmp_path):
        path = tmp_path / "table.json"
        path.write_text(json.dumps({"さ": []}, ensure_ascii=False), encoding="utf-8")
        assert main(["--table", str(path), "check", "さ", "sa"]) == 2


class TestScores:
    def test_empty(self, tmp_path, capsys):
        assert main(["scores", "--scores", str(tmp_path / "scores.json")]) == 0
        assert "No scores yet." in capsys.readouterr().out

    def test_listing(self, tmp_path, capsys):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps([
            {"wpm": 80, "accuracy": 98, "date": "2024-01-02", "timestamp": 2},
            {"wpm": 60, "accuracy": 91, "date": "2024-01-01", "timestamp": 1},
        ]), encoding="utf-8")
        assert main(["scores", "--scores", str(path)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith(" 1.")
        assert "80 WPM" in lines[0]
        assert "2024-01-01" in lines[1]


class TestValidate:
    def test_builtin_corpus_is_clean(self):
        assert main(["validate"]) == 0

    def test_reports_untypeable_rows(self, tmp_path):
        table = tmp_path / "table.json"
        table.write_text(json.dumps({"さ": ["sa"]}, ensure_ascii=False), encoding="utf-8")
        corpus = tmp_path / "sentences.csv"
        corpus.write_text("text,kana\n佐,さ\n猫,ねこ\n", encoding="utf-8")
        assert main(["--table", str(table), "validate", "--corpus", str(corpus)]) == 1

    def test_table_after_subcommand(self, tmp_path):
        table = tmp_path / "table.json"
        table.write_text(json.dumps({"さ": ["sa"]}, ensure_ascii=False), encoding="utf-8")
        corpus = tmp_path / "sentences.csv"
        corpus.write_text("text,kana\n佐,さ\n", encoding="utf-8")
        assert main(["validate", "--table", str(table), "--corpus", str(corpus)]) == 0

    def test_missing_corpus(self, tmp_path):
        assert main(["validate", "--corpus", str(tmp_path / "missing.csv")]) == 2


class TestPlay:
    def parse(self, *argv):
        return build_parser().parse_args(["play", *argv])

    def test_full_game(self, settings, corpus, capsys):
        args = self.parse("--sentences", "2", "--corpus", corpus)
        assert cmd_play(args, settings, input_fn=scripted_input(["sa", "sa"])) == 0
        out = capsys.readouterr().out
        assert "[1/2] 佐" in out
        assert "[2/2] 佐" in out
        assert "🏆 New high score!" in out
        with open(settings.scores_path, encoding="utf-8") as f:
            assert len(json.load(f)) == 1

    def test_reports_misses(self, settings, corpus, capsys):
        args = self.parse("--sentences", "1", "--corpus", corpus)
        assert cmd_play(args, settings, input_fn=scripted_input(["qsa"])) == 0
        assert "❌ miss at key 1 ('q')" in capsys.readouterr().out

    def test_input_closed(self, settings, corpus):
        args = self.parse("--sentences", "1", "--corpus", corpus)
        assert cmd_play(args, settings, input_fn=scripted_input(["s"])) == 1

    def test_untypeable_rows_are_skipped(self, tmp_path, settings, capsys):
        table = tmp_path / "table.json"
        table.write_text(json.dumps({"さ": ["sa"]}, ensure_ascii=False), encoding="utf-8")
        corpus = tmp_path / "mixed.csv"
        corpus.write_text("text,kana\n猫,ねこ\n佐,さ\nABC,ABC\n", encoding="utf-8")
        args = self.parse("--table", str(table), "--sentences", "3", "--corpus", str(corpus))
        assert cmd_play(args, settings, input_fn=scripted_input(["sa", "sa", "sa"])) == 0
        out = capsys.readouterr().out
        assert "❌" not in out
        assert "猫" not in out

    def test_no_typeable_rows(self, tmp_path):
        corpus = tmp_path / "bad.csv"
        corpus.write_text("text,kana\nABC,ABC\n", encoding="utf-8")
        argv = ["play", "--corpus", str(corpus), "--scores", str(tmp_path / "scores.json")]
        assert main(argv) == 2
        assert not (tmp_path / "scores.json").exists()


class TestFormatProgress:
    def test_progress_line(self, small_table):
        matcher = Matcher("さし", small_table)
        for key in "sas":
            matcher.submit(key)
        assert format_progress(matcher) == "さ|し [s]  → hi"
