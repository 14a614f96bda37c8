"""
Command line front end for romatype.

Usage:
    romatype play --sentences 3
    romatype check きょうと kyouto
    romatype scores
    romatype validate --corpus sentences.csv
"""

import argparse
import sys
from typing import Callable, List, Optional

from romatype import __version__
from romatype.config import Settings, get_settings
from romatype.content import (
    BUILTIN_SENTENCES,
    SentencePicker,
    load_sentences,
    validate_sentences,
    validate_target,
)
from romatype.engine.matcher import Matcher
from romatype.engine.table import RomanizationTable, TableError
from romatype.logger import logger
from romatype.nlp.japanese import JapanesePhonetics
from romatype.ranking import RankingStore
from romatype.schema import Sentence
from romatype.session import GameSession


TABLE_HELP = "JSON romanization table (default: bundled Hepburn table)"


def load_table(path: Optional[str]) -> RomanizationTable:
    if path:
        logger.info(f"📖 Loading romanization table from {path}")
        return RomanizationTable.from_json(path)
    return RomanizationTable.default()


def load_corpus(path: Optional[str]) -> List[Sentence]:
    if path:
        return load_sentences(path)
    return list(BUILTIN_SENTENCES)


def format_progress(matcher: Matcher) -> str:
    """One status line: done kana | remaining kana, then the romaji guide."""
    done = matcher.target[:matcher.cursor]
    todo = matcher.target[matcher.cursor:]
    buffer = f" [{matcher.buffer}]" if matcher.buffer else ""
    return f"{done}|{todo}{buffer}  → {matcher.romaji_guide()}"


def cmd_check(args: argparse.Namespace, settings: Settings) -> int:
    table = load_table(args.table or settings.table_path)
    target = JapanesePhonetics.to_hiragana(args.kana)
    matcher = Matcher(target, table)
    print(f"{'#':>3}  key  accepted  unit  done  cursor  buffer  hint")
    for i, key in enumerate(args.keys, start=1):
        result = matcher.submit(key)
        print(
            f"{i:>3}  {key!r:<4} {str(result.accepted):<9} {str(result.unit_completed):<5} "
            f"{str(result.sequence_completed):<5} {matcher.cursor:>6}  {matcher.buffer:<6}  {matcher.current_hint()}"
        )
    print(f"correct={matcher.correct_count} miss={matcher.miss_count} finished={matcher.is_finished()}")
    return 0 if matcher.is_finished() else 1


def cmd_scores(args: argparse.Namespace, settings: Settings) -> int:
    store = RankingStore(args.scores or settings.scores_path)
    scores = store.get_scores()
    if not scores:
        print("No scores yet.")
        return 0
    for rank, entry in enumerate(scores, start=1):
        print(f"{rank:>2}. {entry.wpm:>4} WPM  {entry.accuracy:>3}%  {entry.date}")
    return 0


def cmd_validate(args: argparse.Namespace, settings: Settings) -> int:
    table = load_table(args.table or settings.table_path)
    sentences = load_corpus(args.corpus or settings.corpus_path)
    bad = 0
    for sentence in sentences:
        unknown = validate_target(sentence.kana, table)
        if unknown:
            bad += 1
            logger.warning(f"⚠️ '{sentence.text}' ({sentence.kana}): no romanization for {', '.join(unknown)}")
    logger.info(f"✅ {len(sentences) - bad}/{len(sentences)} sentences are typeable")
    return 1 if bad else 0


def cmd_play(args: argparse.Namespace, settings: Settings,
             input_fn: Callable[[str], str] = input) -> int:
    table = load_table(args.table or settings.table_path)
    sentences = validate_sentences(load_corpus(args.corpus or settings.corpus_path), table)
    if not sentences:
        raise ValueError("No typeable sentences in the corpus (see `romatype validate`)")
    session = GameSession(
        table,
        SentencePicker(sentences),
        sentences_to_type=args.sentences or settings.sentences_per_game,
    )
    store = RankingStore(args.scores or settings.scores_path)

    sentence = session.start()
    print(f"[{session.progress_label}] {sentence.text}")
    while session.is_running:
        print(format_progress(session.matcher))
        try:
            line = input_fn("> ")
        except EOFError:
            print()
            logger.warning("⚠️ Input closed, game abandoned")
            return 1
        before = session.sentences_completed
        for pos, key in enumerate(line, start=1):
            result = session.handle_key(key)
            if result is None:
                break
            if not result.accepted:
                print(f"❌ miss at key {pos} ({key!r})")
        if session.is_running and session.sentences_completed != before:
            print(f"[{session.progress_label}] {session.current_sentence.text}")

    stats = session.stats()
    print(f"🏁 {stats.wpm} WPM, {stats.accuracy}% accuracy")
    if store.save_score(stats.wpm, stats.accuracy):
        print("🏆 New high score!")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="romatype", description="Romaji typing practice for kana sentences")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--table", help=TABLE_HELP)
    # Also accepted after the subcommand, without overwriting the global value
    table_option = argparse.ArgumentParser(add_help=False)
    table_option.add_argument("--table", default=argparse.SUPPRESS, help=TABLE_HELP)
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", parents=[table_option], help="Play a game in the terminal")
    play.add_argument("--sentences", type=int, help="Sentences per game")
    play.add_argument("--corpus", help="CSV corpus with text,kana columns")
    play.add_argument("--scores", help="Leaderboard JSON file")
    play.set_defaults(func=cmd_play)

    check = sub.add_parser("check", parents=[table_option], help="Replay keys against a kana target")
    check.add_argument("kana", help="Target kana (katakana is converted to hiragana)")
    check.add_argument("keys", help="Keys to type, in order")
    check.set_defaults(func=cmd_check)

    scores = sub.add_parser("scores", help="Show the leaderboard")
    scores.add_argument("--scores", help="Leaderboard JSON file")
    scores.set_defaults(func=cmd_scores)

    validate = sub.add_parser("validate", parents=[table_option], help="Report sentences the table cannot spell")
    validate.add_argument("--corpus", help="CSV corpus with text,kana columns")
    validate.set_defaults(func=cmd_validate)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = get_settings()
        return args.func(args, settings)
    except (TableError, ValueError, FileNotFoundError) as e:
        logger.error(f"❌ {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
