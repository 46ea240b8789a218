"""
helper/helper_cli.py

Interactive Wordle helper (human-in-the-loop):
- YOU type the word you guessed in the game and the feedback pattern you saw.
- Feedback accepted as: 'gybby', '21001', or a Python-like list '[0, 0, 2, 2, 2]'.
- The helper narrows the candidate list and prints what is left.
- 'undo' drops the last round and restores the previous candidates.

Run:
  python -m helper.helper_cli --csv word_list.csv
  python -m helper.helper_cli --csv word_list.csv --round least:gggbg

Shortcuts:
  quit / q / exit  -> exit
  undo             -> forget the last round
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Tuple

from wordfilter.constraints import Filter
from wordfilter.data_utils import load_answer_dictionary, load_word_dictionary
from wordfilter.dictionary import Dictionary
from wordfilter.feedback import parse_feedback
from wordfilter.word import WORD_LENGTH

log = logging.getLogger(__name__)

QUIT = {"q", "quit", "exit"}
SOLVED = [2] * WORD_LENGTH


def _load_dictionary(csv_path: str, all_words: bool) -> Dictionary:
    # Official answers by default; --all-words keeps the full guess list.
    if all_words:
        return load_word_dictionary(csv_path)
    return load_answer_dictionary(csv_path)


def parse_round(s: str) -> Tuple[str, List[int]]:
    """Parse 'guess:feedback' (e.g. 'least:gggbg') into (guess, pattern)."""
    guess, sep, fb = s.partition(":")
    if not sep:
        raise ValueError("round must look like GUESS:FEEDBACK, e.g. least:gggbg")
    guess = guess.strip().lower()
    if len(guess) != WORD_LENGTH or not guess.isalpha():
        raise ValueError(f"guess must be a {WORD_LENGTH}-letter alphabetic word")
    return guess, parse_feedback(fb)


def apply_round(candidates: Dictionary, guess: str, pattern: List[int]) -> Dictionary:
    flt = Filter.from_feedback(guess, pattern)
    remaining = candidates.filter(flt)
    log.debug("round %s %s: %d -> %d candidates", guess, pattern, len(candidates), len(remaining))
    return remaining


def print_candidates(candidates: Dictionary, show: int) -> None:
    print(f"Remaining candidates: {len(candidates)}")
    if 0 < len(candidates) <= show:
        print("Candidates:", ", ".join(candidates.words()))


def _prompt_guess() -> Optional[str]:
    while True:
        guess = input("Enter your guess word (or 'undo'): ").strip().lower()
        if guess in QUIT:
            return None
        if guess == "undo":
            return guess
        if len(guess) != WORD_LENGTH or not guess.isalpha():
            print("Please enter a 5-letter alphabetic word.")
            continue
        return guess


def _prompt_feedback() -> Optional[List[int]]:
    while True:
        fb = input("Feedback for that guess (g/y/b or 2/1/0 or [..]): ").strip()
        if fb.lower() in QUIT:
            return None
        try:
            return parse_feedback(fb)
        except ValueError as e:
            print("Invalid feedback:", e)


def run_interactive(start: Dictionary, show: int) -> None:
    # history[i] is the candidate list before round i+1
    history: List[Dictionary] = [start]

    print("\nWordle helper - after EACH guess you make in the game, paste the feedback here.")
    print("Accepted: g/y/b, 2/1/0, or [0,1,2,2,0]. Type 'undo' to drop a round, 'quit' to exit.\n")

    while True:
        guess = _prompt_guess()
        if guess is None:
            print("bye!")
            return
        if guess == "undo":
            if len(history) == 1:
                print("Nothing to undo.")
            else:
                history.pop()
                print_candidates(history[-1], show)
            continue

        patt = _prompt_feedback()
        if patt is None:
            print("bye!")
            return
        if patt == SOLVED:
            print("Solved!")
            return

        candidates = apply_round(history[-1], guess, patt)
        history.append(candidates)
        print_candidates(candidates, show)
        if candidates.is_empty():
            print("No candidates remain. Check your feedback inputs, or type 'undo'.")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Interactive Wordle helper (manual feedback)")
    ap.add_argument("--csv", default="word_list.csv", help="Path to word_list.csv")
    ap.add_argument("--all-words", action="store_true", help="Use every word in the CSV, not only official answers")
    ap.add_argument("--show", type=int, default=10, help="List the candidates when at most this many remain")
    ap.add_argument(
        "--round",
        dest="rounds",
        action="append",
        default=[],
        metavar="GUESS:FEEDBACK",
        help="Apply a round non-interactively (repeatable), print the survivors and exit",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        rounds = [parse_round(r) for r in args.rounds]
    except ValueError as e:
        ap.error(str(e))

    try:
        candidates = _load_dictionary(args.csv, args.all_words)
    except (OSError, KeyError, ValueError) as e:
        ap.error(f"cannot load word list {args.csv}: {e}")
    print("Vocab size:", len(candidates))

    if not rounds:
        run_interactive(candidates, args.show)
        return 0

    for guess, patt in rounds:
        candidates = apply_round(candidates, guess, patt)
    print_candidates(candidates, args.show)
    return 0 if not candidates.is_empty() else 1


if __name__ == "__main__":
    raise SystemExit(main())
