"""
Feedback utilities for Wordle.

The game side of the engine: scoring a guess against a hidden answer and
parsing the feedback a player copies out of the game.
"""

import re
from collections import Counter

from wordfilter.constraints import Verdict
from wordfilter.word import WORD_LENGTH

_FEEDBACK_CODES = {"g": 2, "y": 1, "b": 0, "2": 2, "1": 1, "0": 0}


def _check_word(name: str, word: str) -> None:
    if not isinstance(word, str):
        raise TypeError(f"{name} must be a string")
    if len(word) != WORD_LENGTH:
        raise ValueError(f"{name} must be length {WORD_LENGTH}")
    if not word.isalpha() or not word.islower():
        raise ValueError(f"{name} must be lowercase alphabetic")


def score_pattern(guess: str, target: str) -> list[int]:
    """
    Compute the 5-position Wordle feedback for `guess` against `target`.

    Returns
    -------
    list[int]
        A list of length 5 with values in {0, 1, 2} where:
        - 0 = gray  (letter not present OR over-used relative to target counts)
        - 1 = yellow (letter present but in a different position)
        - 2 = green (letter matches the target at that position)

    Duplicates follow the two-pass rule: greens first consume their copies of
    the target letter, then yellows are handed out left to right while copies
    remain.
    """
    _check_word("guess", guess)
    _check_word("target", target)

    pattern: list[int] = [0] * WORD_LENGTH
    remaining = Counter(target)

    # Pass 1: mark greens and decrement availability
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            pattern[i] = Verdict.CORRECT
            remaining[g] -= 1

    # Pass 2: mark yellows where counts allow (else gray)
    for i, g in enumerate(guess):
        if pattern[i] == Verdict.INCORRECT and remaining[g] > 0:
            pattern[i] = Verdict.MISPLACED
            remaining[g] -= 1

    return [int(p) for p in pattern]


def parse_feedback(s: str) -> list[int]:
    """Parse a 5-char feedback into a list of ints [0/1/2].
    Accepted forms:
      - letters: g/y/b  (green/yellow/black)
      - digits:  2/1/0
      - list:   [0, 1, 2, 2, 0]
    Raises ValueError on invalid input.
    """
    s = s.strip().lower()
    # List-like form: [0,1,2,2,0]
    if s.startswith("[") and s.endswith("]"):
        nums = re.findall(r"[012]", s)
        if len(nums) != WORD_LENGTH:
            raise ValueError("list form must contain exactly five 0/1/2 values")
        return [int(x) for x in nums]

    if len(s) != WORD_LENGTH:
        raise ValueError("feedback must be length 5 (gybgy / 21001 / [0,1,2,2,0])")
    try:
        return [_FEEDBACK_CODES[ch] for ch in s]
    except KeyError as e:
        raise ValueError("feedback must use only g/y/b or 2/1/0") from e


def consistent_with(word: str, guess: str, pattern: list[int]) -> bool:
    """True if `word`, taken as the answer, would have produced `pattern` for `guess`."""
    _check_word("word", word)
    if len(pattern) != WORD_LENGTH or any(p not in (0, 1, 2) for p in pattern):
        raise ValueError("pattern must be five values in {0,1,2}")
    return score_pattern(guess, word) == list(pattern)
