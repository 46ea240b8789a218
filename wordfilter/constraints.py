"""
constraints.py

Accumulates one guess's verdicts into per-letter constraints:
- position masks (where a letter must / must not sit)
- an occurrence bound (at least n, or exactly n, copies of the letter)
plus the presence sets used by the dictionary's coarse pass.
"""

from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import Dict, Iterator, List, Optional, Tuple

from wordfilter.errors import IncompleteFilter
from wordfilter.word import WORD_LENGTH, is_letter, letter_mask

log = logging.getLogger(__name__)


class Verdict(IntEnum):
    INCORRECT = 0
    MISPLACED = 1
    CORRECT = 2


class Limit(Enum):
    AT_LEAST = "at_least"
    EXACTLY = "exactly"


class OccurrenceBound:
    """How many times a letter may appear. Once EXACTLY, never back to AT_LEAST."""

    __slots__ = ("count", "limit")

    def __init__(self, count: int = 0, limit: Limit = Limit.AT_LEAST) -> None:
        self.count = count
        self.limit = limit

    def increment(self) -> None:
        self.count += 1

    def cap(self) -> None:
        self.limit = Limit.EXACTLY

    def is_informative(self) -> bool:
        # AT_LEAST 0 or 1 is already covered by the includes set
        return self.limit is Limit.EXACTLY or self.count > 1

    def check(self, n: int) -> bool:
        if self.limit is Limit.EXACTLY:
            return n == self.count
        return n >= self.count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OccurrenceBound):
            return NotImplemented
        return (self.count, self.limit) == (other.count, other.limit)

    def __repr__(self) -> str:
        return f"OccurrenceBound({self.count}, {self.limit.name})"


class LetterConstraint:
    __slots__ = ("bound", "must_have", "must_exclude")

    def __init__(self) -> None:
        self.bound = OccurrenceBound()
        self.must_have = 0      # bit p set: letter sits at position p
        self.must_exclude = 0   # bit p set: letter is not at position p

    def check_positions(self, letter: str, letters: str) -> bool:
        for pos, ch in enumerate(letters):
            bit = 1 << pos
            if ch == letter:
                if self.must_exclude & bit:
                    return False
            elif self.must_have & bit:
                return False
        return True

    def check_count(self, letter: str, letters: str) -> bool:
        if not self.bound.is_informative():
            return True
        return self.bound.check(letters.count(letter))

    def __repr__(self) -> str:
        return (
            f"LetterConstraint(bound={self.bound!r}, "
            f"must_have={self.must_have:05b}, must_exclude={self.must_exclude:05b})"
        )


class Filter:
    """
    Builder for a single round of feedback.

    Call exactly one of mark_correct / mark_misplaced / mark_incorrect per
    position, left to right; the filter tracks the position itself.

    - Correct   = letter sits here; one more confirmed copy
    - Misplaced = letter is elsewhere; one more confirmed copy
    - Incorrect = no copies beyond those already confirmed this round
      (the bound becomes exact, so a duplicate guess caps the count
      instead of removing a letter that is present)
    """

    def __init__(self) -> None:
        self._constraints: Dict[str, LetterConstraint] = {}
        self._includes = 0
        self._excludes = 0
        self._position = 0

    @classmethod
    def from_feedback(cls, guess: str, pattern: List[int]) -> "Filter":
        """Build a complete filter from a guess and its 0/1/2 pattern."""
        if not isinstance(guess, str) or len(guess) != WORD_LENGTH:
            raise ValueError(f"guess must be a string of length {WORD_LENGTH}")
        if not isinstance(pattern, (list, tuple)) or len(pattern) != WORD_LENGTH:
            raise ValueError(f"pattern must be a list of length {WORD_LENGTH}")

        flt = cls()
        for ch, p in zip(guess, pattern):
            if isinstance(p, bool) or not isinstance(p, int):
                raise ValueError("pattern elements must be integers in {0,1,2}")
            if p == Verdict.CORRECT:
                flt.mark_correct(ch)
            elif p == Verdict.MISPLACED:
                flt.mark_misplaced(ch)
            elif p == Verdict.INCORRECT:
                flt.mark_incorrect(ch)
            else:
                raise ValueError("pattern elements must be in {0,1,2}")
        return flt

    def reset(self) -> None:
        self._constraints = {}
        self._includes = 0
        self._excludes = 0
        self._position = 0

    # -------------------------
    # Verdicts
    # -------------------------
    def mark_correct(self, letter: str) -> None:
        state, bit = self._advance(letter)
        state.bound.increment()
        state.must_have |= bit
        self._includes |= letter_mask(letter)

    def mark_misplaced(self, letter: str) -> None:
        state, bit = self._advance(letter)
        state.bound.increment()
        state.must_exclude |= bit
        self._includes |= letter_mask(letter)

    def mark_incorrect(self, letter: str) -> None:
        state, bit = self._advance(letter)
        state.bound.cap()
        state.must_exclude |= bit
        self._excludes |= letter_mask(letter)

    def _advance(self, letter: str) -> Tuple[LetterConstraint, int]:
        if not is_letter(letter):
            raise ValueError(f"verdict letter must be a single lowercase letter: {letter!r}")
        pos = self._position
        self._position += 1
        if pos >= WORD_LENGTH:
            log.debug("verdict for %r past the last position (%d)", letter, pos)
            bit = 0
        else:
            bit = 1 << pos
        state = self._constraints.get(letter)
        if state is None:
            state = self._constraints[letter] = LetterConstraint()
        return state, bit

    # -------------------------
    # Introspection
    # -------------------------
    @property
    def position(self) -> int:
        return self._position

    @property
    def is_complete(self) -> bool:
        return self._position == WORD_LENGTH

    def ensure_complete(self) -> None:
        if not self.is_complete:
            raise IncompleteFilter(self._position, WORD_LENGTH)

    @property
    def includes(self) -> int:
        return self._includes

    @property
    def excludes(self) -> int:
        return self._excludes

    @property
    def effective_excludes(self) -> int:
        """Letters known to be wholly absent (guessed too often but present don't count)."""
        return self._excludes & ~self._includes

    def constraint(self, letter: str) -> Optional[LetterConstraint]:
        return self._constraints.get(letter)

    def constraints(self) -> Iterator[Tuple[str, LetterConstraint]]:
        """Touched letters in alphabetical order."""
        for letter in sorted(self._constraints):
            yield letter, self._constraints[letter]

    def admits(self, bitmap: int) -> bool:
        """Presence check on a letter bitmap: every included letter, no absent one."""
        return (bitmap & self.effective_excludes) == 0 and (bitmap & self._includes) == self._includes

    def matches(self, letters: str) -> bool:
        """Detailed check of one candidate against every touched letter."""
        for letter, state in self.constraints():
            if not state.check_positions(letter, letters):
                return False
            if not state.check_count(letter, letters):
                return False
        return True

    def __repr__(self) -> str:
        return f"Filter(position={self._position}, letters={''.join(sorted(self._constraints))!r})"
