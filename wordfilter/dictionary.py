"""
dictionary.py

An ordered list of candidate words that can be narrowed by a Filter.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

import numpy as np
import pandas as pd

from wordfilter.constraints import Filter
from wordfilter.word import WORD_LENGTH, Word

log = logging.getLogger(__name__)


class Dictionary:
    """
    Candidate words in insertion order. Duplicates are kept.

    `filter` never mutates the dictionary; it returns a new one, so callers
    can keep every round's dictionary around.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        if isinstance(words, str):
            raise TypeError("`words` must be an iterable of strings, not a single str")
        self._words: List[Word] = []
        for w in words:
            self.add(w)

    @classmethod
    def _from_words(cls, words: List[Word]) -> "Dictionary":
        out = cls()
        out._words = words
        return out

    # ---------- Construction helpers ----------

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        lowercase: bool = True,
        dedupe: bool = True,
    ) -> "Dictionary":
        """
        Load words from a CSV and build a Dictionary.

        Rows that are not a five-letter a-z word (after stripping and,
        optionally, lowercasing) are dropped.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        lowercase : bool, default=True
            If True, lowercase words before validation.
        dedupe : bool, default=True
            If True, keep the first occurrence and drop later duplicates.

        Raises
        ------
        FileNotFoundError, KeyError, ValueError
        """
        df = pd.read_csv(path)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        return cls.from_frame(df, column, path, lowercase=lowercase, dedupe=dedupe)

    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        column: str,
        source: str,
        *,
        lowercase: bool = True,
        dedupe: bool = True,
    ) -> "Dictionary":
        clean: List[Word] = []
        seen = set()
        skipped = 0

        for val in df[column].tolist():
            if not isinstance(val, str):
                # NaN cells and numbers never make a valid word
                skipped += 1
                continue
            w = val.strip()
            if lowercase:
                w = w.lower()

            try:
                word = Word(w)
            except ValueError:
                skipped += 1
                continue

            if dedupe:
                if w in seen:
                    continue
                seen.add(w)

            clean.append(word)

        if not clean:
            raise ValueError(f"no valid words after filtering {source}")

        log.info("Loaded %d words from %s (%d rows, %d invalid)", len(clean), source, len(df), skipped)
        return cls._from_words(clean)

    # ---------- Basic protocol ----------

    def add(self, text: str) -> None:
        """Validate and append a word; raises InvalidLength like Word()."""
        self._words.append(Word(text))

    def get(self, index: int) -> str:
        """Return the word at position `index`; raise IndexError if out of bounds."""
        if index < 0 or index >= len(self._words):
            raise IndexError(f"index out of range: {index}")
        return self._words[index].to_string()

    def __getitem__(self, index: int) -> str:
        return self.get(index)

    def __len__(self) -> int:
        """Number of words in the dictionary."""
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        """Iterate over the words as strings, like `get`."""
        return (w.to_string() for w in self._words)

    def is_empty(self) -> bool:
        return not self._words

    def words(self) -> List[str]:
        """Return the words as a new list of strings."""
        return [w.to_string() for w in self._words]

    def contains(self, text: str) -> bool:
        """True iff `text` exactly matches a stored word."""
        if not isinstance(text, str) or len(text) != WORD_LENGTH:
            return False
        return any(w.letters == text for w in self._words)

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.contains(text)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words)"

    # ---------- Filtering ----------

    def bitmaps(self) -> np.ndarray:
        """Letter-presence bitmaps of every word, in order."""
        return np.fromiter((w.bitmap for w in self._words), dtype=np.uint32, count=len(self._words))

    def coarse_mask(self, flt: Filter) -> np.ndarray:
        """
        Boolean mask of words that pass the bitmap pre-check: none of the
        letters known to be absent, and every letter known to be present.
        """
        bitmaps = self.bitmaps()
        includes = np.uint32(flt.includes)
        excludes = np.uint32(flt.effective_excludes)
        return ((bitmaps & excludes) == 0) & ((bitmaps & includes) == includes)

    def filter(self, flt: Filter, *, coarse: bool = True) -> "Dictionary":
        """
        Return a new Dictionary with the words consistent with `flt`.

        Raises IncompleteFilter unless exactly five verdicts were recorded.
        With `coarse=False` the bitmap check runs word by word instead of as
        a vectorised pre-pass; the result is the same.
        """
        flt.ensure_complete()

        if coarse:
            candidates = [self._words[i] for i in np.flatnonzero(self.coarse_mask(flt))]
            log.debug("coarse pass kept %d of %d words", len(candidates), len(self._words))
        else:
            candidates = [w for w in self._words if flt.admits(w.bitmap)]

        kept = [w for w in candidates if flt.matches(w.letters)]
        log.debug("filter kept %d of %d words", len(kept), len(self._words))
        return Dictionary._from_words(kept)
