"""
word.py

Fixed-length words and the 26-letter alphabet model shared by the engine.
"""

from __future__ import annotations

from string import ascii_lowercase

from wordfilter.errors import InvalidLength

WORD_LENGTH = 5
ALPHABET = ascii_lowercase


def letter_index(c: str) -> int:
    """Map a lowercase letter to 0..25."""
    return ord(c) - 97


def letter_mask(c: str) -> int:
    return 1 << letter_index(c)


def is_letter(c: str) -> bool:
    return isinstance(c, str) and len(c) == 1 and c in ALPHABET


class Word:
    """
    An immutable five-letter word plus its letter-presence bitmap.

    Bit i of `bitmap` is set iff letter i occurs at least once in the word.
    """

    __slots__ = ("_letters", "_bitmap")

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError("word must be a str")
        if len(text) != WORD_LENGTH:
            raise InvalidLength(text, WORD_LENGTH)
        if not all(is_letter(c) for c in text):
            raise ValueError(f"word must be lowercase alphabetic: {text!r}")

        bitmap = 0
        for c in text:
            bitmap |= letter_mask(c)

        self._letters = text
        self._bitmap = bitmap

    @property
    def letters(self) -> str:
        return self._letters

    @property
    def bitmap(self) -> int:
        return self._bitmap

    def count(self, letter: str) -> int:
        """Number of times `letter` occurs in the word."""
        return self._letters.count(letter)

    def to_string(self) -> str:
        return self._letters

    def __str__(self) -> str:
        return self._letters

    def __repr__(self) -> str:
        return f"Word({self._letters!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self) -> int:
        return hash(self._letters)

    def __iter__(self):
        return iter(self._letters)

    def __len__(self) -> int:
        return WORD_LENGTH
