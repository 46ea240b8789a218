"""
Wordle candidate filtering.

Record one guess's verdicts in a Filter, then narrow a Dictionary with it:

    >>> d = Dictionary(["crane", "slate", "least", "leapt"])
    >>> f = Filter.from_feedback("least", [2, 2, 2, 0, 2])
    >>> d.filter(f).words()
    ['leapt']
"""

__version__ = "1.0.0"

from .errors import WordFilterError, InvalidLength, IncompleteFilter
from .word import Word, WORD_LENGTH, ALPHABET
from .constraints import Filter, Limit, OccurrenceBound, LetterConstraint, Verdict
from .dictionary import Dictionary
from .feedback import score_pattern, parse_feedback, consistent_with
