"""
errors.py

Caller-contract violations raised by the filtering engine. Both are
ValueError subclasses so hosts that already catch ValueError keep working.
"""


class WordFilterError(ValueError):
    """Base class for engine errors."""


class InvalidLength(WordFilterError):
    def __init__(self, text: str, expected: int = 5) -> None:
        self.text = text
        self.length = len(text)
        super().__init__(f"word must be {expected} characters, got {self.length}: {text!r}")


class IncompleteFilter(WordFilterError):
    def __init__(self, recorded: int, expected: int = 5) -> None:
        self.recorded = recorded
        super().__init__(
            f"filter needs exactly {expected} verdicts before it can be applied, got {recorded}"
        )
