from __future__ import annotations


class EmptyVocabularyError(ValueError):
    """Raised when a passage yields no usable word tokens."""

    def __init__(self, message: str = "Passage contains no analyzable words.") -> None:
        super().__init__(message)
