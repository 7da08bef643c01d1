"""
Error hierarchy for the tweet sentiment pipeline.

Only structural problems are raised: a corpus file that cannot be parsed or
lacks its text column, and a sentiment lexicon that cannot be read. Problems
inside a single document are repaired locally and never surface here.
"""

from typing import Any, Optional


class TweetSentimentError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class CorpusError(TweetSentimentError):
    """The corpus could not be constructed."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["path"] = self.path
        return data


class CorpusFormatError(CorpusError):
    """Corpus file is unreadable or is missing the expected text column."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        column: Optional[str] = None,
        available_columns: Optional[list[str]] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, path, details)
        self.column = column
        self.available_columns = available_columns or []

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "column": self.column,
            "available_columns": self.available_columns,
        })
        return data


class LexiconError(TweetSentimentError):
    """Sentiment lexicon is missing or malformed."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["path"] = self.path
        return data
