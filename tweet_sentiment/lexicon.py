# tweet_sentiment/lexicon.py
"""
Ten-category emotion lexicon (NRC Emotion Lexicon layout).

The lexicon itself is an external resource: a tab-separated word-level file
``word<TAB>category<TAB>flag`` where ``flag`` is 1 when the word is associated
with the category. Scoring lowercases the text, splits it on non-word
characters and adds one point per token for every category the token belongs
to, so a single word can raise several categories at once.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, Mapping, Union

import pandas as pd

from tweet_sentiment.exceptions import LexiconError

NRC_CATEGORIES = (
    "anger",
    "anticipation",
    "disgust",
    "fear",
    "joy",
    "sadness",
    "surprise",
    "trust",
    "negative",
    "positive",
)

_SPLIT_RE = re.compile(r"\W")


def normalize_encoding(value) -> str:
    """
    Best-effort UTF-8 cleanup before lexicon matching.

    Bytes are decoded with replacement characters; strings lose any code
    points that cannot be encoded (lone surrogates from broken exports).
    """
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if not isinstance(value, str):
        if pd.isna(value):
            return ""
        value = str(value)
    return value.encode("utf-8", errors="ignore").decode("utf-8")


def lexicon_tokens(text: str):
    return [tok for tok in _SPLIT_RE.split(text.lower()) if tok]


class CategoryLexicon:
    """Callable scorer: text -> {category: number of matching tokens}."""

    def __init__(
        self,
        mapping: Mapping[str, Iterable[str]],
        categories: Iterable[str] = NRC_CATEGORIES,
    ) -> None:
        self.categories = tuple(categories)
        known = set(self.categories)
        self._index: Dict[str, frozenset] = {}
        for word, cats in mapping.items():
            cats = frozenset(cats)
            unknown = cats - known
            if unknown:
                raise LexiconError(
                    f"Unknown categories for '{word}': {sorted(unknown)}",
                    details={"word": word, "categories": sorted(unknown)},
                )
            if cats:
                self._index[word.lower()] = cats

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._index

    def categories_for(self, word: str) -> frozenset:
        return self._index.get(word.lower(), frozenset())

    def score(self, text) -> Dict[str, int]:
        counts = dict.fromkeys(self.categories, 0)
        for tok in lexicon_tokens(normalize_encoding(text)):
            for cat in self._index.get(tok, ()):
                counts[cat] += 1
        return counts

    __call__ = score

    @classmethod
    def from_frame(cls, df: pd.DataFrame, categories: Iterable[str] = NRC_CATEGORIES) -> "CategoryLexicon":
        """Build from a frame with ``word``, ``category`` and ``flag`` columns."""
        missing = {"word", "category", "flag"} - set(df.columns)
        if missing:
            raise LexiconError(f"Lexicon frame is missing columns: {sorted(missing)}")
        categories = tuple(categories)
        rows = df[(pd.to_numeric(df["flag"], errors="coerce") == 1) & df["category"].isin(categories)]
        mapping: Dict[str, set] = {}
        for word, cat in zip(rows["word"].astype(str), rows["category"].astype(str)):
            mapping.setdefault(word, set()).add(cat)
        return cls(mapping, categories)

    @classmethod
    def from_nrc_file(
        cls,
        path: Union[str, Path],
        categories: Iterable[str] = NRC_CATEGORIES,
    ) -> "CategoryLexicon":
        path = Path(path)
        if not path.exists():
            raise LexiconError(f"Lexicon file not found: {path}", path=str(path))
        try:
            df = pd.read_csv(
                path,
                sep="\t",
                header=None,
                names=["word", "category", "flag"],
                keep_default_na=False,
                quoting=3,
            )
        except (pd.errors.ParserError, UnicodeDecodeError, ValueError) as e:
            raise LexiconError(f"Could not parse lexicon {path.name}: {e}", path=str(path)) from e
        if df.empty:
            raise LexiconError(f"Lexicon file is empty: {path}", path=str(path))
        return cls.from_frame(df, categories)
