# tweet_sentiment/normalize.py
"""
Tokenization and normalization of sanitized post text.

Each post goes through word segmentation, removal of numeric-only tokens,
lowercasing, stop-word removal and stemming, in that order. The stemmer and
the stop-word predicate are plain callables so alternative resources can be
plugged in (tests use a fixed stop-word set to avoid NLTK downloads).
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable, Iterable, List, Optional

from joblib import Parallel, delayed

from tweet_sentiment import utils

# Runs of letters/digits; inner apostrophes stay so contractions remain one word.
# Hyphens, underscores and all other punctuation split words.
WORD_RE = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")


def segment(text: str) -> List[str]:
    if not text:
        return []
    return WORD_RE.findall(text)


def is_word_token(token: str) -> bool:
    """Numeric-only tokens (and anything without a letter) are dropped."""
    return any(ch.isalpha() for ch in token)


@lru_cache(maxsize=1)
def english_stopwords() -> frozenset:
    utils.ensure_nltk_resource("corpora/stopwords", "stopwords")
    from nltk.corpus import stopwords
    return frozenset(stopwords.words("english"))


def default_is_stop_word(word: str) -> bool:
    return word in english_stopwords()


@lru_cache(maxsize=1)
def _snowball():
    from nltk.stem.snowball import SnowballStemmer
    return SnowballStemmer("english")


def default_stem(word: str) -> str:
    return _snowball().stem(word)


class Normalizer:
    """Callable turning one sanitized string into its ordered stem sequence."""

    def __init__(
        self,
        stem: Optional[Callable[[str], str]] = None,
        is_stop_word: Optional[Callable[[str], bool]] = None,
    ) -> None:
        self.stem = stem or default_stem
        self.is_stop_word = is_stop_word or default_is_stop_word

    @classmethod
    def with_stopwords(cls, words: Iterable[str], stem=None) -> "Normalizer":
        vocab = frozenset(w.lower() for w in words)
        return cls(stem=stem, is_stop_word=vocab.__contains__)

    def tokens(self, text: str) -> List[str]:
        """Lowercased word tokens before stop-word removal and stemming."""
        return [
            tok.lower().replace("’", "'")
            for tok in segment(text)
            if is_word_token(tok)
        ]

    def __call__(self, text: str) -> List[str]:
        out = []
        for tok in self.tokens(text):
            if self.is_stop_word(tok):
                continue
            out.append(self.stem(tok))
        return out


def normalize_texts(texts: Iterable[str], normalizer: Optional[Normalizer] = None, n_jobs: int = 1):
    """Normalize every text; order of the result follows the input."""
    normalizer = normalizer or Normalizer()
    texts = list(texts)
    if n_jobs == 1 or len(texts) < 2:
        return [normalizer(t) for t in texts]
    return Parallel(n_jobs=n_jobs)(delayed(normalizer)(t) for t in texts)
