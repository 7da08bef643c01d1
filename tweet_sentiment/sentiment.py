# tweet_sentiment/sentiment.py
from typing import Callable, Dict, Iterable, Mapping

import pandas as pd

from tweet_sentiment.lexicon import normalize_encoding

CategoryScorer = Callable[[str], Mapping[str, int]]


def score_documents(texts: Iterable, score_categories: CategoryScorer) -> pd.DataFrame:
    """One row of category counts per document, zeros included."""
    rows = [dict(score_categories(normalize_encoding(t))) for t in texts]
    columns = list(getattr(score_categories, "categories", ()))
    if not rows:
        return pd.DataFrame(columns=columns, dtype="int64")
    df = pd.DataFrame(rows).fillna(0).astype("int64")
    if columns:
        extra = [c for c in df.columns if c not in columns]
        df = df.reindex(columns=columns + extra, fill_value=0)
    return df


def category_totals(scores: pd.DataFrame) -> Dict[str, int]:
    # no documents -> no categories, rather than zero-valued entries
    if scores.empty:
        return {}
    return {str(cat): int(total) for cat, total in scores.sum(axis=0).items()}


def aggregate_category_scores(texts: Iterable, score_categories: CategoryScorer) -> Dict[str, int]:
    return category_totals(score_documents(texts, score_categories))
