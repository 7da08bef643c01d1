#!/usr/bin/env python3
"""
pipeline.py

End-to-end run over one fixed corpus of posts:

  raw text -> sanitize -> normalize -> frequency table -> filtered / ranked views
  raw text -> sanitize -> encoding cleanup -> lexicon scores -> category totals

The two branches only share the sanitized text. Each stage returns a new
value; nothing is updated in place.

CLI usage:

  python -m tweet_sentiment.pipeline data/raw/TweetsNintendo.csv
  python -m tweet_sentiment.pipeline data/raw/TweetsNintendo.csv 40
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Dict, Optional

import pandas as pd

from tweet_sentiment import utils
from tweet_sentiment.corpus import Corpus, load_corpus
from tweet_sentiment.frequency import FrequencyTable, build_frequency_table
from tweet_sentiment.normalize import Normalizer, normalize_texts
from tweet_sentiment.sanitize import sanitize_text
from tweet_sentiment.sentiment import CategoryScorer, category_totals, score_documents


@dataclass(frozen=True, eq=False)
class PipelineResult:
    corpus: Corpus
    table: FrequencyTable
    threshold: int
    document_scores: Optional[pd.DataFrame] = None
    category_scores: Dict[str, int] = dataclasses.field(default_factory=dict)

    @property
    def vocabulary(self):
        return self.table.vocabulary

    @property
    def frequent_terms(self) -> pd.Series:
        return self.table.filtered(self.threshold)

    @property
    def ranked_terms(self) -> pd.DataFrame:
        return self.table.ranked()

    def summary(self) -> dict:
        return {
            "documents": len(self.corpus),
            "vocabulary": len(self.table.vocabulary),
            "threshold": self.threshold,
            "frequent_terms": {k: int(v) for k, v in self.frequent_terms.items()},
            "top_terms": [
                {"word": str(w), "freq": int(f)}
                for w, f in self.ranked_terms.head(10).itertuples(index=False)
            ],
            "category_scores": self.category_scores,
        }


def prepare_corpus(corpus: Corpus, normalizer: Optional[Normalizer] = None, n_jobs: int = 1) -> Corpus:
    """Return a new Corpus whose documents carry sanitized text and tokens."""
    sanitized = [sanitize_text(t) for t in corpus.texts]
    token_docs = normalize_texts(sanitized, normalizer, n_jobs=n_jobs)
    return Corpus(
        dataclasses.replace(doc, sanitized_text=s, tokens=tuple(toks))
        for doc, s, toks in zip(corpus, sanitized, token_docs)
    )


def run_pipeline(
    corpus: Corpus,
    normalizer: Optional[Normalizer] = None,
    score_categories: Optional[CategoryScorer] = None,
    threshold: int = utils.FREQUENCY_THRESHOLD,
    n_jobs: int = 1,
) -> PipelineResult:
    """
    Run both branches over ``corpus``.

    Without ``score_categories`` the sentiment branch is skipped and
    ``category_scores`` stays empty.
    """
    prepared = prepare_corpus(corpus, normalizer, n_jobs=n_jobs)
    table = build_frequency_table(doc.tokens for doc in prepared)

    document_scores = None
    totals: Dict[str, int] = {}
    if score_categories is not None:
        document_scores = score_documents((doc.sanitized_text for doc in prepared), score_categories)
        totals = category_totals(document_scores)

    return PipelineResult(
        corpus=prepared,
        table=table,
        threshold=threshold,
        document_scores=document_scores,
        category_scores=totals,
    )


def main(argv=None):
    import sys
    from tweet_sentiment.exceptions import TweetSentimentError
    from tweet_sentiment.lexicon import CategoryLexicon

    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        raw_files = utils.list_raw_csvs()
        if not raw_files:
            print("No CSVs found in data/raw. Pass a path or put the tweet export there.")
            return None
        args = [str(raw_files[0])]
    path = args[0]
    threshold = int(args[1]) if len(args) > 1 else utils.FREQUENCY_THRESHOLD

    try:
        corpus = load_corpus(path)
    except TweetSentimentError as e:
        print(json.dumps(e.to_dict(), indent=2, default=str))
        return None

    scorer = None
    try:
        scorer = CategoryLexicon.from_nrc_file(utils.lexicon_path())
    except TweetSentimentError as e:
        print(json.dumps({**e.to_dict(), "skipped": "sentiment scores"}, indent=2, default=str))

    result = run_pipeline(corpus, score_categories=scorer, threshold=threshold)
    print(json.dumps(result.summary(), indent=2))
    return result


if __name__ == "__main__":
    main()
