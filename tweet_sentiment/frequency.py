# tweet_sentiment/frequency.py
"""
Document-term frequency table over normalized token sequences.

Counting is delegated to scikit-learn's CountVectorizer with an identity
analyzer: tokens are already sanitized, lowercased, filtered and stemmed, so
the vectorizer only has to tally them. The vocabulary is passed in explicitly
in first-discovery order, which keeps column order (and therefore tie order
in the ranked view) independent of the alphabet.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd
from scipy import sparse
from sklearn.feature_extraction.text import CountVectorizer

from tweet_sentiment import utils


def _identity(tokens):
    return tokens


def discover_vocabulary(token_docs: Iterable[Sequence[str]]) -> Dict[str, int]:
    """Map each distinct term to its column, in order of first appearance."""
    vocabulary: Dict[str, int] = {}
    for tokens in token_docs:
        for tok in tokens:
            if tok not in vocabulary:
                vocabulary[tok] = len(vocabulary)
    return vocabulary


@dataclass(frozen=True, eq=False)
class FrequencyTable:
    vocabulary: Tuple[str, ...]
    matrix: sparse.csr_matrix  # documents x terms

    @property
    def n_documents(self) -> int:
        return self.matrix.shape[0]

    @cached_property
    def _columns(self) -> Dict[str, int]:
        return {term: i for i, term in enumerate(self.vocabulary)}

    def _check_row(self, doc_index: int) -> None:
        # no negative wrap-around: rows are document positions
        if not 0 <= doc_index < self.n_documents:
            raise IndexError(f"document index {doc_index} out of range for {self.n_documents} documents")

    def count(self, doc_index: int, term: str) -> int:
        self._check_row(doc_index)
        col = self._columns.get(term)
        if col is None:
            return 0
        return int(self.matrix[doc_index, col])

    def document_counts(self, doc_index: int) -> Dict[str, int]:
        self._check_row(doc_index)
        row = self.matrix[doc_index]
        return {self.vocabulary[j]: int(v) for j, v in zip(row.indices, row.data)}

    @cached_property
    def aggregate(self) -> pd.Series:
        """Total count per term across all documents, in discovery order."""
        totals = np.asarray(self.matrix.sum(axis=0)).ravel().astype(np.int64)
        return pd.Series(totals, index=pd.Index(self.vocabulary, dtype=object), dtype="int64", name="freq")

    def filtered(self, threshold: int = utils.FREQUENCY_THRESHOLD) -> pd.Series:
        """Terms whose aggregate count is at least ``threshold``."""
        agg = self.aggregate
        return agg[agg >= threshold]

    def ranked(self) -> pd.DataFrame:
        """word/freq pairs by descending count; ties keep discovery order."""
        pairs = sorted(self.aggregate.items(), key=lambda item: item[1], reverse=True)
        df = pd.DataFrame(pairs, columns=["word", "freq"])
        df["freq"] = df["freq"].astype("int64")
        return df

    def to_dataframe(self) -> pd.DataFrame:
        """Dense term x document counts (terms are rows)."""
        return pd.DataFrame(
            self.matrix.T.toarray(),
            index=pd.Index(self.vocabulary, dtype=object),
            columns=pd.RangeIndex(self.n_documents),
        )

    def merge(self, other: "FrequencyTable") -> "FrequencyTable":
        """
        Combine tables built over consecutive batches of documents.

        Rows of ``other`` follow the rows of this table; terms new to
        ``other`` are appended to the vocabulary in its discovery order.
        """
        vocabulary: List[str] = list(self.vocabulary)
        columns = dict(self._columns)
        for term in other.vocabulary:
            if term not in columns:
                columns[term] = len(vocabulary)
                vocabulary.append(term)

        width = len(vocabulary)
        left = sparse.csr_matrix(
            (self.matrix.data, self.matrix.indices, self.matrix.indptr),
            shape=(self.n_documents, width),
        )
        coo = other.matrix.tocoo()
        col_map = np.array([columns[t] for t in other.vocabulary], dtype=np.int64)
        right = sparse.coo_matrix(
            (coo.data, (coo.row, col_map[coo.col] if len(col_map) else coo.col)),
            shape=(other.n_documents, width),
            dtype=np.int64,
        )
        matrix = sparse.vstack([left, right], format="csr", dtype=np.int64)
        return FrequencyTable(tuple(vocabulary), matrix)


def build_frequency_table(token_docs: Iterable[Sequence[str]]) -> FrequencyTable:
    """Count the terms of every document; an empty corpus gives an empty table."""
    docs = [list(tokens) for tokens in token_docs]
    vocabulary = discover_vocabulary(docs)
    if not vocabulary:
        matrix = sparse.csr_matrix((len(docs), 0), dtype=np.int64)
        return FrequencyTable((), matrix)

    vectorizer = CountVectorizer(analyzer=_identity, vocabulary=vocabulary, dtype=np.int64)
    matrix = vectorizer.fit_transform(docs).tocsr()
    return FrequencyTable(tuple(vocabulary), matrix)
