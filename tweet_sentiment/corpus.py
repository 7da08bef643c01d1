# tweet_sentiment/corpus.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

import pandas as pd

from tweet_sentiment import utils
from tweet_sentiment.exceptions import CorpusFormatError

# fallbacks when the export does not use the default column name
TEXT_COLUMN_CANDIDATES = ("Tweet", "tweet", "text", "full_text", "content", "body")


@dataclass(frozen=True)
class Document:
    index: int
    raw_text: str
    sanitized_text: str = ""
    tokens: Tuple[str, ...] = field(default_factory=tuple)


class Corpus:
    """Ordered, read-only collection of documents."""

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._documents = tuple(documents)

    @classmethod
    def from_texts(cls, texts: Iterable) -> "Corpus":
        return cls(Document(i, _cell_text(t)) for i, t in enumerate(texts))

    @property
    def documents(self) -> Tuple[Document, ...]:
        return self._documents

    @property
    def texts(self) -> list:
        return [d.raw_text for d in self._documents]

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __getitem__(self, i: int) -> Document:
        return self._documents[i]

    def __repr__(self) -> str:
        return f"Corpus(n_documents={len(self)})"


def _cell_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if not isinstance(value, str) and pd.isna(value):
        return ""
    return str(value)


def resolve_text_column(columns, text_column: Optional[str] = None) -> Optional[str]:
    if text_column:
        return text_column if text_column in columns else None
    for cand in TEXT_COLUMN_CANDIDATES:
        if cand in columns:
            return cand
    return None


def corpus_from_frame(df: pd.DataFrame, text_column: Optional[str] = utils.TEXT_COLUMN, path=None) -> Corpus:
    col = resolve_text_column(df.columns, text_column)
    if col is None:
        wanted = text_column or " / ".join(TEXT_COLUMN_CANDIDATES)
        raise CorpusFormatError(
            f"Text column '{wanted}' not found",
            path=str(path) if path is not None else None,
            column=text_column,
            available_columns=[str(c) for c in df.columns],
        )
    return Corpus.from_texts(df[col].tolist())


def load_corpus(path: Union[str, Path], text_column: Optional[str] = utils.TEXT_COLUMN) -> Corpus:
    """
    Read a comma-separated export with a header row into a Corpus.

    Rows with an empty text cell become empty documents. A file that cannot
    be parsed, or that lacks the text column, raises CorpusFormatError.
    Pass ``text_column=None`` to pick the first known text column.
    """
    path = Path(path)
    if not path.exists():
        raise CorpusFormatError(f"Corpus file not found: {path}", path=str(path), column=text_column)
    try:
        df = pd.read_csv(path, sep=",", header=0, dtype=str, keep_default_na=False,
                         encoding="utf-8", encoding_errors="replace")
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise CorpusFormatError(f"Could not parse {path.name}: {e}", path=str(path), column=text_column) from e
    return corpus_from_frame(df, text_column, path=path)
