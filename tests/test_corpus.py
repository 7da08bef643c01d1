import pytest

from tweet_sentiment.corpus import Corpus, corpus_from_frame, load_corpus
from tweet_sentiment.exceptions import CorpusFormatError

import pandas as pd


def _write(tmp_path, text):
    path = tmp_path / "tweets.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_corpus_reads_text_column(tmp_path):
    path = _write(tmp_path, 'Tweet,Date\n"Hello, #Nintendo",2019-02-21\n,2019-02-21\nBye,2019-02-22\n')
    corpus = load_corpus(path)
    assert len(corpus) == 3
    assert corpus.texts == ["Hello, #Nintendo", "", "Bye"]
    assert corpus[1].tokens == ()
    assert [d.index for d in corpus] == [0, 1, 2]


def test_missing_column_is_fatal(tmp_path):
    path = _write(tmp_path, "id,Date\n1,2019-02-21\n")
    with pytest.raises(CorpusFormatError) as exc:
        load_corpus(path)
    assert exc.value.available_columns == ["id", "Date"]


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(CorpusFormatError):
        load_corpus(tmp_path / "nope.csv")


def test_empty_file_is_fatal(tmp_path):
    with pytest.raises(CorpusFormatError):
        load_corpus(_write(tmp_path, ""))


def test_text_column_autodetect(tmp_path):
    path = _write(tmp_path, "id,text\n1,hi there\n")
    assert load_corpus(path, text_column=None).texts == ["hi there"]


def test_corpus_from_frame_handles_missing_cells():
    df = pd.DataFrame({"Tweet": ["a", None, float("nan")]})
    assert corpus_from_frame(df).texts == ["a", "", ""]


def test_empty_corpus():
    corpus = Corpus.from_texts([])
    assert len(corpus) == 0
    assert corpus.texts == []
