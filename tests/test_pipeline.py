import json

from tests.conftest import STOPWORDS
from tweet_sentiment import normalize
from tweet_sentiment.corpus import Corpus
from tweet_sentiment.pipeline import main, prepare_corpus, run_pipeline


def test_prepare_corpus_returns_new_documents(raw_tweets, normalizer):
    corpus = Corpus.from_texts(raw_tweets)
    prepared = prepare_corpus(corpus, normalizer)
    assert corpus[0].tokens == ()
    assert prepared[0].raw_text == raw_tweets[0]
    assert "#Nintendo" not in prepared[0].sanitized_text
    assert "https" not in prepared[0].sanitized_text
    assert prepared[3].tokens == ()
    assert prepared[4].tokens.count("run") == 3


def test_run_pipeline_end_to_end(raw_tweets, normalizer, lexicon):
    result = run_pipeline(Corpus.from_texts(raw_tweets), normalizer, lexicon, threshold=3)
    assert len(result.corpus) == 5
    assert "nintendo" in result.vocabulary
    assert "nintendoamerica" not in result.vocabulary  # only ever appears as a mention
    assert list(result.frequent_terms.index) == ["run"]
    ranked = result.ranked_terms
    assert ranked.iloc[0]["word"] == "run"
    for term in result.vocabulary:
        assert result.table.aggregate[term] == sum(len([t for t in d.tokens if t == term]) for d in result.corpus)
    assert result.category_scores["joy"] == 2
    assert result.category_scores["fear"] == 1
    assert result.document_scores.shape == (5, 10)


def test_sentiment_branch_uses_sanitized_text(normalizer, lexicon):
    result = run_pipeline(Corpus.from_texts(["#happy day"]), normalizer, lexicon)
    assert result.category_scores["joy"] == 0


def test_without_scorer_category_scores_are_empty(raw_tweets, normalizer):
    result = run_pipeline(Corpus.from_texts(raw_tweets), normalizer)
    assert result.category_scores == {}
    assert result.document_scores is None


def test_empty_corpus(normalizer, lexicon):
    result = run_pipeline(Corpus(), normalizer, lexicon)
    assert result.vocabulary == ()
    assert result.table.aggregate.empty
    assert result.frequent_terms.empty
    assert result.ranked_terms.empty
    assert result.category_scores == {}


def test_summary_is_json_serializable(raw_tweets, normalizer, lexicon):
    result = run_pipeline(Corpus.from_texts(raw_tweets), normalizer, lexicon, threshold=2)
    payload = json.loads(json.dumps(result.summary()))
    assert payload["documents"] == 5
    assert payload["top_terms"][0] == {"word": "run", "freq": 3}


def test_main_reports_bad_corpus(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_text("id\n1\n", encoding="utf-8")
    assert main([str(path)]) is None
    payload = json.loads(capsys.readouterr().out)
    assert payload["error_type"] == "CorpusFormatError"
    assert "not found" in payload["message"]
    assert payload["path"] == str(path)
    assert payload["column"] == "Tweet"
    assert payload["available_columns"] == ["id"]


def test_main_reports_missing_lexicon_and_still_runs(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("TWEET_SENTIMENT_DATA", str(tmp_path))
    monkeypatch.setattr(normalize, "default_is_stop_word", STOPWORDS.__contains__)
    path = tmp_path / "tweets.csv"
    path.write_text("Tweet\nrunning running #Nintendo\n", encoding="utf-8")

    result = main([str(path), "1"])

    out = capsys.readouterr().out
    error, end = json.JSONDecoder().raw_decode(out)
    assert error["error_type"] == "LexiconError"
    assert error["skipped"] == "sentiment scores"
    assert error["path"].endswith("NRC-Emotion-Lexicon-Wordlevel-v0.92.txt")
    summary = json.loads(out[end:])
    assert summary["frequent_terms"] == {"run": 2}
    assert result.category_scores == {}
