import pytest

from tweet_sentiment.exceptions import LexiconError
from tweet_sentiment.lexicon import NRC_CATEGORIES, CategoryLexicon, lexicon_tokens, normalize_encoding


def test_ten_categories():
    assert len(NRC_CATEGORIES) == 10
    assert {"positive", "negative", "fear", "joy"} <= set(NRC_CATEGORIES)


def test_word_counts_in_several_categories(lexicon):
    scores = lexicon.score("I am happy but scared")
    assert scores["joy"] == 1
    assert scores["positive"] == 1
    assert scores["fear"] == 1
    assert scores["negative"] == 1
    assert scores["anger"] == 0
    assert list(scores) == list(NRC_CATEGORIES)


def test_repeated_words_count_each_time(lexicon):
    assert lexicon("sad sad SAD")["sadness"] == 3


def test_no_stemming_is_applied(lexicon):
    assert lexicon("happiness scaredy")["joy"] == 0


def test_lexicon_tokens_split_on_non_word():
    assert lexicon_tokens("Happy!!! #scared, sad") == ["happy", "scared", "sad"]


def test_unknown_category_rejected():
    with pytest.raises(LexiconError):
        CategoryLexicon({"meh": {"boredom"}})


def test_from_nrc_file(tmp_path):
    path = tmp_path / "nrc.txt"
    path.write_text(
        "abandon\tfear\t1\n"
        "abandon\tjoy\t0\n"
        "abandon\tnegative\t1\n"
        "abandon\tsadness\t1\n"
        "happy\tjoy\t1\n"
        "happy\tpositive\t1\n"
        "null\tanger\t0\n",
        encoding="utf-8",
    )
    lex = CategoryLexicon.from_nrc_file(path)
    assert len(lex) == 2
    assert lex.categories_for("abandon") == {"fear", "negative", "sadness"}
    assert "null" not in lex
    assert lex("happy to abandon")["negative"] == 1


def test_missing_lexicon_file(tmp_path):
    with pytest.raises(LexiconError) as exc:
        CategoryLexicon.from_nrc_file(tmp_path / "missing.txt")
    assert exc.value.path.endswith("missing.txt")


def test_normalize_encoding_repairs_text():
    assert normalize_encoding(b"caf\xe9") == "caf\ufffd"
    assert normalize_encoding("a\udcff b") == "a b"
    assert normalize_encoding(None) == ""
    assert normalize_encoding(float("nan")) == ""
    assert normalize_encoding("ok") == "ok"
