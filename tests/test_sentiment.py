from tweet_sentiment.lexicon import NRC_CATEGORIES
from tweet_sentiment.sentiment import aggregate_category_scores, category_totals, score_documents


def test_score_documents_shape(lexicon):
    scores = score_documents(["I am happy", "so sad", ""], lexicon)
    assert scores.shape == (3, 10)
    assert list(scores.columns) == list(NRC_CATEGORIES)
    assert scores.loc[2].sum() == 0


def test_totals_sum_each_category(lexicon):
    totals = aggregate_category_scores(["I am happy but scared", "happy happy", "sad to leave"], lexicon)
    assert totals["joy"] == 3
    assert totals["positive"] == 3
    assert totals["fear"] == 1
    assert totals["negative"] == 3
    assert totals["sadness"] == 2
    assert all(isinstance(v, int) and v >= 0 for v in totals.values())


def test_single_document_contributes_to_several_categories(lexicon):
    totals = aggregate_category_scores(["I am happy but scared"], lexicon)
    assert totals["joy"] > 0 and totals["fear"] > 0


def test_empty_corpus_has_no_categories(lexicon):
    assert aggregate_category_scores([], lexicon) == {}
    assert category_totals(score_documents([], lexicon)) == {}


def test_plain_function_scorer():
    def scorer(text):
        return {"positive": text.count("good"), "negative": text.count("bad")}

    assert aggregate_category_scores(["good good", "bad"], scorer) == {"positive": 2, "negative": 1}


def test_bad_bytes_do_not_abort(lexicon):
    totals = aggregate_category_scores([b"happy \xff\xfe", None, "sad"], lexicon)
    assert totals["joy"] == 1
    assert totals["sadness"] == 1
