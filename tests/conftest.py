import pytest

from tweet_sentiment.lexicon import CategoryLexicon
from tweet_sentiment.normalize import Normalizer

# small fixed list so tests never need the NLTK stopwords download
STOPWORDS = frozenset({
    "i", "me", "my", "am", "is", "are", "was", "be", "the", "a", "an", "and",
    "but", "of", "to", "in", "on", "for", "with", "what", "so", "see", "it",
    "this", "that", "don't", "not", "new", "at",
})


@pytest.fixture
def stopwords():
    return STOPWORDS


@pytest.fixture
def normalizer():
    return Normalizer.with_stopwords(STOPWORDS)


@pytest.fixture
def lexicon():
    return CategoryLexicon({
        "happy": {"joy", "positive", "trust"},
        "scared": {"fear", "negative"},
        "sad": {"sadness", "negative"},
        "excited": {"anticipation", "joy", "positive", "surprise"},
        "leave": {"negative", "sadness"},
    })


@pytest.fixture
def raw_tweets():
    return [
        "Thank you Reggie! Excited for what's next #Nintendo https://t.co/abc123",
        "@NintendoAmerica so sad to see Reggie leave <U+0001F622> #Nintendo",
        "Doug Bowser is the new president of Nintendo of America #Nintendo #Bowser",
        "",
        "Happy but scared: Nintendo's running games are running and running",
    ]
