"""Hashtag tweet sentiment: sanitize, normalize, count terms, score emotions."""

from .corpus import Corpus, Document, load_corpus
from .exceptions import CorpusError, CorpusFormatError, LexiconError, TweetSentimentError
from .frequency import FrequencyTable, build_frequency_table
from .lexicon import NRC_CATEGORIES, CategoryLexicon, normalize_encoding
from .normalize import Normalizer, normalize_texts
from .pipeline import PipelineResult, prepare_corpus, run_pipeline
from .sanitize import DEFAULT_RULES, RewriteRule, sanitize_text
from .sentiment import aggregate_category_scores, category_totals, score_documents

__all__ = [
    "Corpus",
    "Document",
    "load_corpus",
    "Normalizer",
    "normalize_texts",
    "RewriteRule",
    "DEFAULT_RULES",
    "sanitize_text",
    "FrequencyTable",
    "build_frequency_table",
    "CategoryLexicon",
    "NRC_CATEGORIES",
    "normalize_encoding",
    "score_documents",
    "category_totals",
    "aggregate_category_scores",
    "PipelineResult",
    "prepare_corpus",
    "run_pipeline",
    "TweetSentimentError",
    "CorpusError",
    "CorpusFormatError",
    "LexiconError",
]

__version__ = "0.1.0"
