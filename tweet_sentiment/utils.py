# tweet_sentiment/utils.py
from pathlib import Path
import os

# ROOT = project root
ROOT = Path(__file__).resolve().parents[1]

# Column holding the post text in the exported tweet CSV
TEXT_COLUMN = "Tweet"

# Bar chart only shows terms occurring at least this many times
FREQUENCY_THRESHOLD = 40

NRC_LEXICON_FILE = "NRC-Emotion-Lexicon-Wordlevel-v0.92.txt"

def data_root() -> Path:
    override = os.environ.get("TWEET_SENTIMENT_DATA")
    if override:
        return Path(override).expanduser().resolve()
    return ROOT / "data"

def raw_dir() -> Path:
    return data_root() / "raw"

def processed_dir() -> Path:
    return data_root() / "processed"

def figures_dir() -> Path:
    return processed_dir() / "figures"

def lexicon_dir() -> Path:
    return data_root() / "lexicon"

def lexicon_path() -> Path:
    return lexicon_dir() / NRC_LEXICON_FILE

def list_raw_csvs():
    return sorted(raw_dir().glob("*.csv"))

def safe_read_csv(path):
    import pandas as pd
    try:
        return pd.read_csv(path, low_memory=False)
    except Exception as e:
        print("[safe_read_csv]", e)
        return pd.DataFrame()

def ensure_nltk_resource(resource: str, package: str) -> None:
    """Download an NLTK data package quietly unless it is already installed."""
    import nltk
    try:
        nltk.data.find(resource)
    except LookupError:
        nltk.download(package, quiet=True)
