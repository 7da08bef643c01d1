# tweet_sentiment/preprocess.py
from tweet_sentiment import utils
from tweet_sentiment.corpus import load_corpus
from tweet_sentiment.exceptions import CorpusError
from tweet_sentiment.pipeline import prepare_corpus
import pandas as pd

def main(n_jobs=1):
    in_path = utils.processed_dir() / "tweets_raw.csv"
    if not in_path.exists():
        print("Missing tweets_raw.csv — run ingest_merge first.")
        return
    try:
        corpus = prepare_corpus(load_corpus(in_path), n_jobs=n_jobs)
    except CorpusError as e:
        print("Failed to load corpus:", e)
        return
    df = pd.DataFrame({
        utils.TEXT_COLUMN: [d.raw_text for d in corpus],
        'text_clean': [d.sanitized_text for d in corpus],
        'tokens': [" ".join(d.tokens) for d in corpus],
    })
    df['n_tokens'] = [len(d.tokens) for d in corpus]
    out = utils.processed_dir() / "tweets_clean.csv"
    df.to_csv(out, index=False)
    print("Saved tweets_clean.csv with", len(df), "rows at", out)

if __name__ == "__main__":
    main()
