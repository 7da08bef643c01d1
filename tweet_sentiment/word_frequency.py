# tweet_sentiment/word_frequency.py
import sys
import pandas as pd
from tweet_sentiment import utils
from tweet_sentiment.frequency import build_frequency_table
from tweet_sentiment import visualize

def load_token_docs(path):
    df = pd.read_csv(path, keep_default_na=False, dtype=str, low_memory=False)
    # tokens are stored space-joined; stems never contain spaces
    return [t.split() for t in df.get('tokens', pd.Series(dtype=str)).tolist()]

def main(threshold=None):
    if threshold is None:
        threshold = int(sys.argv[1]) if len(sys.argv) > 1 else utils.FREQUENCY_THRESHOLD
    in_path = utils.processed_dir() / "tweets_clean.csv"
    if not in_path.exists():
        print("Missing tweets_clean.csv — run preprocess first.")
        return
    table = build_frequency_table(load_token_docs(in_path))

    ranked = table.ranked()
    out = utils.processed_dir() / "word_frequency.csv"
    ranked.to_csv(out, index=False)
    print("Saved word_frequency.csv with", len(ranked), "terms at", out)

    frequent = table.filtered(threshold)
    out = utils.processed_dir() / "frequent_words.csv"
    frequent.rename_axis('word').reset_index().to_csv(out, index=False)
    print(f"{len(frequent)} terms occur at least {threshold} times; saved at", out)
    if frequent.empty:
        print("No term reaches the threshold; bar chart skipped.")

    visualize.save_figure(visualize.frequent_words_figure(frequent), utils.figures_dir() / "frequent_words.png")
    visualize.save_wordcloud(visualize.build_wordcloud(ranked), utils.figures_dir() / "wordcloud.png")

if __name__ == "__main__":
    main()
