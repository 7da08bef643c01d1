# tweet_sentiment/lexicon_sentiment.py
import pandas as pd
from tweet_sentiment import utils
from tweet_sentiment.exceptions import LexiconError
from tweet_sentiment.lexicon import CategoryLexicon
from tweet_sentiment.sentiment import score_documents, category_totals
from tweet_sentiment import visualize

def main():
    in_path = utils.processed_dir() / "tweets_clean.csv"
    if not in_path.exists():
        print("Missing tweets_clean.csv — run preprocess first.")
        return
    try:
        lexicon = CategoryLexicon.from_nrc_file(utils.lexicon_path())
    except LexiconError as e:
        print(f"{e}. Download the NRC Emotion Lexicon into {utils.lexicon_dir()}.")
        return

    df = pd.read_csv(in_path, keep_default_na=False, dtype=str, low_memory=False)
    scores = score_documents(df.get('text_clean', pd.Series(dtype=str)).tolist(), lexicon)
    out = utils.processed_dir() / "tweets_sentiment.csv"
    pd.concat([df.reset_index(drop=True), scores], axis=1).to_csv(out, index=False)
    print("Saved tweets_sentiment.csv at", out)

    totals = category_totals(scores)
    out = utils.processed_dir() / "category_scores.csv"
    pd.DataFrame(list(totals.items()), columns=['category', 'count']).to_csv(out, index=False)
    print("Category totals:", totals)
    visualize.save_figure(visualize.category_scores_figure(totals), utils.figures_dir() / "category_scores.png")

if __name__ == "__main__":
    main()
