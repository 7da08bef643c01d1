# tweet_sentiment/ingest_merge.py
import pandas as pd
from tweet_sentiment import utils
from tweet_sentiment.corpus import resolve_text_column

def main():
    raw_files = utils.list_raw_csvs()
    print("Found raw files:", [p.name for p in raw_files])
    dfs = []
    for p in raw_files:
        try:
            df = pd.read_csv(p, dtype=str, keep_default_na=False, encoding_errors="replace")
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            print(f"Failed to read {p.name}: {e}")
            continue
        # every export must carry the post text; others are skipped
        col = resolve_text_column(df.columns, None)
        if col is None:
            print(f"Skipping {p.name}: no text column in {list(df.columns)}")
            continue
        if col != utils.TEXT_COLUMN:
            df = df.rename(columns={col: utils.TEXT_COLUMN})
        df['source'] = p.stem
        dfs.append(df)

    if not dfs:
        print("No CSVs found in data/raw. Put the exported tweets there and re-run.")
        return

    combined = pd.concat(dfs, ignore_index=True, sort=False)

    out = utils.processed_dir() / "tweets_raw.csv"
    out.parent.mkdir(parents=True, exist_ok=True)
    combined.to_csv(out, index=False)
    print("Saved tweets_raw.csv at", out, "rows:", len(combined))

if __name__ == "__main__":
    main()
