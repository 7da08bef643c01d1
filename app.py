# app.py — Hashtag Tweet Sentiment (word frequencies + NRC emotion categories)
# - Upload a tweet export or pick one from data/raw
# - Sanitize -> tokenize/stem -> frequency views, and lexicon category totals
# - Guards for empty views (nothing above threshold, missing lexicon)

import sys
from pathlib import Path
import streamlit as st

ROOT = Path(__file__).parent.resolve()
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tweet_sentiment import utils
from tweet_sentiment.corpus import corpus_from_frame
from tweet_sentiment.exceptions import CorpusFormatError, LexiconError
from tweet_sentiment.lexicon import CategoryLexicon
from tweet_sentiment.normalize import Normalizer
from tweet_sentiment.pipeline import run_pipeline
from tweet_sentiment import visualize

import pandas as pd

# Create raw dir and small demo CSV if empty
raw_dir = utils.raw_dir()
raw_dir.mkdir(parents=True, exist_ok=True)
if not any(raw_dir.glob("*.csv")):
    demo_csv = raw_dir / "tweets_demo.csv"
    demo_csv.write_text(
        "Tweet,Date\n"
        "\"Thank you Reggie! Excited to see what Doug does next #Nintendo https://t.co/abc\",2019-02-21\n"
        "\"@NintendoAmerica so sad to see Reggie leave <U+0001F622> #Nintendo\",2019-02-21\n"
        "\"Bowser is the new president of Nintendo of America, amazing #Nintendo\",2019-02-21\n",
        encoding="utf-8",
    )

# Ensure NLTK stopwords
try:
    utils.ensure_nltk_resource("corpora/stopwords", "stopwords")
except Exception as e:
    print("[app] stopwords download failed:", e)

# ---------------- Helpers ----------------

@st.cache_resource
def load_lexicon():
    try:
        return CategoryLexicon.from_nrc_file(utils.lexicon_path())
    except LexiconError as e:
        print("[load_lexicon]", e)
        return None

def read_upload(buffer):
    try:
        buffer.seek(0)
        return pd.read_csv(buffer, dtype=str, keep_default_na=False, encoding_errors="replace")
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        print("[read_upload]", e)
        return pd.DataFrame()

# ---------------- UI ----------------

st.set_page_config(page_title="#️⃣ Hashtag Tweet Sentiment", layout="wide")
st.title("#️⃣ Hashtag Tweet Sentiment — word frequencies & emotions")

with st.expander("📘 User Manual", expanded=False):
    st.markdown(f"""
    Quick guide:
    - Upload a CSV export of tweets or choose one from `data/raw`.
    - The text column should be `{utils.TEXT_COLUMN}` (or `text`).
    - Links, emoji codes, @mentions and #hashtags are removed, words are lowercased, stop-words dropped and stems counted.
    - Emotion categories need the NRC lexicon at `{utils.lexicon_path()}`.
    """)

st.sidebar.header("Data & Controls")
upload = st.sidebar.file_uploader("Upload a CSV file (optional)", type="csv")
available_files = utils.list_raw_csvs()
sel_file = st.sidebar.selectbox("Choose raw dataset", available_files)
threshold = st.sidebar.slider("Minimum count for bar chart", 1, 200, utils.FREQUENCY_THRESHOLD)

if upload:
    df_active = read_upload(upload)
else:
    df_active = utils.safe_read_csv(sel_file) if sel_file else pd.DataFrame()

if df_active is None or df_active.empty:
    st.error("No data loaded. Upload a CSV or add tweet exports to data/raw.")
    st.stop()

try:
    corpus = corpus_from_frame(df_active, None)
except CorpusFormatError as e:
    st.error(f"{e}. Columns found: {e.available_columns}")
    st.stop()

lexicon = load_lexicon()
result = run_pipeline(corpus, normalizer=Normalizer(), score_categories=lexicon, threshold=threshold)

# ---------------- Analytics ----------------

st.subheader("Word frequencies")
st.write(f"Tweets: {len(result.corpus)} · distinct stems: {len(result.vocabulary)}")

frequent = result.frequent_terms
if frequent.empty:
    st.info(f"No word occurs at least {threshold} times. Lower the threshold.")
else:
    st.bar_chart(frequent)

ranked = result.ranked_terms
wc = visualize.build_wordcloud(ranked)
if wc is None:
    st.info("No words left after cleaning; word cloud unavailable.")
else:
    st.image(wc.to_array(), caption="WordCloud — most frequent stems")
st.dataframe(ranked.head(50))
st.download_button("📥 Download word frequencies CSV", ranked.to_csv(index=False).encode("utf-8"),
                   "word_frequency.csv", "text/csv")

st.subheader("Sentiment analysis")
if lexicon is None:
    st.info("NRC lexicon not found — emotion categories unavailable.")
elif not result.category_scores:
    st.info("No tweets to score.")
else:
    totals = pd.Series(result.category_scores, name="count")
    st.bar_chart(totals)
    st.write("Category totals:", result.category_scores)
    per_tweet = pd.concat([
        pd.DataFrame({"text_clean": [d.sanitized_text for d in result.corpus]}),
        result.document_scores,
    ], axis=1)
    st.download_button("📥 Download per-tweet scores CSV", per_tweet.to_csv(index=False).encode("utf-8"),
                       "tweets_sentiment.csv", "text/csv")

# Single tweet preview
st.subheader("Single tweet preview")
user_text = st.text_area("Paste a tweet", "So happy for Reggie but scared about what's next #Nintendo")
if st.button("Analyze tweet"):
    single = run_pipeline(corpus_from_frame(pd.DataFrame({"Tweet": [user_text]})),
                          score_categories=lexicon, threshold=1)
    doc = single.corpus[0]
    st.write("Sanitized:", doc.sanitized_text)
    st.write("Stems:", list(doc.tokens))
    if single.category_scores:
        st.write("Categories:", {k: v for k, v in single.category_scores.items() if v})

# End of file
