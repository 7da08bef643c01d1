# tweet_sentiment/visualize.py
from pathlib import Path
from typing import Mapping, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
from wordcloud import WordCloud


def frequent_words_figure(freqs: pd.Series, title="Most frequently occurring words"):
    """Bar chart of the filtered term counts; None when nothing passed the threshold."""
    if freqs is None or freqs.empty:
        return None
    fig, ax = plt.subplots(figsize=(max(6, 0.35 * len(freqs)), 5))
    colors = plt.cm.rainbow([i / max(1, len(freqs) - 1) for i in range(len(freqs))])
    ax.bar(freqs.index.astype(str), freqs.values, color=colors)
    ax.set_title(title)
    ax.tick_params(axis="x", labelrotation=90)
    fig.tight_layout()
    return fig


def category_scores_figure(scores: Mapping[str, int], title="Sentiment analysis of #Nintendo tweets"):
    if not scores:
        return None
    labels = list(scores.keys())
    fig, ax = plt.subplots(figsize=(7, 5))
    colors = plt.cm.rainbow([i / max(1, len(labels) - 1) for i in range(len(labels))])
    ax.bar(labels, [scores[k] for k in labels], color=colors)
    ax.set_title(title)
    ax.set_ylabel("Count")
    ax.tick_params(axis="x", labelrotation=90)
    fig.tight_layout()
    return fig


def build_wordcloud(ranked: pd.DataFrame, width=800, height=800, max_words=200) -> Optional[WordCloud]:
    """Word cloud sized by frequency, from a word/freq frame."""
    if ranked is None or ranked.empty:
        return None
    freqs = {str(w): int(f) for w, f in zip(ranked["word"], ranked["freq"]) if f > 0}
    if not freqs:
        return None
    wc = WordCloud(width=width, height=height, background_color="white",
                   max_words=max_words, prefer_horizontal=0.7)
    return wc.generate_from_frequencies(freqs)


def save_figure(fig, path: Path) -> Optional[Path]:
    if fig is None:
        print("Nothing to plot for", Path(path).name)
        return None
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path


def save_wordcloud(wc: Optional[WordCloud], path: Path) -> Optional[Path]:
    if wc is None:
        print("Nothing to plot for", Path(path).name)
        return None
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    wc.to_file(str(path))
    return path
