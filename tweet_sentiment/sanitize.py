# tweet_sentiment/sanitize.py
from dataclasses import dataclass
import re

import pandas as pd


@dataclass(frozen=True)
class RewriteRule:
    """A single regex substitution applied to raw post text."""

    name: str
    pattern: "re.Pattern[str]"
    replacement: str = ""

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


# links, with one optional leading space
URL_RULE = RewriteRule("urls", re.compile(r" ?(?:ht|f)tps?://\S+"))

# emoji codes exported as <U+0001F60D> and similar placeholders
MARKUP_RULE = RewriteRule("markup", re.compile(r"<.*?>"))

# @mentions and #hashtags, with trailing spaces
TAG_RULE = RewriteRule("tags", re.compile(r"[@#]+\w+ *"))

# order matters: tags are matched only after links and markup are gone
DEFAULT_RULES = (URL_RULE, MARKUP_RULE, TAG_RULE)


def _as_text(s) -> str:
    if s is None:
        return ""
    if isinstance(s, bytes):
        return s.decode("utf-8", errors="replace")
    if not isinstance(s, str) and pd.isna(s):
        return ""
    return str(s)


def apply_rules(text: str, rules=DEFAULT_RULES) -> str:
    """Run every rule once, in order."""
    for rule in rules:
        text = rule.apply(text)
    return text


def sanitize_text(s, rules=DEFAULT_RULES) -> str:
    """
    Strip links, markup placeholders, mentions and hashtags from a post.

    The ordered pass is repeated until the text is stable, so removing one
    piece of noise cannot leave a new link or tag behind. Rules must only
    delete characters, which bounds the number of passes.
    """
    text = _as_text(s)
    while True:
        cleaned = apply_rules(text, rules)
        if cleaned == text:
            return cleaned
        text = cleaned
