import re
from typing import FrozenSet, Literal, Pattern


SentimentLabel = Literal["Positive", "Neutral", "Negative"]

POSITIVE_WORDS: FrozenSet[str] = frozenset(
    [
        "good",
        "great",
        "excellent",
        "progress",
        "achieved",
        "completed",
        "happy",
        "satisfied",
        "improved",
        "better",
        "success",
        "win",
        "accomplished",
        "proud",
        "excited",
        "motivated",
        "grateful",
        "thankful",
    ]
)
NEGATIVE_WORDS: FrozenSet[str] = frozenset(
    [
        "bad",
        "failed",
        "struggled",
        "difficult",
        "problem",
        "stuck",
        "worried",
        "disappointed",
        "frustrated",
        "hard",
        "challenge",
        "blocked",
        "stressed",
        "overwhelmed",
        "can't",
        "cannot",
    ]
)
POSITIVE_EMOJI: FrozenSet[str] = frozenset("😊😄👍🎉✅🙂😃")
NEGATIVE_EMOJI: FrozenSet[str] = frozenset("😞😢❌😔😟😕")

EXCLAMATION_CAP = 2


def _keyword_pattern(words: FrozenSet[str]) -> Pattern[str]:
    alternatives = "|".join(re.escape(word) for word in sorted(words))
    return re.compile(rf"\b(?:{alternatives})\b", re.I)


POSITIVE_PATTERN = _keyword_pattern(POSITIVE_WORDS)
NEGATIVE_PATTERN = _keyword_pattern(NEGATIVE_WORDS)


def _count_keywords(pattern: Pattern[str], text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))


def _count_emoji(emoji: FrozenSet[str], text: str) -> int:
    return sum(1 for char in text if char in emoji)


def score_sentiment(text: str) -> int:
    """Return the signed positive-minus-negative signal count for ``text``."""
    lower = text.lower()

    positive = _count_keywords(POSITIVE_PATTERN, lower) + _count_emoji(POSITIVE_EMOJI, lower)
    negative = _count_keywords(NEGATIVE_PATTERN, lower) + _count_emoji(NEGATIVE_EMOJI, lower)

    positive += min(text.count("!"), EXCLAMATION_CAP)
    if text.count("?") > 1:
        negative += 1

    return positive - negative


def classify_sentiment(text: str) -> SentimentLabel:
    score = score_sentiment(text)
    if score > 0:
        return "Positive"
    if score < 0:
        return "Negative"
    return "Neutral"
