from ..schemas.analysis import AnalysisResult
from .next_step import suggest_next_step
from .sentiment import classify_sentiment
from .summarization import extract_summary


def analyze_text(text: str) -> AnalysisResult:
    """Analyze one goal update.

    Sentiment is classified first because it drives the next-step choice; the
    summary is independent of both. Every step is a total function over
    strings, so this never raises for ``str`` input.
    """
    trimmed = text.strip()
    sentiment_label = classify_sentiment(trimmed)
    summary_bullets = extract_summary(trimmed)
    next_step = suggest_next_step(sentiment_label)
    return AnalysisResult(
        summaryBullets=summary_bullets,
        sentimentLabel=sentiment_label,
        nextStep=next_step,
    )
