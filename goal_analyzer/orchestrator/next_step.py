from typing import Dict, Optional


NEXT_STEPS: Dict[str, str] = {
    "Positive": "Reinforce this positive habit",
    "Negative": "Pick one small task to move forward",
    "Neutral": "Define your next concrete action",
}
DEFAULT_NEXT_STEP = NEXT_STEPS["Neutral"]


def suggest_next_step(sentiment_label: Optional[str]) -> str:
    if sentiment_label is None:
        return DEFAULT_NEXT_STEP
    return NEXT_STEPS.get(sentiment_label, DEFAULT_NEXT_STEP)
