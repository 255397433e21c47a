import re
from typing import List


SENTENCE_BREAK = re.compile(r"([.!?]+\s+)")
TERMINATOR_ONLY = re.compile(r"^[.!?]+\s*$")

MIN_SENTENCE_LENGTH = 10
MAX_BULLETS = 3
FALLBACK_LENGTH = 200
ELLIPSIS = "..."


def split_sentences(text: str) -> List[str]:
    """Split ``text`` into trimmed sentences, keeping each terminator run on its sentence.

    Breaks happen only where a run of ``.``, ``!`` or ``?`` is followed by
    whitespace, so abbreviations like "v1.2" and a terminator at the very end
    of the text stay inside their sentence. A terminator run with nothing
    before it is dropped.
    """
    sentences: List[str] = []
    for piece in SENTENCE_BREAK.split(text):
        if not piece.strip():
            continue
        if TERMINATOR_ONLY.match(piece):
            if sentences:
                sentences[-1] += piece.strip()
            continue
        sentences.append(piece.strip())
    return sentences


def _fallback_bullet(text: str) -> str:
    bullet = text[:FALLBACK_LENGTH].strip()
    if len(text) > FALLBACK_LENGTH:
        bullet += ELLIPSIS
    return bullet


def extract_summary(text: str) -> List[str]:
    candidates = [sentence for sentence in split_sentences(text) if len(sentence) >= MIN_SENTENCE_LENGTH]
    if not candidates:
        return [_fallback_bullet(text)]
    if len(candidates) <= MAX_BULLETS:
        return candidates

    # Shortest first, earlier sentence wins a tie; output keeps document order.
    by_length = sorted(range(len(candidates)), key=lambda index: (len(candidates[index]), index))
    chosen = sorted(by_length[:MAX_BULLETS])
    return [candidates[index] for index in chosen]
