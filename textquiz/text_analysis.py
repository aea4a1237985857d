"""Statistical text analysis: sentences, word frequencies, key terms, definitions.

All functions are pure and work on fully materialized text.  Patterns are
compiled once at import time; they hold no state.
"""
from __future__ import annotations

import logging
import re
from collections import Counter

from textquiz.models import InvalidInputError

_log = logging.getLogger("textquiz.analysis")

# Split *between* terminal punctuation and the capital letter that opens the
# next sentence, so both sides keep their characters.
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z])")

NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9\s]")

# "<Capitalized Phrase> is|are|refers to|means|defined as <definition>."
DEFINITION_PATTERN = re.compile(
    r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)\s+"
    r"(?:is|are|refers to|means|defined as)\s+"
    r"([^.!?]+)[.!?]"
)

MIN_TERM_LENGTH = 4

STOP_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "if", "because", "as", "what", "when",
    "where", "how", "why", "which", "who", "whom", "this", "that", "these", "those",
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "having",
    "do", "does", "did", "doing", "would", "should", "could", "ought", "i", "you",
    "he", "she", "it", "we", "they", "their", "your", "my", "his", "her", "its",
    "our", "of", "in", "to", "for", "with", "on", "at", "from", "by", "about",
    "against", "between", "into", "through", "during", "before", "after", "above",
    "below", "up", "down", "out", "off", "over", "under", "again", "further", "then",
    "once", "all", "any", "both", "each", "few", "more", "most", "other", "some",
    "such", "no", "nor", "not", "only", "own", "same", "so", "than", "too", "very",
})


def _require_text(text) -> str:
    if not isinstance(text, str):
        raise InvalidInputError(f"text must be a string, got {type(text).__name__}")
    return text


def segment_sentences(text: str) -> list[str]:
    """Split *text* into trimmed, non-empty sentences in document order.

    A boundary is ``.``, ``!`` or ``?`` followed by whitespace and an
    uppercase letter.  Abbreviations and decimals are not special-cased.
    """
    text = _require_text(text)
    sentences = [part.strip() for part in SENTENCE_BOUNDARY.split(text)]
    return [s for s in sentences if s]


def word_frequency(text: str) -> Counter:
    """Count lower-cased alphanumeric tokens, punctuation stripped."""
    text = _require_text(text)
    normalized = NON_ALPHANUMERIC.sub("", text).lower()
    return Counter(normalized.split())


def extract_key_terms(text: str, max_terms: int = 30) -> dict[str, float]:
    """Rank candidate terms by term frequency (count / total tokens).

    Stop-words and tokens shorter than four characters are skipped.  The
    result is ordered by descending score; equal scores keep the order in
    which the tokens first appear in *text*.
    """
    if max_terms < 0:
        raise InvalidInputError(f"max_terms must be >= 0, got {max_terms}")
    frequencies = word_frequency(text)
    total = sum(frequencies.values())

    scores = {
        word: count / total
        for word, count in frequencies.items()
        if len(word) >= MIN_TERM_LENGTH and word not in STOP_WORDS
    }
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    _log.debug("Key terms: %d candidates from %d tokens", len(scores), total)
    return dict(ranked[:max_terms])


def extract_definitions(text: str) -> dict[str, str]:
    """Mine ``Term is/are/means/refers to/defined as ...`` sentences.

    Returns term -> definition; a term defined twice keeps the later text.
    """
    text = _require_text(text)
    definitions: dict[str, str] = {}
    for m in DEFINITION_PATTERN.finditer(text):
        definitions[m.group(1).strip()] = m.group(2).strip()
    _log.debug("Definitions: %d found", len(definitions))
    return definitions
