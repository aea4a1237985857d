"""Locale-specific labels for true/false questions."""
from __future__ import annotations

import logging
from dataclasses import dataclass

_log = logging.getLogger("textquiz.languages")


@dataclass(frozen=True)
class TrueFalseLabels:
    true_label: str
    false_label: str
    prefix: str

    @property
    def options(self) -> list[str]:
        return [self.true_label, self.false_label]


ENGLISH = TrueFalseLabels("True", "False", "True or False: ")
ALBANIAN = TrueFalseLabels("E vërtetë", "E gabuar", "E vërtetë apo e gabuar: ")

LABELS = {
    "en": ENGLISH,
    "sq": ALBANIAN,
}

# Common Albanian function words; padded with spaces to match whole words.
ALBANIAN_MARKERS = (
    " është ", " janë ", " dhe ", " në ", " për ", " nga ", " që ", " me ",
    "shqip", "shqiptar",
)


def detect_language(text: str) -> str:
    lowered = text.lower()
    if any(marker in lowered for marker in ALBANIAN_MARKERS):
        return "sq"
    return "en"


def true_false_labels(text: str, language: str = "en") -> TrueFalseLabels:
    """Resolve labels for *language*; ``"auto"`` sniffs the document text."""
    if language == "auto":
        language = detect_language(text)
    labels = LABELS.get(language)
    if labels is None:
        _log.warning("Unknown language %r, using English labels", language)
        return ENGLISH
    return labels
