from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textquiz.config import Settings
    from textquiz.models import Question, TextMaterial

FILLER_OPTION = "None of the above"


class QuestionStrategy(ABC):
    """One way of turning analysed text into questions.

    ``generate`` returns at most *count* questions and never fails for lack
    of material; it simply returns fewer.
    """

    def __init__(self, settings: Settings, rng: random.Random):
        self.settings = settings
        self.rng = rng

    @abstractmethod
    def generate(self, material: TextMaterial, count: int) -> list[Question]:
        ...

    @abstractmethod
    def name(self) -> str:
        ...

    def capacity(self, material: TextMaterial) -> int:
        """Upper bound the orchestrator caps this strategy's quota with."""
        return len(material.sentences)


def find_term_in_sentence(sentence: str, terms: list[str]) -> str | None:
    """First term (in *terms* order) that occurs case-insensitively in *sentence*."""
    lowered = sentence.lower()
    for term in terms:
        if term.lower() in lowered:
            return term
    return None


def build_options(
    correct_answer: str,
    distractor_pool: list[str],
    option_count: int,
    rng: random.Random,
    filler: str = FILLER_OPTION,
) -> list[str]:
    """Shuffle *correct_answer* in among distinct distractors from the pool.

    Distractors equal to the answer (ignoring case and surrounding space)
    or to an already chosen distractor are skipped.  A pool that runs dry is
    padded with *filler*.
    """
    seen = {correct_answer.strip().lower()}
    distractors = list(distractor_pool)
    rng.shuffle(distractors)

    options = [correct_answer]
    for candidate in distractors:
        if len(options) >= option_count:
            break
        key = candidate.strip().lower()
        if key in seen:
            continue
        seen.add(key)
        options.append(candidate)

    while len(options) < option_count:
        options.append(filler)

    rng.shuffle(options)
    return options
