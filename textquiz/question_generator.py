"""Turn document text into a shuffled list of quiz questions.

The orchestrator analyses the text once, hands each strategy a quota from
the plan for the requested mode, then validates, deduplicates, shuffles and
truncates what comes back.  Falling short of the requested count is normal
for thin documents and is not an error.
"""
from __future__ import annotations

import logging
import random
from collections.abc import Callable

from textquiz.config import Settings
from textquiz.languages import TrueFalseLabels, true_false_labels
from textquiz.models import (
    MIXED,
    MULTIPLE_CHOICE,
    OPTION_COUNTS,
    QUESTION_TYPES,
    TRUE_FALSE,
    InvalidInputError,
    Question,
    TextMaterial,
)
from textquiz.strategies.base import QuestionStrategy
from textquiz.strategies.cloze import FactualCloze, MultipleChoiceCloze
from textquiz.strategies.definition import DefinitionChoice
from textquiz.strategies.true_false import TrueFalse
from textquiz.text_analysis import extract_definitions, extract_key_terms, segment_sentences

_log = logging.getLogger("textquiz.qgen")

# quota(requested, produced_so_far) -> how many to ask the strategy for
Quota = Callable[[int, int], int]


def _all(n: int, produced: int) -> int:
    return n


def _two_thirds(n: int, produced: int) -> int:
    return n * 2 // 3


def _third(n: int, produced: int) -> int:
    return n // 3


def _remainder(n: int, produced: int) -> int:
    return n - produced


STRATEGIES: dict[str, type[QuestionStrategy]] = {
    "multiple_choice_cloze": MultipleChoiceCloze,
    "true_false": TrueFalse,
    "definition_choice": DefinitionChoice,
    "factual_cloze": FactualCloze,
}

# Strategies run in list order; later quotas see what earlier ones produced.
QUOTA_PLANS: dict[str, list[tuple[str, Quota]]] = {
    "microbit": [
        ("multiple_choice_cloze", _two_thirds),
        ("true_false", _remainder),
    ],
    "standard": [
        ("definition_choice", _third),
        ("factual_cloze", _third),
        ("true_false", _remainder),
    ],
    MULTIPLE_CHOICE: [("multiple_choice_cloze", _all)],
    TRUE_FALSE: [("true_false", _all)],
}


def quota_plan(question_type: str, microbit_compatible: bool) -> list[tuple[str, Quota]]:
    if question_type not in QUESTION_TYPES:
        raise InvalidInputError(f"Unknown question type: {question_type!r}")
    if question_type == MIXED:
        return QUOTA_PLANS["microbit" if microbit_compatible else "standard"]
    return QUOTA_PLANS[question_type]


def analyze_text(text: str, settings: Settings | None = None) -> TextMaterial:
    settings = settings or Settings()
    return TextMaterial(
        sentences=segment_sentences(text),
        key_terms=extract_key_terms(text, settings.key_term_limit),
        definitions=extract_definitions(text),
    )


def _make_strategy(
    name: str, settings: Settings, rng: random.Random, labels: TrueFalseLabels,
) -> QuestionStrategy:
    cls = STRATEGIES[name]
    if cls is TrueFalse:
        return TrueFalse(settings, rng, labels=labels)
    return cls(settings, rng)


def _validate_question(q: Question, settings: Settings) -> str | None:
    """Return ``None`` if *q* is well formed, else the reason it is not."""
    expected = OPTION_COUNTS.get(q.question_type)
    if expected is None:
        return f"unknown question type {q.question_type!r}"
    if len(q.options) != expected:
        return f"{q.question_type} needs {expected} options (got {len(q.options)})"
    if not 0 <= q.correct_index < len(q.options):
        return f"correct_index out of range: {q.correct_index}"
    if not 1 <= q.difficulty_level <= 3:
        return f"difficulty_level out of range: {q.difficulty_level}"
    if not q.text.strip():
        return "empty question text"
    return None


def _deduplicate(questions: list[Question]) -> list[Question]:
    seen: set[str] = set()
    unique = []
    for q in questions:
        if q.text in seen:
            continue
        seen.add(q.text)
        unique.append(q)
    return unique


def generate_questions(
    text: str,
    number_of_questions: int,
    microbit_compatible: bool = True,
    question_type: str = MIXED,
    settings: Settings | None = None,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> list[Question]:
    """Generate up to *number_of_questions* questions from *text*.

    microbit_compatible: in MIXED mode, restrict output to cloze
      multiple-choice and true/false; otherwise mix definition, factual
      cloze and true/false questions.
    question_type: MIXED, MULTIPLE_CHOICE or TRUE_FALSE.
    rng / seed: the random source for this call.  Without either a fresh
      unseeded ``random.Random`` is used.
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"text must be a string, got {type(text).__name__}")
    if isinstance(number_of_questions, bool) or not isinstance(number_of_questions, int):
        raise InvalidInputError(f"number_of_questions must be an int, got {number_of_questions!r}")
    if number_of_questions < 0:
        raise InvalidInputError(f"number_of_questions must be >= 0, got {number_of_questions}")

    plan = quota_plan(question_type, microbit_compatible)
    settings = settings or Settings()
    if rng is None:
        rng = random.Random(seed)

    material = analyze_text(text, settings)
    labels = true_false_labels(text, settings.language)
    _log.info(
        "Generating %d %s questions (microbit=%s) from %d sentences, %d key terms, %d definitions",
        number_of_questions, question_type, microbit_compatible,
        len(material.sentences), len(material.key_terms), len(material.definitions),
    )

    questions: list[Question] = []
    for name, quota in plan:
        strategy = _make_strategy(name, settings, rng, labels)
        wanted = min(strategy.capacity(material), quota(number_of_questions, len(questions)))
        if wanted <= 0:
            continue
        batch = strategy.generate(material, wanted)
        _log.info("  %s: asked for %d, got %d", strategy.name(), wanted, len(batch))
        for q in batch:
            reason = _validate_question(q, settings)
            if reason:
                _log.warning("  Dropped %s question: %s", strategy.name(), reason)
                continue
            questions.append(q)

    questions = _deduplicate(questions)
    rng.shuffle(questions)
    if len(questions) > number_of_questions:
        questions = questions[:number_of_questions]

    if len(questions) < number_of_questions:
        _log.info("Generated %d of %d requested questions", len(questions), number_of_questions)
    return questions
