from __future__ import annotations

import random

from textquiz.languages import ENGLISH, TrueFalseLabels
from textquiz.models import TRUE_FALSE, Question, TextMaterial
from textquiz.strategies.base import QuestionStrategy

# Checked in this order; the first one present in the sentence is negated.
NEGATABLE_VERBS = (
    "is", "was", "are", "were", "has", "have", "had",
    "can", "could", "will", "would", "should", "may", "might",
)


def negate_sentence(sentence: str) -> str:
    """Turn a statement into a (probably) false one.

    Inserts "not" after the first listed verb that appears as a
    space-delimited word, at every place it appears.  Failing that, "not"
    goes after the first word, and a single-word sentence gets a
    "Not true: " prefix.  Grammar is not guaranteed.
    """
    for verb in NEGATABLE_VERBS:
        padded = f" {verb} "
        if padded in sentence:
            return sentence.replace(padded, f" {verb} not ")

    first_space = sentence.find(" ")
    if first_space > 0:
        return sentence[: first_space + 1] + "not " + sentence[first_space + 1:]
    return "Not true: " + sentence


class TrueFalse(QuestionStrategy):
    def __init__(self, settings, rng: random.Random, labels: TrueFalseLabels = ENGLISH):
        super().__init__(settings, rng)
        self.labels = labels

    def generate(self, material: TextMaterial, count: int) -> list[Question]:
        sentences = list(material.sentences)
        self.rng.shuffle(sentences)

        questions: list[Question] = []
        seen: set[str] = set()
        for sentence in sentences:
            if len(questions) >= count:
                break
            if sentence in seen:
                continue
            seen.add(sentence)
            if len(sentence) < self.settings.tf_min_sentence_length:
                continue

            is_true = self.rng.random() < 0.5
            statement = sentence if is_true else negate_sentence(sentence)
            questions.append(Question(
                text=self.labels.prefix + statement,
                question_type=TRUE_FALSE,
                options=self.labels.options,
                correct_index=0 if is_true else 1,
                explanation=(
                    f"The statement is {'true' if is_true else 'false'} "
                    f"according to the text: {sentence}"
                ),
                difficulty_level=1,
                source_text=sentence,
            ))
        return questions

    def name(self) -> str:
        return "true_false"
