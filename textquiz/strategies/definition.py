from __future__ import annotations

from textquiz.models import MULTIPLE_CHOICE, OPTION_COUNTS, Question, TextMaterial
from textquiz.strategies.base import QuestionStrategy, build_options


class DefinitionChoice(QuestionStrategy):
    """Ask for the definition of a mined term among the other definitions."""

    def generate(self, material: TextMaterial, count: int) -> list[Question]:
        pool = list(material.definitions.values())
        terms = list(material.definitions)
        self.rng.shuffle(terms)

        questions: list[Question] = []
        for term in terms[:count]:
            definition = material.definitions[term]
            options = build_options(
                definition, pool, OPTION_COUNTS[MULTIPLE_CHOICE], self.rng,
                filler=self.settings.filler_option,
            )
            questions.append(Question(
                text=f"What is {term}?",
                question_type=MULTIPLE_CHOICE,
                options=options,
                correct_index=options.index(definition),
                explanation=f"The correct definition of {term} is: {definition}",
                difficulty_level=2,
                source_text=f"{term} - {definition}",
            ))
        return questions

    def capacity(self, material: TextMaterial) -> int:
        return len(material.definitions)

    def name(self) -> str:
        return "definition_choice"
