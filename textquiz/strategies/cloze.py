"""Cloze strategies: blank a key term out of its sentence and ask for it back."""
from __future__ import annotations

import re
from abc import abstractmethod

from textquiz.models import MULTIPLE_CHOICE, OPTION_COUNTS, Question, TextMaterial
from textquiz.strategies.base import QuestionStrategy, build_options, find_term_in_sentence


def blank_out(sentence: str, term: str, marker: str) -> str:
    """Replace every case-insensitive occurrence of *term* with *marker*."""
    return re.sub(re.escape(term), lambda _m: marker, sentence, flags=re.IGNORECASE)


class _KeyTermCloze(QuestionStrategy):
    difficulty = 2

    def generate(self, material: TextMaterial, count: int) -> list[Question]:
        terms = material.term_list
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
            if len(sentence) < self.settings.mc_min_sentence_length:
                continue
            term = find_term_in_sentence(sentence, terms)
            if term is None:
                continue

            options = build_options(
                term, terms, OPTION_COUNTS[MULTIPLE_CHOICE], self.rng,
                filler=self.settings.filler_option,
            )
            questions.append(Question(
                text=self.phrase(sentence, term),
                question_type=MULTIPLE_CHOICE,
                options=options,
                correct_index=options.index(term),
                explanation=f"The correct answer is: {term}",
                difficulty_level=self.difficulty,
                source_text=sentence,
            ))
        return questions

    @abstractmethod
    def phrase(self, sentence: str, term: str) -> str:
        ...


class MultipleChoiceCloze(_KeyTermCloze):
    """Fill-in-the-blank over the sentence, falling back to "which term relates"
    when the term does not appear in it verbatim (ignoring case).

    Occurrences inside longer words are blanked too ("cell" in "cellular").
    """

    def phrase(self, sentence: str, term: str) -> str:
        if term.lower() in sentence.lower():
            blanked = blank_out(sentence, term, self.settings.blank_marker)
            return f"Fill in the blank: {blanked}"
        return f'Which term is most related to this statement: "{sentence}"?'

    def name(self) -> str:
        return "multiple_choice_cloze"


class FactualCloze(_KeyTermCloze):
    difficulty = 3

    def phrase(self, sentence: str, term: str) -> str:
        return f"Complete the following: {blank_out(sentence, term, self.settings.blank_marker)}"

    def name(self) -> str:
        return "factual_cloze"
