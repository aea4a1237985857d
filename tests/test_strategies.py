"""Tests for the question strategies and their shared primitives."""
from __future__ import annotations

import random

import pytest

from textquiz.config import Settings
from textquiz.languages import ALBANIAN
from textquiz.models import MULTIPLE_CHOICE, TRUE_FALSE, TextMaterial
from textquiz.strategies.base import FILLER_OPTION, build_options, find_term_in_sentence
from textquiz.strategies.cloze import FactualCloze, MultipleChoiceCloze, blank_out
from textquiz.strategies.definition import DefinitionChoice
from textquiz.strategies.true_false import TrueFalse, negate_sentence


class TestFindTermInSentence:
    def test_first_in_list_order(self):
        sentence = "Energy flows from the mitochondria."
        assert find_term_in_sentence(sentence, ["mitochondria", "energy"]) == "mitochondria"
        assert find_term_in_sentence(sentence, ["energy", "mitochondria"]) == "energy"

    def test_case_insensitive(self):
        assert find_term_in_sentence("PLANTS grow.", ["plants"]) == "plants"

    def test_substring_match(self):
        assert find_term_in_sentence("Cellular life.", ["cell"]) == "cell"

    def test_none(self):
        assert find_term_in_sentence("Nothing here.", ["water", "light"]) is None
        assert find_term_in_sentence("Nothing here.", []) is None


class TestBuildOptions:
    def test_scenario_paris(self, rng):
        options = build_options("Paris", ["Paris", "Lyon", "Nice"], 4, rng)
        assert len(options) == 4
        assert options.count("Paris") == 1
        assert sorted(options) == sorted(["Paris", "Lyon", "Nice", FILLER_OPTION])

    def test_near_duplicates_skipped(self, rng):
        options = build_options("Paris", ["paris ", "Lyon", "LYON", "Nice"], 4, rng)
        lowered = [o.strip().lower() for o in options]
        assert lowered.count("paris") == 1
        assert lowered.count("lyon") == 1
        assert "Paris" in options
        assert FILLER_OPTION in options

    def test_empty_pool_padded(self, rng):
        options = build_options("Paris", [], 4, rng)
        assert options.count("Paris") == 1
        assert options.count(FILLER_OPTION) == 3

    def test_large_pool_distinct(self, rng):
        pool = [f"term{i}" for i in range(20)]
        options = build_options("term3", pool, 4, rng)
        assert len(options) == 4
        assert len(set(options)) == 4
        assert "term3" in options

    def test_custom_filler_and_count(self, rng):
        options = build_options("yes", [], 2, rng, filler="n/a")
        assert sorted(options) == ["n/a", "yes"]

    def test_pool_not_mutated(self, rng):
        pool = ["Paris", "Lyon", "Nice"]
        build_options("Paris", pool, 4, rng)
        assert pool == ["Paris", "Lyon", "Nice"]

    def test_answer_position_varies(self):
        rng = random.Random(0)
        positions = {
            build_options("a", ["b", "c", "d"], 4, rng).index("a")
            for _ in range(200)
        }
        assert positions == {0, 1, 2, 3}


class TestNegateSentence:
    def test_is(self):
        assert negate_sentence("The sky is blue today.") == "The sky is not blue today."

    def test_was(self):
        assert negate_sentence("Water was heated slowly.") == "Water was not heated slowly."

    def test_verb_list_order(self):
        # "is" is checked before "can"
        assert negate_sentence("Birds can fly and this is true.") == "Birds can fly and this is not true."

    def test_every_occurrence(self):
        assert negate_sentence("It is what it is today.") == "It is not what it is not today."

    def test_verb_must_be_space_delimited(self):
        assert negate_sentence("Island life was calm.") == "Island life was not calm."

    def test_no_verb(self):
        assert negate_sentence("Plants grow quickly.") == "Plants not grow quickly."

    def test_capitalized_verb_not_matched(self):
        assert negate_sentence("Is it raining?") == "Is not it raining?"

    def test_single_word(self):
        assert negate_sentence("Hello.") == "Not true: Hello."


class TestClozeHelpers:
    def test_blank_out_all_cases(self):
        assert blank_out("Plants love plants and PLANTS.", "plants", "___") == "___ love ___ and ___."

    def test_blank_out_literal_term(self):
        assert blank_out("Use C++ daily.", "c++", "___") == "Use ___ daily."


class TestMultipleChoiceCloze:
    def test_questions(self, sample_material, settings, rng):
        questions = MultipleChoiceCloze(settings, rng).generate(sample_material, 5)
        assert len(questions) == 2
        by_source = {q.source_text: q for q in questions}

        q = by_source["The mitochondria releases energy inside every living cell."]
        assert q.text == "Fill in the blank: The ________ releases energy inside every living cell."
        assert q.question_type == MULTIPLE_CHOICE
        assert q.difficulty_level == 2
        assert q.correct_option == "mitochondria"
        assert sorted(q.options) == sorted(["mitochondria", "energy", "cell", FILLER_OPTION])
        assert q.explanation == "The correct answer is: mitochondria"

    def test_term_inside_longer_word(self, sample_material, settings, rng):
        questions = MultipleChoiceCloze(settings, rng).generate(sample_material, 5)
        q = next(q for q in questions if q.source_text.startswith("Cellular"))
        assert q.text == (
            "Fill in the blank: ________ular respiration happens in every living organism today."
        )
        assert q.correct_option == "cell"

    def test_related_term_phrasing(self, settings, rng):
        q = MultipleChoiceCloze(settings, rng).phrase("Plants need light.", "photosynthesis")
        assert q == 'Which term is most related to this statement: "Plants need light."?'

    def test_repeated_sentence_asked_once(self, settings, rng):
        sentence = "The mitochondria releases energy inside every living cell."
        material = TextMaterial(sentences=[sentence, sentence], key_terms={"mitochondria": 0.5})
        questions = MultipleChoiceCloze(settings, rng).generate(material, 2)
        assert len(questions) == 1

    def test_count_respected(self, sample_material, settings, rng):
        assert len(MultipleChoiceCloze(settings, rng).generate(sample_material, 1)) == 1

    def test_short_sentences_skipped(self, settings, rng):
        material = TextMaterial(sentences=["The cell is small."], key_terms={"cell": 0.5})
        assert MultipleChoiceCloze(settings, rng).generate(material, 3) == []

    def test_no_terms(self, sample_material, settings, rng):
        material = TextMaterial(sentences=sample_material.sentences, key_terms={})
        assert MultipleChoiceCloze(settings, rng).generate(material, 3) == []

    def test_min_length_from_settings(self, rng):
        material = TextMaterial(sentences=["The cell is small."], key_terms={"cell": 0.5})
        s = Settings(mc_min_sentence_length=10)
        assert len(MultipleChoiceCloze(s, rng).generate(material, 3)) == 1


class TestFactualCloze:
    def test_always_blanks(self, sample_material, settings, rng):
        questions = FactualCloze(settings, rng).generate(sample_material, 5)
        texts = sorted(q.text for q in questions)
        assert texts == [
            "Complete the following: The ________ releases energy inside every living cell.",
            "Complete the following: ________ular respiration happens in every living organism today.",
        ]
        for q in questions:
            assert q.difficulty_level == 3
            assert q.question_type == MULTIPLE_CHOICE
            assert q.correct_option in sample_material.key_terms


class TestTrueFalse:
    def test_statements(self, sample_material, settings):
        for seed in range(20):
            questions = TrueFalse(settings, random.Random(seed)).generate(sample_material, 5)
            assert len(questions) == 2  # the short sentence is skipped
            for q in questions:
                assert q.question_type == TRUE_FALSE
                assert q.options == ["True", "False"]
                assert q.difficulty_level == 1
                if q.correct_index == 0:
                    assert q.text == "True or False: " + q.source_text
                    assert q.explanation.startswith("The statement is true")
                else:
                    assert q.text == "True or False: " + negate_sentence(q.source_text)
                    assert q.explanation.startswith("The statement is false")

    def test_both_outcomes_occur(self, settings):
        material = TextMaterial(
            sentences=["The mitochondria releases energy inside every living cell."],
            key_terms={},
        )
        outcomes = {
            TrueFalse(settings, random.Random(seed)).generate(material, 1)[0].correct_index
            for seed in range(50)
        }
        assert outcomes == {0, 1}

    def test_albanian_labels(self, sample_material, settings, rng):
        questions = TrueFalse(settings, rng, labels=ALBANIAN).generate(sample_material, 1)
        assert questions[0].options == ["E vërtetë", "E gabuar"]
        assert questions[0].text.startswith("E vërtetë apo e gabuar: ")

    def test_count_respected(self, sample_material, settings, rng):
        assert len(TrueFalse(settings, rng).generate(sample_material, 1)) == 1

    def test_zero_count(self, sample_material, settings, rng):
        assert TrueFalse(settings, rng).generate(sample_material, 0) == []

    def test_repeated_sentence_asked_once(self, settings):
        sentence = "The mitochondria releases energy inside every living cell."
        material = TextMaterial(sentences=[sentence, sentence], key_terms={})
        for seed in range(20):
            assert len(TrueFalse(settings, random.Random(seed)).generate(material, 2)) == 1


class TestDefinitionChoice:
    def test_questions(self, sample_material, settings, rng):
        questions = DefinitionChoice(settings, rng).generate(sample_material, 3)
        assert len(questions) == 3
        for q in questions:
            term = q.text[len("What is "):-1]
            assert q.text == f"What is {term}?"
            assert q.correct_option == sample_material.definitions[term]
            assert q.question_type == MULTIPLE_CHOICE
            assert q.difficulty_level == 2
            assert len(q.options) == 4
            assert set(q.options) <= set(sample_material.definitions.values())
            assert q.source_text == f"{term} - {q.correct_option}"

    def test_capacity(self, sample_material, settings, rng):
        assert DefinitionChoice(settings, rng).capacity(sample_material) == 4

    def test_exhausts_pool(self, sample_material, settings, rng):
        assert len(DefinitionChoice(settings, rng).generate(sample_material, 10)) == 4

    def test_single_definition_padded(self, settings, rng):
        material = TextMaterial(sentences=[], key_terms={}, definitions={"Osmosis": "water movement"})
        [q] = DefinitionChoice(settings, rng).generate(material, 1)
        assert q.correct_option == "water movement"
        assert q.options.count(FILLER_OPTION) == 3

    def test_no_definitions(self, sample_material, settings, rng):
        material = TextMaterial(sentences=sample_material.sentences, key_terms={})
        assert DefinitionChoice(settings, rng).generate(material, 3) == []
