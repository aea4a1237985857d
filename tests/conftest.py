"""Shared test fixtures."""
from __future__ import annotations

import random

import pytest

from textquiz.config import Settings
from textquiz.models import MULTIPLE_CHOICE, Question, TextMaterial

BIOLOGY_TEXT = (
    "Photosynthesis is the process plants use to make food from sunlight. "
    "Osmosis is the movement of water molecules through a membrane. "
    "Mitochondria are the organelles that release energy inside every cell. "
    "Chlorophyll is the green pigment that captures light for photosynthesis. "
    "Plants need sunlight, water and carbon dioxide to grow well. "
    "The cell membrane controls which molecules enter and leave the cell. "
    "Diffusion means the spread of particles from high to low concentration."
)


@pytest.fixture
def biology_text():
    """Seven sentences, five of them definitions."""
    return BIOLOGY_TEXT


@pytest.fixture
def short_text():
    """Sentences too short for any strategy."""
    return "Cats purr. Dogs bark loudly. Birds sing."


@pytest.fixture
def albanian_text():
    return (
        "Fotosinteza është procesi me të cilin bimët prodhojnë ushqim. "
        "Uji dhe drita janë të domosdoshme për rritjen e bimëve."
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def sample_material():
    return TextMaterial(
        sentences=[
            "The mitochondria releases energy inside every living cell.",
            "Cellular respiration happens in every living organism today.",
            "Too short to use.",
        ],
        key_terms={"mitochondria": 0.1, "energy": 0.08, "cell": 0.05},
        definitions={
            "Osmosis": "the movement of water through a membrane",
            "Diffusion": "the spread of particles from high to low concentration",
            "Mitochondria": "the organelles that release energy",
            "Chlorophyll": "the green pigment that captures light",
        },
    )


@pytest.fixture
def sample_question():
    """A valid Question object."""
    return Question(
        text="Fill in the blank: The ________ releases energy inside every living cell.",
        question_type=MULTIPLE_CHOICE,
        options=["energy", "mitochondria", "cell", "None of the above"],
        correct_index=1,
        explanation="The correct answer is: mitochondria",
        difficulty_level=2,
        source_text="The mitochondria releases energy inside every living cell.",
    )
