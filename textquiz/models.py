from __future__ import annotations

from dataclasses import asdict, dataclass, field

MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
TRUE_FALSE = "TRUE_FALSE"
MIXED = "MIXED"

QUESTION_TYPES = (MULTIPLE_CHOICE, TRUE_FALSE, MIXED)

# Options per question, fixed by the answer devices (4 buttons / 2 gestures).
OPTION_COUNTS = {MULTIPLE_CHOICE: 4, TRUE_FALSE: 2}


class InvalidInputError(ValueError):
    """Raised when the engine is handed input it cannot work with at all."""


@dataclass
class Question:
    text: str
    question_type: str  # MULTIPLE_CHOICE | TRUE_FALSE
    options: list[str]
    correct_index: int
    explanation: str
    difficulty_level: int  # 1 (easy) .. 3 (hard)
    source_text: str

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TextMaterial:
    """Everything the strategies draw on, derived once per generation call."""

    sentences: list[str]
    key_terms: dict[str, float]
    definitions: dict[str, str] = field(default_factory=dict)

    @property
    def term_list(self) -> list[str]:
        return list(self.key_terms)
