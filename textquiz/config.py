from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS = {
    "key_term_limit": 30,
    "filler_option": "None of the above",
    "blank_marker": "________",
    "mc_min_sentence_length": 40,
    "tf_min_sentence_length": 30,
    "language": "en",
    "max_questions": 50,
    "default_question_count": 10,
    "microbit_compatible": True,
}


@dataclass
class Settings:
    key_term_limit: int = DEFAULTS["key_term_limit"]
    filler_option: str = DEFAULTS["filler_option"]
    blank_marker: str = DEFAULTS["blank_marker"]
    mc_min_sentence_length: int = DEFAULTS["mc_min_sentence_length"]
    tf_min_sentence_length: int = DEFAULTS["tf_min_sentence_length"]
    language: str = DEFAULTS["language"]  # en | sq | auto
    max_questions: int = DEFAULTS["max_questions"]
    default_question_count: int = DEFAULTS["default_question_count"]
    microbit_compatible: bool = DEFAULTS["microbit_compatible"]

    def to_dict(self) -> dict:
        return {
            "key_term_limit": self.key_term_limit,
            "filler_option": self.filler_option,
            "blank_marker": self.blank_marker,
            "mc_min_sentence_length": self.mc_min_sentence_length,
            "tf_min_sentence_length": self.tf_min_sentence_length,
            "language": self.language,
            "max_questions": self.max_questions,
            "default_question_count": self.default_question_count,
            "microbit_compatible": self.microbit_compatible,
        }


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")
