"""FastAPI application exposing the question engine over HTTP."""
from __future__ import annotations

import logging

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request

from textquiz.config import Settings, load_settings, save_settings
from textquiz.models import MIXED, InvalidInputError
from textquiz.question_generator import analyze_text, generate_questions
from textquiz.text_analysis import extract_key_terms

app = FastAPI(title="Text Quiz")

_settings: Settings | None = None
_log = logging.getLogger("textquiz.app")


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


@app.on_event("startup")
async def startup():
    global _settings
    if _settings is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()


async def _json_body(request: Request) -> dict:
    body = await request.json() if await request.body() else {}
    if not isinstance(body, dict):
        raise HTTPException(400, "Request body must be a JSON object")
    return body


def _require_text(body: dict) -> str:
    text = body.get("text")
    if not isinstance(text, str):
        raise HTTPException(400, "No text provided")
    return text


# ── API: Generate questions ───────────────────────────────────────────────

@app.post("/api/generate")
async def api_generate(request: Request):
    body = await _json_body(request)
    text = _require_text(body)
    s = get_settings()

    count = body.get("number_of_questions", s.default_question_count)
    if isinstance(count, bool) or not isinstance(count, int) or not 1 <= count <= s.max_questions:
        raise HTTPException(400, f"number_of_questions must be between 1 and {s.max_questions}")

    microbit = body.get("microbit_compatible", s.microbit_compatible)
    if not isinstance(microbit, bool):
        raise HTTPException(400, "microbit_compatible must be true or false")
    seed = body.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise HTTPException(400, "seed must be an integer")

    try:
        questions = generate_questions(
            text,
            count,
            microbit_compatible=microbit,
            question_type=body.get("question_type", MIXED),
            settings=s,
            seed=seed,
        )
    except InvalidInputError as e:
        raise HTTPException(400, str(e))

    _log.info("Generated %d/%d questions", len(questions), count)
    return {
        "requested": count,
        "generated": len(questions),
        "questions": [q.to_dict() for q in questions],
    }


# ── API: Text analysis ────────────────────────────────────────────────────

@app.post("/api/analyze")
async def api_analyze(request: Request):
    body = await _json_body(request)
    text = _require_text(body)
    s = get_settings()

    try:
        material = analyze_text(text, s)
        key_terms = extract_key_terms(text, body.get("max_terms", s.key_term_limit))
    except (InvalidInputError, TypeError) as e:
        raise HTTPException(400, str(e))

    return {
        "sentences": material.sentences,
        "key_terms": [{"term": t, "score": score} for t, score in key_terms.items()],
        "definitions": material.definitions,
    }


# ── API: Settings ─────────────────────────────────────────────────────────

@app.get("/api/settings")
async def api_get_settings():
    return get_settings().to_dict()


@app.put("/api/settings")
async def api_update_settings(request: Request):
    body = await _json_body(request)
    s = get_settings()
    known = {f.name for f in Settings.__dataclass_fields__.values()}
    updates = {k: v for k, v in body.items() if k in known}
    for k, v in updates.items():
        current = getattr(s, k)
        if isinstance(v, bool) != isinstance(current, bool) or not isinstance(v, type(current)):
            raise HTTPException(400, f"{k} must be {type(current).__name__}")
    for k, v in updates.items():
        setattr(s, k, v)
    save_settings(s)
    return s.to_dict()
