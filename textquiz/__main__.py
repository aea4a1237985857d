"""CLI entry point for textquiz.

Usage:
  python -m textquiz serve [--host HOST] [--port PORT]
  python -m textquiz generate FILE [--count N] [--type TYPE] [--seed S] [--no-microbit]
  python -m textquiz analyze FILE [--max-terms N]

FILE may be "-" to read the text from stdin.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path


def main():
    args = sys.argv[1:]
    command = args[0] if args else "serve"

    if command == "serve":
        _serve(args[1:])
    elif command == "generate":
        _generate(args[1:])
    elif command == "analyze":
        _analyze(args[1:])
    else:
        print(f"Unknown command: {command}")
        print("Commands: serve, generate, analyze")
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str | None) -> str | None:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _read_text(args: list[str]) -> str:
    if not args or args[0].startswith("--"):
        print("No input file given.")
        sys.exit(1)
    source = args[0]
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        print(f"File not found: {path}")
        sys.exit(1)
    return path.read_text(encoding="utf-8")


def _serve(args: list[str]):
    import uvicorn

    port = int(_parse_flag(args, "--port", "8765"))
    host = _parse_flag(args, "--host", "127.0.0.1")
    print(f"Starting Text Quiz on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    uvicorn.run("textquiz.app:app", host=host, port=port, reload=False)


def _generate(args: list[str]):
    import logging

    from textquiz.config import load_settings
    from textquiz.models import MIXED, InvalidInputError
    from textquiz.question_generator import generate_questions

    logging.basicConfig(level=logging.WARNING, format="%(name)s | %(message)s")
    settings = load_settings()
    text = _read_text(args)

    count = int(_parse_flag(args, "--count", str(settings.default_question_count)))
    if not 1 <= count <= settings.max_questions:
        print(f"--count must be between 1 and {settings.max_questions}")
        sys.exit(1)
    seed = _parse_flag(args, "--seed", None)
    microbit = settings.microbit_compatible and "--no-microbit" not in args

    try:
        questions = generate_questions(
            text,
            count,
            microbit_compatible=microbit,
            question_type=_parse_flag(args, "--type", MIXED).upper(),
            settings=settings,
            seed=int(seed) if seed is not None else None,
        )
    except InvalidInputError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(json.dumps([q.to_dict() for q in questions], indent=2, ensure_ascii=False))
    if len(questions) < count:
        print(f"Only {len(questions)} of {count} questions could be generated.", file=sys.stderr)


def _analyze(args: list[str]):
    from textquiz.config import load_settings
    from textquiz.text_analysis import extract_definitions, extract_key_terms, segment_sentences

    settings = load_settings()
    text = _read_text(args)
    max_terms = int(_parse_flag(args, "--max-terms", str(settings.key_term_limit)))

    print(json.dumps({
        "sentences": segment_sentences(text),
        "key_terms": extract_key_terms(text, max_terms),
        "definitions": extract_definitions(text),
    }, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
