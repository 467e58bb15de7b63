"""Normalizer: turns one RawRecord into zero or one canonical Question."""

from collections.abc import Iterable, Mapping
from typing import TypeAlias

from transito_quiz.bank.domain.question import (
    Question,
    RawRecord,
    normalize_image,
    normalize_prompt,
    question_id,
)

DropReason: TypeAlias = str


def clean_options(options: Iterable[object]) -> list[str]:
    """Trim string options, discard empties and non-strings, drop exact duplicates."""
    cleaned: list[str] = []
    seen: set[str] = set()
    for option in options:
        if not isinstance(option, str):
            continue
        text = option.strip()
        if not text or text in seen:
            continue
        seen.add(text)
        cleaned.append(text)
    return cleaned


def _text_field(record: RawRecord, *keys: str) -> str:
    for key in keys:
        value = record.get(key)
        if isinstance(value, str):
            return value
    return ""


def normalize_record(record: object) -> Question | DropReason:
    """
    Normalize one raw record.

    Returns the Question on success, or a short reason string describing why
    the record was filtered out. Filtering is expected data hygiene, not an
    error.
    """
    if not isinstance(record, Mapping):
        return "record is not an object"

    prompt = normalize_prompt(_text_field(record, "question", "prompt"))
    if not prompt:
        return "missing prompt"

    raw_options = record.get("options")
    if not isinstance(raw_options, list):
        return "options is not a list"

    correct = _text_field(record, "correct", "answer").strip()
    if not correct:
        return "missing correct answer"

    options = clean_options(raw_options)
    if correct not in options:
        options.insert(0, correct)

    if len(options) < 2:
        return f"only {len(options)} usable option(s)"

    image = normalize_image(_text_field(record, "image") or None)
    description = _text_field(record, "imageDesc", "image_description").strip()

    return Question(
        id=question_id(prompt, image),
        prompt=prompt,
        image=image,
        image_description=description or None,
        options=tuple(options),
        correct=correct,
    )
