"""Question domain value object: the canonical unit consumed by the quiz UI."""

import hashlib
import re
from collections.abc import Mapping
from typing import Any, Self, TypeAlias

from pydantic import BaseModel, Field, model_validator

QuestionId: TypeAlias = str
RawRecord: TypeAlias = Mapping[str, Any]

_WHITESPACE = re.compile(r"\s+")
_ID_SEPARATOR = "\x1f"


def normalize_prompt(text: str) -> str:
    """Trim and collapse runs of whitespace to a single space."""
    return _WHITESPACE.sub(" ", text).strip()


def normalize_image(image: str | None) -> str | None:
    """Return image with forward slashes, or None when blank."""
    if image is None:
        return None
    cleaned = image.strip().replace("\\", "/")
    return cleaned or None


def question_id(prompt: str, image: str | None) -> QuestionId:
    """
    Deterministic id over the normalized prompt and image reference.

    The same logical question yields the same id whichever source file it
    came from; prompt + image is treated as the identity of a question.
    """
    key = f"{normalize_prompt(prompt)}{_ID_SEPARATOR}{normalize_image(image) or ''}"
    return hashlib.sha256(key.encode("utf-8")).hexdigest()[:16]


class Question(BaseModel, frozen=True):
    """Immutable multiple-choice question with exactly one correct option."""

    id: QuestionId = Field(min_length=1)
    prompt: str = Field(min_length=1)
    image: str | None = None
    image_description: str | None = None
    options: tuple[str, ...] = Field(min_length=2)
    correct: str = Field(min_length=1)

    @model_validator(mode="after")
    def _check_options(self) -> Self:
        if len(set(self.options)) != len(self.options):
            raise ValueError("options must not contain duplicates")
        if self.correct not in self.options:
            raise ValueError("correct answer must be one of the options")
        return self

    def is_correct(self, selected: str) -> bool:
        return selected.strip() == self.correct
