"""Bank: the full categorized collection of canonical Questions."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, field_serializer, field_validator

from transito_quiz.bank.domain.question import Question
from transito_quiz.bank.domain.sources import CategoryName

SIGNALS_CATEGORY = "signals"
DEFINITIONS_CATEGORY = "definitions"


class Bank(BaseModel, frozen=True):
    """Immutable value returned by a bank-building pass.

    Category order follows the order in which categories were first seen
    across the sources.
    """

    categories: Mapping[CategoryName, tuple[Question, ...]]

    @field_validator("categories", mode="after")
    @classmethod
    def _read_only(
        cls, value: Mapping[CategoryName, tuple[Question, ...]]
    ) -> Mapping[CategoryName, tuple[Question, ...]]:
        return MappingProxyType(dict(value))

    @field_serializer("categories")
    def _serialize_categories(
        self, value: Mapping[CategoryName, tuple[Question, ...]]
    ) -> dict[CategoryName, tuple[Question, ...]]:
        return dict(value)

    @property
    def signal_count(self) -> int:
        """Number of sign questions, used by the UI to bound the quiz length."""
        return len(self.categories.get(SIGNALS_CATEGORY, ()))

    @property
    def total_questions(self) -> int:
        return sum(len(questions) for questions in self.categories.values())

    def category(self, name: CategoryName) -> tuple[Question, ...]:
        return self.categories.get(name, ())

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready payload for the static front-end."""
        return {
            "categories": {
                name: [question.model_dump(mode="json") for question in questions]
                for name, questions in self.categories.items()
            },
            "signal_count": self.signal_count,
        }
