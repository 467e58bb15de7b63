"""Tests for the Bank value object."""

import pytest

from transito_quiz.bank.domain.bank import Bank
from transito_quiz.bank.domain.question import Question, question_id


def _question(prompt: str, image: str | None = None) -> Question:
    return Question(
        id=question_id(prompt, image),
        prompt=prompt,
        image=image,
        options=("A", "B"),
        correct="A",
    )


def _bank() -> Bank:
    return Bank(
        categories={
            "quiz1": (_question("Q1"), _question("Q2")),
            "signals": (_question("¿Cuál?", "senales/SR-01.png"),),
        }
    )


class TestBank:
    """A built Bank cannot be changed through its categories."""

    def test_categories_reject_item_assignment(self) -> None:
        bank = _bank()

        with pytest.raises(TypeError):
            bank.categories["quiz1"] = ()  # type: ignore[index]

        assert len(bank.category("quiz1")) == 2

    def test_mutating_the_input_dict_does_not_change_the_bank(self) -> None:
        categories = {"quiz1": (_question("Q1"),)}
        bank = Bank(categories=categories)

        categories["quiz2"] = (_question("C1"),)

        assert list(bank.categories) == ["quiz1"]

    def test_counts_and_lookup(self) -> None:
        bank = _bank()

        assert bank.signal_count == 1
        assert bank.total_questions == 3
        assert bank.category("missing") == ()

    def test_payload_is_plain_json_data(self) -> None:
        payload = _bank().to_payload()

        assert list(payload["categories"]) == ["quiz1", "signals"]
        assert payload["categories"]["signals"][0]["image"] == "senales/SR-01.png"
        assert payload["signal_count"] == 1

    def test_model_dump_returns_plain_dict(self) -> None:
        dumped = _bank().model_dump()

        assert isinstance(dumped["categories"], dict)
        assert dumped["categories"]["quiz1"][0]["prompt"] == "Q1"
