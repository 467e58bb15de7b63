"""Tests for the Question value object and its identity helpers."""

import pytest
from pydantic import ValidationError

from transito_quiz.bank.domain.question import (
    Question,
    normalize_image,
    normalize_prompt,
    question_id,
)


def _question(**overrides: object) -> Question:
    fields: dict[str, object] = {
        "id": "abc",
        "prompt": "¿Qué indica la señal?",
        "options": ("Pare", "Ceda el paso"),
        "correct": "Pare",
    }
    fields.update(overrides)
    return Question(**fields)  # type: ignore[arg-type]


class TestQuestionId:
    """question_id is a deterministic function of prompt and image."""

    def test_same_inputs_give_same_id(self) -> None:
        assert question_id("Q1", "img/a.png") == question_id("Q1", "img/a.png")

    def test_whitespace_differences_in_prompt_collapse(self) -> None:
        assert question_id("  Q1   de  prueba ", None) == question_id(
            "Q1 de prueba", None
        )

    def test_backslash_and_forward_slash_images_collapse(self) -> None:
        assert question_id("Q1", "img\\a.png") == question_id("Q1", "img/a.png")

    def test_blank_image_equals_no_image(self) -> None:
        assert question_id("Q1", "   ") == question_id("Q1", None)

    def test_different_image_gives_different_id(self) -> None:
        assert question_id("Q1", "a.png") != question_id("Q1", "b.png")

    def test_different_prompt_gives_different_id(self) -> None:
        assert question_id("Q1", None) != question_id("Q2", None)

    def test_id_is_sixteen_hex_characters(self) -> None:
        qid = question_id("Q1", None)

        assert len(qid) == 16
        assert all(c in "0123456789abcdef" for c in qid)


class TestNormalizers:
    def test_normalize_prompt_trims_and_collapses(self) -> None:
        assert normalize_prompt("\t¿Qué\n es  esto? ") == "¿Qué es esto?"

    def test_normalize_image_none_stays_none(self) -> None:
        assert normalize_image(None) is None

    def test_normalize_image_rewrites_backslashes(self) -> None:
        assert normalize_image(" senales\\SR-01.png ") == "senales/SR-01.png"


class TestQuestionValidation:
    """Question rejects values that break the option invariants."""

    def test_valid_question_constructs(self) -> None:
        question = _question()

        assert question.correct in question.options

    def test_correct_missing_from_options_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _question(correct="Zona escolar")

    def test_duplicate_options_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _question(options=("Pare", "Pare"))

    def test_single_option_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _question(options=("Pare",))

    def test_empty_correct_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _question(correct="")

    def test_question_is_frozen(self) -> None:
        question = _question()

        with pytest.raises(ValidationError):
            question.prompt = "otra"  # type: ignore[misc]


class TestIsCorrect:
    def test_exact_answer_is_correct(self) -> None:
        assert _question().is_correct("Pare")

    def test_answer_is_trimmed_before_comparison(self) -> None:
        assert _question().is_correct("  Pare ")

    def test_comparison_is_case_sensitive(self) -> None:
        assert not _question().is_correct("pare")
