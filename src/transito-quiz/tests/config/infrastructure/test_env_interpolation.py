"""Tests for ${VAR} and ${VAR:-default} interpolation."""

import pytest

from transito_quiz.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)


class TestCollectMissingVars:
    def test_unset_var_is_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("QUIZ_TEST_UNSET", raising=False)

        assert collect_missing_vars({"a": "${QUIZ_TEST_UNSET}"}) == ["QUIZ_TEST_UNSET"]

    def test_var_with_default_is_not_reported(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("QUIZ_TEST_UNSET", raising=False)

        assert collect_missing_vars({"a": "${QUIZ_TEST_UNSET:-./assets}"}) == []

    def test_all_missing_vars_collected_once_in_order(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("QUIZ_A", raising=False)
        monkeypatch.delenv("QUIZ_B", raising=False)
        data = {"x": ["${QUIZ_B}", {"y": "${QUIZ_A}/${QUIZ_B}"}]}

        assert collect_missing_vars(data) == ["QUIZ_B", "QUIZ_A"]


class TestInterpolate:
    def test_set_var_is_substituted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUIZ_ASSETS", "/srv/quiz")

        assert interpolate("${QUIZ_ASSETS}/questions.json") == "/srv/quiz/questions.json"

    def test_default_used_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("QUIZ_ASSETS", raising=False)

        assert interpolate("${QUIZ_ASSETS:-assets}/q.json") == "assets/q.json"

    def test_set_var_wins_over_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUIZ_ASSETS", "/srv")

        assert interpolate("${QUIZ_ASSETS:-assets}") == "/srv"

    def test_empty_default_is_allowed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("QUIZ_PREFIX", raising=False)

        assert interpolate("${QUIZ_PREFIX:-}q.json") == "q.json"

    def test_nested_structures_and_scalars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUIZ_NAME", "transito")

        result = interpolate({"name": "${QUIZ_NAME}", "n": 3, "l": ["${QUIZ_NAME}"]})

        assert result == {"name": "transito", "n": 3, "l": ["transito"]}
