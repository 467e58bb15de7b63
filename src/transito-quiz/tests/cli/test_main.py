"""Tests for the transito-quiz CLI commands."""

import json
from pathlib import Path

from typer.testing import CliRunner

from transito_quiz.cli.main import app

runner = CliRunner()


def _write_assets(tmp_path: Path, with_inventory: bool = True) -> Path:
    (tmp_path / "questions.json").write_text(
        json.dumps(
            {
                "quiz1": [{"question": "Q1", "options": ["A", "B"], "correct": "A"}],
                "quiz2": [{"question": "C1", "options": ["Sí", "No"], "correct": "No"}],
            }
        ),
        encoding="utf-8",
    )
    if with_inventory:
        (tmp_path / "inventario.csv").write_text(
            "nombre_visible,archivo,url\n"
            "Pare,senales\\SR-01.png,\n"
            "Ceda el paso,senales\\SR-02.png,\n",
            encoding="utf-8",
        )
    config_path = tmp_path / "quiz.yaml"
    config_path.write_text(
        "name: transito-test\n"
        "sources:\n"
        "  base_questions: questions.json\n"
        "  sign_inventory: inventario.csv\n",
        encoding="utf-8",
    )
    return config_path


class TestBuildCommand:
    def test_build_writes_bank_payload(self, tmp_path: Path) -> None:
        config_path = _write_assets(tmp_path)
        output = tmp_path / "out" / "bank.json"

        result = runner.invoke(
            app,
            ["build", str(config_path), "--output", str(output), "--seed", "1"],
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(output.read_text(encoding="utf-8"))
        assert payload["signal_count"] == 2
        assert [q["prompt"] for q in payload["categories"]["quiz1"]] == ["Q1"]

    def test_missing_inventory_exits_with_error(self, tmp_path: Path) -> None:
        config_path = _write_assets(tmp_path, with_inventory=False)

        result = runner.invoke(app, ["build", str(config_path)])

        assert result.exit_code == 1
        assert "Failed to build question bank" in result.output

    def test_missing_config_exits_with_error(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["build", str(tmp_path / "absent.yaml")])

        assert result.exit_code == 1
        assert "Failed to load config" in result.output


class TestPlayCommand:
    def test_play_scores_answers_and_prints_summary(self, tmp_path: Path) -> None:
        config_path = _write_assets(tmp_path)

        result = runner.invoke(
            app,
            ["play", str(config_path), "--category", "quiz1", "--seed", "3"],
            input="1\n",
        )

        assert result.exit_code == 0, result.output
        assert "Tu puntaje final" in result.output

    def test_unknown_category_exits_with_error(self, tmp_path: Path) -> None:
        config_path = _write_assets(tmp_path)

        result = runner.invoke(app, ["play", str(config_path), "--category", "motos"])

        assert result.exit_code == 1
        assert "unknown category" in result.output
