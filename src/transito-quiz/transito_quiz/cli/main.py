"""CLI entrypoint for transito-quiz: typer app with `build` and `play` commands."""

import asyncio
import json
import logging
import random
import sys
from pathlib import Path

import click
import structlog
import typer
from rich.console import Console
from rich.markup import escape

from transito_quiz.bank.application.builder import QuestionBankBuilder
from transito_quiz.bank.domain.bank import Bank
from transito_quiz.bank.infrastructure.file_loader import FileSourceLoader
from transito_quiz.bank.infrastructure.observer import StructlogBankObserver
from transito_quiz.cli.output.report import bank_table, print_quiz_summary
from transito_quiz.config.domain.config import QuizConfig
from transito_quiz.config.infrastructure.observer import StructlogConfigObserver
from transito_quiz.config.infrastructure.yaml_loader import YamlConfigLoader
from transito_quiz.core.errors import QuizError
from transito_quiz.session.domain.quiz import (
    answer,
    current_question,
    display_options,
    start_quiz,
    summarize,
)

app = typer.Typer(add_completion=False)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog based on the requested format and level."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = _LOG_LEVELS.get(log_level.lower())
    if level is None:
        typer.echo(
            f"Invalid log level: {log_level!r}. Must be one of {', '.join(_LOG_LEVELS)}."
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path) -> QuizConfig:
    return YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)


def _build_bank(config: QuizConfig, rng: random.Random) -> Bank:
    observer = StructlogBankObserver()
    builder = QuestionBankBuilder(
        config=config.sources,
        loader=FileSourceLoader(observer=observer),
        rng=rng,
        observer=observer,
        options_per_question=config.session.options_per_question,
    )
    return asyncio.run(builder.build())


@app.command()
def build(
    config_path: Path = typer.Argument(..., help="Path to quiz config YAML"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the bank as JSON for the static front-end",
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for distractor draws"),
    log_format: str = typer.Option(
        "console", "--log-format", help="Log format: 'console' or 'json'"
    ),
    log_level: str = typer.Option("info", "--log-level", help="Minimum log level"),
) -> None:
    """Build the question bank from the configured assets."""
    try:
        _configure_structlog(log_format=log_format, log_level=log_level)
        config = _load_config(config_path=config_path)
        bank = _build_bank(config=config, rng=random.Random(seed))

        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(
                json.dumps(bank.to_payload(), ensure_ascii=False, indent=2),
                encoding="utf-8",
            )

        console = Console()
        console.print(bank_table(bank=bank, config_name=config.name))
        if output is not None:
            console.print(f"[dim]Bank written to {escape(str(output))}[/dim]")

    except QuizError as exc:
        typer.echo(str(exc))
        sys.exit(1)


@app.command()
def play(
    config_path: Path = typer.Argument(..., help="Path to quiz config YAML"),
    category: str = typer.Option("quiz1", "--category", "-c", help="Bank category"),
    count: int | None = typer.Option(
        None,
        "--count",
        "-n",
        help="Number of questions (defaults to the configured session length)",
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for shuffling"),
    log_level: str = typer.Option("warning", "--log-level", help="Minimum log level"),
) -> None:
    """Run a quiz in the terminal and print the final summary."""
    try:
        _configure_structlog(log_format="console", log_level=log_level)
        config = _load_config(config_path=config_path)
        rng = random.Random(seed)
        bank = _build_bank(config=config, rng=rng)

        limit = count if count is not None else config.session.default_length
        state = start_quiz(bank=bank, category=category, rng=rng, limit=limit)

        console = Console()
        while (question := current_question(state)) is not None:
            console.rule(f"[cyan]{state.current_index + 1} / {state.total}")
            console.print(f"[bold]{escape(question.prompt)}[/bold]")
            if question.image:
                console.print(f"[dim]Imagen: {escape(question.image)}[/dim]")
            if question.image_description:
                console.print(f"[dim]{escape(question.image_description)}[/dim]")

            options = display_options(question=question, rng=rng)
            for number, option in enumerate(options, 1):
                console.print(f"  {number}. {escape(option)}")
            choice = typer.prompt(
                "Respuesta",
                type=click.IntRange(1, len(options)),
            )
            selected = options[choice - 1]

            if question.is_correct(selected):
                console.print("[green]¡Correcto![/green]")
            else:
                console.print(
                    f"[red]Incorrecto.[/red] Respuesta: {escape(question.correct)}"
                )
            state = answer(state=state, selected=selected)

        print_quiz_summary(console=console, summary=summarize(state))

    except KeyboardInterrupt:
        typer.echo("Quiz interrupted.")
        sys.exit(1)
    except QuizError as exc:
        typer.echo(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    app()
