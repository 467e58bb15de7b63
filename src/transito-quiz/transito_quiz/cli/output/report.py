"""Rich renderers for bank and quiz summaries."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from transito_quiz.bank.domain.bank import Bank
from transito_quiz.session.domain.summary import QuizSummary


def bank_table(bank: Bank, config_name: str) -> Table:
    """One row per category with its question count and image coverage."""
    table = Table(
        title=f"{escape(config_name)} · question bank", title_justify="left"
    )
    table.add_column("Category", style="cyan")
    table.add_column("Questions", justify="right")
    table.add_column("With image", justify="right", style="dim")

    for name, questions in bank.categories.items():
        with_image = sum(1 for question in questions if question.image)
        table.add_row(escape(name), str(len(questions)), str(with_image))

    table.add_section()
    table.add_row("Total", str(bank.total_questions), "", style="bold")
    return table


def _score_style(percentage: float) -> str:
    if percentage >= 80.0:
        return "green"
    if percentage >= 60.0:
        return "yellow"
    return "red"


def print_quiz_summary(console: Console, summary: QuizSummary) -> None:
    style = _score_style(summary.percentage)
    console.print()
    console.print(
        f"[bold]Tu puntaje final:[/bold] [{style}]{summary.score} / {summary.total}"
        f" ({summary.percentage:.1f}%)[/{style}]"
    )

    if summary.perfect:
        console.print("[green]¡Felicidades! No tuviste errores.[/green]")
        return

    table = Table(title="Resumen de preguntas erradas", title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Pregunta")
    table.add_column("Tu respuesta", style="red")
    table.add_column("Respuesta correcta", style="green")
    for index, wrong in enumerate(summary.wrong_answers, 1):
        table.add_row(
            str(index),
            escape(wrong.prompt),
            escape(wrong.selected),
            escape(wrong.correct),
        )
    console.print(table)
