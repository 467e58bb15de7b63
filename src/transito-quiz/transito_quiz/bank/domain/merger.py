"""Bank Merger: combines Question collections, first occurrence of an id wins."""

from collections.abc import Callable, Iterable

from transito_quiz.bank.domain.question import Question, QuestionId


def merge_questions(
    collections: Iterable[Iterable[Question]],
    on_duplicate: Callable[[QuestionId], None] | None = None,
) -> tuple[Question, ...]:
    """
    Merge collections in priority order.

    Each id appears at most once in the result, carrying the content of the
    first collection that supplied it. Order of first appearance is kept.
    """
    merged: dict[QuestionId, Question] = {}
    for collection in collections:
        for question in collection:
            if question.id in merged:
                if on_duplicate is not None:
                    on_duplicate(question.id)
                continue
            merged[question.id] = question
    return tuple(merged.values())
