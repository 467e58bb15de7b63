"""Pure quiz-session operations over a Bank and a caller-owned QuizState."""

from transito_quiz.bank.domain.bank import Bank
from transito_quiz.bank.domain.question import Question
from transito_quiz.bank.domain.random_source import RandomSource
from transito_quiz.session.domain.state import QuizState, WrongAnswer
from transito_quiz.session.domain.summary import QuizSummary
from transito_quiz.session.infrastructure.errors import (
    EmptyCategoryError,
    InvalidQuizLengthError,
    QuizFinishedError,
    UnknownCategoryError,
)

# The theory quiz always runs through the whole category.
FULL_LENGTH_CATEGORIES = frozenset({"quiz1"})


def start_quiz(
    bank: Bank,
    category: str,
    rng: RandomSource,
    limit: int | None = None,
) -> QuizState:
    """
    Start a quiz over a shuffled copy of the category.

    limit is clamped to the category size and ignored for full-length
    categories.

    Raises:
        UnknownCategoryError: if the bank has no such category.
        EmptyCategoryError: if the category holds no questions.
        InvalidQuizLengthError: if limit is below one.
    """
    if category not in bank.categories:
        raise UnknownCategoryError(category=category, available=list(bank.categories))
    if limit is not None and limit < 1:
        raise InvalidQuizLengthError(limit=limit)

    questions = list(bank.category(category))
    if not questions:
        raise EmptyCategoryError(category=category)

    rng.shuffle(questions)
    if limit is not None and category not in FULL_LENGTH_CATEGORIES:
        questions = questions[:limit]

    return QuizState(category=category, questions=tuple(questions))


def current_question(state: QuizState) -> Question | None:
    if state.finished:
        return None
    return state.questions[state.current_index]


def display_options(question: Question, rng: RandomSource) -> list[str]:
    """Shuffled copy of the options; the question itself is left untouched."""
    options = list(question.options)
    rng.shuffle(options)
    return options


def answer(state: QuizState, selected: str) -> QuizState:
    """
    Score the answer to the current question and advance to the next one.

    Raises:
        QuizFinishedError: if every question has already been answered.
    """
    question = current_question(state)
    if question is None:
        raise QuizFinishedError()

    if question.is_correct(selected):
        return state.model_copy(
            update={
                "current_index": state.current_index + 1,
                "score": state.score + 1,
            }
        )

    wrong = WrongAnswer(
        prompt=question.prompt, selected=selected.strip(), correct=question.correct
    )
    return state.model_copy(
        update={
            "current_index": state.current_index + 1,
            "wrong_answers": (*state.wrong_answers, wrong),
        }
    )


def summarize(state: QuizState) -> QuizSummary:
    """Report on the quiz so far; usually called once it is finished."""
    return QuizSummary(
        category=state.category,
        score=state.score,
        total=state.total,
        wrong_answers=state.wrong_answers,
    )
