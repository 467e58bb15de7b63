"""Error types raised by quiz session operations."""

from transito_quiz.core.errors import QuizError


class UnknownCategoryError(QuizError):
    """Raised when a quiz is started for a category the bank does not have."""

    def __init__(self, category: str, available: list[str]) -> None:
        self.category = category
        names = ", ".join(available) or "none"
        super().__init__(
            f"Failed to start quiz: unknown category '{category}' (available: {names})"
        )


class EmptyCategoryError(QuizError):
    """Raised when a quiz is started for a category with no questions."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"Failed to start quiz: category '{category}' has no questions")


class InvalidQuizLengthError(QuizError):
    """Raised when the requested number of questions is below one."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Failed to start quiz: invalid number of questions: {limit}")


class QuizFinishedError(QuizError):
    """Raised when answering after the last question has been answered."""

    def __init__(self) -> None:
        super().__init__("Failed to answer: the quiz is already finished")
