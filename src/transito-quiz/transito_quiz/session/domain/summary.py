"""QuizSummary: the end-of-quiz report."""

from pydantic import BaseModel, Field

from transito_quiz.session.domain.state import WrongAnswer


class QuizSummary(BaseModel, frozen=True):
    category: str
    score: int = Field(ge=0)
    total: int = Field(ge=1)
    wrong_answers: tuple[WrongAnswer, ...]

    @property
    def percentage(self) -> float:
        return round(100.0 * self.score / self.total, 1)

    @property
    def perfect(self) -> bool:
        return not self.wrong_answers
