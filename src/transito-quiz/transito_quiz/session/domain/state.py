"""QuizState: caller-owned, immutable progress through one quiz."""

from pydantic import BaseModel, Field

from transito_quiz.bank.domain.question import Question


class WrongAnswer(BaseModel, frozen=True):
    prompt: str
    selected: str
    correct: str


class QuizState(BaseModel, frozen=True):
    """Snapshot of a quiz in progress. Session functions return new snapshots."""

    category: str = Field(min_length=1)
    questions: tuple[Question, ...] = Field(min_length=1)
    current_index: int = Field(default=0, ge=0)
    score: int = Field(default=0, ge=0)
    wrong_answers: tuple[WrongAnswer, ...] = ()

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def finished(self) -> bool:
        return self.current_index >= self.total

    @property
    def progress(self) -> float:
        """Fraction of questions answered, from 0.0 to 1.0."""
        return self.current_index / self.total
