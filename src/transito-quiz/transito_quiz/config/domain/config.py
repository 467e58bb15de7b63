"""Top-level QuizConfig aggregate: the root configuration object."""

from pydantic import BaseModel, Field

from transito_quiz.config.domain.session import SessionConfig
from transito_quiz.config.domain.sources import SourcesConfig


class QuizConfig(BaseModel, frozen=True):
    """Root configuration aggregate for building a question bank."""

    name: str = Field(min_length=1)
    sources: SourcesConfig
    session: SessionConfig = SessionConfig()
