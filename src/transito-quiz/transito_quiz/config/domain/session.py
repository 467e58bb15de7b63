"""Quiz session configuration model."""

from pydantic import BaseModel, Field


class SessionConfig(BaseModel, frozen=True):
    default_length: int = Field(default=20, ge=1)
    options_per_question: int = Field(default=4, ge=2)
