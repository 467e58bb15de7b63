"""Error types raised while loading sources and building a bank."""

from transito_quiz.core.errors import QuizError


class SourceLoadError(QuizError):
    """Raised when one source asset cannot be read or has the wrong shape."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load source {source}: {reason}")


class BankBuildError(QuizError):
    """Raised when a mandatory source failed and no bank can be built.

    Distinct from an empty bank: callers must not present a failed build as
    a zero-question quiz.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to build question bank: {reason}")
