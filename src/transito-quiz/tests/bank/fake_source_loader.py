"""FakeSourceLoader: in-memory SourceLoader implementation for use in tests."""

from pathlib import Path

from transito_quiz.bank.domain.sources import (
    CatalogEntry,
    CatalogName,
    Definition,
    InventoryRow,
    QuestionSet,
)
from transito_quiz.bank.infrastructure.errors import SourceLoadError
from transito_quiz.config.domain.sources import InventoryColumns


class FakeSourceLoader:
    """Satisfies the SourceLoader protocol.

    Question sets are looked up by path; any path listed in `failing` raises
    SourceLoadError instead.
    """

    def __init__(
        self,
        question_sets: dict[Path, QuestionSet],
        inventory: list[InventoryRow],
        definitions: list[Definition] | None = None,
        catalogs: dict[CatalogName, list[CatalogEntry]] | None = None,
        failing: set[Path] | None = None,
    ) -> None:
        self._question_sets = question_sets
        self._inventory = inventory
        self._definitions = definitions or []
        self._catalogs = catalogs or {}
        self._failing = failing or set()
        self.requested: list[Path] = []

    def _check(self, path: Path) -> None:
        self.requested.append(path)
        if path in self._failing:
            raise SourceLoadError(source=str(path), reason="file not found")

    async def load_question_set(self, path: Path) -> QuestionSet:
        self._check(path)
        return self._question_sets[path]

    async def load_inventory(
        self, path: Path, columns: InventoryColumns
    ) -> list[InventoryRow]:
        self._check(path)
        return self._inventory

    async def load_definitions(self, path: Path) -> list[Definition]:
        self._check(path)
        return self._definitions

    async def load_catalogs(self, path: Path) -> dict[CatalogName, list[CatalogEntry]]:
        self._check(path)
        return self._catalogs
