"""SourceLoader Protocol: structural interface for reading the raw bank sources."""

from pathlib import Path
from typing import Protocol

from transito_quiz.bank.domain.sources import (
    CatalogEntry,
    CatalogName,
    Definition,
    InventoryRow,
    QuestionSet,
)
from transito_quiz.config.domain.sources import InventoryColumns


class SourceLoader(Protocol):
    """Reads one source asset each call. Failures raise SourceLoadError."""

    async def load_question_set(self, path: Path) -> QuestionSet: ...

    async def load_inventory(
        self, path: Path, columns: InventoryColumns
    ) -> list[InventoryRow]: ...

    async def load_definitions(self, path: Path) -> list[Definition]: ...

    async def load_catalogs(
        self, path: Path
    ) -> dict[CatalogName, list[CatalogEntry]]: ...
