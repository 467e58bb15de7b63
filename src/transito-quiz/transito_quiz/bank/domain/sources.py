"""Raw source value objects: the shapes handed over by the asset loaders."""

from typing import Any, TypeAlias

from pydantic import BaseModel, Field

from transito_quiz.bank.domain.question import normalize_image

CategoryName: TypeAlias = str
CatalogName: TypeAlias = str


class InventoryRow(BaseModel, frozen=True):
    """One row of the sign inventory table."""

    name: str
    path: str = ""
    url: str = ""

    @property
    def image(self) -> str | None:
        """Local path with forward slashes, falling back to the remote URL."""
        return normalize_image(self.path) or normalize_image(self.url)


class Definition(BaseModel, frozen=True):
    term: str = Field(min_length=1)
    definition: str = Field(min_length=1)


class CatalogEntry(BaseModel, frozen=True):
    """A numbered sign in a named catalog."""

    code: str = Field(min_length=1)
    name: str = Field(min_length=1)


class QuestionSet(BaseModel, frozen=True):
    """Category name to raw question records, not yet validated.

    Records stay untyped here; the Normalizer decides which ones survive.
    """

    categories: dict[CategoryName, list[Any]]


class BankSources(BaseModel, frozen=True):
    """Every input of one bank-building pass, after all loads have resolved."""

    base: QuestionSet
    inventory: list[InventoryRow]
    supplementary: QuestionSet | None = None
    definitions: list[Definition] = []
    catalogs: dict[CatalogName, list[CatalogEntry]] = {}
