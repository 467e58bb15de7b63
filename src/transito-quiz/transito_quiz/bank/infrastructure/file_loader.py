"""File source loader: reads the JSON and CSV assets the static app ships with."""

import asyncio
import csv
import io
import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from transito_quiz.bank.domain.observer import BankObserver
from transito_quiz.bank.domain.sources import (
    CatalogEntry,
    CatalogName,
    Definition,
    InventoryRow,
    QuestionSet,
)
from transito_quiz.bank.infrastructure.errors import SourceLoadError
from transito_quiz.config.domain.sources import InventoryColumns

M = TypeVar("M", bound=BaseModel)


class FileSourceLoader:
    """Satisfies the SourceLoader protocol over local files.

    File reads run in a worker thread so that independent sources load
    concurrently. Whole-file problems (missing file, invalid JSON, wrong
    top-level shape, missing CSV columns) raise SourceLoadError; individual
    malformed entries are skipped.
    """

    def __init__(self, observer: BankObserver) -> None:
        self._observer = observer

    async def load_question_set(self, path: Path) -> QuestionSet:
        raw = await asyncio.to_thread(_read_json, path)
        if not isinstance(raw, dict):
            raise SourceLoadError(source=str(path), reason="top level is not an object")

        categories: dict[str, list[Any]] = {}
        for name, records in raw.items():
            if not isinstance(records, list):
                self._observer.bank_category_skipped(
                    source=str(path), category=str(name), reason="not a list"
                )
                continue
            categories[str(name)] = records
        return QuestionSet(categories=categories)

    async def load_inventory(
        self, path: Path, columns: InventoryColumns
    ) -> list[InventoryRow]:
        text = await asyncio.to_thread(_read_text, path)
        reader = csv.DictReader(io.StringIO(text))
        header = [field.strip() for field in reader.fieldnames or []]
        missing = [col for col in (columns.name, columns.path) if col not in header]
        if missing:
            raise SourceLoadError(
                source=str(path),
                reason=f"missing column(s) {', '.join(missing)}",
            )

        rows: list[InventoryRow] = []
        for raw_row in reader:
            row = {
                (key or "").strip(): (value or "").strip()
                for key, value in raw_row.items()
                if isinstance(value, str)
            }
            name = row.get(columns.name, "")
            if not name:
                continue
            rows.append(
                InventoryRow(
                    name=name,
                    path=row.get(columns.path, ""),
                    url=row.get(columns.url, ""),
                )
            )
        return rows

    async def load_definitions(self, path: Path) -> list[Definition]:
        raw = await asyncio.to_thread(_read_json, path)
        if not isinstance(raw, list):
            raise SourceLoadError(source=str(path), reason="top level is not a list")
        return _validate_each(Definition, raw)

    async def load_catalogs(self, path: Path) -> dict[CatalogName, list[CatalogEntry]]:
        raw = await asyncio.to_thread(_read_json, path)
        if not isinstance(raw, dict):
            raise SourceLoadError(source=str(path), reason="top level is not an object")

        catalogs: dict[CatalogName, list[CatalogEntry]] = {}
        for name, entries in raw.items():
            if not isinstance(entries, list):
                self._observer.bank_category_skipped(
                    source=str(path), category=str(name), reason="not a list"
                )
                continue
            catalogs[str(name)] = _validate_each(CatalogEntry, entries)
        return catalogs


def _read_text(path: Path) -> str:
    try:
        # utf-8-sig: spreadsheet exports often start with a BOM.
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise SourceLoadError(source=str(path), reason="file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceLoadError(source=str(path), reason=str(exc)) from exc


def _read_json(path: Path) -> Any:
    text = _read_text(path)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SourceLoadError(source=str(path), reason=f"invalid JSON: {exc}") from exc


def _validate_each(model: type[M], items: list[Any]) -> list[M]:
    valid: list[M] = []
    for item in items:
        try:
            valid.append(model.model_validate(item))
        except ValidationError:
            continue
    return valid
