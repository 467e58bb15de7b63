"""Category-specific assembly: derives raw records from tables and catalogs.

Every function here produces plain raw records; the Normalizer remains the
single gate that decides which of them become Questions.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from transito_quiz.bank.domain.distractors import (
    DISTRACTOR_COUNT,
    synthesize_distractors,
)
from transito_quiz.bank.domain.matching import best_inventory_match
from transito_quiz.bank.domain.observer import BankObserver
from transito_quiz.bank.domain.random_source import RandomSource
from transito_quiz.bank.domain.sources import (
    CatalogEntry,
    CatalogName,
    Definition,
    InventoryRow,
)

SIGN_PROMPT = "¿Cuál es el nombre de esta señal?"
PLACEHOLDER_KEY = "placeholder"


def sign_records(
    inventory: Sequence[InventoryRow],
    rng: RandomSource,
    observer: BankObserver,
    distractor_count: int = DISTRACTOR_COUNT,
) -> list[dict[str, Any]]:
    """
    One "name this sign" record per named inventory row with an image.

    Rows without a path or URL are skipped and reported to the observer.
    """
    pool = [row.name for row in inventory]
    records: list[dict[str, Any]] = []
    for row in inventory:
        name = row.name.strip()
        if not name:
            continue
        if row.image is None:
            observer.bank_sign_image_missing(name=name)
            continue
        distractors = synthesize_distractors(
            correct=name, pool=pool, rng=rng, count=distractor_count
        )
        records.append(
            {
                "question": SIGN_PROMPT,
                "image": row.image,
                "options": [name, *distractors],
                "correct": name,
            }
        )
    return records


def definition_records(
    definitions: Sequence[Definition],
    rng: RandomSource,
    distractor_count: int = DISTRACTOR_COUNT,
) -> list[dict[str, Any]]:
    """One record per term; the other entries' definitions are the distractors.

    No fallback labels: sign names would be obviously wrong next to a
    legal definition.
    """
    pool = [entry.definition for entry in definitions]
    return [
        {
            "question": f'¿Qué significa "{entry.term.strip()}"?',
            "options": [
                entry.definition,
                *synthesize_distractors(
                    correct=entry.definition,
                    pool=pool,
                    rng=rng,
                    fallback=(),
                    count=distractor_count,
                ),
            ],
            "correct": entry.definition,
        }
        for entry in definitions
    ]


def catalog_records(
    entries: Sequence[CatalogEntry],
    inventory: Sequence[InventoryRow],
    rng: RandomSource,
    observer: BankObserver,
    distractor_count: int = DISTRACTOR_COUNT,
) -> list[dict[str, Any]]:
    """One record per catalog entry, with its image matched from the inventory."""
    pool = [entry.name for entry in entries]
    records: list[dict[str, Any]] = []
    for entry in entries:
        match = best_inventory_match(name=entry.name, inventory=inventory)
        if match is None:
            observer.bank_sign_image_unmatched(code=entry.code, name=entry.name)
        records.append(
            {
                "question": f"¿Cuál es el nombre de la señal {entry.code.strip()}?",
                "image": match.image if match is not None else None,
                "options": [
                    entry.name,
                    *synthesize_distractors(
                        correct=entry.name, pool=pool, rng=rng, count=distractor_count
                    ),
                ],
                "correct": entry.name,
            }
        )
    return records


def expand_placeholders(
    category: str,
    records: Sequence[Any],
    catalogs: Mapping[CatalogName, Sequence[CatalogEntry]],
    inventory: Sequence[InventoryRow],
    rng: RandomSource,
    observer: BankObserver,
    distractor_count: int = DISTRACTOR_COUNT,
) -> list[Any]:
    """
    Replace placeholder records with concrete catalog-driven records.

    A placeholder is a record carrying a "placeholder" key that names a
    catalog. It is replaced in place by one record per catalog entry; a
    placeholder naming an unknown catalog is dropped. Other records pass
    through untouched.
    """
    expanded: list[Any] = []
    for record in records:
        catalog_name = (
            record.get(PLACEHOLDER_KEY) if isinstance(record, Mapping) else None
        )
        if not isinstance(catalog_name, str):
            expanded.append(record)
            continue

        entries = catalogs.get(catalog_name)
        if entries is None:
            observer.bank_placeholder_unknown_catalog(
                category=category, catalog=catalog_name
            )
            continue

        expanded.extend(
            catalog_records(
                entries=entries,
                inventory=inventory,
                rng=rng,
                observer=observer,
                distractor_count=distractor_count,
            )
        )
        observer.bank_placeholder_expanded(
            category=category, catalog=catalog_name, total_entries=len(entries)
        )
    return expanded
