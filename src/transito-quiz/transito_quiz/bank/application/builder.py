"""QuestionBankBuilder: loads every source, then assembles one immutable Bank."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path
from typing import TypeVar

from transito_quiz.bank.domain.assembly import (
    definition_records,
    expand_placeholders,
    sign_records,
)
from transito_quiz.bank.domain.bank import DEFINITIONS_CATEGORY, SIGNALS_CATEGORY, Bank
from transito_quiz.bank.domain.loader import SourceLoader
from transito_quiz.bank.domain.merger import merge_questions
from transito_quiz.bank.domain.normalizer import normalize_record
from transito_quiz.bank.domain.observer import BankObserver
from transito_quiz.bank.domain.question import Question
from transito_quiz.bank.domain.random_source import RandomSource
from transito_quiz.bank.domain.sources import BankSources, CategoryName, QuestionSet
from transito_quiz.bank.infrastructure.errors import BankBuildError, SourceLoadError
from transito_quiz.config.domain.sources import SourcesConfig

T = TypeVar("T")


def _normalize_all(
    category: CategoryName, records: Sequence[object], observer: BankObserver
) -> list[Question]:
    questions: list[Question] = []
    for index, record in enumerate(records):
        result = normalize_record(record)
        if isinstance(result, str):
            observer.bank_record_dropped(category=category, index=index, reason=result)
        else:
            questions.append(result)
    return questions


def _category_names(sources: BankSources) -> list[CategoryName]:
    names: list[CategoryName] = list(sources.base.categories)
    if sources.supplementary is not None:
        names.extend(
            name for name in sources.supplementary.categories if name not in names
        )
    for derived in (SIGNALS_CATEGORY, DEFINITIONS_CATEGORY):
        if derived not in names:
            names.append(derived)
    return names


def build_bank(
    sources: BankSources,
    rng: RandomSource,
    observer: BankObserver,
    options_per_question: int = 4,
) -> Bank:
    """
    Assemble a Bank from fully loaded sources. No I/O.

    For each category the contributions are merged in priority order:
    base set, supplementary set, then records derived from the inventory
    (signals) or the definitions table. The first question with a given id
    wins. The definitions category is omitted when it ends up empty.
    """
    distractor_count = options_per_question - 1
    derived: dict[CategoryName, Sequence[object]] = {
        SIGNALS_CATEGORY: sign_records(
            inventory=sources.inventory,
            rng=rng,
            observer=observer,
            distractor_count=distractor_count,
        ),
        DEFINITIONS_CATEGORY: definition_records(
            definitions=sources.definitions, rng=rng, distractor_count=distractor_count
        ),
    }
    question_sets: list[QuestionSet] = [sources.base]
    if sources.supplementary is not None:
        question_sets.append(sources.supplementary)

    categories: dict[CategoryName, tuple[Question, ...]] = {}
    for category in _category_names(sources):
        contributions: list[list[Question]] = []
        for question_set in question_sets:
            records = expand_placeholders(
                category=category,
                records=question_set.categories.get(category, []),
                catalogs=sources.catalogs,
                inventory=sources.inventory,
                rng=rng,
                observer=observer,
                distractor_count=distractor_count,
            )
            contributions.append(_normalize_all(category, records, observer))
        contributions.append(
            _normalize_all(category, derived.get(category, []), observer)
        )

        merged = merge_questions(
            contributions,
            on_duplicate=lambda question_id, category=category: (
                observer.bank_duplicate_skipped(
                    category=category, question_id=question_id
                )
            ),
        )
        if category == DEFINITIONS_CATEGORY and not merged:
            continue
        categories[category] = merged
        observer.bank_category_built(category=category, total_questions=len(merged))

    return Bank(categories=categories)


class QuestionBankBuilder:
    """Loads all sources concurrently, then builds the Bank in one pure pass.

    Mandatory sources (base questions, sign inventory) abort the build with
    BankBuildError. Optional sources that are unset or fail to load
    contribute nothing.
    """

    def __init__(
        self,
        config: SourcesConfig,
        loader: SourceLoader,
        rng: RandomSource,
        observer: BankObserver,
        options_per_question: int = 4,
    ) -> None:
        self._config = config
        self._loader = loader
        self._rng = rng
        self._observer = observer
        self._options_per_question = options_per_question

    async def build(self) -> Bank:
        """Load every source and return the assembled Bank.

        Raises:
            BankBuildError: if the base question set or the sign inventory
                cannot be loaded.
        """
        cfg = self._config
        self._observer.bank_build_started(
            sources=[
                name
                for name in (
                    "base_questions",
                    "sign_inventory",
                    "supplementary_questions",
                    "definitions",
                    "sign_catalog",
                )
                if getattr(cfg, name) is not None
            ]
        )

        try:
            async with asyncio.TaskGroup() as tg:
                base_task = tg.create_task(
                    self._load_mandatory(
                        source="base_questions",
                        path=cfg.base_questions,
                        load=lambda path: self._loader.load_question_set(path=path),
                    )
                )
                inventory_task = tg.create_task(
                    self._load_mandatory(
                        source="sign_inventory",
                        path=cfg.sign_inventory,
                        load=lambda path: self._loader.load_inventory(
                            path=path, columns=cfg.inventory_columns
                        ),
                    )
                )
                supplementary_task = tg.create_task(
                    self._load_optional(
                        source="supplementary_questions",
                        path=cfg.supplementary_questions,
                        load=lambda path: self._loader.load_question_set(path=path),
                    )
                )
                definitions_task = tg.create_task(
                    self._load_optional(
                        source="definitions",
                        path=cfg.definitions,
                        load=lambda path: self._loader.load_definitions(path=path),
                    )
                )
                catalogs_task = tg.create_task(
                    self._load_optional(
                        source="sign_catalog",
                        path=cfg.sign_catalog,
                        load=lambda path: self._loader.load_catalogs(path=path),
                    )
                )
        except* SourceLoadError as eg:
            reason = "; ".join(str(exc) for exc in eg.exceptions)
            self._observer.bank_build_failed(reason=reason)
            raise BankBuildError(reason=reason) from eg.exceptions[0]

        sources = BankSources(
            base=base_task.result(),
            inventory=inventory_task.result(),
            supplementary=supplementary_task.result(),
            definitions=definitions_task.result() or [],
            catalogs=catalogs_task.result() or {},
        )
        bank = build_bank(
            sources=sources,
            rng=self._rng,
            observer=self._observer,
            options_per_question=self._options_per_question,
        )
        self._observer.bank_build_completed(
            total_questions=bank.total_questions,
            signal_count=bank.signal_count,
        )
        return bank

    async def _load_mandatory(
        self,
        source: str,
        path: Path,
        load: Callable[[Path], Awaitable[T]],
    ) -> T:
        result = await load(path)
        self._observer.bank_source_loaded(source=source, total_records=_size(result))
        return result

    async def _load_optional(
        self,
        source: str,
        path: Path | None,
        load: Callable[[Path], Awaitable[T]],
    ) -> T | None:
        """Load an optional source; an unset path or a failed load yields None."""
        if path is None:
            return None
        try:
            result = await load(path)
        except SourceLoadError as exc:
            self._observer.bank_optional_source_skipped(source=source, reason=str(exc))
            return None
        self._observer.bank_source_loaded(source=source, total_records=_size(result))
        return result


def _size(loaded: object) -> int:
    if isinstance(loaded, QuestionSet):
        return sum(len(records) for records in loaded.categories.values())
    if isinstance(loaded, (list, dict)):
        return len(loaded)
    return 0
