"""Structlog implementation of the BankObserver port."""

import structlog


class StructlogBankObserver:
    """Delegates bank domain events to structlog.

    Satisfies the BankObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def bank_build_started(self, sources: list[str]) -> None:
        self._log.info("bank.build_started", sources=sources)

    def bank_source_loaded(self, source: str, total_records: int) -> None:
        self._log.info("bank.source_loaded", source=source, total_records=total_records)

    def bank_optional_source_skipped(self, source: str, reason: str) -> None:
        self._log.warning("bank.optional_source_skipped", source=source, reason=reason)

    def bank_category_skipped(self, source: str, category: str, reason: str) -> None:
        self._log.warning(
            "bank.category_skipped", source=source, category=category, reason=reason
        )

    def bank_record_dropped(self, category: str, index: int, reason: str) -> None:
        self._log.debug(
            "bank.record_dropped", category=category, index=index, reason=reason
        )

    def bank_duplicate_skipped(self, category: str, question_id: str) -> None:
        self._log.debug(
            "bank.duplicate_skipped", category=category, question_id=question_id
        )

    def bank_placeholder_expanded(
        self, category: str, catalog: str, total_entries: int
    ) -> None:
        self._log.info(
            "bank.placeholder_expanded",
            category=category,
            catalog=catalog,
            total_entries=total_entries,
        )

    def bank_placeholder_unknown_catalog(self, category: str, catalog: str) -> None:
        self._log.warning(
            "bank.placeholder_unknown_catalog", category=category, catalog=catalog
        )

    def bank_sign_image_unmatched(self, code: str, name: str) -> None:
        self._log.warning("bank.sign_image_unmatched", code=code, name=name)

    def bank_sign_image_missing(self, name: str) -> None:
        self._log.warning("bank.sign_image_missing", name=name)

    def bank_category_built(self, category: str, total_questions: int) -> None:
        self._log.info(
            "bank.category_built", category=category, total_questions=total_questions
        )

    def bank_build_completed(self, total_questions: int, signal_count: int) -> None:
        self._log.info(
            "bank.build_completed",
            total_questions=total_questions,
            signal_count=signal_count,
        )

    def bank_build_failed(self, reason: str) -> None:
        self._log.error("bank.build_failed", reason=reason)
