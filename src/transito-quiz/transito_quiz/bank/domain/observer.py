"""Observer port for the bank domain: defines events in domain language."""

from typing import Protocol


class BankObserver(Protocol):
    def bank_build_started(self, sources: list[str]) -> None: ...

    def bank_source_loaded(self, source: str, total_records: int) -> None: ...

    def bank_optional_source_skipped(self, source: str, reason: str) -> None: ...

    def bank_category_skipped(self, source: str, category: str, reason: str) -> None: ...

    def bank_record_dropped(self, category: str, index: int, reason: str) -> None: ...

    def bank_duplicate_skipped(self, category: str, question_id: str) -> None: ...

    def bank_placeholder_expanded(
        self, category: str, catalog: str, total_entries: int
    ) -> None: ...

    def bank_placeholder_unknown_catalog(self, category: str, catalog: str) -> None: ...

    def bank_sign_image_unmatched(self, code: str, name: str) -> None: ...

    def bank_sign_image_missing(self, name: str) -> None: ...
    def bank_category_built(self, category: str, total_questions: int) -> None: ...

    def bank_build_completed(self, total_questions: int, signal_count: int) -> None: ...

    def bank_build_failed(self, reason: str) -> None: ...
