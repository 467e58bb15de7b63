"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, path: str) -> None:
        self._log.info("config.loaded", name=name, path=path)

    def config_optional_source_unset(self, source: str) -> None:
        self._log.debug("config.optional_source_unset", source=source)
