"""YAML config loader: parses, interpolates env vars, resolves paths, validates."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from transito_quiz.config.domain.config import QuizConfig
from transito_quiz.config.domain.observer import ConfigObserver
from transito_quiz.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from transito_quiz.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)

_PATH_KEYS = (
    "base_questions",
    "sign_inventory",
    "supplementary_questions",
    "definitions",
    "sign_catalog",
)
_OPTIONAL_KEYS = ("supplementary_questions", "definitions", "sign_catalog")


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a QuizConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> QuizConfig:
        """
        Load, interpolate, validate, and return a QuizConfig from a YAML file.

        Relative source paths are resolved against the directory holding the
        config file.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        interpolated = interpolate(raw)
        resolved = _resolve_source_paths(interpolated=interpolated, base_dir=path.parent)
        cfg = _build_config(resolved=resolved)
        for key in _OPTIONAL_KEYS:
            if getattr(cfg.sources, key) is None:
                self._observer.config_optional_source_unset(source=key)
        self._observer.config_loaded(name=cfg.name, path=str(path))
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc
    if not isinstance(raw, dict):
        raise ConfigLoadError(path=path, reason="top level is not a mapping")
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _resolve_source_paths(interpolated: Any, base_dir: Path) -> Any:
    """Return a copy of interpolated with relative source paths anchored at base_dir."""
    sources = interpolated.get("sources")
    if not isinstance(sources, dict):
        return interpolated

    resolved_sources: dict[str, Any] = dict(sources)
    for key in _PATH_KEYS:
        value = sources.get(key)
        if not isinstance(value, str) or not value:
            continue
        candidate = Path(value)
        if not candidate.is_absolute():
            candidate = base_dir / candidate
        resolved_sources[key] = str(candidate)

    return {**interpolated, "sources": resolved_sources}


def _build_config(resolved: Any) -> QuizConfig:
    try:
        return QuizConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
