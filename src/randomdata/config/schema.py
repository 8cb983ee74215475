"""Typed configuration schema and loader for the randomdata package."""

from __future__ import annotations

import os
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint, constr, model_validator

from randomdata.utils.logging import get_logger

log = get_logger(__name__)

_VERSION_PATTERN = r"^[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+$"


def _version_tuple(text: str) -> tuple[int, int, int, int]:
    a, b, c, d = (int(p) for p in text.split("."))
    return a, b, c, d


# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class StringSettings(BaseModel):
    """Defaults for random string generation."""

    min_length: conint(ge=0)
    max_length: conint(ge=0)
    batch_size: conint(ge=1, le=65536) = 128
    max_consecutive_rejections: conint(ge=1) = 4096

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _ordered(self) -> StringSettings:
        if self.min_length > self.max_length:
            raise ValueError("strings.min_length must not exceed strings.max_length")
        return self


class TextSettings(BaseModel):
    """Defaults for word, sentence and paragraph synthesis."""

    min_words: conint(ge=2)
    max_words: conint(ge=2)
    min_sentence_words: conint(ge=3)
    max_sentence_words: conint(ge=3)
    paragraph_count: conint(ge=1)
    min_sentences: conint(ge=1)
    max_sentences: conint(ge=1)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _ordered(self) -> TextSettings:
        pairs = (
            ("min_words", "max_words"),
            ("min_sentence_words", "max_sentence_words"),
            ("min_sentences", "max_sentences"),
        )
        for low, high in pairs:
            if getattr(self, low) > getattr(self, high):
                raise ValueError(f"text.{low} must not exceed text.{high}")
        return self


class VersionSettings(BaseModel):
    """Fallback bounds for version sampling."""

    floor: constr(pattern=_VERSION_PATTERN)
    ceiling: constr(pattern=_VERSION_PATTERN)

    model_config = ConfigDict(extra="forbid")

    @property
    def floor_tuple(self) -> tuple[int, int, int, int]:
        return _version_tuple(self.floor)

    @property
    def ceiling_tuple(self) -> tuple[int, int, int, int]:
        return _version_tuple(self.ceiling)

    @model_validator(mode="after")
    def _ordered(self) -> VersionSettings:
        if self.floor_tuple > self.ceiling_tuple:
            raise ValueError("versions.floor must not exceed versions.ceiling")
        return self


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    seed: int | None = None
    strings: StringSettings
    text: TextSettings
    versions: VersionSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(path: str | os.PathLike[str] | None = None) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML.
    Invalid values raise :class:`pydantic.ValidationError`.
    """

    with (
        importlib_resources.files("randomdata.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
        log.debug("loaded configuration overrides from %s", path)
    else:
        merged = defaults

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "StringSettings",
    "TextSettings",
    "VersionSettings",
    "deep_merge_dicts",
    "load_config",
]
