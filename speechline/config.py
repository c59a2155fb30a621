"""Typed runtime settings resolved from environment variables."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

from speechline.domain import (
    DEFAULT_BOUNDARY_PUNCTUATION,
    DEFAULT_SILENCE_THRESHOLD_SECONDS,
)

SUPPORTED_PROVIDERS: tuple[str, ...] = ("elevenlabs", "assemblyai", "tokens")


class ConfigError(Exception):
    """Configuration loading or validation error."""


@dataclass(frozen=True)
class SegmentationSettings:
    """Sentence-boundary detection settings."""

    boundary_punctuation: frozenset[str] = DEFAULT_BOUNDARY_PUNCTUATION


@dataclass(frozen=True)
class SilenceSettings:
    """Silence-slot extraction settings."""

    threshold_seconds: float = DEFAULT_SILENCE_THRESHOLD_SECONDS


@dataclass(frozen=True)
class TimelineSettings:
    """Timeline export settings."""

    folder: Path = Path("./transcripts")


@dataclass(frozen=True)
class AppConfig:
    """Top-level application settings."""

    segmentation: SegmentationSettings
    silence: SilenceSettings
    timeline: TimelineSettings
    default_provider: str = "elevenlabs"


_SETTINGS: AppConfig | None = None


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as err:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from err
    if not math.isfinite(value):
        raise ConfigError(f"{name} must be finite, got {raw!r}")
    return value


def _read_boundary_punctuation() -> frozenset[str]:
    raw = os.getenv("SPEECHLINE_BOUNDARY_PUNCTUATION")
    if raw is None or raw.strip() == "":
        return DEFAULT_BOUNDARY_PUNCTUATION
    return frozenset(char for char in raw if not char.isspace())


def _read_provider() -> str:
    provider = os.getenv("SPEECHLINE_PROVIDER", "elevenlabs").strip().lower()
    if provider not in SUPPORTED_PROVIDERS:
        raise ConfigError(
            f"Invalid provider '{provider}'. "
            f"Must be one of: {', '.join(SUPPORTED_PROVIDERS)}"
        )
    return provider


def _build_settings() -> AppConfig:
    return AppConfig(
        segmentation=SegmentationSettings(
            boundary_punctuation=_read_boundary_punctuation(),
        ),
        silence=SilenceSettings(
            threshold_seconds=_read_float(
                "SPEECHLINE_SILENCE_THRESHOLD",
                DEFAULT_SILENCE_THRESHOLD_SECONDS,
            ),
        ),
        timeline=TimelineSettings(
            folder=Path(os.getenv("SPEECHLINE_TIMELINE_DIR", "./transcripts")),
        ),
        default_provider=_read_provider(),
    )


def reload_settings() -> AppConfig:
    """Rebuilds settings from the current environment and caches them."""
    global _SETTINGS
    _SETTINGS = _build_settings()
    return _SETTINGS


def get_settings() -> AppConfig:
    """Returns cached settings, building them on first access."""
    if _SETTINGS is None:
        return reload_settings()
    return _SETTINGS
