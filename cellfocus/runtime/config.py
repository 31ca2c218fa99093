"""Centralized focus configuration loaded from environment."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Mapping

from cellfocus.api.focus import DEFAULT_FOCUS_THRESHOLD


@dataclass(frozen=True, slots=True)
class SelectionConfig:
    threshold: float = DEFAULT_FOCUS_THRESHOLD


@dataclass(frozen=True, slots=True)
class ViewportConfig:
    row_height: float = 260.0
    bottom_inset: float = 100.0


@dataclass(frozen=True, slots=True)
class SettleConfig:
    delay_ms: float = 100.0
    epsilon: float = 0.5

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0


@dataclass(frozen=True, slots=True)
class DiagnosticsConfig:
    enabled: bool = True
    capacity: int = 1_000


@dataclass(frozen=True, slots=True)
class FocusConfig:
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    viewport: ViewportConfig = field(default_factory=ViewportConfig)
    settle: SettleConfig = field(default_factory=SettleConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    log_level: str = "INFO"


_FOCUS_CONFIG: ContextVar[FocusConfig | None] = ContextVar("cellfocus_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _threshold(raw: float) -> float:
    if raw <= 0.0:
        return DEFAULT_FOCUS_THRESHOLD
    return min(100.0, raw)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with the package-prefixed override taking precedence."""
    value = _raw("CELLFOCUS_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_focus_config(*, env: Mapping[str, str] | None = None) -> FocusConfig:
    return FocusConfig(
        selection=SelectionConfig(
            threshold=_threshold(_float("CELLFOCUS_THRESHOLD", DEFAULT_FOCUS_THRESHOLD, env=env)),
        ),
        viewport=ViewportConfig(
            row_height=_float("CELLFOCUS_ROW_HEIGHT", 260.0, minimum=1.0, env=env),
            bottom_inset=_float("CELLFOCUS_BOTTOM_INSET", 100.0, minimum=0.0, env=env),
        ),
        settle=SettleConfig(
            delay_ms=_float("CELLFOCUS_SETTLE_DELAY_MS", 100.0, minimum=0.0, env=env),
            epsilon=_float("CELLFOCUS_SETTLE_EPSILON", 0.5, minimum=0.0, env=env),
        ),
        diagnostics=DiagnosticsConfig(
            enabled=_flag("CELLFOCUS_DIAGNOSTICS_ENABLED", True, env=env),
            capacity=_int("CELLFOCUS_DIAGNOSTICS_CAPACITY", 1_000, minimum=1, env=env),
        ),
        log_level=resolve_log_level_name(env=env),
    )


def initialize_focus_config(*, env: Mapping[str, str] | None = None) -> FocusConfig:
    config = load_focus_config(env=env)
    _FOCUS_CONFIG.set(config)
    return config


def set_focus_config(config: FocusConfig) -> FocusConfig:
    _FOCUS_CONFIG.set(config)
    return config


def get_focus_config() -> FocusConfig:
    config = _FOCUS_CONFIG.get()
    if config is not None:
        return config
    return initialize_focus_config()


__all__ = [
    "DiagnosticsConfig",
    "FocusConfig",
    "SelectionConfig",
    "SettleConfig",
    "ViewportConfig",
    "get_focus_config",
    "initialize_focus_config",
    "load_focus_config",
    "resolve_log_level_name",
    "set_focus_config",
]
