"""Public logging configuration contract."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

LogFormat = Literal["text", "json"]


@dataclass(frozen=True, slots=True)
class FocusLoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: LogFormat = "text"
    file_path: str | None = None
    file_format: LogFormat = "json"
