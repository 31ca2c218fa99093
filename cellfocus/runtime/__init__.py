"""Runtime configuration, logging and settle debouncing."""

from cellfocus.runtime.config import (
    FocusConfig,
    get_focus_config,
    initialize_focus_config,
    load_focus_config,
    set_focus_config,
)
from cellfocus.runtime.debounce import SettleDebouncer
from cellfocus.runtime.logging import configure_logging, get_logger, setup_logging

__all__ = [
    "FocusConfig",
    "SettleDebouncer",
    "configure_logging",
    "get_focus_config",
    "get_logger",
    "initialize_focus_config",
    "load_focus_config",
    "set_focus_config",
    "setup_logging",
]
