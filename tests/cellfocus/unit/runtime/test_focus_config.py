from __future__ import annotations

from cellfocus.runtime.config import (
    FocusConfig,
    get_focus_config,
    load_focus_config,
    resolve_log_level_name,
    set_focus_config,
)


def test_load_focus_config_defaults() -> None:
    cfg = load_focus_config(env={})
    assert cfg.selection.threshold == 90.0
    assert cfg.viewport.row_height == 260.0
    assert cfg.viewport.bottom_inset == 100.0
    assert cfg.settle.delay_ms == 100.0
    assert cfg.settle.delay_seconds == 0.1
    assert cfg.settle.epsilon == 0.5
    assert cfg.diagnostics.enabled is True
    assert cfg.diagnostics.capacity == 1_000
    assert cfg.log_level == "INFO"


def test_load_focus_config_reads_overrides() -> None:
    cfg = load_focus_config(
        env={
            "CELLFOCUS_THRESHOLD": "75",
            "CELLFOCUS_ROW_HEIGHT": "120",
            "CELLFOCUS_BOTTOM_INSET": "0",
            "CELLFOCUS_SETTLE_DELAY_MS": "250",
            "CELLFOCUS_SETTLE_EPSILON": "1.5",
            "CELLFOCUS_DIAGNOSTICS_ENABLED": "off",
            "CELLFOCUS_DIAGNOSTICS_CAPACITY": "64",
            "CELLFOCUS_LOG_LEVEL": "debug",
        }
    )
    assert cfg.selection.threshold == 75.0
    assert cfg.viewport.row_height == 120.0
    assert cfg.viewport.bottom_inset == 0.0
    assert cfg.settle.delay_seconds == 0.25
    assert cfg.settle.epsilon == 1.5
    assert cfg.diagnostics.enabled is False
    assert cfg.diagnostics.capacity == 64
    assert cfg.log_level == "DEBUG"


def test_load_focus_config_falls_back_and_clamps() -> None:
    cfg = load_focus_config(
        env={
            "CELLFOCUS_THRESHOLD": "not-a-number",
            "CELLFOCUS_ROW_HEIGHT": "0",
            "CELLFOCUS_SETTLE_DELAY_MS": "-10",
            "CELLFOCUS_DIAGNOSTICS_ENABLED": "maybe",
            "CELLFOCUS_DIAGNOSTICS_CAPACITY": "0",
        }
    )
    assert cfg.selection.threshold == 90.0
    assert cfg.viewport.row_height == 1.0
    assert cfg.settle.delay_ms == 0.0
    assert cfg.diagnostics.enabled is True
    assert cfg.diagnostics.capacity == 1

    assert load_focus_config(env={"CELLFOCUS_THRESHOLD": "150"}).selection.threshold == 100.0
    assert load_focus_config(env={"CELLFOCUS_THRESHOLD": "-1"}).selection.threshold == 90.0


def test_resolve_log_level_prefers_package_prefix() -> None:
    env = {"LOG_LEVEL": "WARNING", "CELLFOCUS_LOG_LEVEL": "ERROR"}
    assert resolve_log_level_name(env=env) == "ERROR"
    assert resolve_log_level_name(env={"LOG_LEVEL": "warning"}) == "WARNING"
    assert resolve_log_level_name(env={}) == "INFO"


def test_load_focus_config_reads_process_env(monkeypatch) -> None:
    monkeypatch.setenv("CELLFOCUS_THRESHOLD", "80")
    assert load_focus_config().selection.threshold == 80.0


def test_set_focus_config_is_returned_by_getter() -> None:
    cfg = FocusConfig(log_level="DEBUG")
    assert set_focus_config(cfg) is cfg
    assert get_focus_config() is cfg
