from __future__ import annotations

import pytest

from cellfocus.api.focus import FocusTransition
from cellfocus.runtime.config import FocusConfig


class RecordingRenderer:
    def __init__(self) -> None:
        self.transitions: list[FocusTransition] = []

    def apply_transition(self, transition: FocusTransition) -> None:
        self.transitions.append(transition)


@pytest.fixture
def focus_config() -> FocusConfig:
    return FocusConfig()


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    return RecordingRenderer()
