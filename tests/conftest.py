from __future__ import annotations

import logging
import os

import pytest

from selprops.adapters.memory import InMemoryScene
from selprops.config import DEFAULT_TOLERANCES, ToleranceConfig


@pytest.fixture
def scene() -> InMemoryScene:
    return InMemoryScene()


@pytest.fixture
def tolerances() -> ToleranceConfig:
    return DEFAULT_TOLERANCES


@pytest.fixture(autouse=True)
def _clean_selprops_env(monkeypatch: pytest.MonkeyPatch) -> None:  # pyright: ignore[reportUnusedFunction]
    for name in list(os.environ):
        if name.startswith("SELPROPS_"):
            monkeypatch.delenv(name)


@pytest.fixture
def selprops_caplog(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="selprops")
    return caplog
