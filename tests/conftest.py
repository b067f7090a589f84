from __future__ import annotations

import os

import pytest

from nu_editor.runtime import telemetry


@pytest.fixture(autouse=True, scope="session")
def quiet_telemetry():
    os.environ.setdefault("NU_EDITOR_DISABLE_CONSOLE", "1")
    os.environ.setdefault("NU_EDITOR_LOG_LEVEL", "WARNING")
    telemetry.configure()
    yield
