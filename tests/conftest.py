from __future__ import annotations

import pytest

from tests.helpers import get_failures
from unitharness.config import reset_settings
from unitharness.failure_sink import get_sink


@pytest.fixture(autouse=True)
def _soft_checks_must_pass(monkeypatch):
    """Fail the pytest test if it recorded any soft-check failure."""
    for var in ("UNITHARNESS_LOG_URL", "UNITHARNESS_COLOR", "UNITHARNESS_REPORT_PATH"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    get_sink().reset()

    before = len(get_failures())
    yield
    new = get_failures()[before:]

    reset_settings()
    get_sink().reset()
    assert not new, "soft checks failed:\n" + "\n".join(f"- {f}" for f in new)
