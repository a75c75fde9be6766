from __future__ import annotations

from collections.abc import Iterator

import pytest

from spend_report.config import load_settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the developer's environment out of the settings every test sees."""
    monkeypatch.delenv("SPEND_REPORT_CSV", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
