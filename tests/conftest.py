"""Test configuration and fixtures.

Provides:
- Python path setup for imports
- Settings isolation between tests
- Common payload fixtures
"""

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from resultkit.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings and RESULTKIT_* variables around each test."""
    for name in ("RESULTKIT_LOG_LEVEL", "RESULTKIT_RECORD_EXTRA"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(params=[0, "text", None, [1, 2], {"key": "value"}, ValueError("boom")])
def payload(request: pytest.FixtureRequest) -> Any:
    """A spread of payload types, including None and an exception instance."""
    return request.param
