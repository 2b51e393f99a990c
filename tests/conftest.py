"""
Pytest configuration and fixtures for i18n-parity tests.
"""

import json
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Generator

import pytest

from i18n_parity.main import setup_logging

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def quiet_logging():
    """Route structlog through stdlib logging at WARNING for every test."""
    setup_logging(debug=False)
    yield


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fixtures_locale_dir() -> Path:
    """Directory with fr (reference), en (complete) and es (incomplete)."""
    return FIXTURES_DIR / "locales"


@pytest.fixture
def broken_locale_dir() -> Path:
    """Directory with a valid fr reference and unparseable candidates."""
    return FIXTURES_DIR / "broken"


@pytest.fixture
def write_locale(temp_dir: Path) -> Callable[..., Path]:
    """Write a locale file into ``temp_dir``."""

    def _write(name: str, content: Any, raw: bool = False) -> Path:
        path = temp_dir / name
        text = content if raw else json.dumps(content, ensure_ascii=False)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def reference_tree() -> Dict[str, Any]:
    """Small nested reference tree."""
    return {
        "app": {"title": "Logbook", "welcome": "Welcome aboard"},
        "navigation": {"port": "Port", "starboard": "Starboard"},
        "quit": "Quit",
    }
