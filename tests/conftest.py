import sys
from pathlib import Path

import pytest

# Make the src/ layout importable when the package is not installed.
src_dir = Path(__file__).resolve().parents[1] / "src"
if src_dir.exists() and str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep the user's settings file and environment out of every test."""
    monkeypatch.setenv("XORSCOPE_SETTINGS", str(tmp_path / "settings.json"))
    monkeypatch.delenv("XORSCOPE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("XORSCOPE_WORKERS", raising=False)
    return tmp_path / "settings.json"
