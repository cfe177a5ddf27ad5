import logging
import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture(autouse=True)
def _clear_mazegen_env(monkeypatch):
    # Settings read MAZEGEN_* variables; keep the developer's shell out of the tests.
    for name in ("MAZEGEN_WIDTH", "MAZEGEN_HEIGHT", "MAZEGEN_SEED", "MAZEGEN_START", "MAZEGEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    # The CLI reconfigures the root logger; put pytest's handlers back afterwards.
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
