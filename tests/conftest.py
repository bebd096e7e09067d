from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Resets the logging infrastructure between tests.
3. Provides a small directory tree fixture shared by traversal tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from filekit.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging():
    """Detach any handlers a test installed through configure_logging."""
    yield
    shutdown_logging()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small nested structure.

    Structure:
    /root
      a/
        b.txt
        c/
          d.txt
      e.txt
    """
    root = tmp_path / "root"
    (root / "a" / "c").mkdir(parents=True)
    (root / "a" / "b.txt").write_text("b", encoding="utf-8")
    (root / "a" / "c" / "d.txt").write_text("d", encoding="utf-8")
    (root / "e.txt").write_text("e", encoding="utf-8")
    return root
