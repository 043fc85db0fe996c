import sys
from pathlib import Path

# Ensure the src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


import pytest

FIXTURES = PROJECT_ROOT / "tests" / "fixtures"


@pytest.fixture
def summary_export_path() -> Path:
    """Return path to a four packet summary export."""
    return FIXTURES / "summary_export.txt"


@pytest.fixture
def verbose_path() -> Path:
    """Return path to a five frame verbose export."""
    return FIXTURES / "verbose.txt"


@pytest.fixture
def summary_export_lines(summary_export_path: Path) -> list[str]:
    return summary_export_path.read_text(encoding="utf-8").splitlines()


@pytest.fixture
def verbose_lines(verbose_path: Path) -> list[str]:
    return verbose_path.read_text(encoding="utf-8").splitlines()
