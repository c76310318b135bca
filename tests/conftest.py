import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def contacts_text():
    """Raw text of mock_files/contacts_1.vcf (two cards, CRLF line endings)."""
    return (PROJECT_ROOT / "mock_files" / "contacts_1.vcf").read_text(encoding="utf-8")
