import sys
from pathlib import Path

import pytest

# Ensure the project root is available on the Python path when running the tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rules.facts import Facts  # noqa: E402


@pytest.fixture
def facts() -> Facts:
    return Facts({"rain": True, "temperature": 12})
