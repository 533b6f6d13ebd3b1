import os
import sys

import pytest

# Modules live at the repository root; make them importable from tests.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from symbols import SymbolSession  # noqa: E402


@pytest.fixture
def session():
    return SymbolSession()
