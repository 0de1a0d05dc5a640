from __future__ import annotations

from typing import List

import pytest


@pytest.fixture
def events() -> List[tuple]:
    """Shared call log so tests can assert ordering across fakes."""
    return []
