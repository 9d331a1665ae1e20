"""
Shared pytest fixtures.

Generated ids come from a process-wide counter; resetting it before every
test keeps expected markup deterministic.
"""
from __future__ import annotations

import pytest

from bootstrap_widgets import html as h


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_generated_ids():
    h.reset_id_counter()
    yield
    h.reset_id_counter()
