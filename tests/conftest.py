from __future__ import annotations

import pytest

from shelf_atlas import Packer


@pytest.fixture
def packer() -> Packer:
    return Packer(64, 64)
