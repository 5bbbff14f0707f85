from pathlib import Path
from typing import Any, Dict, List

import pytest

from satchel import Satchel


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def base_dir(fixtures_dir: Path) -> Path:
    return fixtures_dir / "base"


@pytest.fixture
def local_dir(fixtures_dir: Path) -> Path:
    return fixtures_dir / "local"


@pytest.fixture
def store() -> Satchel:
    satchel = Satchel()
    satchel.add_collection("items")
    return satchel


@pytest.fixture
def numbered() -> List[Dict[str, Any]]:
    return [{"id": i, "sort": 11 - i} for i in range(1, 6)]


@pytest.fixture
def worded() -> List[Dict[str, Any]]:
    return [{"id": word} for word in ("act", "bad", "art", "biscuit", "sushi", "farm")]
