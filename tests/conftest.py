from pathlib import Path

import pytest


FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def sample_roster_path() -> Path:
    return FIXTURES / "sample_roster.csv"


@pytest.fixture
def sample_roster_text(sample_roster_path: Path) -> str:
    return sample_roster_path.read_text(encoding="utf-8")
