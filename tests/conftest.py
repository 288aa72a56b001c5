import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Ensure local source package (src/arcgis_rest) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def portal() -> str:
    return "https://www.arcgis.com/sharing/rest"


@pytest.fixture
def base_url(portal: str) -> str:
    return f"{portal}/content/items/43a8e51789044d9480a20d7d9a5b6b2c/data"


@pytest.fixture
def token_url(portal: str) -> str:
    return f"{portal}/generateToken"


@pytest.fixture
def tomorrow() -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=1)


@pytest.fixture
def yesterday() -> datetime:
    return datetime.now(timezone.utc) - timedelta(days=1)

