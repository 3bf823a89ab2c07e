from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest
import pytest_asyncio

from aretry import AsyncInterceptorClient, ClientDefaults
from tests.helpers import SequenceHandler

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def handler() -> SequenceHandler:
    """Create an empty transport handler. Tests push outcomes on it."""
    return SequenceHandler()


@pytest_asyncio.fixture
async def client(handler: SequenceHandler) -> AsyncGenerator[AsyncInterceptorClient, None]:
    """Create a client sending every request to ``handler``."""
    async with AsyncInterceptorClient(
        defaults=ClientDefaults(transport=handler.transport())
    ) as client:
        yield client
