from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from yt_transcript.config import Config, get_config
from yt_transcript.models.transcript import DebugConfig
from yt_transcript.registry.node_registry import get_registry


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Clear the config and registry caches before and after each test."""
    get_config.cache_clear()
    get_registry.cache_clear()
    yield
    get_config.cache_clear()
    get_registry.cache_clear()


@pytest.fixture
def isolated_config() -> Config:
    """Config built from defaults only, ignoring .env files."""
    return Config(_env_file=None)


@pytest.fixture
def debug_config() -> DebugConfig:
    """Production timing policy with no settle delay."""
    return DebugConfig(consent_settle_ms=0)


@pytest.fixture
def make_page():
    """
    Factory for a mock Playwright page.

    ``present`` maps selectors to the element returned by ``wait_for_selector``;
    waiting for any other selector raises a Playwright timeout.
    """

    def _factory(present: dict, raw_segments: list | None = None) -> MagicMock:
        async def wait_for_selector(selector, **kwargs):
            if selector in present:
                return present[selector]
            raise PlaywrightTimeoutError(f"Timeout {kwargs.get('timeout')}ms exceeded waiting for {selector}")

        page = MagicMock()
        page.goto = AsyncMock()
        page.close = AsyncMock()
        page.wait_for_selector = AsyncMock(side_effect=wait_for_selector)
        page.evaluate = AsyncMock(return_value=raw_segments or [])
        return page

    return _factory


@pytest.fixture
def make_session():
    """Factory for a mock browser session serving ``page``."""

    def _factory(page: MagicMock) -> MagicMock:
        session = MagicMock()
        session.context.new_page = AsyncMock(return_value=page)
        session.close = AsyncMock()
        return session

    return _factory


@pytest.fixture
def element():
    """A mock element handle supporting click and evaluate."""
    handle = MagicMock()
    handle.click = AsyncMock()
    handle.evaluate = AsyncMock()
    return handle
