from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from yt_transcript.extraction.browser import (
    STEALTH_INIT_SCRIPT,
    BrowserLauncher,
    BrowserSession,
    build_context_options,
    build_launch_options,
)
from yt_transcript.models.errors import BrowserLaunchError, ErrorCode
from yt_transcript.models.transcript import DebugConfig


@pytest.fixture
def mock_playwright():
    """A started Playwright driver whose chromium launches a mock browser."""
    context = MagicMock()
    context.add_init_script = AsyncMock()
    context.close = AsyncMock()

    browser = MagicMock()
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)
    playwright.stop = AsyncMock()

    starter = MagicMock()
    starter.start = AsyncMock(return_value=playwright)

    with patch("yt_transcript.extraction.browser.async_playwright", return_value=starter):
        yield playwright, browser, context


def test_launch_options_production():
    options = build_launch_options(DebugConfig())

    assert options["headless"] is True
    assert options["slow_mo"] == 0
    assert options["ignore_default_args"] == ["--enable-automation"]
    assert "--no-sandbox" in options["args"]
    assert "--disable-blink-features=AutomationControlled" in options["args"]
    assert "--window-size=1920,1080" in options["args"]
    assert "--auto-open-devtools-for-tabs" not in options["args"]


def test_launch_options_debug():
    config = DebugConfig(headless=False, open_devtools=True, slow_motion_delay_ms=100)
    options = build_launch_options(config)

    assert options["headless"] is False
    assert options["slow_mo"] == 100
    assert "--auto-open-devtools-for-tabs" in options["args"]


def test_context_options_fix_viewport():
    options = build_context_options(DebugConfig())
    assert options["viewport"] == {"width": 1920, "height": 1080}


@pytest.mark.asyncio
async def test_launch_success(mock_playwright):
    playwright, browser, context = mock_playwright
    config = DebugConfig()

    session = await BrowserLauncher().launch(config)

    assert isinstance(session, BrowserSession)
    assert session.context is context
    playwright.chromium.launch.assert_awaited_once_with(**build_launch_options(config))
    browser.new_context.assert_awaited_once_with(**build_context_options(config))
    context.add_init_script.assert_awaited_once_with(STEALTH_INIT_SCRIPT)


@pytest.mark.asyncio
async def test_launch_failure_releases_driver(mock_playwright):
    """Test that a failed browser launch stops the driver and raises BrowserLaunchError."""
    playwright, _, _ = mock_playwright
    playwright.chromium.launch.side_effect = Exception("Executable doesn't exist")

    with pytest.raises(BrowserLaunchError) as excinfo:
        await BrowserLauncher().launch(DebugConfig())

    assert excinfo.value.code == ErrorCode.BROWSER_LAUNCH_FAILED
    assert "Executable doesn't exist" in excinfo.value.message
    playwright.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_context_failure_closes_browser(mock_playwright):
    playwright, browser, _ = mock_playwright
    browser.new_context.side_effect = Exception("context crashed")

    with pytest.raises(BrowserLaunchError):
        await BrowserLauncher().launch(DebugConfig())

    browser.close.assert_awaited_once()
    playwright.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_preflight_launches_and_closes(mock_playwright):
    playwright, browser, context = mock_playwright

    await BrowserLauncher().preflight(DebugConfig())

    playwright.chromium.launch.assert_awaited_once()
    context.close.assert_awaited_once()
    browser.close.assert_awaited_once()
    playwright.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_session_close_stops_driver_when_browser_close_fails():
    session = BrowserSession(playwright=MagicMock(), browser=MagicMock(), context=MagicMock())
    session.context.close = AsyncMock()
    session.browser.close = AsyncMock(side_effect=Exception("already closed"))
    session.playwright.stop = AsyncMock()

    with pytest.raises(Exception, match="already closed"):
        await session.close()

    session.playwright.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_session_close_closes_browser_when_context_close_fails():
    session = BrowserSession(playwright=MagicMock(), browser=MagicMock(), context=MagicMock())
    session.context.close = AsyncMock(side_effect=Exception("Target closed"))
    session.browser.close = AsyncMock()
    session.playwright.stop = AsyncMock()

    with pytest.raises(Exception, match="Target closed"):
        await session.close()

    session.browser.close.assert_awaited_once()
    session.playwright.stop.assert_awaited_once()
