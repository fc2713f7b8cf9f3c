"""Chromium session management through Playwright."""

from dataclasses import dataclass
from typing import Any

from playwright.async_api import Browser, BrowserContext, Playwright, async_playwright

from yt_transcript.models.errors import BrowserLaunchError
from yt_transcript.models.transcript import DebugConfig
from yt_transcript.utils.logging import get_logger

logger = get_logger(__name__)

# Hide the usual headless tells before any page script runs
STEALTH_INIT_SCRIPT = """
Object.defineProperty(navigator, 'webdriver', { get: () => undefined });
window.chrome = { runtime: {} };
Object.defineProperty(navigator, 'plugins', { get: () => [1, 2, 3, 4, 5] });
Object.defineProperty(navigator, 'languages', { get: () => ['en-US', 'en'] });
"""

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


def build_launch_options(config: DebugConfig) -> dict[str, Any]:
    """Keyword arguments for ``chromium.launch`` derived from the debug configuration."""
    args = [
        "--ignore-certificate-errors",
        "--no-sandbox",
        "--disable-setuid-sandbox",
        "--disable-accelerated-2d-canvas",
        "--disable-gpu",
        "--disable-blink-features=AutomationControlled",
        f"--window-size={config.viewport_width},{config.viewport_height}",
    ]
    if config.open_devtools:
        args.append("--auto-open-devtools-for-tabs")

    return {
        "headless": config.headless,
        "slow_mo": config.slow_motion_delay_ms,
        "args": args,
        "ignore_default_args": ["--enable-automation"],
    }


def build_context_options(config: DebugConfig) -> dict[str, Any]:
    return {
        "viewport": {"width": config.viewport_width, "height": config.viewport_height},
        "user_agent": USER_AGENT,
    }


@dataclass
class BrowserSession:
    """A running Playwright driver, browser and browser context owned by one work item."""

    playwright: Playwright
    browser: Browser
    context: BrowserContext

    async def close(self) -> None:
        """Close the context, then the browser, then the driver; each step runs even if an earlier one fails."""
        try:
            await self.context.close()
        finally:
            try:
                await self.browser.close()
            finally:
                await self.playwright.stop()


class BrowserLauncher:
    """Starts isolated browser sessions configured by a ``DebugConfig``."""

    async def launch(self, config: DebugConfig) -> BrowserSession:
        """
        Start a new browser session.

        Raises:
            BrowserLaunchError: Playwright or Chromium could not be started.
        """
        playwright = None
        browser = None
        try:
            playwright = await async_playwright().start()
            browser = await playwright.chromium.launch(**build_launch_options(config))
            context = await browser.new_context(**build_context_options(config))
            await context.add_init_script(STEALTH_INIT_SCRIPT)
        except Exception as e:
            logger.error("browser_launcher.launch_failed", error=str(e))
            if browser is not None:
                await browser.close()
            if playwright is not None:
                await playwright.stop()
            raise BrowserLaunchError(f"Failed to launch the browser: {e}") from e

        logger.debug("browser_launcher.launched", headless=config.headless, slow_mo=config.slow_motion_delay_ms)
        return BrowserSession(playwright=playwright, browser=browser, context=context)

    async def preflight(self, config: DebugConfig) -> None:
        """Launch and immediately close a session to prove the browser works."""
        logger.info("browser_launcher.preflight", headless=config.headless)
        session = await self.launch(config)
        await session.close()
