"""Browser manager for Playwright automation.

Owns the single browser session shared by every blog admin action.
"""

from __future__ import annotations

import asyncio
import atexit
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from playwright.async_api import Page, async_playwright

from blog_admin_e2e.config import get_headless_mode

if TYPE_CHECKING:
    from playwright.async_api import Browser, BrowserContext, Playwright

logger = logging.getLogger(__name__)


class BrowserManager:
    """Keeps one Playwright browser, context and page alive as a singleton.

    Actions from one test scenario run against the same page, so login
    cookies and dashboard state carry over from step to step.

    Class Attributes:
        _instance: Singleton instance
        _playwright: Running Playwright driver
        _browser: Chromium browser
        _context: Browser context holding the session cookies
        _page: Shared page
        _lock: Serializes page creation and teardown
        default_timeout_ms: Timeout applied to every new page
        storage_state: Playwright storage state file (cookies of a logged-in user)
    """

    _instance: ClassVar[BrowserManager | None] = None
    _playwright: Playwright | None = None
    _browser: Browser | None = None
    _context: BrowserContext | None = None
    _page: Page | None = None
    _lock: asyncio.Lock | None = None
    default_timeout_ms: int | None = None
    storage_state: Path | None = None

    @classmethod
    def get_instance(cls) -> BrowserManager:
        """Get singleton instance of BrowserManager.

        Returns:
            BrowserManager singleton instance
        """
        if cls._instance is None:
            cls._instance = cls()
            cls._lock = asyncio.Lock()
            atexit.register(cls._sync_cleanup)
        return cls._instance

    @classmethod
    def configure(cls, timeout_ms: int | None = None, storage_state: Path | None = None) -> None:
        """Set options used the next time a context or page is created.

        Args:
            timeout_ms: Default timeout for page operations
            storage_state: Storage state file to start the context from
        """
        cls.default_timeout_ms = timeout_ms
        cls.storage_state = storage_state

    @classmethod
    def _sync_cleanup(cls) -> None:
        """Close the browser from the atexit hook."""
        if cls._browser is None:
            return
        try:
            loop = asyncio.get_event_loop()
            if loop.is_running():
                loop.create_task(cls._async_cleanup())
            else:
                loop.run_until_complete(cls._async_cleanup())
        except RuntimeError:
            asyncio.run(cls._async_cleanup())

    @classmethod
    async def _async_cleanup(cls) -> None:
        """Release the browser, driver and cached page."""
        if cls._browser is not None:
            try:
                await cls._browser.close()
            except Exception as e:  # noqa: BLE001
                logger.debug(f"Browser close failed: {type(e).__name__}: {e}")
            cls._browser = None
        if cls._playwright is not None:
            try:
                await cls._playwright.stop()
            except Exception as e:  # noqa: BLE001
                logger.debug(f"Playwright stop failed: {type(e).__name__}: {e}")
            cls._playwright = None
        cls._context = None
        cls._page = None

    async def _ensure_page(self) -> Page:
        cls = self.__class__
        if cls._playwright is None:
            cls._playwright = await async_playwright().start()
        if cls._browser is None:
            headless = get_headless_mode()
            logger.info(f"Launching chromium (headless={headless})")
            cls._browser = await cls._playwright.chromium.launch(headless=headless)
        if cls._context is None:
            storage_state = str(cls.storage_state) if cls.storage_state is not None else None
            cls._context = await cls._browser.new_context(storage_state=storage_state)
        if cls._page is None or cls._page.is_closed():
            cls._page = await cls._context.new_page()
            if cls.default_timeout_ms is not None:
                cls._page.set_default_timeout(cls.default_timeout_ms)
        return cls._page

    async def get_page(self) -> Page:
        """Get the shared page, launching the browser on first use.

        Returns:
            Playwright Page instance
        """
        if self._lock is None:
            self.__class__._lock = asyncio.Lock()
        lock = self._lock
        assert lock is not None

        async with lock:
            if self._page is not None and not self._page.is_closed():
                return self._page
            return await self._ensure_page()

    async def close(self) -> None:
        """Close browser and cleanup resources."""
        if self._lock is None:
            self.__class__._lock = asyncio.Lock()
        lock = self._lock
        assert lock is not None

        async with lock:
            await self._async_cleanup()
