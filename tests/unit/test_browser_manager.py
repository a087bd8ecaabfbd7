"""Unit tests for browser manager."""

from __future__ import annotations

import asyncio
from collections.abc import Generator
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from blog_admin_e2e.browser.manager import BrowserManager


@pytest.fixture(autouse=True)
def reset_singleton() -> Generator[None]:
    """Reset singleton state around each test."""
    BrowserManager._instance = None
    BrowserManager._playwright = None
    BrowserManager._browser = None
    BrowserManager._context = None
    BrowserManager._page = None
    BrowserManager._lock = None
    BrowserManager.configure()
    yield
    BrowserManager._instance = None
    BrowserManager._playwright = None
    BrowserManager._browser = None
    BrowserManager._context = None
    BrowserManager._page = None
    BrowserManager._lock = None
    BrowserManager.configure()


def _mock_playwright_stack() -> tuple[MagicMock, AsyncMock, AsyncMock, MagicMock]:
    page = MagicMock()
    page.is_closed = MagicMock(return_value=False)
    context = AsyncMock()
    context.new_page = AsyncMock(return_value=page)
    browser = AsyncMock()
    browser.new_context = AsyncMock(return_value=context)
    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)
    playwright.stop = AsyncMock()
    starter = MagicMock()
    starter.start = AsyncMock(return_value=playwright)
    return starter, browser, context, page


class TestBrowserManager:
    """Tests for BrowserManager class."""

    def test_get_instance_creates_singleton(self) -> None:
        instance1 = BrowserManager.get_instance()
        instance2 = BrowserManager.get_instance()
        assert instance1 is instance2

    @pytest.mark.asyncio
    async def test_get_page_launches_browser(self) -> None:
        """First get_page starts Playwright, launches chromium and opens a page."""
        starter, browser, context, page = _mock_playwright_stack()
        BrowserManager.configure(timeout_ms=5000, storage_state=Path("state.json"))
        manager = BrowserManager.get_instance()

        with (
            patch("blog_admin_e2e.browser.manager.async_playwright", return_value=starter),
            patch("blog_admin_e2e.browser.manager.get_headless_mode", return_value=True),
        ):
            result = await manager.get_page()

        assert result is page
        browser.new_context.assert_awaited_once_with(storage_state="state.json")
        page.set_default_timeout.assert_called_once_with(5000)

    @pytest.mark.asyncio
    async def test_get_page_without_storage_state(self) -> None:
        starter, browser, _context, page = _mock_playwright_stack()
        manager = BrowserManager.get_instance()

        with (
            patch("blog_admin_e2e.browser.manager.async_playwright", return_value=starter),
            patch("blog_admin_e2e.browser.manager.get_headless_mode", return_value=False),
        ):
            await manager.get_page()

        browser.new_context.assert_awaited_once_with(storage_state=None)
        page.set_default_timeout.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_page_reuses_existing_page(self) -> None:
        manager = BrowserManager.get_instance()

        mock_page = MagicMock()
        mock_page.is_closed = MagicMock(return_value=False)
        BrowserManager._page = mock_page
        BrowserManager._lock = asyncio.Lock()

        page = await manager.get_page()

        assert page is mock_page

    @pytest.mark.asyncio
    async def test_get_page_replaces_closed_page(self) -> None:
        manager = BrowserManager.get_instance()
        closed_page = MagicMock()
        closed_page.is_closed = MagicMock(return_value=True)
        new_page = MagicMock()
        context = AsyncMock()
        context.new_page = AsyncMock(return_value=new_page)
        BrowserManager._playwright = MagicMock()
        BrowserManager._browser = AsyncMock()
        BrowserManager._context = context
        BrowserManager._page = closed_page

        page = await manager.get_page()

        assert page is new_page

    @pytest.mark.asyncio
    async def test_close_closes_browser(self) -> None:
        manager = BrowserManager.get_instance()

        mock_browser = AsyncMock()
        mock_playwright = AsyncMock()
        BrowserManager._browser = mock_browser
        BrowserManager._playwright = mock_playwright
        BrowserManager._lock = asyncio.Lock()

        await manager.close()

        mock_browser.close.assert_called_once()
        mock_playwright.stop.assert_called_once()
        assert BrowserManager._browser is None
        assert BrowserManager._page is None

    @pytest.mark.asyncio
    async def test_close_survives_browser_errors(self) -> None:
        manager = BrowserManager.get_instance()

        mock_browser = AsyncMock()
        mock_browser.close.side_effect = RuntimeError("already closed")
        mock_playwright = AsyncMock()
        BrowserManager._browser = mock_browser
        BrowserManager._playwright = mock_playwright

        await manager.close()

        mock_playwright.stop.assert_called_once()
        assert BrowserManager._browser is None

    @pytest.mark.asyncio
    async def test_close_handles_no_browser(self) -> None:
        manager = BrowserManager.get_instance()

        # Should not raise
        await manager.close()
