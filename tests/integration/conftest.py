"""Fixtures for tests that run against a real Chromium page.

Pages are built from static HTML with page.set_content, so no application
server is needed. Tests are skipped when Chromium is not installed
(run `playwright install chromium` to enable them).
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, async_playwright

from blog_admin_e2e.config import Settings, get_headless_mode
from blog_admin_e2e.users.blog_post_admin import BlogPostAdmin


@pytest_asyncio.fixture
async def blank_page() -> AsyncGenerator[Page]:
    """A fresh Chromium page with no content.

    Yields:
        Playwright Page in its own browser context
    """
    playwright = await async_playwright().start()
    try:
        browser = await playwright.chromium.launch(headless=get_headless_mode())
    except PlaywrightError as e:
        await playwright.stop()
        pytest.skip(f"Chromium is not available: {e.message}")

    context = await browser.new_context()
    page = await context.new_page()
    try:
        yield page
    finally:
        await context.close()
        await browser.close()
        await playwright.stop()


@pytest.fixture
def page_admin(blank_page: Page, tmp_path: Path) -> BlogPostAdmin:
    """BlogPostAdmin acting on the blank page with short timeouts."""
    settings = Settings(
        base_url="http://blog.test",
        thumbnail_image=tmp_path / "thumbnail.jpg",
        timeout_ms=2000,
        transition_delay_ms=0,
    )
    return BlogPostAdmin(blank_page, settings)
