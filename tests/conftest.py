"""Pytest configuration and shared fixtures for blog-admin-e2e tests.

Unit tests drive BlogPostAdmin against a mocked Playwright page whose
evaluate() answers with result envelopes.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from blog_admin_e2e.config import Settings
from blog_admin_e2e.users.blog_post_admin import BlogPostAdmin

# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def thumbnail_image(tmp_path: Path) -> Path:
    """Create a small JPEG-like file to upload as a thumbnail."""
    image = tmp_path / "thumbnail.jpg"
    image.write_bytes(b"\xff\xd8\xff" + b"x" * 100)
    return image


@pytest.fixture
def settings(thumbnail_image: Path) -> Settings:
    """Settings pointing at a fake host with transition delays disabled."""
    return Settings(
        base_url="http://blog.test",
        thumbnail_image=thumbnail_image,
        timeout_ms=1000,
        transition_delay_ms=0,
    )


# ============================================================================
# Browser Fixtures
# ============================================================================


@pytest.fixture
def mock_locator() -> MagicMock:
    """A locator whose chained lookups (nth, first, last, locator) return itself."""
    locator = MagicMock()
    locator.nth.return_value = locator
    locator.locator.return_value = locator
    locator.first = locator
    locator.last = locator
    locator.click = AsyncMock()
    locator.fill = AsyncMock()
    return locator


@pytest.fixture
def mock_page(mock_locator: MagicMock) -> MagicMock:
    """Create a mock Playwright page.

    Returns:
        MagicMock page with async interaction methods
    """
    page = MagicMock()
    page.goto = AsyncMock()
    page.click = AsyncMock()
    page.type = AsyncMock()
    page.wait_for_selector = AsyncMock()
    page.wait_for_function = AsyncMock()
    page.select_option = AsyncMock()
    page.set_input_files = AsyncMock()
    page.evaluate = AsyncMock()
    page.keyboard = MagicMock()
    page.keyboard.press = AsyncMock()
    page.locator.return_value = mock_locator

    text_locator = MagicMock()
    text_locator.first = text_locator
    text_locator.click = AsyncMock()
    page.get_by_text.return_value = text_locator
    return page


@pytest.fixture
def admin(mock_page: MagicMock, settings: Settings) -> BlogPostAdmin:
    """BlogPostAdmin bound to the mock page."""
    return BlogPostAdmin(mock_page, settings)
