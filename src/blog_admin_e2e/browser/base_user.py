"""Base test user with page-interaction primitives.

Role-specific users (blog admin, blog editor) subclass BaseUser and build
their actions from these primitives.
"""

from __future__ import annotations

import asyncio
import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any, Self

from blog_admin_e2e.browser.manager import BrowserManager
from blog_admin_e2e.browser.page_scripts import run_page_query
from blog_admin_e2e.config import Settings, load_settings

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger(__name__)

FILE_INPUT_SELECTOR = "input[type=file]"

# Targets containing any of these characters are CSS selectors;
# anything else is treated as a visible label ("Save", "NEW POST").
_SELECTOR_CHARS = re.compile(r"[.#\[\]>:=]")


def is_css_selector(target: str) -> bool:
    """Tell a CSS selector apart from a visible button label.

    Args:
        target: Selector or visible label passed to click_on

    Returns:
        True if target should be used as a CSS selector
    """
    return _SELECTOR_CHARS.search(target) is not None


class BaseUser:
    """A browser-driven user of the application under test.

    Attributes:
        page: Playwright Page the user acts on
        settings: URLs, fixtures and timing used by actions
    """

    def __init__(self, page: Page, settings: Settings | None = None) -> None:
        self.page = page
        self.settings = settings or load_settings()

    @classmethod
    async def open(cls, settings: Settings | None = None) -> Self:
        """Create a user on the shared BrowserManager page.

        Args:
            settings: Settings to use (default: loaded from environment)

        Returns:
            New user instance bound to the shared page
        """
        settings = settings or load_settings()
        BrowserManager.configure(timeout_ms=settings.timeout_ms, storage_state=settings.storage_state)
        page = await BrowserManager.get_instance().get_page()
        return cls(page, settings)

    async def goto(self, url: str) -> None:
        """Navigate to url and wait for the network to go idle."""
        logger.debug(f"goto {url}")
        await self.page.goto(url, wait_until="networkidle")

    async def wait_for_selector(self, selector: str, timeout_ms: int | None = None) -> None:
        """Wait until an element matching selector is visible.

        Args:
            selector: CSS selector to wait for
            timeout_ms: Timeout override (default: settings.timeout_ms)

        Raises:
            playwright.async_api.TimeoutError: If nothing matches in time
        """
        timeout = timeout_ms if timeout_ms is not None else self.settings.timeout_ms
        await self.page.wait_for_selector(selector, state="visible", timeout=timeout)

    async def click_on(self, target: str) -> None:
        """Click an element by CSS selector or by its visible label.

        Args:
            target: CSS selector (e.g. "button.e2e-test-confirm-button")
                or visible text (e.g. "Delete"), matched case-sensitively
                anywhere in an element's text
        """
        if is_css_selector(target):
            await self.wait_for_selector(target)
            await self.page.click(target)
        else:
            await self.page.get_by_text(re.compile(re.escape(target))).first.click(timeout=self.settings.timeout_ms)
        logger.debug(f"clicked {target}")

    async def type(self, selector: str, text: str) -> None:
        """Type text into the element matching selector."""
        await self.wait_for_selector(selector)
        await self.page.type(selector, text)

    async def select_option(self, selector: str, value: str) -> None:
        """Choose value in the <select> matching selector."""
        await self.wait_for_selector(selector)
        await self.page.select_option(selector, value)

    async def press_key(self, key: str) -> None:
        """Press a single key (e.g. "Tab", "Backspace") on the focused element."""
        await self.page.keyboard.press(key)

    async def upload_file(self, file_path: str | Path) -> None:
        """Attach a local file to the page's file input.

        Args:
            file_path: Path to the file, relative paths resolved from the cwd

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(file_path).resolve()
        if not path.is_file():
            raise FileNotFoundError(f"Upload fixture not found: {path}")
        await self.page.set_input_files(FILE_INPUT_SELECTOR, str(path))

    async def settle(self) -> None:
        """Wait out a UI transition that exposes no readiness signal.

        Buttons behind an animation are in the DOM immediately but ignore
        clicks until the animation ends.
        """
        delay_ms = self.settings.transition_delay_ms
        if delay_ms > 0:
            await asyncio.sleep(delay_ms / 1000)

    async def query(self, script: str, arg: Any = None) -> Any:
        """Run an in-page script and return its unwrapped value.

        Raises:
            BlogAdminError: If the script reports a failure
        """
        return await run_page_query(self.page, script, arg)
