"""Runtime configuration for blog-admin-e2e.

Settings are read from BLOG_E2E_* environment variables so the same
actions can run against a local dev server or a deployed instance.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blog_admin_e2e.models import MissingPostPolicy

ENV_PREFIX = "BLOG_E2E_"
HEADLESS_ENV_VAR = f"{ENV_PREFIX}HEADLESS"

DEFAULT_BASE_URL = "http://localhost:8181"
DEFAULT_DASHBOARD_PATH = "/blog-dashboard"
DEFAULT_ADMIN_PATH = "/blog-admin"
DEFAULT_THUMBNAIL_IMAGE = "data/dummy_large_image.jpg"
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_TRANSITION_DELAY_MS = 500


class Settings(BaseSettings):
    """Settings shared by every blog admin action.

    Each field is read from the BLOG_E2E_-prefixed environment variable of
    the same name (e.g. BLOG_E2E_TIMEOUT_MS); empty variables are ignored.

    Attributes:
        base_url: Root URL of the application under test
        dashboard_path: Path of the blog dashboard page
        admin_path: Path of the blog admin page
        thumbnail_image: Image fixture uploaded as a post thumbnail
        timeout_ms: Default timeout for element waits
        transition_delay_ms: Fallback delay for UI transitions (0 disables)
        missing_post_policy: Behavior of delete-by-title when nothing matches
        storage_state: Playwright storage state of a logged-in user, if any
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_ignore_empty=True, extra="ignore")

    base_url: str = DEFAULT_BASE_URL
    dashboard_path: str = DEFAULT_DASHBOARD_PATH
    admin_path: str = DEFAULT_ADMIN_PATH
    thumbnail_image: Path = Path(DEFAULT_THUMBNAIL_IMAGE)
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    transition_delay_ms: int = Field(default=DEFAULT_TRANSITION_DELAY_MS, ge=0)
    missing_post_policy: MissingPostPolicy = MissingPostPolicy.IGNORE
    storage_state: Path | None = None

    @field_validator("missing_post_policy", mode="before")
    @classmethod
    def _lowercase_policy(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value

    @property
    def blog_dashboard_url(self) -> str:
        """Full URL of the blog dashboard."""
        return _join_url(self.base_url, self.dashboard_path)

    @property
    def blog_admin_url(self) -> str:
        """Full URL of the blog admin page."""
        return _join_url(self.base_url, self.admin_path)


def _join_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def get_headless_mode() -> bool:
    """Get headless mode from BLOG_E2E_HEADLESS environment variable.

    Default: True. Set BLOG_E2E_HEADLESS=false to watch the browser
    while debugging selectors.

    Returns:
        True if headless mode is enabled (default)
    """
    return os.environ.get(HEADLESS_ENV_VAR, "true").lower() != "false"


def load_settings() -> Settings:
    """Build Settings from BLOG_E2E_* environment variables.

    Unset or empty variables fall back to the defaults above.

    Returns:
        Validated Settings instance

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    return Settings()
