"""Browser module for blog-admin-e2e.

Provides the shared Playwright session, the base user primitives and the
in-page scripts used to read DOM state.
"""

from blog_admin_e2e.browser.base_user import BaseUser
from blog_admin_e2e.browser.manager import BrowserManager

__all__ = ["BaseUser", "BrowserManager"]
