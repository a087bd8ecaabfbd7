"""Utility modules for blog-admin-e2e."""

from blog_admin_e2e.utils.logging import get_logger, setup_logging, show_message

__all__ = ["get_logger", "setup_logging", "show_message"]
