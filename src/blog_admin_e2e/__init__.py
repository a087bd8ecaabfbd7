"""Playwright actions for blog dashboard and blog admin acceptance tests."""

from blog_admin_e2e.config import Settings, load_settings
from blog_admin_e2e.models import BlogAdminError, BlogAdminRole, ErrorCode, MissingPostPolicy
from blog_admin_e2e.users.blog_post_admin import BlogPostAdmin

__all__ = [
    "BlogAdminError",
    "BlogAdminRole",
    "BlogPostAdmin",
    "ErrorCode",
    "MissingPostPolicy",
    "Settings",
    "load_settings",
]
