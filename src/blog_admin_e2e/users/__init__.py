"""Role-specific users built on BaseUser."""

from blog_admin_e2e.users.blog_post_admin import BlogPostAdmin

__all__ = ["BlogPostAdmin"]
