"""Entry point for blog-admin-e2e.

Run with: python -m blog_admin_e2e --help
"""

from blog_admin_e2e.cli import app

if __name__ == "__main__":
    app()
