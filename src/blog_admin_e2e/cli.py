"""CLI for running single blog admin actions by hand.

Useful for seeding a dev server with posts or checking selectors after a
markup change without running a whole test scenario.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Annotated

import typer
from playwright.async_api import Error as PlaywrightError

from blog_admin_e2e.browser.manager import BrowserManager
from blog_admin_e2e.models import BlogAdminError, BlogAdminRole
from blog_admin_e2e.users.blog_post_admin import BlogPostAdmin
from blog_admin_e2e.utils.logging import get_logger, setup_logging

logger = get_logger("cli")

app = typer.Typer(
    name="blog-admin-e2e",
    help="Drive blog dashboard and blog admin actions in a browser",
)


class AccessExpectation(str, Enum):
    AUTHORIZED = "authorized"
    UNAUTHORIZED = "unauthorized"


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every browser step"),
    ] = False,
) -> None:
    """Configure logging before any command runs."""
    setup_logging(logging.DEBUG if verbose else logging.INFO)


async def _run_action(action: Callable[[BlogPostAdmin], Awaitable[None]]) -> None:
    admin = await BlogPostAdmin.open()
    try:
        await action(admin)
    finally:
        await BrowserManager.get_instance().close()


def _execute(action: Callable[[BlogPostAdmin], Awaitable[None]], success_message: str) -> None:
    try:
        asyncio.run(_run_action(action))
    except BlogAdminError as e:
        typer.echo(f"❌ Error [{e.code.value}]: {e.message}", err=True)
        raise typer.Exit(1) from e
    except PlaywrightError as e:
        logger.debug("Browser action failed", exc_info=True)
        typer.echo(f"❌ Error: {e.message}", err=True)
        raise typer.Exit(1) from e
    except FileNotFoundError as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(1) from e
    except KeyboardInterrupt:
        typer.echo("\n⚠️  Interrupted")
        raise typer.Exit(0) from None
    typer.echo(f"✅ {success_message}")


@app.command("create-draft")
def create_draft(title: Annotated[str, typer.Argument(help="Title of the draft")]) -> None:
    """Create a draft blog post."""

    async def action(admin: BlogPostAdmin) -> None:
        await admin.navigate_to_blog_dashboard_page()
        await admin.create_draft_blog_post_with_title(title)
        await admin.expect_draft_blog_post_with_title_to_be_present(title)

    _execute(action, f"Draft created: {title}")


@app.command()
def publish(title: Annotated[str, typer.Argument(help="Title of the post")]) -> None:
    """Publish a new blog post with the configured thumbnail."""

    async def action(admin: BlogPostAdmin) -> None:
        await admin.navigate_to_blog_dashboard_page()
        await admin.publish_new_blog_post_with_title(title)
        await admin.expect_published_blog_post_with_title_to_be_present(title)

    _execute(action, f"Published: {title}")


@app.command("delete-draft")
def delete_draft(title: Annotated[str, typer.Argument(help="Title of the draft")]) -> None:
    """Delete a draft blog post by title."""

    async def action(admin: BlogPostAdmin) -> None:
        await admin.navigate_to_blog_dashboard_page()
        await admin.delete_draft_blog_post_with_title(title)

    _execute(action, f"Delete requested for draft: {title}")


@app.command("delete-published")
def delete_published(title: Annotated[str, typer.Argument(help="Title of the post")]) -> None:
    """Delete a published blog post by title."""

    async def action(admin: BlogPostAdmin) -> None:
        await admin.navigate_to_blog_dashboard_page()
        await admin.delete_published_blog_post_with_title(title)

    _execute(action, f"Delete requested for published post: {title}")


@app.command("list-posts")
def list_posts(
    published: Annotated[
        bool,
        typer.Option("--published", help="List the PUBLISHED tab instead of drafts"),
    ] = False,
) -> None:
    """Print the titles shown on the blog dashboard."""
    titles: list[str | None] = []

    async def action(admin: BlogPostAdmin) -> None:
        if published:
            await admin.navigate_to_publish_tab()
        else:
            await admin.navigate_to_blog_dashboard_page()
        titles.extend(await admin.get_blog_post_titles())

    _execute(action, "Dashboard read")
    typer.echo(f"{len(titles)} post(s):")
    for title in titles:
        typer.echo(f"  - {title}")


@app.command("assign-role")
def assign_role(
    username: Annotated[str, typer.Argument(help="Username to update")],
    role: Annotated[BlogAdminRole, typer.Argument(help="Blog role to assign")],
) -> None:
    """Assign a blog role from the blog admin page."""

    async def action(admin: BlogPostAdmin) -> None:
        await admin.assign_user_to_role_from_blog_admin_page(username, role)

    _execute(action, f"Role {role.value} assigned to {username}")


@app.command("remove-editor")
def remove_editor(username: Annotated[str, typer.Argument(help="Username to update")]) -> None:
    """Remove the blog post editor role from a user."""

    async def action(admin: BlogPostAdmin) -> None:
        await admin.remove_blog_editor_role_from_username(username)

    _execute(action, f"Blog editor role removed from {username}")


@app.command("add-tag")
def add_tag(tag: Annotated[str, typer.Argument(help="Tag to add")]) -> None:
    """Add a tag to the blog tag list."""

    async def action(admin: BlogPostAdmin) -> None:
        await admin.goto(admin.settings.blog_admin_url)
        await admin.expect_tag_to_not_exist_in_blog_tags(tag)
        await admin.add_new_blog_tag(tag)
        await admin.expect_tag_to_exist_in_blog_tags(tag)

    _execute(action, f"Tag added: {tag}")


@app.command("set-tag-limit")
def set_tag_limit(limit: Annotated[int, typer.Argument(min=1, help="Maximum tags per post")]) -> None:
    """Change the maximum number of tags per blog post."""

    async def action(admin: BlogPostAdmin) -> None:
        await admin.goto(admin.settings.blog_admin_url)
        await admin.set_maximum_tag_limit_to(str(limit))
        await admin.expect_maximum_tag_limit_to_be(str(limit))

    _execute(action, f"Tag limit set to {limit}")


@app.command("check-access")
def check_access(
    expect: Annotated[
        AccessExpectation,
        typer.Option("--expect", "-e", help="Access the current user should have"),
    ] = AccessExpectation.AUTHORIZED,
) -> None:
    """Check whether the current user can open the blog dashboard."""

    async def action(admin: BlogPostAdmin) -> None:
        if expect == AccessExpectation.AUTHORIZED:
            await admin.expect_blog_dashboard_access_to_be_authorized()
        else:
            await admin.expect_blog_dashboard_access_to_be_unauthorized()

    _execute(action, f"Blog dashboard access is {expect.value}")
