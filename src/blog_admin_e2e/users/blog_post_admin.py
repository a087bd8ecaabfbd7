"""Blog admin and blog post editor actions.

BlogPostAdmin scripts the blog dashboard (author bio, drafts, publishing,
deletion) and the blog admin page (roles, tag list, tag limit). Each
method maps to one user-visible action or check; expect_* methods raise
BlogAdminError when the checked condition does not hold.
"""

from __future__ import annotations

import logging

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from blog_admin_e2e.browser.base_user import BaseUser
from blog_admin_e2e.browser.page_scripts import (
    BLOG_POST_COUNT_SCRIPT,
    BLOG_POST_EDIT_BOX_CLASS,
    BLOG_POST_TILE_CLASS,
    BLOG_POST_TITLES_SCRIPT,
    BUTTON_DISABLED_SCRIPT,
    INPUT_VALUE_BY_ID_SCRIPT,
    TAG_INPUT_CLASS,
    TAG_VALUES_SCRIPT,
    TEXT_CONTENT_SCRIPT,
)
from blog_admin_e2e.models import BlogAdminError, BlogAdminRole, ErrorCode, MissingPostPolicy
from blog_admin_e2e.utils.logging import show_message

logger = logging.getLogger(__name__)

# Blog dashboard
BLOG_TITLE_INPUT = "input.e2e-test-blog-post-title-field"
BLOG_BODY_INPUT = "div.e2e-test-rte"
BLOG_AUTHOR_BIO_FIELD = "textarea.e2e-test-blog-author-bio-field"
SAVE_AUTHOR_DETAILS_BUTTON = "button.e2e-test-save-author-details-button"
CREATE_NEW_BLOG_POST_BUTTON = "button.create-new-blog-post-button"
THUMBNAIL_PHOTO_BOX = "div.e2e-test-photo-clickable"
ADD_THUMBNAIL_IMAGE_BUTTON = "button.e2e-test-photo-upload-submit"
THUMBNAIL_TOGGLE_BUTTON = "button.mat-button-toggle-button"
PUBLISH_BLOG_POST_BUTTON_CLASS = "e2e-test-publish-blog-post-button"
PUBLISH_BLOG_POST_BUTTON = f"button.{PUBLISH_BLOG_POST_BUTTON_CLASS}"
SAVE_AS_DRAFT_BUTTON = "button.e2e-test-save-as-draft-button"
DONE_BUTTON = "button.oppia-save-state-item-button"
CONFIRM_BUTTON = "button.e2e-test-confirm-button"
TOAST_WARNING_MESSAGE = "div.e2e-test-toast-warning-message"
UNAUTH_ERROR_CONTAINER = "div.e2e-test-error-container"
AUTHOR_DETAILS_MODAL = "div.modal-dialog"

# Blog admin
ROLE_SELECT = "select#label-target-update-form-role-select"
ROLE_UPDATE_USERNAME_INPUT = "input#label-target-update-form-name"
UPDATE_ROLE_BUTTON = "button.oppia-blog-admin-update-role-button"
BLOG_EDITOR_USERNAME_INPUT = "input#label-target-form-reviewer-username"
REMOVE_BLOG_EDITOR_BUTTON = "button.oppia-blog-admin-remove-blog-editor-button"
MAXIMUM_TAG_LIMIT_INPUT_ID = "mat-input-0"
MAXIMUM_TAG_LIMIT_INPUT = f"input#{MAXIMUM_TAG_LIMIT_INPUT_ID}"

LABEL_FOR_SAVE_BUTTON = "Save"
LABEL_FOR_ADD_ELEMENT_BUTTON = "Add element"
LABEL_FOR_DELETE_BUTTON = "Delete"
LABEL_FOR_NEW_POST_BUTTON = "NEW POST"
LABEL_FOR_PUBLISHED_TAB = "PUBLISHED"

DUMMY_AUTHOR_BIO = "Dummy-User-Bio"
BLOG_POST_BODY = "test blog post body content"
DUPLICATE_BLOG_POST_BODY = "test blog post body content - duplicate"

# Becomes true once the tag list renders more inputs than arg[1]
_TAG_INPUT_ADDED_FUNCTION = "([cls, count]) => document.getElementsByClassName(cls).length > count"


class BlogPostAdmin(BaseUser):
    """A user holding the blog admin (or blog post editor) role."""

    async def add_user_bio_in_blog_dashboard(self) -> None:
        """Fill in the author bio asked for on first dashboard visit."""
        await self.type(BLOG_AUTHOR_BIO_FIELD, DUMMY_AUTHOR_BIO)
        await self.wait_for_selector(f"{SAVE_AUTHOR_DETAILS_BUTTON}:not([disabled])")
        await self.click_on(SAVE_AUTHOR_DETAILS_BUTTON)

    async def navigate_to_blog_dashboard_page(self) -> None:
        await self.goto(self.settings.blog_dashboard_url)

    async def create_draft_blog_post_with_title(self, draft_blog_post_title: str) -> None:
        """Create a draft blog post and return to the dashboard.

        Args:
            draft_blog_post_title: Title of the draft to create
        """
        await self.add_user_bio_in_blog_dashboard()
        await self.settle()
        await self.click_on(CREATE_NEW_BLOG_POST_BUTTON)
        await self.type(BLOG_TITLE_INPUT, draft_blog_post_title)
        await self.press_key("Tab")
        await self.type(BLOG_BODY_INPUT, BLOG_POST_BODY)
        await self.click_on(DONE_BUTTON)
        await self.settle()
        await self.click_on(SAVE_AS_DRAFT_BUTTON)

        show_message("Successfully created a draft blog post!")
        await self.goto(self.settings.blog_dashboard_url)

    async def delete_draft_blog_post_with_title(self, draft_blog_post_title: str) -> None:
        """Delete the draft whose tile shows exactly this title.

        Args:
            draft_blog_post_title: Title of the draft to delete

        Raises:
            BlogAdminError: If no tile matches and the missing post
                policy is RAISE
        """
        deleted = await self._delete_blog_post_with_title(draft_blog_post_title)
        if deleted:
            show_message("Draft blog post with given title deleted successfully!")

    async def expect_publish_button_to_be_disabled(self) -> None:
        """Check the publish button's disabled property.

        A disabled button is still rendered, so visibility says nothing
        about whether it can be used.
        """
        await self.wait_for_selector(PUBLISH_BLOG_POST_BUTTON)
        is_disabled = await self.query(BUTTON_DISABLED_SCRIPT, PUBLISH_BLOG_POST_BUTTON_CLASS)
        if not is_disabled:
            raise BlogAdminError(
                code=ErrorCode.ASSERTION_FAILED,
                message="Published button is not disabled when the blog post data is not completely filled",
                details={"selector": PUBLISH_BLOG_POST_BUTTON},
            )
        show_message("Published button is disabled when blog post data is not completely filled")

    async def _upload_thumbnail(self) -> None:
        await self.click_on(THUMBNAIL_PHOTO_BOX)
        await self.upload_file(self.settings.thumbnail_image)
        await self.wait_for_selector(f"{ADD_THUMBNAIL_IMAGE_BUTTON}:not([disabled])")
        await self.click_on(ADD_THUMBNAIL_IMAGE_BUTTON)
        await self.settle()

    async def _fill_title_and_body(self, title: str, body: str) -> None:
        await self.type(BLOG_TITLE_INPUT, title)
        await self.press_key("Tab")
        await self.type(BLOG_BODY_INPUT, body)
        await self.click_on(DONE_BUTTON)

    async def publish_new_blog_post_with_title(self, new_blog_post_title: str) -> None:
        """Create and publish a blog post with a thumbnail.

        The publish button is checked to stay disabled until title, body
        and thumbnail are all provided.

        Args:
            new_blog_post_title: Title of the post to publish
        """
        await self.add_user_bio_in_blog_dashboard()
        await self.settle()
        await self.click_on(CREATE_NEW_BLOG_POST_BUTTON)

        await self.expect_publish_button_to_be_disabled()
        await self.click_on(THUMBNAIL_TOGGLE_BUTTON)
        await self.expect_publish_button_to_be_disabled()
        await self._upload_thumbnail()
        await self.expect_publish_button_to_be_disabled()

        await self._fill_title_and_body(new_blog_post_title, BLOG_POST_BODY)

        await self.wait_for_selector(f"{PUBLISH_BLOG_POST_BUTTON}:not([disabled])")
        await self.click_on(PUBLISH_BLOG_POST_BUTTON)
        await self.wait_for_selector(CONFIRM_BUTTON)
        await self.click_on(CONFIRM_BUTTON)
        show_message("Successfully published a blog post!")

    async def create_new_blog_post_with_title(self, new_blog_post_title: str) -> None:
        """Start a new post from the NEW POST button without publishing it.

        Used to try publishing a second post with an existing title.

        Args:
            new_blog_post_title: Title of the new post
        """
        await self.click_on(LABEL_FOR_NEW_POST_BUTTON)
        await self.click_on(THUMBNAIL_TOGGLE_BUTTON)
        await self._upload_thumbnail()
        await self._fill_title_and_body(new_blog_post_title, DUPLICATE_BLOG_POST_BODY)

    async def delete_published_blog_post_with_title(self, blog_post_title: str) -> None:
        """Delete the published post whose tile shows exactly this title.

        Args:
            blog_post_title: Title of the published post

        Raises:
            BlogAdminError: If no tile matches and the missing post
                policy is RAISE
        """
        await self.click_on(LABEL_FOR_PUBLISHED_TAB)
        deleted = await self._delete_blog_post_with_title(blog_post_title)
        if deleted:
            show_message("Published blog post with given title deleted successfully!")

    async def _delete_blog_post_with_title(self, title: str) -> bool:
        """Open the first tile titled ``title`` and delete its post.

        Returns:
            True if a post was deleted, False if none matched
        """
        titles = await self.get_blog_post_titles()
        if title not in titles:
            if self.settings.missing_post_policy == MissingPostPolicy.RAISE:
                raise BlogAdminError(
                    code=ErrorCode.POST_NOT_FOUND,
                    message=f"Blog post with title {title} does not exist!",
                    details={"title": title, "rendered_titles": titles},
                )
            logger.warning(f"No blog post titled {title!r} to delete; nothing was deleted")
            return False

        tile = self.page.locator(f".{BLOG_POST_TILE_CLASS}").nth(titles.index(title))
        await tile.locator(f".{BLOG_POST_EDIT_BOX_CLASS}").first.click()
        await self.settle()
        await self.click_on(LABEL_FOR_DELETE_BUTTON)
        await self.wait_for_selector(CONFIRM_BUTTON)
        await self.click_on(CONFIRM_BUTTON)
        return True

    async def expect_user_unable_to_publish_blog_post(self, expected_warning_message: str) -> None:
        """Check that publishing is blocked and the toast explains why.

        Args:
            expected_warning_message: Warning text the toast should show

        Raises:
            BlogAdminError: If the publish button is enabled or the toast
                shows a different warning
        """
        displayed = await self.query(TEXT_CONTENT_SCRIPT, TOAST_WARNING_MESSAGE)
        is_disabled = await self.query(BUTTON_DISABLED_SCRIPT, PUBLISH_BLOG_POST_BUTTON_CLASS)

        if not is_disabled:
            raise BlogAdminError(
                code=ErrorCode.ASSERTION_FAILED,
                message="User is able to publish the blog post",
            )
        displayed_warning = displayed.strip() if displayed is not None else None
        if displayed_warning != expected_warning_message:
            raise BlogAdminError(
                code=ErrorCode.ASSERTION_FAILED,
                message=(
                    "Expected warning message is not same as the actual warning message\n"
                    f"Expected warning: {expected_warning_message}\n"
                    f"Displayed warning: {displayed_warning}\n"
                ),
                details={"expected": expected_warning_message, "actual": displayed_warning},
            )

        show_message(f"User is unable to publish the blog post because {displayed_warning}")

    async def expect_number_of_blog_posts_to_be(self, number: int) -> None:
        """Check how many post tiles the current dashboard tab renders."""
        count = await self.query(BLOG_POST_COUNT_SCRIPT)
        if count != number:
            raise BlogAdminError(
                code=ErrorCode.ASSERTION_FAILED,
                message=f"Number of blog posts is not equal to {number}",
                details={"expected": number, "actual": count},
            )
        show_message(f"Number of blog posts is equal to {number}")

    async def navigate_to_publish_tab(self) -> None:
        await self.goto(self.settings.blog_dashboard_url)
        await self.click_on(LABEL_FOR_PUBLISHED_TAB)
        show_message("Navigated to publish tab.")

    async def get_blog_post_titles(self) -> list[str | None]:
        """Titles of the rendered post tiles, in page order."""
        titles: list[str | None] = await self.query(BLOG_POST_TITLES_SCRIPT)
        return titles

    async def count_blog_posts_with_title(self, title: str) -> int:
        """Number of rendered post tiles whose title equals ``title`` exactly."""
        titles = await self.get_blog_post_titles()
        return titles.count(title)

    async def _expect_single_post_with_title(self, title: str, description: str) -> None:
        count = await self.count_blog_posts_with_title(title)
        if count == 0:
            raise BlogAdminError(
                code=ErrorCode.POST_NOT_FOUND,
                message=f"{description} with title {title} does not exist!",
                details={"title": title},
            )
        if count > 1:
            raise BlogAdminError(
                code=ErrorCode.ASSERTION_FAILED,
                message=f"{description} with title {title} exists more than once!",
                details={"title": title, "count": count},
            )

    async def expect_draft_blog_post_with_title_to_be_present(self, check_draft_blog_post_by_title: str) -> None:
        """Check that exactly one draft carries the title.

        Args:
            check_draft_blog_post_by_title: Title of the draft

        Raises:
            BlogAdminError: If no draft or several drafts carry the title
        """
        await self.goto(self.settings.blog_dashboard_url)
        await self._expect_single_post_with_title(check_draft_blog_post_by_title, "Draft blog post")
        show_message(f"Draft blog post with title {check_draft_blog_post_by_title} exists!")

    async def expect_published_blog_post_with_title_to_be_present(self, blog_post_title: str) -> None:
        """Check that exactly one published post carries the title.

        Args:
            blog_post_title: Title of the published post

        Raises:
            BlogAdminError: If no published post or several carry the title
        """
        await self.goto(self.settings.blog_dashboard_url)
        await self.click_on(LABEL_FOR_PUBLISHED_TAB)
        await self._expect_single_post_with_title(blog_post_title, "Blog post")
        show_message(f"Published blog post with title {blog_post_title} exists!")

    async def expect_blog_dashboard_access_to_be_unauthorized(self) -> None:
        """Check that the dashboard answers with its unauthorized error page.

        Raises:
            BlogAdminError: If the error container never appears
        """
        await self.goto(self.settings.blog_dashboard_url)
        try:
            await self.wait_for_selector(UNAUTH_ERROR_CONTAINER)
        except PlaywrightTimeoutError as e:
            raise BlogAdminError(
                code=ErrorCode.AUTHORIZED,
                message="No unauthorization error on accessing the blog dashboard page!",
                details={"selector": UNAUTH_ERROR_CONTAINER},
            ) from e
        show_message("User unauthorized to access blog dashboard!")

    async def expect_blog_dashboard_access_to_be_authorized(self) -> None:
        """Check that the dashboard opens for the user.

        A user visiting the dashboard for the first time after being given
        a blog role is greeted by the author details modal, so its
        appearance signals access.

        Raises:
            BlogAdminError: If the author details modal never appears
        """
        await self.goto(self.settings.blog_dashboard_url)
        try:
            await self.wait_for_selector(AUTHOR_DETAILS_MODAL)
        except PlaywrightTimeoutError as e:
            raise BlogAdminError(
                code=ErrorCode.UNAUTHORIZED,
                message="User unauthorized to access blog dashboard!",
                details={"selector": AUTHOR_DETAILS_MODAL},
            ) from e
        show_message("User authorized to access blog dashboard!")

    async def assign_user_to_role_from_blog_admin_page(self, username: str, role: str | BlogAdminRole) -> None:
        """Give a user a blog role from the blog admin page.

        Args:
            username: Username of the user
            role: Role select value, e.g. BlogAdminRole.BLOG_POST_EDITOR
        """
        role_value = role.value if isinstance(role, BlogAdminRole) else role
        await self.goto(self.settings.blog_admin_url)
        await self.select_option(ROLE_SELECT, role_value)
        await self.type(ROLE_UPDATE_USERNAME_INPUT, username)
        await self.click_on(UPDATE_ROLE_BUTTON)

    async def remove_blog_editor_role_from_username(self, username: str) -> None:
        await self.goto(self.settings.blog_admin_url)
        await self.type(BLOG_EDITOR_USERNAME_INPUT, username)
        await self.click_on(REMOVE_BLOG_EDITOR_BUTTON)

    async def get_blog_tags(self) -> list[str]:
        """Values of all tag inputs on the blog admin page."""
        tags: list[str] = await self.query(TAG_VALUES_SCRIPT)
        return tags

    async def expect_tag_to_not_exist_in_blog_tags(self, tag_name: str) -> None:
        if tag_name in await self.get_blog_tags():
            raise BlogAdminError(
                code=ErrorCode.ASSERTION_FAILED,
                message=f"Tag {tag_name} already exists in tag list!",
                details={"tag": tag_name},
            )
        show_message(f"Tag with name {tag_name} does not exist in tag list!")

    async def add_new_blog_tag(self, tag_name: str) -> None:
        """Append a tag to the blog tag list and save it.

        The input rendered last is taken to be the one just added.

        Args:
            tag_name: Tag to add
        """
        existing = len(await self.get_blog_tags())
        await self.click_on(LABEL_FOR_ADD_ELEMENT_BUTTON)
        await self.page.wait_for_function(
            _TAG_INPUT_ADDED_FUNCTION,
            arg=[TAG_INPUT_CLASS, existing],
            timeout=self.settings.timeout_ms,
        )
        await self.page.locator(f".{TAG_INPUT_CLASS}").last.fill(tag_name)
        await self.click_on(LABEL_FOR_SAVE_BUTTON)
        show_message(f"Tag {tag_name} added in tag list successfully!")

    async def expect_tag_to_exist_in_blog_tags(self, tag_name: str) -> None:
        if tag_name not in await self.get_blog_tags():
            raise BlogAdminError(
                code=ErrorCode.ASSERTION_FAILED,
                message=f"Tag {tag_name} does not exist in tag list!",
                details={"tag": tag_name},
            )
        show_message(f"Tag with name {tag_name} exists in tag list!")

    async def set_maximum_tag_limit_to(self, limit: str | int) -> None:
        """Replace the maximum number of tags a post may carry.

        Args:
            limit: New tag limit
        """
        # Select the current value so Backspace clears it
        await self.wait_for_selector(MAXIMUM_TAG_LIMIT_INPUT)
        await self.page.locator(MAXIMUM_TAG_LIMIT_INPUT).click(click_count=3)
        await self.press_key("Backspace")

        await self.type(MAXIMUM_TAG_LIMIT_INPUT, str(limit))
        await self.click_on(LABEL_FOR_SAVE_BUTTON)
        show_message(f"Successfully updated the tag limit to {limit}!")

    async def get_maximum_tag_limit(self) -> str | None:
        """Current value of the tag limit input, None if it is not rendered."""
        value: str | None = await self.query(INPUT_VALUE_BY_ID_SCRIPT, MAXIMUM_TAG_LIMIT_INPUT_ID)
        return value

    async def expect_maximum_tag_limit_not_to_be(self, limit: str | int) -> None:
        if await self.get_maximum_tag_limit() == str(limit):
            raise BlogAdminError(
                code=ErrorCode.ASSERTION_FAILED,
                message=f"Maximum tag limit is already {limit}!",
                details={"limit": str(limit)},
            )
        show_message(f"Maximum tag limit is not {limit}!")

    async def expect_maximum_tag_limit_to_be(self, limit: str | int) -> None:
        current = await self.get_maximum_tag_limit()
        if current != str(limit):
            raise BlogAdminError(
                code=ErrorCode.ASSERTION_FAILED,
                message=f"Maximum tag limit is not {limit}!",
                details={"expected": str(limit), "actual": current},
            )
        show_message(f"Maximum tag is currently {limit}!")
