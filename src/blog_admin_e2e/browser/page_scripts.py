"""In-page scripts for reading blog dashboard and blog admin DOM state.

Every script runs inside the browser via page.evaluate and answers with the
PageQueryResult envelope ({ok, value, error}) rather than throwing, so
failures cross the page boundary as data.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from blog_admin_e2e.models import BlogAdminError, ErrorCode, PageQueryResult

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger(__name__)

# Class names used by the blog dashboard markup
BLOG_POST_TILE_CLASS = "blog-dashboard-tile-content"
BLOG_POST_TITLE_CLASS = "e2e-test-blog-post-title"
BLOG_POST_EDIT_BOX_CLASS = "e2e-test-blog-post-edit-box"
TAG_INPUT_CLASS = "form-control"


def _envelope(body: str) -> str:
    """Wrap a script body so its outcome is always a result envelope.

    The body sees the evaluate argument as ``arg`` and returns the value.
    """
    return f"""
        (arg) => {{
            try {{
                const value = (() => {{
                    {body}
                }})();
                return {{ok: true, value: value === undefined ? null : value, error: null}};
            }} catch (e) {{
                return {{ok: false, value: null, error: String((e && e.message) || e)}};
            }}
        }}
    """


# Titles of all rendered post tiles, in DOM order. Tiles without a title
# element yield null so indexes stay aligned with the tiles.
BLOG_POST_TITLES_SCRIPT = _envelope(
    f"""
    const tiles = document.getElementsByClassName('{BLOG_POST_TILE_CLASS}');
    const titles = [];
    for (let i = 0; i < tiles.length; i++) {{
        const title = tiles[i].getElementsByClassName('{BLOG_POST_TITLE_CLASS}')[0];
        titles.push(title ? title.innerText : null);
    }}
    return titles;
    """
)

BLOG_POST_COUNT_SCRIPT = _envelope(
    f"""
    return document.getElementsByClassName('{BLOG_POST_TILE_CLASS}').length;
    """
)

# Reads the disabled DOM property of the first element with class ``arg``.
BUTTON_DISABLED_SCRIPT = _envelope(
    """
    const button = document.getElementsByClassName(arg)[0];
    if (!button) {
        throw new Error(`No element with class ${arg} found`);
    }
    return button.disabled === true;
    """
)

# Text content of the first element matching selector ``arg``, or null.
TEXT_CONTENT_SCRIPT = _envelope(
    """
    const element = document.querySelector(arg);
    return element ? element.textContent : null;
    """
)

TAG_VALUES_SCRIPT = _envelope(
    f"""
    const inputs = document.getElementsByClassName('{TAG_INPUT_CLASS}');
    const values = [];
    for (let i = 0; i < inputs.length; i++) {{
        values.push(inputs[i].value);
    }}
    return values;
    """
)

# Value of the input with id ``arg``, or null when it is not rendered.
INPUT_VALUE_BY_ID_SCRIPT = _envelope(
    """
    const input = document.getElementById(arg);
    return input ? input.value : null;
    """
)


async def run_page_query(page: Page, script: str, arg: Any = None) -> Any:
    """Evaluate an envelope script in the page and unwrap its value.

    Args:
        page: Playwright Page instance
        script: One of the *_SCRIPT constants of this module
        arg: JSON-serializable argument passed to the script

    Returns:
        The value reported by the script

    Raises:
        BlogAdminError: If the script reported a failure or its answer
            does not match the envelope shape
    """
    raw = await page.evaluate(script, arg)
    try:
        result = PageQueryResult.model_validate(raw)
    except ValidationError as e:
        logger.debug(f"Malformed in-page result: {raw!r}")
        raise BlogAdminError(
            code=ErrorCode.PAGE_SCRIPT_FAILED,
            message="In-page script returned a malformed result",
            details={"raw": raw},
        ) from e
    return result.unwrap()
