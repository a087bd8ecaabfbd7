"""Pydantic data models for blog-admin-e2e.

This module defines the error types raised by blog admin actions and the
typed envelope used to carry results back from in-page scripts.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Error codes for blog admin action failures."""

    ASSERTION_FAILED = "assertion_failed"
    PAGE_SCRIPT_FAILED = "page_script_failed"
    POST_NOT_FOUND = "post_not_found"
    UNAUTHORIZED = "unauthorized"
    AUTHORIZED = "authorized"


class BlogAdminError(Exception):
    """Exception raised when a blog admin action or check fails.

    Attributes:
        code: Error code
        message: Human-readable error message
        details: Additional error details (expected/actual values, selector)
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, object] | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            details: Additional context (e.g., expected and actual values)
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MissingPostPolicy(str, Enum):
    """What delete-by-title does when no post tile carries the title."""

    IGNORE = "ignore"
    RAISE = "raise"


class BlogAdminRole(str, Enum):
    """Role values offered by the blog admin role select."""

    BLOG_ADMIN = "BLOG_ADMIN"
    BLOG_POST_EDITOR = "BLOG_POST_EDITOR"


class PageQueryResult(BaseModel):
    """Result envelope returned by every in-page script.

    Scripts never throw across the page boundary. They catch their own
    errors and report them through this envelope instead.

    Attributes:
        ok: True if the script completed
        value: Script return value (JSON-serializable)
        error: Error message when ok is False
    """

    ok: bool
    value: Any = None
    error: str | None = None

    def unwrap(self) -> Any:
        """Return the script value or raise the reported error.

        Returns:
            The value produced by the in-page script

        Raises:
            BlogAdminError: If the script reported a failure
        """
        if not self.ok:
            raise BlogAdminError(
                code=ErrorCode.PAGE_SCRIPT_FAILED,
                message=self.error or "In-page script failed without a message",
            )
        return self.value
