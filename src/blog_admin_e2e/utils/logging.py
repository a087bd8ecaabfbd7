"""Logging configuration for blog-admin-e2e.

Actions log diagnostics on module loggers and report user-visible
progress ("Successfully published a blog post!") through show_message.
"""

import logging

ROOT_LOGGER_NAME = "blog_admin_e2e"
PROGRESS_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.progress"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, name: str | None = None) -> logging.Logger:
    """Set up console logging for the package.

    Replaces any handlers installed by an earlier call so repeated
    setup (one per test session) does not duplicate output.

    Args:
        level: Logging level (default: INFO)
        name: Logger name (default: "blog_admin_e2e")

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the blog_admin_e2e namespace.

    Args:
        name: Logger name suffix (e.g., "cli" for "blog_admin_e2e.cli")

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(ROOT_LOGGER_NAME)


def show_message(message: str) -> None:
    """Report a completed step of a test scenario.

    Args:
        message: Progress message shown to whoever watches the run
    """
    logging.getLogger(PROGRESS_LOGGER_NAME).info(message)
