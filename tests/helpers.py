"""Result envelope factories shared by unit tests."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any


def envelope(value: Any) -> dict[str, Any]:
    """Build the successful result envelope an in-page script returns."""
    return {"ok": True, "value": value, "error": None}


def failed_envelope(error: str) -> dict[str, Any]:
    """Build the failed result envelope an in-page script returns."""
    return {"ok": False, "value": None, "error": error}


def script_answers(answers: dict[str, Any]) -> Callable[..., Any]:
    """Create an evaluate() side effect answering per script.

    Args:
        answers: Mapping of script constant to the value it reports

    Returns:
        Async function usable as page.evaluate side_effect
    """

    async def _evaluate(script: str, arg: Any = None) -> dict[str, Any]:
        return envelope(answers[script])

    return _evaluate


def label_pattern(label: str) -> re.Pattern[str]:
    """Pattern click_on passes to get_by_text for a visible label."""
    return re.compile(re.escape(label))
