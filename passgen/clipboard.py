"""
Clipboard placement with a fallback path and user-facing notifications.

The actual clipboard writers are supplied by the caller (the Qt window
passes its own), so this module does not depend on any GUI toolkit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

SUCCESS = "success"
ERROR = "error"

COPY_OK_MESSAGE = "Password copied to clipboard!"
COPY_FAILED_MESSAGE = "Failed to copy password"


class ClipboardUnavailable(Exception):
    """Raised by a clipboard writer that could not place the text."""


@dataclass(frozen=True)
class Notification:
    message: str
    kind: str = SUCCESS

    @property
    def is_error(self) -> bool:
        return self.kind == ERROR


ClipboardWriter = Callable[[str], None]


def copy_with_fallback(
    text: str,
    primary: ClipboardWriter,
    fallback: ClipboardWriter | None = None,
) -> Notification:
    """
    Try `primary`, then `fallback`, and report the outcome.

    Writers signal failure by raising ClipboardUnavailable. Failure is
    never fatal: the caller still holds the text and can show it.
    """
    try:
        primary(text)
        return Notification(COPY_OK_MESSAGE, SUCCESS)
    except ClipboardUnavailable as exc:
        logger.info("Primary clipboard write failed: %s", exc)

    if fallback is None:
        return Notification(COPY_FAILED_MESSAGE, ERROR)

    try:
        fallback(text)
    except ClipboardUnavailable as exc:
        logger.warning("Fallback clipboard write failed: %s", exc)
        return Notification(COPY_FAILED_MESSAGE, ERROR)

    return Notification(COPY_OK_MESSAGE, SUCCESS)
