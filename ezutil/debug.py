"""
ezutil.debug — printf-debugging helpers
=======================================

``ez_print`` is for throwaway diagnostics; use ``logging`` for anything
that should stay in the code.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional, TextIO

from ezutil.options import SAFETY

logger = logging.getLogger(__name__)


def _render(arg: Any) -> str:
    if isinstance(arg, str):
        return arg
    if isinstance(arg, (bytes, bytearray)):
        return bytes(arg).decode("utf-8", errors="replace")
    return repr(arg)


def ez_print(*args: Any, file: Optional[TextIO] = None) -> None:
    """
    Write ``args`` to stderr separated by ", " and followed by a newline.

    Strings and UTF-8 bytes print as bare text, everything else via
    ``repr``.  The stream is flushed straight away.  Write failures are
    ignored: this is a debugging aid and must never take the caller
    down.
    """
    stream = file if file is not None else sys.stderr
    line = ", ".join(_render(arg) for arg in args) + "\n"
    try:
        stream.write(line)
        stream.flush()
    except (OSError, ValueError):
        pass


def assert_print(ok: bool, fmt: str, *args: Any) -> None:
    """
    Fail with a formatted message when ``ok`` is false.

    The message is logged at ERROR before ``AssertionError`` is raised.
    With ``EZUTIL_SAFETY=0`` the check is skipped entirely, so callers
    must not rely on it for control flow.
    """
    if ok or not SAFETY:
        return
    message = fmt % args if args else fmt
    logger.error("%s", message)
    raise AssertionError(message)
