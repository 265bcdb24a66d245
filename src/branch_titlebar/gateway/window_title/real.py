"""Production WindowTitle implementations.

XdotoolWindowTitle drives X11 windows through the xdotool binary.
TerminalWindowTitle sets the title of the controlling terminal emulator with
the xterm OSC 0 escape sequence.
"""

import logging
import re
import subprocess
from typing import TextIO

from branch_titlebar.gateway.window_title.abc import WindowTitle

logger = logging.getLogger(__name__)

XDOTOOL_TIMEOUT_SECONDS = 2

_ERE_SPECIAL = re.compile(r"([.^$*+?()\[\]{}|\\])")


def ere_escape(text: str) -> str:
    """Escape POSIX extended regex metacharacters, leaving everything else literal."""
    return _ERE_SPECIAL.sub(r"\\\1", text)


class XdotoolWindowTitle(WindowTitle):
    """Locates windows by title with `xdotool search --name`.

    xdotool matches names case-insensitively, so each candidate's name is read
    back and only an exact match is accepted.

    When `window_id` is given, the matcher is ignored and that window is
    targeted directly.
    """

    def __init__(self, *, window_id: str | None = None) -> None:
        self._window_id = window_id

    def get_title(self, matcher: str) -> str | None:
        window_id = self._find_window(matcher)
        if window_id is None:
            return None
        if self._window_id is None:
            # Found by exact name comparison
            return matcher
        title = self._run(["getwindowname", window_id])
        if not title:
            return None
        return title

    def set_title(self, matcher: str, new_title: str) -> bool:
        window_id = self._find_window(matcher)
        if window_id is None:
            return False
        return self._run(["set_window", "--name", new_title, window_id]) is not None

    def _find_window(self, matcher: str) -> str | None:
        if self._window_id is not None:
            return self._window_id
        if not matcher:
            return None

        output = self._run(["search", "--name", f"^{ere_escape(matcher)}$"])
        if not output:
            return None

        # search prints one window id per line; the first exact match wins
        for window_id in output.split():
            if self._run(["getwindowname", window_id]) == matcher:
                return window_id
        logger.debug("No window titled exactly %r", matcher)
        return None

    def _run(self, args: list[str]) -> str | None:
        try:
            result = subprocess.run(
                ["xdotool", *args],
                capture_output=True,
                text=True,
                check=False,
                timeout=XDOTOOL_TIMEOUT_SECONDS,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("xdotool %s failed to run: %s", args[0], e)
            return None

        if result.returncode != 0:
            logger.debug("xdotool %s exited %d", args[0], result.returncode)
            return None

        return result.stdout.strip()


class TerminalWindowTitle(WindowTitle):
    """Sets the terminal title with an OSC 0 escape sequence.

    Terminals do not report their title back, so get_title() always returns
    None and the synchronizer falls back to the last title it applied.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def get_title(self, matcher: str) -> str | None:
        return None

    def set_title(self, matcher: str, new_title: str) -> bool:
        # Control characters would terminate the escape sequence early
        safe_title = "".join(ch for ch in new_title if ch.isprintable())
        try:
            self._stream.write(f"\x1b]0;{safe_title}\x07")
            self._stream.flush()
        except OSError as e:
            logger.debug("Failed to write terminal title: %s", e)
            return False
        return True


class NoWindowTitle(WindowTitle):
    """Window title backend that never finds a window."""

    def get_title(self, matcher: str) -> str | None:
        return None

    def set_title(self, matcher: str, new_title: str) -> bool:
        return False
