"""Single-keypress reader for the terminal frontend.

Handles arrow keys, WASD and the solver/playback keys without requiring
Enter.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time

# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "v": "solve",
    "g": "algorithm",
    "e": "heuristic",
    "n": "next",
    "b": "back",
    "r": "reset",
    "p": "play",
    "x": "scramble",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch.lower(), ch if ch.isprintable() else "")


# -- platform readers ----------------------------------------------------------


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def ready(wait: float | None) -> bool:
        return bool(select.select([fd], [], [], wait)[0])

    def read1() -> str:
        # os.read is unbuffered, so select() still sees the rest of an
        # escape sequence.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        if timeout is not None and not ready(timeout):
            return None
        ch = read1()

        # Arrow keys: ESC [ A/B/C/D
        if ch == "\x1b":
            if not ready(0.1):
                return "quit"  # bare Escape
            if read1() != "[":
                return "quit"
            if not ready(0.1):
                return ""
            return _ARROW_MAP.get(read1(), "")
        return _resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return {"H": "up", "P": "down", "K": "left", "M": "right"}.get(
            msvcrt.getwch(), ""
        )
    if ch == "\x1b":
        return "quit"
    return _resolve(ch)


_read = _read_windows if os.name == "nt" else _read_unix


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action string.

    Possible return values:
        "up", "down", "left", "right"  : slide a tile
        "solve"                        : v
        "algorithm", "heuristic"       : g / e (cycle choice)
        "next", "back", "reset"        : n / b / r (playback)
        "play"                         : p (animate)
        "scramble"                     : x
        "quit"                         : q / Ctrl-C / Escape
        "<char>"                       : unmapped printable char
        ""                             : unrecognised key
    """
    key = _read(None)
    return key or ""


def get_key_timeout(timeout: float) -> str | None:
    """Like :func:`get_key`, but return ``None`` after *timeout* seconds."""
    return _read(timeout)
