# fsmatrix/ui/keys.py

from __future__ import annotations

import os
import select
import sys
from collections import deque
from typing import Deque, List, Optional, TextIO

try:  # Windows-specific keyboard polling
    import msvcrt  # type: ignore
except ImportError:  # pragma: no cover - non-Windows runtimes
    msvcrt = None  # type: ignore

try:  # POSIX terminal helpers
    import termios
    import tty
except ImportError:  # pragma: no cover - Windows runtimes
    termios = None  # type: ignore
    tty = None  # type: ignore

ESCAPE = "escape"

_NAMED_KEYS = {
    "\x1b": ESCAPE,
    "\r": "enter",
    "\n": "enter",
    " ": "space",
    "\t": "tab",
}

# Bytes that open a multi-byte escape sequence after ESC (CSI and SS3)
_SEQUENCE_INTRODUCERS = "[O"


def key_name(raw: str) -> Optional[str]:
    """
    Translate raw key input into a key name.

    A lone ESC byte is the Escape key; ESC followed by more bytes is an
    escape sequence (arrows, function keys) and is reported as None.
    """
    if not raw:
        return None
    if raw.startswith("\x1b") and len(raw) > 1:
        return None
    if raw in _NAMED_KEYS:
        return _NAMED_KEYS[raw]
    return raw[0].lower()


def _sequence_end(raw: str, start: int) -> int:
    """Index just past the escape sequence whose ESC sits at `start`."""
    i = start + 2
    if raw[start + 1] == "O":
        return min(i + 1, len(raw))
    # CSI: parameter and intermediate bytes, then one final byte in @..~
    while i < len(raw) and not ("@" <= raw[i] <= "~"):
        i += 1
    return min(i + 1, len(raw))


def decode_keys(raw: str) -> List[str]:
    """
    Split a burst of terminal input into key names, oldest first.

    ESC followed by `[` or `O` starts an escape sequence, which is consumed
    whole and dropped. Any other ESC is a press of the Escape key, so
    `"x\\x1b"` gives `["x", "escape"]` and `"\\x1b\\x1b"` gives two escapes.
    """
    keys: List[str] = []
    i = 0
    while i < len(raw):
        ch = raw[i]
        if ch == "\x1b" and i + 1 < len(raw) and raw[i + 1] in _SEQUENCE_INTRODUCERS:
            i = _sequence_end(raw, i)
            continue
        name = key_name(ch)
        if name is not None:
            keys.append(name)
        i += 1
    return keys


class KeyPoller:
    """
    Non-blocking key polling for Windows consoles and POSIX terminals.

    On POSIX the terminal is put in cbreak mode while open. When stdin is
    not a terminal polling yields nothing. Every key read is queued and
    handed out one per `poll()`, so a burst never hides an Escape press.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdin
        self.mode = "none"
        self.fd: Optional[int] = None
        self.old_settings: Optional[List] = None
        self.pending: Deque[str] = deque()

    def open(self) -> None:
        if msvcrt:
            self.mode = "windows"
            return
        if not (termios and tty):
            return
        try:
            if not self.stream.isatty():
                return
            self.fd = self.stream.fileno()
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError, ValueError):
            self.fd = None
            self.old_settings = None
            return
        self.mode = "posix"

    def close(self) -> None:
        if self.mode == "posix" and self.fd is not None and self.old_settings is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None
        self.mode = "none"
        self.pending.clear()

    def __enter__(self) -> "KeyPoller":
        self.open()
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def poll(self) -> Optional[str]:
        """Return the name of one pending key press, or None."""
        if not self.pending:
            if self.mode == "windows":
                self._read_windows()
            elif self.mode == "posix":
                self._read_posix()
        return self.pending.popleft() if self.pending else None

    def _read_windows(self) -> None:
        while msvcrt.kbhit():
            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                msvcrt.getwch()  # function-key suffix
                continue
            name = key_name(ch)
            if name is not None:
                self.pending.append(name)

    def _read_posix(self) -> None:
        readable, _, _ = select.select([self.fd], [], [], 0)
        if not readable:
            return
        # Read the whole pending burst so escape sequences arrive together
        data = os.read(self.fd, 1024)
        self.pending.extend(decode_keys(data.decode("utf-8", errors="ignore")))
