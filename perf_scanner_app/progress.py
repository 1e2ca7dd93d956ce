"""Spinner for indeterminate progress on the terminal."""

import sys
from typing import Any


class Spinner:
    """A spinner that advances one frame per update. Silent when not on a TTY."""

    FRAMES = "|/-\\"

    def __init__(self, message: str = "Scanning project...", file: Any = None, enabled: bool = True):
        self.message = message
        self.file = file or sys.stderr
        self.enabled = enabled
        self._frame = 0

    def _is_tty(self) -> bool:
        """Check if output is a terminal."""
        return hasattr(self.file, "isatty") and self.file.isatty()

    def _active(self) -> bool:
        return self.enabled and self._is_tty()

    def start(self) -> None:
        self.spin()

    def spin(self) -> None:
        """Advance spinner by one frame."""
        if not self._active():
            return
        char = self.FRAMES[self._frame % len(self.FRAMES)]
        self.file.write(f"\r\033[K{char} {self.message}")
        self.file.flush()
        self._frame += 1

    def update(self, message: str) -> None:
        """Update the spinner message."""
        self.message = message
        self.spin()

    def stop(self) -> None:
        """Clear the spinner line."""
        if not self._active():
            return
        self.file.write("\r\033[K")
        self.file.flush()
