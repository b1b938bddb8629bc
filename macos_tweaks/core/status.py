"""Transient status line shown under the menu."""
from __future__ import annotations

import time
from typing import Callable, Optional

STATUS_SECONDS = 5.0
ERROR_SECONDS = 8.0


class StatusLine:
    """Holds at most one message and its expiry deadline.

    Deadlines use ``clock`` (monotonic seconds), so the lifetime of a message
    does not depend on how often the screen is redrawn. ``tick`` is called once
    per render pass and drops an expired message.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.message: Optional[str] = None
        self._deadline = 0.0

    def show(self, message: str, seconds: float = STATUS_SECONDS) -> None:
        self.message = message
        self._deadline = self.clock() + seconds

    def error(self, message: str) -> None:
        self.show(message, ERROR_SECONDS)

    def clear(self) -> None:
        self.message = None
        self._deadline = 0.0

    def tick(self) -> None:
        if self.message is not None and self.clock() >= self._deadline:
            self.clear()
