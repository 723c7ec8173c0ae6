"""Signals and the controller that feeds the information bar."""

from __future__ import annotations

import threading
from typing import Any, Callable


class Signal:
    """A list of callables invoked in connection order."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> Callable[..., Any]:
        """Register *slot*; returns it so this can serve as a decorator."""
        self._slots.append(slot)
        return slot

    def disconnect(self, slot: Callable[..., Any] | None = None) -> None:
        """Remove *slot*, or every slot when none is given."""
        if slot is None:
            self._slots.clear()
        else:
            self._slots.remove(slot)

    def emit(self, *args: Any) -> None:
        """Call every connected slot with *args*."""
        for slot in list(self._slots):
            slot(*args)


class InfoBarController:
    """Posts messages to the information bar and clears them after a delay."""

    def __init__(self) -> None:
        self.cleared = Signal()
        self.right_msg_posted = Signal()
        self.left_msg_posted = Signal()
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._generation = 0

    def clear(self) -> None:
        """Clear the bar now."""
        self.cleared.emit()

    def post_msg_r(self, text: str) -> None:
        """Show *text* aligned to the right."""
        self.right_msg_posted.emit(text)

    def post_msg_l(self, text: str, lifetime: int = -1) -> None:
        """Show *text* aligned to the left, clearing it after *lifetime* ms if positive."""
        self.left_msg_posted.emit(text)
        if lifetime > 0:
            self._start_timer(lifetime)

    def cancel(self) -> None:
        """Stop a pending clear."""
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        """True while a delayed clear is scheduled."""
        with self._lock:
            return self._timer is not None

    def _start_timer(self, lifetime_ms: int) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            timer = threading.Timer(
                lifetime_ms / 1000.0, self._on_timeout, args=(self._generation,)
            )
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _on_timeout(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
        self.cleared.emit()