"""Event and message queues, input capture chains and the status clock."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

MAXMESSAGES = 50

T = TypeVar("T")


@dataclass(frozen=True)
class Event:
    """A low-level input event: its kind and the two values it carries.

    For mouse events ``x`` and ``y`` are screen coordinates; for keyboard
    events they are the key code and the shift state.
    """

    kind: Hashable
    x: int = 0
    y: int = 0


class BoundedQueue(Generic[T]):
    """A first-in first-out queue that drops what is posted while it is full."""

    def __init__(self, capacity: int = MAXMESSAGES) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def full(self) -> bool:
        return len(self._items) >= self.capacity

    def post(self, item: T) -> bool:
        """Queue an item; return False if the queue was full and it was dropped."""
        if self.full:
            return False
        self._items.append(item)
        return True

    def pop(self) -> T:
        """Remove and return the oldest item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def drain(self) -> Iterator[T]:
        """Yield items until the queue is empty, including ones posted meanwhile."""
        while self._items:
            yield self._items.popleft()

    def clear(self) -> None:
        self._items.clear()


@dataclass
class CaptureChain:
    """The stack of windows that have captured the mouse or the keyboard.

    Each capture remembers which window held the capture before it, so
    releasing a window hands the capture back to its predecessor, and a
    window released out of order is unlinked from the middle of the chain.
    ``exclusive`` is true while the current capture keeps input away from
    the holder's children as well.
    """

    current: Hashable | None = None
    exclusive: bool = False
    _previous: dict[Hashable, Hashable | None] = field(
        default_factory=dict, repr=False
    )

    def previous(self, window: Hashable) -> Hashable | None:
        """Return the window that held the capture before this one."""
        return self._previous.get(window)

    def capture(self, window: Hashable, holder: Hashable | None = None) -> None:
        """Give the capture to a window.

        The earlier holder is remembered on ``holder`` when given, otherwise
        on the window itself.
        """
        self._previous[holder if holder is not None else window] = self.current
        self.current = window

    def release(self, window: Hashable | None, force: bool = False) -> None:
        """Release a window's capture.

        Releasing None clears the capture altogether.  The current holder, or
        any window when ``force`` is set, hands the capture to its
        predecessor.  A window deeper in the chain is unlinked from it; if it
        is not in the chain at all the capture is cleared.
        """
        if window is None:
            self.current = None
        else:
            if self.current == window or force:
                self.current = self._previous.get(window)
            else:
                link = self.current
                while link is not None:
                    if self._previous.get(link) == window:
                        self._previous[link] = self._previous.get(window)
                        break
                    link = self._previous.get(link)
                if link is None:
                    self.current = None
            self._previous.pop(window, None)
        self.exclusive = False

    def __iter__(self) -> Iterator[Hashable]:
        """Iterate over the holders, current first."""
        link = self.current
        seen: set[Hashable] = set()
        while link is not None and link not in seen:
            seen.add(link)
            yield link
            link = self._previous.get(link)


def format_clock(hour: int, minute: int, blink: bool = False) -> str:
    """Format the status bar clock, 12-hour with am/pm.

    With ``blink`` set the colon is blanked, as on alternate seconds.
    """
    if not 0 <= hour <= 23:
        raise ValueError(f"hour out of range: {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"minute out of range: {minute}")
    hr = hour - 12 if hour > 12 else hour
    if hr == 0:
        hr = 12
    separator = " " if blink else ":"
    suffix = "pm " if hour > 11 else "am "
    return f"{hr:2d}{separator}{minute:02d}{suffix}"