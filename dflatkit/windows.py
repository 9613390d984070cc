"""Window rectangles, the window tree and focus movement between siblings."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field

APPLICATION = "APPLICATION"
MENUBAR = "MENUBAR"
STATUSBAR = "STATUSBAR"


@dataclass(frozen=True)
class Rect:
    """A screen rectangle with inclusive edges."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    def contains(self, x: int, y: int) -> bool:
        """Return True when the point lies inside the rectangle."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def intersect(self, other: Rect) -> Rect | None:
        """Return the overlap of two rectangles, or None when they do not meet."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if left > right or top > bottom:
            return None
        return Rect(left, top, right, bottom)

    def translated(self, dx: int, dy: int) -> Rect:
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)


@dataclass(eq=False)
class Window:
    """A node of the window tree.

    A window given a parent at construction is appended to the end of the
    parent's children, the position that is drawn last and sits on top.
    """

    rect: Rect
    window_class: str = "NORMAL"
    parent: Window | None = None
    title: str | None = None
    hidden: bool = False
    noclip: bool = False
    has_border: bool = False
    has_title: bool = False
    closing: bool = False
    condition: Hashable = None
    restored_rect: Rect | None = None
    childfocus: Window | None = field(default=None, repr=False)
    children: list[Window] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.parent is not None:
            self.append()

    # ---- geometry ----
    @property
    def width(self) -> int:
        return self.rect.width

    @property
    def height(self) -> int:
        return self.rect.height

    @property
    def client_rect(self) -> Rect:
        """The rectangle inside the border and title bar."""
        side = 1 if self.has_border else 0
        top = 1 if (self.has_border or self.has_title) else 0
        return Rect(
            self.rect.left + side,
            self.rect.top + top,
            self.rect.right - side,
            self.rect.bottom - side,
        )

    # ---- siblings ----
    def _siblings(self) -> list[Window]:
        return self.parent.children if self.parent is not None else []

    @property
    def next_sibling(self) -> Window | None:
        siblings = self._siblings()
        if self not in siblings:
            return None
        i = siblings.index(self)
        return siblings[i + 1] if i + 1 < len(siblings) else None

    @property
    def prev_sibling(self) -> Window | None:
        siblings = self._siblings()
        if self not in siblings:
            return None
        i = siblings.index(self)
        return siblings[i - 1] if i > 0 else None

    @property
    def first_child(self) -> Window | None:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Window | None:
        return self.children[-1] if self.children else None

    # ---- tree maintenance ----
    def append(self) -> None:
        """Put this window at the end of its parent's children."""
        if self.parent is not None:
            self.remove()
            self.parent.children.append(self)

    def remove(self) -> None:
        """Take this window out of its parent's children; the parent link stays."""
        if self.parent is not None and self in self.parent.children:
            self.parent.children.remove(self)

    def refocus(self) -> None:
        """Move this window and each of its ancestors to the end of their lists."""
        wnd: Window | None = self
        while wnd is not None and wnd.parent is not None:
            wnd.remove()
            wnd.append()
            wnd = wnd.parent

    # ---- queries ----
    def ancestors(self):
        """Yield this window and then each of its ancestors."""
        wnd: Window | None = self
        while wnd is not None:
            yield wnd
            wnd = wnd.parent

    def is_ancestor(self, other: Window) -> bool:
        """Return True when ``other`` is this window or one of its ancestors."""
        return any(wnd is other for wnd in self.ancestors())

    def is_visible(self) -> bool:
        """Return True when neither this window nor any ancestor is hidden."""
        return not any(wnd.hidden for wnd in self.ancestors())

    def get_ancestor(self) -> Window:
        """Return the oldest ancestor below the application window."""
        wnd = self
        while wnd.parent is not None and wnd.parent.window_class != APPLICATION:
            wnd = wnd.parent
        return wnd

    def inside(self, x: int, y: int) -> bool:
        """Return True when the point is in the part of the window not clipped away."""
        rc: Rect | None = self.rect
        if not self.noclip:
            pwnd = self.parent
            while pwnd is not None and rc is not None:
                rc = rc.intersect(pwnd.client_rect)
                pwnd = pwnd.parent
        return rc is not None and rc.contains(x, y)


def _cycle(
    focus: Window | None,
    step: Callable[[Window], Window | None],
    wrap: Callable[[Window], Window | None],
    skip: frozenset[str],
) -> Window | None:
    if focus is None:
        return None
    wnd: Window | None = focus
    seen: set[int] = set()
    while True:
        parent = wnd.parent
        sibling = step(wnd)
        if sibling is not None:
            wnd = sibling
        elif parent is not None:
            wnd = wrap(parent)
        if wnd is None or wnd is focus or id(wnd) in seen:
            wnd = parent
            break
        seen.add(id(wnd))
        if wnd.window_class in skip:
            continue
        if wnd.is_visible():
            break
    if wnd is None:
        return None
    while wnd.childfocus is not None:
        wnd = wnd.childfocus
    return None if wnd.closing else wnd


def set_next_focus(focus: Window | None) -> Window | None:
    """Return the window that takes the focus after ``focus``, or None.

    The next visible sibling is chosen, wrapping to the first; status and
    menu bars are passed over.  With no other candidate the parent is
    chosen.  The choice then follows remembered child focus downwards.
    """
    return _cycle(
        focus,
        lambda w: w.next_sibling,
        lambda p: p.first_child,
        frozenset({STATUSBAR, MENUBAR}),
    )


def set_prev_focus(focus: Window | None) -> Window | None:
    """Return the window that takes the focus before ``focus``, or None.

    Like :func:`set_next_focus` but moving backwards; only status bars are
    passed over.
    """
    return _cycle(
        focus,
        lambda w: w.prev_sibling,
        lambda p: p.last_child,
        frozenset({STATUSBAR}),
    )