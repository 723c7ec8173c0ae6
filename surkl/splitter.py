"""A tree of splitters dividing space between windows."""

from __future__ import annotations

import itertools
from enum import Enum
from typing import Union

from surkl.infobar import Signal

HANDLE_WIDTH = 7

_widget_ids = itertools.count()


class Orientation(Enum):
    """Direction in which a splitter lays out its children."""

    HORIZONTAL = 1
    VERTICAL = 2

    def flipped(self) -> Orientation:
        return Orientation.VERTICAL if self is Orientation.HORIZONTAL else Orientation.HORIZONTAL


class Window:
    """A leaf of the splitter tree."""

    def __init__(self) -> None:
        self.widget_id = next(_widget_ids)
        self.parent: Splitter | None = None

    def split(self, pos: tuple[int, int], orientation: Orientation) -> Window:
        """Ask the owning splitter to split this window at *pos*."""
        if self.parent is None:
            raise ValueError("window is not in a splitter")
        return self.parent.split_window(pos, orientation, self)

    def close(self) -> None:
        """Ask the owning splitter to remove this window."""
        if self.parent is not None:
            self.parent.delete_child(self)

    def swap_with(self, other: Window) -> None:
        """Exchange places with *other*."""
        Splitter.swap(self, other)


Widget = Union[Window, "Splitter"]


class Splitter:
    """Lays out windows and child splitters along one orientation.

    ``sizes`` are the lengths of the children along the orientation;
    ``cross_size`` is the splitter's extent across it.
    """

    def __init__(
        self,
        orientation: Orientation,
        cross_size: int = 0,
        handle_width: int = HANDLE_WIDTH,
    ) -> None:
        self.orientation = orientation
        self.cross_size = cross_size
        self.handle_width = handle_width
        self.widget_id = next(_widget_ids)
        self.parent: Splitter | None = None
        self.state_changed = Signal()
        self.splitter_deleted = Signal()
        self._widgets: list[Widget] = []
        self._sizes: list[int] = []

    def count(self) -> int:
        return len(self._widgets)

    def index_of(self, widget: Widget) -> int:
        """Position of *widget*, or -1 when it is not a child."""
        return next((i for i, w in enumerate(self._widgets) if w is widget), -1)

    def widget(self, index: int) -> Widget:
        if not 0 <= index < len(self._widgets):
            raise IndexError(index)
        return self._widgets[index]

    def sizes(self) -> list[int]:
        return list(self._sizes)

    def set_sizes(self, sizes) -> None:
        """Set child sizes; extra values are ignored, missing ones become zero."""
        values = [max(0, int(s)) for s in sizes][: self.count()]
        values += [0] * (self.count() - len(values))
        self._sizes = values
        for widget, size in zip(self._widgets, values):
            if isinstance(widget, Splitter):
                widget.cross_size = size

    @property
    def extent(self) -> int:
        """Total length along the orientation, handles included."""
        return sum(self._sizes) + self.handle_width * max(self.count() - 1, 0)

    def add_window(self, window: Window | None = None) -> Window:
        """Append *window*, or a new one, and return it."""
        if window is None:
            window = Window()
        self._insert(self.count(), window)
        self.state_changed.emit(self)
        return window

    def insert_window(self, index: int, window: Window) -> None:
        self._insert(index, window)

    def add_splitter(self) -> Splitter:
        """Append a new child splitter of the opposite orientation."""
        splitter = self._new_splitter(self.orientation.flipped())
        self._insert(self.count(), splitter)
        self.state_changed.emit(self)
        return splitter

    def row(self) -> int:
        """Index in the parent splitter, or -1 for a root splitter."""
        if self.parent is not None:
            return self.parent.index_of(self)
        return -1

    def move_splitter(self, pos: int, index: int) -> None:
        """Move handle *index* (before child *index*) to *pos*."""
        if not 1 <= index < self.count():
            raise IndexError(index)
        start = sum(self._sizes[: index - 1]) + self.handle_width * (index - 1)
        pair = self._sizes[index - 1] + self._sizes[index]
        first = min(max(pos - start, 0), pair)
        self._sizes[index - 1] = first
        self._sizes[index] = pair - first
        for i in (index - 1, index):
            if isinstance(self._widgets[i], Splitter):
                self._widgets[i].cross_size = self._sizes[i]
        self.state_changed.emit(self)

    def split_window(
        self, pos: tuple[int, int], split_orientation: Orientation, child: Window
    ) -> Window:
        """Split *child* at *pos* (relative to it) and return the new window."""
        child_index = self.index_of(child)
        if child_index == -1:
            raise ValueError("window is not a child of this splitter")
        widget_sizes = self.sizes()
        child_size = widget_sizes[child_index]

        if self.orientation is split_orientation:
            left_or_top = pos[1] if self.orientation is Orientation.VERTICAL else pos[0]
            widget_sizes[child_index] = left_or_top
            widget_sizes.insert(child_index + 1, child_size - left_or_top - self.handle_width)
            new_window = Window()
            self.insert_window(child_index, new_window)
            self.set_sizes(widget_sizes)
        else:
            size = pos[0] if split_orientation is Orientation.HORIZONTAL else pos[1]
            inner = self._new_splitter(split_orientation, child_size)
            inner.add_window(child)
            new_window = inner.add_window()
            inner.set_sizes([max(self.cross_size - inner.handle_width, 0), 0])
            self._insert(child_index, inner)
            self.set_sizes(widget_sizes)
            inner.move_splitter(size, 1)
            self.state_changed.emit(inner)

        self.state_changed.emit(self)
        return new_window

    def delete_child(self, child: Window) -> None:
        """Remove *child*, giving its space to its neighbours."""
        if child.parent is not self:
            raise ValueError("window is not a child of this splitter")

        count = self.count()
        if count > 2:
            child_index = self.index_of(child)
            sizes = self.sizes()
            child_size = sizes[child_index]
            half = child_size // 2
            if 0 < child_index < count - 1:
                sizes[child_index - 1] += half
                sizes[child_index + 1] += half + self.handle_width
            elif child_index == 0:
                sizes[1] += child_size + self.handle_width
            else:
                sizes[-2] += child_size + self.handle_width
            del sizes[child_index]
            self._detach(child)
            self.set_sizes(sizes)
        elif count == 2:
            parent = self.parent
            if parent is not None:
                index_of_this = parent.index_of(self)
                self._detach(child)
                remaining = self._widgets[0]
                if isinstance(remaining, Window):
                    parent._take_window(remaining, index_of_this)
                else:
                    parent._take_splitter(remaining, index_of_this)
            else:
                total = self.extent
                self._detach(child)
                self.set_sizes([total])

    @staticmethod
    def swap(win_a: Window | None, win_b: Window | None) -> None:
        """Exchange the places of two windows, keeping each splitter's sizes."""
        if win_a is None or win_b is None:
            return
        splitter_a, splitter_b = win_a.parent, win_b.parent
        if splitter_a is None or splitter_b is None:
            raise ValueError("both windows must be in a splitter")

        index_a = splitter_a.index_of(win_a)
        index_b = splitter_b.index_of(win_b)
        sizes_a = splitter_a.sizes()
        sizes_b = splitter_b.sizes()

        splitter_a.insert_window(index_a, win_b)
        splitter_b.insert_window(index_b, win_a)

        splitter_a.set_sizes(sizes_a)
        splitter_a.state_changed.emit(splitter_a)
        if splitter_a is not splitter_b:
            splitter_b.set_sizes(sizes_b)
            splitter_b.state_changed.emit(splitter_b)

    def _new_splitter(self, orientation: Orientation, cross_size: int = 0) -> Splitter:
        splitter = Splitter(orientation, cross_size, self.handle_width)
        splitter.state_changed = self.state_changed
        splitter.splitter_deleted = self.splitter_deleted
        return splitter

    def _detach(self, widget: Widget) -> int:
        index = self.index_of(widget)
        if index == -1:
            raise ValueError("widget is not a child of this splitter")
        del self._widgets[index]
        size = self._sizes.pop(index)
        widget.parent = None
        return size

    def _insert(self, index: int, widget: Widget) -> None:
        size = 0
        if widget.parent is self:
            old = self.index_of(widget)
            if old == index:
                return
            del self._widgets[old]
            size = self._sizes.pop(old)
        elif widget.parent is not None:
            widget.parent._detach(widget)

        if not 0 <= index <= len(self._widgets):
            index = len(self._widgets)
        self._widgets.insert(index, widget)
        self._sizes.insert(index, size)
        widget.parent = self

    def _take_window(self, orphan: Window, child_splitter_index: int) -> None:
        sizes = self.sizes()
        child_splitter = self._widgets[child_splitter_index]
        self.splitter_deleted.emit(child_splitter.widget_id)
        self._detach(child_splitter)
        self._insert(child_splitter_index, orphan)
        self.set_sizes(sizes)
        self.state_changed.emit(self)

    def _take_splitter(self, orphan: Splitter, child_splitter_index: int) -> None:
        """Replace the child splitter holding *orphan*, unpacking it when orientations match."""
        doomed = self._widgets[child_splitter_index]
        sizes = self.sizes()
        if self.orientation is orphan.orientation:
            new_sizes = sizes[:child_splitter_index] + orphan.sizes()
            new_sizes += sizes[child_splitter_index + 1 :]
            for offset, widget in enumerate(list(orphan._widgets)):
                self._insert(child_splitter_index + offset, widget)
            self.splitter_deleted.emit(doomed.widget_id)
            self._detach(doomed)
            self.splitter_deleted.emit(orphan.widget_id)
            orphan.parent = None
            self.set_sizes(new_sizes)
        else:
            if isinstance(doomed, Splitter):
                self.splitter_deleted.emit(doomed.widget_id)
            self._detach(doomed)
            self._insert(child_splitter_index, orphan)
            self.set_sizes(sizes)
        self.state_changed.emit(self)