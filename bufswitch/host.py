"""Host contract — what the editor must provide to the switcher.

The switcher never owns windows or buffers. It only holds references to
them and asks the host to enumerate, display and report status.
"""
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)


class Buffer:
    """A named document the host can show in a window.

    Identity is object identity: two buffers with the same name are
    still different buffers.
    """

    def __init__(self, name: str):
        self.name = name
        self._live = True

    def is_live(self) -> bool:
        return self._live

    def kill(self):
        self._live = False

    def __repr__(self):
        state = "" if self._live else " dead"
        return f"<Buffer {self.name!r}{state}>"


class Window:
    """A viewport showing one buffer at a time."""

    def __init__(self, name: str, is_minibuffer: bool = False,
                 strongly_dedicated: bool = False):
        self.name = name
        self.is_minibuffer = is_minibuffer
        self.strongly_dedicated = strongly_dedicated

    def __repr__(self):
        return f"<Window {self.name!r}>"


class Host(ABC):
    """Editor primitives used by the switcher."""

    @abstractmethod
    def buffers(self) -> Iterable[Buffer]:
        """All buffers in the host's natural order."""

    @abstractmethod
    def windows(self) -> Iterable[Window]:
        """All windows currently open."""

    @abstractmethod
    def selected_window(self) -> Window:
        """The window that receives commands."""

    @abstractmethod
    def displayed_buffer(self, window: Window) -> Optional[Buffer]:
        """Buffer currently shown in ``window``."""

    @abstractmethod
    def set_displayed_buffer(self, window: Window, buffer: Buffer):
        """Show ``buffer`` in ``window``."""

    @abstractmethod
    def show_status(self, text: str):
        """Display a single status line (empty string clears it)."""

    def status_width(self) -> Optional[int]:
        """Width of the status area in columns, or None if unknown."""
        return None

    def run_command(self, command):
        """Run a command the switcher did not recognise."""
        logger.debug("Host has no command runner, dropping %r", command)


class MemoryHost(Host):
    """Host kept entirely in memory.

    Used by the replay CLI and by tests. ``on_display`` is called after
    every buffer change, the way an editor fires its window-change hook.
    """

    def __init__(self, width: Optional[int] = None):
        self._buffers: List[Buffer] = []
        self._windows: List[Window] = []
        self._shown: dict = {}
        self._selected: Optional[Window] = None
        self.width = width
        self.status_lines: List[str] = []
        self.commands: list = []
        self.on_display = None

    def add_buffer(self, name: str) -> Buffer:
        buf = Buffer(name)
        self._buffers.append(buf)
        return buf

    def add_window(self, name: str, **kwargs) -> Window:
        win = Window(name, **kwargs)
        self._windows.append(win)
        if self._selected is None:
            self._selected = win
        return win

    def kill_buffer(self, buffer: Buffer):
        buffer.kill()
        self._buffers.remove(buffer)
        for win, shown in list(self._shown.items()):
            if shown is buffer:
                del self._shown[win]

    def close_window(self, window: Window):
        self._windows.remove(window)
        self._shown.pop(window, None)
        if self._selected is window:
            self._selected = self._windows[0] if self._windows else None

    def select_window(self, window: Window):
        self._selected = window

    def find_buffer(self, name: str) -> Optional[Buffer]:
        for buf in self._buffers:
            if buf.name == name:
                return buf
        return None

    def find_window(self, name: str) -> Optional[Window]:
        for win in self._windows:
            if win.name == name:
                return win
        return None

    # Host interface

    def buffers(self):
        return list(self._buffers)

    def windows(self):
        return list(self._windows)

    def selected_window(self):
        return self._selected

    def displayed_buffer(self, window):
        return self._shown.get(window)

    def set_displayed_buffer(self, window, buffer):
        self._shown[window] = buffer
        if self.on_display is not None:
            self.on_display(window)

    def show_status(self, text):
        self.status_lines.append(text)

    def status_width(self):
        return self.width

    def run_command(self, command):
        self.commands.append(command)

    @property
    def last_status(self) -> Optional[str]:
        return self.status_lines[-1] if self.status_lines else None
