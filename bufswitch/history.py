"""Per-window buffer history, most recently shown first."""
import logging
from typing import Dict, List

from bufswitch.host import Buffer, Window

logger = logging.getLogger(__name__)


class HistoryTracker:
    """Maintains one ordered stack of buffers for every window.

    Stacks never contain duplicates. Dead buffers are not removed when they
    are killed; they are dropped the next time their window is updated.
    """

    def __init__(self):
        self._stacks: Dict[Window, List[Buffer]] = {}
        self._suspended = False

    @property
    def suspended(self) -> bool:
        return self._suspended

    def suspend(self):
        self._suspended = True

    def resume(self):
        self._suspended = False

    def record(self, window: Window, top: Buffer):
        """Promote ``top`` to the head of ``window``'s stack."""
        if self._suspended or top is None:
            return
        old = self._stacks.get(window, [])
        self._stacks[window] = [top] + [
            buf for buf in old if buf is not top and buf.is_live()
        ]
        logger.debug("History for %r: %r", window, self._stacks[window])

    def observe(self, host):
        """Update every window from what ``host`` currently displays."""
        if self._suspended:
            return
        for window in host.windows():
            self.record(window, host.displayed_buffer(window))

    def stack(self, window: Window) -> List[Buffer]:
        return list(self._stacks.get(window, ()))

    def forget(self, window: Window):
        """Drop the history of a closed window."""
        if self._stacks.pop(window, None) is not None:
            logger.debug("Forgot history for %r", window)

    def __contains__(self, window):
        return window in self._stacks
