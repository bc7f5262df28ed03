"""Candidate ordering for a switch session."""
import logging
from typing import Iterable, Tuple

from bufswitch.history import HistoryTracker
from bufswitch.host import Buffer, Window
from bufswitch.rules import RuleSet

logger = logging.getLogger(__name__)


class PreconditionError(Exception):
    """Switching is not allowed from this window."""


class CandidateSetBuilder:
    """Builds the ordered candidate list for a window.

    Order:
    1. interesting buffers from the window's history (recency order)
    2. other interesting buffers (host order)
    3. uninteresting buffers from the history
    4. other uninteresting buffers
    Ignored buffers never appear.
    """

    def __init__(self, history: HistoryTracker, ignore: RuleSet,
                 uninteresting: RuleSet):
        self.history = history
        self.ignore = ignore
        self.uninteresting = uninteresting

    @staticmethod
    def check_window(window: Window):
        if getattr(window, "is_minibuffer", False):
            raise PreconditionError("Cannot switch buffers in a minibuffer window")
        if getattr(window, "strongly_dedicated", False):
            raise PreconditionError(f"Window {window.name!r} is dedicated to its buffer")

    def build(self, window: Window, buffers: Iterable[Buffer]) -> Tuple[Buffer, ...]:
        """Return the candidate snapshot for ``window``.

        ``buffers`` is the host's global buffer list in its natural order.
        """
        self.check_window(window)

        interesting_history = []
        interesting_other = []
        boring_history = []
        boring_other = []
        seen = set()

        for buf in self.history.stack(window):
            if not buf.is_live() or self.ignore.matches(buf):
                continue
            seen.add(id(buf))
            if self.uninteresting.matches(buf):
                boring_history.append(buf)
            else:
                interesting_history.append(buf)

        for buf in buffers:
            if id(buf) in seen or not buf.is_live() or self.ignore.matches(buf):
                continue
            seen.add(id(buf))
            if self.uninteresting.matches(buf):
                boring_other.append(buf)
            else:
                interesting_other.append(buf)

        snapshot = tuple(interesting_history + interesting_other
                         + boring_history + boring_other)
        logger.debug("Candidates for %r: %r", window, snapshot)
        return snapshot
