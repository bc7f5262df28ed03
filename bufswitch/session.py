"""Switch session state and its selection/filter operations."""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from bufswitch.filter_input import FilterInput
from bufswitch.host import Buffer, Window
from bufswitch.matcher import BufferMatcher, FOLD_SMART, compile_filter
from bufswitch.undo import IndexUndoStack

logger = logging.getLogger(__name__)


@dataclass
class SwitchSession:
    """State of one in-progress switch in one window.

    ``filtered`` is always an order-preserving subsequence of ``snapshot``.
    ``index`` is None exactly when ``filtered`` is empty.
    """
    window: Window
    snapshot: Tuple[Buffer, ...]
    start_buffer: Optional[Buffer] = None
    filtered: List[Buffer] = field(default_factory=list)
    index: Optional[int] = None
    filter_active: bool = False
    filter_input: FilterInput = field(default_factory=FilterInput)
    index_undo: IndexUndoStack = field(default_factory=IndexUndoStack)
    display_window: Optional[Tuple[int, int]] = None

    def __post_init__(self):
        self.filtered = list(self.snapshot)
        self.index = 0 if self.filtered else None

    @property
    def filter(self) -> Optional[str]:
        return self.filter_input.text

    def selected(self) -> Optional[Buffer]:
        if self.index is None:
            return None
        return self.filtered[self.index]

    def move(self, delta: int) -> Optional[Buffer]:
        """Step the selection by ``delta``, wrapping around.

        Returns the newly selected buffer, or None if nothing matches.
        """
        if not self.filtered:
            return None
        self.index = (self.index + delta) % len(self.filtered)
        self.index_undo.clear()
        return self.filtered[self.index]

    def extend_filter(self, char: str, current: Optional[Buffer],
                      matcher: BufferMatcher, fold_policy: str = FOLD_SMART):
        self.index_undo.push(self.index)
        self.filter_input.add_char(char)
        self.filter_active = True
        self.refilter(current, matcher, fold_policy)

    def delete_last_filter_char(self, current: Optional[Buffer],
                                matcher: BufferMatcher,
                                fold_policy: str = FOLD_SMART) -> bool:
        """Remove the last filter character. Returns False if the filter was empty."""
        if not self.filter_input.handle_backspace():
            return False
        requested = self.index_undo.pop()
        self.refilter(current, matcher, fold_policy, requested)
        return True

    def refilter(self, current: Optional[Buffer], matcher: BufferMatcher,
                 fold_policy: str = FOLD_SMART, requested: Optional[int] = None):
        """Recompute ``filtered`` and ``index`` from the current filter.

        ``requested`` (from the undo stack) wins when given. Otherwise the
        buffer currently displayed stays selected if it still matches, and
        the first match is selected if it does not.
        """
        accept = compile_filter(self.filter, matcher, fold_policy)
        self.filtered = [buf for buf in self.snapshot if accept(buf)]
        self.display_window = None

        if not self.filtered:
            self.index = None
        elif requested is not None:
            self.index = min(max(requested, 0), len(self.filtered) - 1)
        else:
            self.index = 0
            for pos, buf in enumerate(self.filtered):
                if buf is current:
                    self.index = pos
                    break
        logger.debug("Filter %r: %d of %d candidates, index %s",
                     self.filter, len(self.filtered), len(self.snapshot), self.index)
