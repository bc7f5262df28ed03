"""Core controller — ties together history, candidates, session and rendering."""
import logging
from typing import Optional

from bufswitch import events
from bufswitch.candidates import CandidateSetBuilder, PreconditionError
from bufswitch.config import Config
from bufswitch.filter_input import FilterInput
from bufswitch.history import HistoryTracker
from bufswitch.host import Buffer, Host, Window
from bufswitch.matcher import MatcherRegistry
from bufswitch.renderer import CandidateListRenderer, reverse_video
from bufswitch.rules import RuleSet
from bufswitch.session import SwitchSession

logger = logging.getLogger(__name__)


class Switcher:
    """Owns all switcher state for one running editor.

    History is tracked while idle. While a session is active the tracker is
    suspended, so buffers shown while browsing do not enter the history;
    only the buffer chosen on finalize (or restored on cancel) does.
    """

    def __init__(self, host: Host, config: Optional[Config] = None,
                 matchers: Optional[MatcherRegistry] = None):
        self.host = host
        self.config = config if config is not None else Config()
        self.history = HistoryTracker()
        self.ignore_rules = RuleSet.from_config(self.config.ignore_patterns)
        self.uninteresting_rules = RuleSet.from_config(self.config.uninteresting_patterns)
        self._builder = CandidateSetBuilder(
            self.history, self.ignore_rules, self.uninteresting_rules)
        self.matchers = matchers if matchers is not None else MatcherRegistry()
        self.matcher = self.matchers.get(self.config.matcher)
        highlight = reverse_video if self.config.highlight == "reverse" else None
        self.renderer = CandidateListRenderer(
            separator=self.config.separator,
            ellipsis=self.config.ellipsis,
            highlight=highlight,
        )
        self._session: Optional[SwitchSession] = None

    @property
    def session(self) -> Optional[SwitchSession]:
        return self._session

    @property
    def active(self) -> bool:
        return self._session is not None

    def dispatch(self, event):
        """Route one host event."""
        if isinstance(event, events.BufferDisplayed):
            self.buffer_displayed(event.window, event.buffer)
        elif isinstance(event, events.WindowClosed):
            self.window_closed(event.window)
        elif isinstance(event, events.Next):
            self.next()
        elif isinstance(event, events.Previous):
            self.previous()
        elif isinstance(event, events.ActivateFilter):
            self.activate_filter()
        elif isinstance(event, events.ExtendFilter):
            self.extend_filter(event.char)
        elif isinstance(event, events.DeleteLastFilterChar):
            self.delete_last_filter_char()
        elif isinstance(event, events.Finalize):
            self.finalize()
        elif isinstance(event, events.Cancel):
            self.cancel()
        elif isinstance(event, events.OtherCommand):
            self.other_command(event.command)
        else:
            raise TypeError(f"Unknown event: {event!r}")

    # History

    def buffer_displayed(self, window: Optional[Window] = None,
                         buffer: Optional[Buffer] = None):
        """Record what the host shows. Ignored while a session is active."""
        if self.history.suspended:
            return
        if window is None:
            self.history.observe(self.host)
            return
        if buffer is None:
            buffer = self.host.displayed_buffer(window)
        self.history.record(window, buffer)

    def window_closed(self, window: Window):
        self.history.forget(window)

    # Session lifecycle

    def start(self) -> bool:
        """Open a session in the selected window. Returns False if refused."""
        if self._session is not None:
            return True
        window = self.host.selected_window()
        current = self.host.displayed_buffer(window)
        try:
            CandidateSetBuilder.check_window(window)
            self.history.record(window, current)
            snapshot = self._builder.build(window, self.host.buffers())
        except PreconditionError as e:
            logger.warning("Switch refused: %s", e)
            self.host.show_status(str(e))
            return False

        self.history.suspend()
        self._session = SwitchSession(window, snapshot, start_buffer=current)
        logger.info("Switch started in %r with %d candidates", window, len(snapshot))
        return True

    def next(self):
        if not self.start():
            return
        self._step(1)

    def previous(self):
        if self._session is None:
            # The previous entry at start time is the least relevant candidate.
            if self.start():
                self._show_status()
            return
        self._step(-1)

    def activate_filter(self):
        if not self.start():
            return
        self._session.filter_active = True
        self._show_status()

    def extend_filter(self, char: str):
        session = self._session
        if session is None:
            return
        if not FilterInput.accepts(char):
            logger.debug("Not a plain character, ignoring %r", char)
            return
        session.extend_filter(char, self._current(), self.matcher, self.config.fold_case)
        self._display_selection()
        self._show_status()

    def delete_last_filter_char(self):
        session = self._session
        if session is None:
            return
        if not session.delete_last_filter_char(
                self._current(), self.matcher, self.config.fold_case):
            logger.debug("Filter already empty")
            return
        self._display_selection()
        self._show_status()

    def finalize(self):
        if self._session is None:
            return
        chosen = self._session.selected()
        logger.info("Switch finalized on %r", chosen)
        self._end(chosen)

    def cancel(self):
        if self._session is None:
            return
        logger.info("Switch cancelled, restoring %r", self._session.start_buffer)
        self._end(self._session.start_buffer)

    def other_command(self, command):
        """Finish the session, then let the host run ``command`` normally."""
        self.finalize()
        self.host.run_command(command)

    def status_text(self) -> str:
        session = self._session
        if session is None:
            return ""
        width = self.host.status_width() or self.config.status_width
        budget = max(width - len(self.renderer.prefix(session)), 0)
        return self.renderer.render(session, budget)

    # Internals

    def _current(self) -> Optional[Buffer]:
        return self.host.displayed_buffer(self._session.window)

    def _step(self, delta: int):
        buffer = self._session.move(delta)
        if buffer is not None:
            self.host.set_displayed_buffer(self._session.window, buffer)
        logger.debug("Selection moved to %s", self._session.index)
        self._show_status()

    def _display_selection(self):
        buffer = self._session.selected()
        if buffer is not None and buffer is not self._current():
            self.host.set_displayed_buffer(self._session.window, buffer)

    def _show_status(self):
        self.host.show_status(self.status_text())

    def _end(self, buffer: Optional[Buffer]):
        window = self._session.window
        self._session = None
        self.history.resume()
        if buffer is not None and buffer.is_live():
            if self.host.displayed_buffer(window) is not buffer:
                self.host.set_displayed_buffer(window, buffer)
        else:
            buffer = self.host.displayed_buffer(window)
        self.history.record(window, buffer)
        self.host.show_status("")
