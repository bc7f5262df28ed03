"""Single-line rendering of the candidate list."""
import re
from typing import Callable, Optional, Tuple

from bufswitch.session import SwitchSession

NO_MATCH = "[no match]"
REVERSE_VIDEO = "\x1b[7m{}\x1b[27m"

# Entries a viewport may span before an edge selection recenters it.
STABLE_SPAN = 5

_SGR = re.compile(r"\x1b\[[0-9;]*m")


def visible_width(text: str) -> int:
    """Number of columns ``text`` takes on screen (SGR escapes are free)."""
    return len(_SGR.sub("", text))


def reverse_video(name: str) -> str:
    return REVERSE_VIDEO.format(name)


class CandidateListRenderer:
    """Renders ``[<filter>: ]<candidates>`` within a column budget.

    The visible range of candidates is cached on the session as
    ``display_window`` and only moved when the selection gets near its
    edges, so stepping through candidates does not make the line jump.
    """

    def __init__(self, separator: str = " ", ellipsis: str = "...",
                 highlight: Optional[Callable[[str], str]] = reverse_video):
        self.separator = separator
        self.ellipsis = ellipsis
        self.highlight = highlight or (lambda name: name)

    def prefix(self, session: SwitchSession) -> str:
        if not session.filter_active:
            return ""
        return f"{session.filter or ''}: "

    def render(self, session: SwitchSession, width_limit: int) -> str:
        return self.prefix(session) + self.render_candidates(session, width_limit)

    def render_candidates(self, session: SwitchSession, width_limit: int) -> str:
        if not session.filtered or session.index is None:
            return NO_MATCH

        first, last = self.viewport(session, width_limit)
        names = [buf.name for buf in session.filtered]
        parts = []
        for pos in range(first, last + 1):
            if pos == session.index:
                parts.append(self.highlight(names[pos]))
            else:
                parts.append(names[pos])

        used = self._names_length(names, first, last)
        marker = len(self.ellipsis) + len(self.separator)
        if first > 0 and used + marker <= width_limit:
            parts.insert(0, self.ellipsis)
            used += marker
        if last < len(names) - 1 and used + marker <= width_limit:
            parts.append(self.ellipsis)
        return self.separator.join(parts)

    def viewport(self, session: SwitchSession, width_limit: int) -> Tuple[int, int]:
        """Return (and cache) the visible index range for ``session``."""
        names = [buf.name for buf in session.filtered]
        index = session.index
        window = session.display_window
        if window is not None:
            first, last = window
            stale = (
                last >= len(names)
                or index < first or index > last
                or ((index == first or index == last) and last - first + 1 > STABLE_SPAN)
                or self._cost(names, first, last) > width_limit
            )
            if not stale:
                return window
        session.display_window = self._compute(names, index, width_limit)
        return session.display_window

    def _names_length(self, names, first, last) -> int:
        return (sum(len(n) for n in names[first:last + 1])
                + len(self.separator) * (last - first))

    def _cost(self, names, first, last) -> int:
        """Rendered length of ``names[first..last]`` including edge markers."""
        marker = len(self.ellipsis) + len(self.separator)
        cost = self._names_length(names, first, last)
        if first > 0:
            cost += marker
        if last < len(names) - 1:
            cost += marker
        return cost

    def _compute(self, names, index, width_limit) -> Tuple[int, int]:
        end = len(names) - 1
        first = last = index
        while first > 0 or last < end:
            # Grow left only once right >= 3 * (left + 1), so the right side
            # stays at or just above 3:1 until an edge or the width stops it.
            grow_left = first > 0 and (
                last == end or last - index >= 3 * (index - first + 1))
            if grow_left:
                candidate = (first - 1, last)
            else:
                candidate = (first, last + 1)
            if self._cost(names, *candidate) > width_limit:
                break
            first, last = candidate
        return first, last
