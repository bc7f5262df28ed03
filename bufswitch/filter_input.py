"""Filter text — accumulates typed characters during a switch."""
from typing import Optional


class FilterInput:
    """Raw filter text typed by the user.

    The text is absent (None) until the first character is typed, and
    becomes absent again when the last character is deleted.
    """

    def __init__(self):
        self._chars: list[str] = []

    @staticmethod
    def accepts(char) -> bool:
        """True for a single printable character."""
        return isinstance(char, str) and len(char) == 1 and char.isprintable()

    def add_char(self, char: str):
        self._chars.append(char)

    def handle_backspace(self) -> bool:
        """Remove the last character. Returns False if there was nothing to remove."""
        if not self._chars:
            return False
        self._chars.pop()
        return True

    @property
    def text(self) -> Optional[str]:
        if not self._chars:
            return None
        return ''.join(self._chars)
