"""Input events delivered by the host."""
from dataclasses import dataclass
from typing import Any, Optional

from bufswitch.host import Buffer, Window


@dataclass(frozen=True)
class BufferDisplayed:
    # None means "re-check every window"
    window: Optional[Window] = None
    buffer: Optional[Buffer] = None


@dataclass(frozen=True)
class WindowClosed:
    window: Window


@dataclass(frozen=True)
class Next:
    pass


@dataclass(frozen=True)
class Previous:
    pass


@dataclass(frozen=True)
class ActivateFilter:
    pass


@dataclass(frozen=True)
class ExtendFilter:
    char: str


@dataclass(frozen=True)
class DeleteLastFilterChar:
    pass


@dataclass(frozen=True)
class Finalize:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class OtherCommand:
    command: Any
