"""Window-scoped buffer switching with recency ordering and live filtering."""
from bufswitch.candidates import CandidateSetBuilder, PreconditionError
from bufswitch.config import Config
from bufswitch.history import HistoryTracker
from bufswitch.host import Buffer, Host, MemoryHost, Window
from bufswitch.matcher import BufferMatcher, MatcherRegistry
from bufswitch.renderer import CandidateListRenderer
from bufswitch.rules import NameRegex, Predicate, RuleSet
from bufswitch.session import SwitchSession
from bufswitch.switcher import Switcher

__version__ = "0.1.0"
