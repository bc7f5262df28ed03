"""Filter matching strategies.

A matcher turns the typed filter into a ``MatchSpec``: either a regex
tested against the buffer name, or a custom predicate that may look at
anything on the buffer. Patterns are always assembled from escaped
fragments, so no filter text can produce an invalid regex.
"""
import logging
import re
from abc import ABC, abstractmethod
from typing import Callable, Dict, NamedTuple, Optional

from bufswitch.host import Buffer

logger = logging.getLogger(__name__)

FOLD_ALWAYS = "always"
FOLD_NEVER = "never"
FOLD_SMART = "smart"  # fold unless the filter has an uppercase letter
FOLD_POLICIES = (FOLD_ALWAYS, FOLD_NEVER, FOLD_SMART)

DEFAULT_MATCHER = "word-parts"

_WORD_PARTS = re.compile(r"\w+|\W")


class MatchSpec(NamedTuple):
    pattern: str
    predicate: Optional[Callable[[str, Buffer], bool]]
    fold_case: bool


class BufferMatcher(ABC):
    """Strategy base.

    Regex strategies implement ``build_pattern``. Strategies that decide
    membership with a custom predicate override ``resolve`` instead and
    may leave ``build_pattern`` as a trivial implementation.
    """

    name = ""

    @abstractmethod
    def build_pattern(self, text: str) -> str:
        """Regex (built from escaped fragments) a matching name must contain."""

    def resolve(self, text: str, fold_case: bool) -> MatchSpec:
        return MatchSpec(self.build_pattern(text), None, fold_case)


class SubstringMatcher(BufferMatcher):
    """Name contains the filter verbatim."""

    name = "substring"

    def build_pattern(self, text):
        return re.escape(text)


class WordPartsMatcher(BufferMatcher):
    """Word runs and single punctuation characters, in order, gaps allowed.

    ``ead.txt`` becomes ``ead.*\\..*txt`` and matches ``readme.txt``.
    """

    name = "word-parts"

    def build_pattern(self, text):
        return ".*".join(re.escape(part) for part in _WORD_PARTS.findall(text))


class SubsequenceMatcher(BufferMatcher):
    """Every filter character, in order, gaps allowed."""

    name = "subsequence"

    def build_pattern(self, text):
        return ".*".join(re.escape(c) for c in text)


BUILTIN_MATCHERS = (SubstringMatcher, WordPartsMatcher, SubsequenceMatcher)


class MatcherRegistry:
    """Name to matcher table, seeded with the built-in strategies.

    Each switcher owns its own registry; hosts add strategies to it with
    ``register``.
    """

    def __init__(self):
        self._matchers: Dict[str, BufferMatcher] = {}
        for cls in BUILTIN_MATCHERS:
            self.register(cls())

    def register(self, matcher: BufferMatcher, name: Optional[str] = None):
        """Make ``matcher`` selectable by name from configuration."""
        key = name or matcher.name
        if not key:
            raise ValueError("matcher needs a name")
        self._matchers[key] = matcher

    def get(self, name: str) -> BufferMatcher:
        """Look up a matcher by name, falling back to the default one."""
        matcher = self._matchers.get(name)
        if matcher is None:
            logger.warning("Unknown matcher %r, using %r", name, DEFAULT_MATCHER)
            matcher = self._matchers[DEFAULT_MATCHER]
        return matcher

    def names(self):
        return sorted(self._matchers)

    def __contains__(self, name):
        return name in self._matchers


def resolve_fold_case(text: Optional[str], policy: str) -> bool:
    """Decide whether matching ignores case."""
    if policy == FOLD_ALWAYS:
        return True
    if policy == FOLD_NEVER:
        return False
    if not text:
        return True
    return not any(c.isupper() for c in text)


def compile_filter(text: Optional[str], matcher: BufferMatcher,
                   policy: str = FOLD_SMART) -> Callable[[Buffer], bool]:
    """Return a predicate telling whether a buffer passes the filter."""
    if text is None:
        return lambda buffer: True

    resolved = matcher.resolve(text, resolve_fold_case(text, policy))
    if resolved.predicate is not None:
        pred, pattern = resolved.predicate, resolved.pattern
        return lambda buffer: bool(pred(pattern, buffer))

    regex = re.compile(resolved.pattern, re.IGNORECASE if resolved.fold_case else 0)
    return lambda buffer: regex.search(buffer.name) is not None
