"""Buffer classification rules: name regexes and arbitrary predicates."""
import re
from typing import Callable, Iterable, List, Union

from bufswitch.host import Buffer


class NameRegex:
    """Matches buffers whose name contains a match for ``pattern``."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        self._regex = re.compile(pattern)

    def __call__(self, buffer: Buffer) -> bool:
        return self._regex.search(buffer.name) is not None

    def __repr__(self):
        return f"NameRegex({self.pattern!r})"


class Predicate:
    """Matches buffers for which ``fn(buffer)`` is true."""

    def __init__(self, fn: Callable[[Buffer], bool]):
        self.fn = fn

    def __call__(self, buffer: Buffer) -> bool:
        return bool(self.fn(buffer))

    def __repr__(self):
        return f"Predicate({getattr(self.fn, '__name__', self.fn)!r})"


Rule = Union[NameRegex, Predicate]


class RuleSet:
    """Ordered rules; a buffer matches if any rule matches."""

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules: List[Rule] = list(rules)

    @classmethod
    def from_config(cls, patterns: Iterable[str]) -> "RuleSet":
        return cls(NameRegex(p) for p in patterns)

    def add(self, rule):
        """Append a rule. Plain callables are wrapped as predicates."""
        if not isinstance(rule, (NameRegex, Predicate)):
            rule = Predicate(rule)
        self._rules.append(rule)

    def matches(self, buffer: Buffer) -> bool:
        return any(rule(buffer) for rule in self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __len__(self):
        return len(self._rules)
