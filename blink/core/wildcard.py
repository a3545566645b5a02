"""Wildcard key matching.

Patterns use `*` as the only meta-character: it matches zero or more
characters of any kind. Everything else, including `?`, `[`, `]` and
backslashes, is compared literally.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
  from collections.abc import Iterable

WILDCARD = "*"


def contains_wildcard(text: str) -> bool:
  """Return True if `text` should be treated as a wildcard pattern."""
  return WILDCARD in text


@dataclass(frozen=True)
class WildcardPattern:
  """A pattern split into the literal segments between wildcards.

  `head` must open the key, `tail` must close it, and each of `middle`
  must appear in order somewhere in between.
  """

  source: str
  head: str
  middle: tuple[str, ...]
  tail: str

  @classmethod
  def parse(cls, pattern: str) -> WildcardPattern:
    """Split a pattern on `*` into its literal segments."""
    parts = pattern.split(WILDCARD)
    if len(parts) == 1:
      # No wildcard: the whole pattern is the head and must match exactly.
      return cls(source=pattern, head=pattern, middle=(), tail="")
    return cls(
      source=pattern,
      head=parts[0],
      middle=tuple(p for p in parts[1:-1] if p),
      tail=parts[-1],
    )

  @property
  def is_literal(self) -> bool:
    return not contains_wildcard(self.source)

  def matches(self, key: str) -> bool:
    """Check whether `key` matches this pattern."""
    if self.is_literal:
      return key == self.source

    if len(key) < len(self.head) + len(self.tail):
      return False
    if not key.startswith(self.head) or not key.endswith(self.tail):
      return False

    # Leftmost match of each middle segment is sufficient when `*` is the
    # only meta-character.
    pos = len(self.head)
    end = len(key) - len(self.tail)
    for segment in self.middle:
      index = key.find(segment, pos, end)
      if index == -1:
        return False
      pos = index + len(segment)
    return True


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> WildcardPattern:
  """Parse a pattern, reusing earlier results for repeated lookups."""
  return WildcardPattern.parse(pattern)


def matching_keys(keys: Iterable[str], pattern: str) -> list[str]:
  """Return the keys matching `pattern`, preserving their order.

  Args:
      keys: Candidate keys, usually a store's keys in insertion order
      pattern: Wildcard pattern

  Returns:
      List of matching keys
  """
  compiled = compile_pattern(pattern)
  return [key for key in keys if compiled.matches(key)]
