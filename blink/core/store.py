"""In-process key-value store with wildcard lookups.

The store lives for as long as the object does. Nothing expires and nothing
is persisted. It is not synchronized: callers sharing one instance between
threads must guard it themselves, and `once` may run its producer more than
once under concurrent access.
"""

from __future__ import annotations

from numbers import Number
from typing import TYPE_CHECKING, Any

import structlog

from blink.core.errors import InvalidKeyError, NonNumericValueError
from blink.core.wildcard import contains_wildcard, matching_keys

if TYPE_CHECKING:
  from collections.abc import Callable, Iterator, Mapping

logger = structlog.get_logger()


class Blink:
  """A key-value store for values that only need to live briefly.

  Keys containing `*` are treated as wildcard patterns by `get`, `has`,
  `forget` and `pull`. A key stored with a literal `*` in it can therefore
  only be read back through `all()` or a matching pattern.

  Usage
  -----
  >>> blink = Blink()
  >>> blink.put("user.1.name", "Ada").put("user.2.name", "Grace")
  Blink(count=2)
  >>> blink.get("user.*.name")
  {'user.1.name': 'Ada', 'user.2.name': 'Grace'}
  >>> blink.get("user.3.name", "unknown")
  'unknown'
  """

  def __init__(self) -> None:
    self._values: dict[str, Any] = {}

  # Writing

  def put(self, key: str, value: Any) -> Blink:
    """Store `value` under `key`, overwriting any existing value.

    Raises:
        InvalidKeyError: If `key` is not a str
    """
    _check_key(key)
    self._values[key] = value
    return self

  def put_many(self, values: Mapping[str, Any]) -> Blink:
    """Merge several pairs into the store.

    New keys are appended, existing keys are overwritten in place and all
    other keys are left untouched.
    """
    for key in values:
      _check_key(key)
    self._values.update(values)
    return self

  # Reading

  def get(self, key: str, default: Any = None) -> Any:
    """Get a value from the store.

    For a wildcard pattern the result is a dict of every matching pair in
    insertion order, or `default` when nothing matches.
    """
    if contains_wildcard(key):
      values = self._values_for_keys(self._keys_matching(key))
      return values if values else default

    return self._values.get(key, default)

  def has(self, key: str) -> bool:
    """Determine if the store has a value for `key` (or any match)."""
    if contains_wildcard(key):
      return len(self._keys_matching(key)) > 0

    return key in self._values

  def all(self) -> dict[str, Any]:
    """Return a copy of every stored pair."""
    return dict(self._values)

  def all_starting_with(self, prefix: str = "") -> dict[str, Any]:
    """Return every pair whose key starts with the literal `prefix`."""
    if prefix == "":
      return self.all()

    return {k: v for k, v in self._values.items() if k.startswith(prefix)}

  def count(self) -> int:
    return len(self._values)

  # Removing

  def forget(self, key: str) -> Blink:
    """Remove the value for `key`, or every value matching the pattern.

    Missing keys are ignored.
    """
    if contains_wildcard(key):
      keys = self._keys_matching(key)
      logger.debug("wildcard_forget", pattern=key, removed=len(keys))
    else:
      keys = [key]

    for k in keys:
      self._values.pop(k, None)

    return self

  delete = forget

  def pull(self, key: str, default: Any = None) -> Any:
    """Get a value (or matching values) and then forget it."""
    value = self.get(key, default)

    self.forget(key)

    return value

  def flush(self) -> Blink:
    """Remove every value from the store."""
    removed = len(self._values)
    self._values = {}
    logger.debug("store_flushed", removed=removed)
    return self

  def flush_starting_with(self, prefix: str = "") -> Blink:
    """Remove every value whose key starts with the literal `prefix`.

    An empty prefix empties the store.
    """
    if prefix == "":
      return self.flush()

    before = len(self._values)
    self._values = {
      k: v for k, v in self._values.items() if not k.startswith(prefix)
    }
    logger.debug(
      "store_flushed_prefix", prefix=prefix, removed=before - len(self._values)
    )
    return self

  # Computed values

  def once(self, key: str, producer: Callable[[], Any]) -> Any:
    """Run `producer` only if `key` is not in the store yet.

    The result is stored under `key` and returned. Later calls return the
    stored value without calling `producer`.

    A wildcard key goes through `has` and `get` like any other query: if
    nothing matches, the result is stored under the literal pattern and the
    return value is the match mapping (`{"user.*": 5}`), not the bare result.
    """
    if not self.has(key):
      self.put(key, producer())

    return self.get(key)

  def increment(self, key: str, by: int | float = 1) -> Any:
    """Add `by` to the number stored under `key` and return the result.

    A missing key (or a stored `None`) counts as 0.

    Raises:
        NonNumericValueError: If the current value or `by` is not a number
    """
    return self._add("increment", key, by, by)

  def decrement(self, key: str, by: int | float = 1) -> Any:
    """Subtract `by` from the number stored under `key`."""
    if not isinstance(by, Number):
      raise NonNumericValueError("decrement", key, by, role="step")
    return self._add("decrement", key, by, -by)

  # Indexed access

  def __getitem__(self, key: str) -> Any:
    _check_key(key)
    return self.get(key)

  def __setitem__(self, key: str, value: Any) -> None:
    self.put(key, value)

  def __delitem__(self, key: str) -> None:
    _check_key(key)
    self.forget(key)

  def __contains__(self, key: object) -> bool:
    return isinstance(key, str) and self.has(key)

  def __len__(self) -> int:
    return self.count()

  def __iter__(self) -> Iterator[str]:
    return iter(list(self._values))

  def __repr__(self) -> str:
    return f"Blink(count={self.count()})"

  # Helpers

  def _keys_matching(self, pattern: str) -> list[str]:
    return matching_keys(self._values, pattern)

  def _values_for_keys(self, keys: list[str]) -> dict[str, Any]:
    return {k: self._values[k] for k in keys}

  def _add(self, operation: str, key: str, step: Any, delta: Any) -> Any:
    current = self.get(key)
    if current is None:
      current = 0

    if not isinstance(current, Number):
      raise NonNumericValueError(operation, key, current)
    if not isinstance(step, Number):
      raise NonNumericValueError(operation, key, step, role="step")

    new_value = current + delta

    self.put(key, new_value)

    return new_value


def _check_key(key: object) -> None:
  if not isinstance(key, str):
    raise InvalidKeyError(key)
