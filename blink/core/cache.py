"""Generic cache interface over a blink store.

`BlinkCache` exposes the get/set/delete/clear vocabulary that common cache
abstractions expect, so a `Blink` can be dropped in where such a cache is
required.

Expiry is NOT supported. `set` and `set_multiple` accept a TTL for
interface compatibility and discard it: values stay until they are deleted,
the cache is cleared, or the process ends.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any

import structlog

from blink.core.store import Blink
from blink.settings import settings

if TYPE_CHECKING:
  from collections.abc import Iterable, Mapping

logger = structlog.get_logger()

Ttl = int | float | timedelta | None


class BlinkCache:
  """Cache-interface adapter routing every call to a `Blink` store."""

  def __init__(
    self,
    store: Blink | None = None,
    *,
    warn_on_ignored_ttl: bool | None = None,
  ):
    """Initialize the adapter.

    Args:
        store: Store to wrap. A fresh one is created when omitted.
        warn_on_ignored_ttl: Log a warning the first time a TTL is dropped.
            Defaults to `settings.warn_on_ignored_ttl`.
    """
    self.store = store if store is not None else Blink()
    if warn_on_ignored_ttl is None:
      warn_on_ignored_ttl = settings.warn_on_ignored_ttl
    self._warn_on_ignored_ttl = warn_on_ignored_ttl
    self._ttl_warned = False

  def get(self, key: str, default: Any = None) -> Any:
    return self.store.get(key, default)

  def set(self, key: str, value: Any, ttl: Ttl = None) -> bool:
    """Store a value. `ttl` is ignored."""
    self._discard_ttl(ttl)
    self.store.put(key, value)
    return True

  def delete(self, key: str) -> bool:
    self.store.forget(key)
    return True

  def clear(self) -> bool:
    self.store.flush()
    return True

  def has(self, key: str) -> bool:
    return self.store.has(key)

  def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
    """Look up each key in turn, with the same rules as `get`."""
    return {key: self.get(key, default) for key in keys}

  def set_multiple(self, values: Mapping[str, Any], ttl: Ttl = None) -> bool:
    """Store each pair. `ttl` is ignored."""
    self._discard_ttl(ttl)
    for key, value in values.items():
      self.store.put(key, value)
    return True

  def delete_multiple(self, keys: Iterable[str]) -> bool:
    for key in keys:
      self.store.forget(key)
    return True

  def _discard_ttl(self, ttl: Ttl) -> None:
    if ttl is None or self._ttl_warned or not self._warn_on_ignored_ttl:
      return
    self._ttl_warned = True
    seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else ttl
    logger.warning("ttl_ignored", ttl=seconds)
