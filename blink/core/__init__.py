"""Core store, wildcard matcher and adapters."""

from blink.core.cache import BlinkCache
from blink.core.errors import BlinkError, InvalidKeyError, NonNumericValueError
from blink.core.store import Blink

__all__ = [
  "Blink",
  "BlinkCache",
  "BlinkError",
  "InvalidKeyError",
  "NonNumericValueError",
]
