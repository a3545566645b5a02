"""Blink: a short-lived in-process key-value store with wildcard lookups."""

from blink.core import (
  Blink,
  BlinkCache,
  BlinkError,
  InvalidKeyError,
  NonNumericValueError,
)

__all__ = [
  "Blink",
  "BlinkCache",
  "BlinkError",
  "InvalidKeyError",
  "NonNumericValueError",
]
