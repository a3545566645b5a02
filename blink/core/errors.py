"""Exception types raised by the blink store."""

from __future__ import annotations


class BlinkError(Exception):
  """Base class for errors raised by blink."""


class InvalidKeyError(BlinkError, TypeError):
  """Raised when a key is not a string."""

  def __init__(self, key: object):
    self.key = key
    super().__init__(f"Keys must be str, got {type(key).__name__}: {key!r}")


class NonNumericValueError(BlinkError, TypeError):
  """Raised when a counter operation meets a value that is not a number.

  Args:
      operation: "increment" or "decrement"
      key: Key being changed
      value: The offending value
      role: What `value` is, e.g. "stored value" or "step"
  """

  def __init__(
    self,
    operation: str,
    key: str,
    value: object,
    role: str = "stored value",
  ):
    self.operation = operation
    self.key = key
    self.value = value
    self.role = role
    super().__init__(
      f"Cannot {operation} key {key!r}: {role} of type "
      f"{type(value).__name__} is not numeric"
    )
