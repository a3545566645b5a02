"""Unit tests for wildcard key matching."""

from __future__ import annotations

import pytest

from blink.core.wildcard import (
  WildcardPattern,
  compile_pattern,
  contains_wildcard,
  matching_keys,
)


class TestContainsWildcard:
  """Test wildcard detection."""

  def test_plain_key(self) -> None:
    """Test keys without `*` are not patterns."""
    assert not contains_wildcard("prefix.suffix")
    assert not contains_wildcard("")

  def test_star_anywhere(self) -> None:
    """Test a `*` in any position makes a pattern."""
    assert contains_wildcard("*")
    assert contains_wildcard("a*")
    assert contains_wildcard("*a")
    assert contains_wildcard("a*b")


class TestWildcardPatternParse:
  """Test splitting patterns into segments."""

  def test_segments(self) -> None:
    """Test head, middle and tail are extracted."""
    pattern = WildcardPattern.parse("a*b*c")
    assert pattern.head == "a"
    assert pattern.middle == ("b",)
    assert pattern.tail == "c"

  def test_consecutive_stars_collapse(self) -> None:
    """Test empty segments between stars are dropped."""
    pattern = WildcardPattern.parse("a**b")
    assert pattern.middle == ()

  def test_literal_pattern(self) -> None:
    """Test a pattern without `*` is literal."""
    assert WildcardPattern.parse("abc").is_literal
    assert not WildcardPattern.parse("a*").is_literal

  def test_compile_is_memoized(self) -> None:
    """Test compiling the same pattern twice reuses the result."""
    assert compile_pattern("x.*.y") is compile_pattern("x.*.y")


class TestMatches:
  """Test the matching rules."""

  @pytest.mark.parametrize(
    ("pattern", "key", "expected"),
    [
      ("prefix.*.suffix", "prefix.1.suffix", True),
      ("prefix.*.suffix", "prefix..suffix", True),
      ("prefix.*.suffix", "prefix.1", False),
      ("prefix.*.suffix", "1.suffix", False),
      ("*.suffix", "prefix.middle.suffix", True),
      ("prefix.*", "prefix.", True),
      ("prefix.*", "prefix", False),
      ("*", "", True),
      ("*", "anything at all", True),
      ("a*b*c", "abc", True),
      ("a*b*c", "axxbyyc", True),
      ("a*b*c", "acb", False),
      ("ab*ba", "aba", False),
      ("ab*ba", "abba", True),
      ("*a*a*", "banana", True),
      ("*x*", "banana", False),
      ("a*", "a/b/c", True),
    ],
  )
  def test_star_semantics(self, pattern: str, key: str, expected: bool) -> None:
    """Test `*` matches any run of characters, including none."""
    assert compile_pattern(pattern).matches(key) is expected

  @pytest.mark.parametrize(
    ("pattern", "key", "expected"),
    [
      ("a?c*", "abc1", False),
      ("a?c*", "a?c1", True),
      ("[ab]*", "a1", False),
      ("[ab]*", "[ab]1", True),
      ("a\\*", "a\\x", True),
      ("a\\*", "a*", False),
      ("a.*", "abc", False),
    ],
  )
  def test_other_characters_are_literal(
    self, pattern: str, key: str, expected: bool
  ) -> None:
    """Test `?`, brackets, dots and backslashes are never special."""
    assert compile_pattern(pattern).matches(key) is expected

  def test_literal_pattern_requires_equality(self) -> None:
    """Test a pattern without `*` only matches itself."""
    pattern = compile_pattern("key")
    assert pattern.matches("key")
    assert not pattern.matches("key2")


class TestMatchingKeys:
  """Test filtering a key sequence."""

  def test_preserves_order(self) -> None:
    """Test matches come back in input order."""
    keys = ["b.1", "a.1", "c.2", "a.2"]
    assert matching_keys(keys, "*.1") == ["b.1", "a.1"]

  def test_no_matches(self) -> None:
    """Test an empty list when nothing matches."""
    assert matching_keys(["a", "b"], "c*") == []

  def test_accepts_dict_keys(self) -> None:
    """Test any iterable of keys works."""
    assert matching_keys({"x.1": 1, "y.1": 2}, "x*") == ["x.1"]
