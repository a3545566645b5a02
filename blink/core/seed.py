"""Seed files for pre-populating a store.

A seed is a YAML document with a single `values` mapping:

    values:
      prefix.1.suffix: v1
      counter: 3
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field

from blink.core.store import Blink

logger = structlog.get_logger()


class Seed(BaseModel):
  """Key-value pairs to load into a store, in document order."""

  model_config = ConfigDict(extra="forbid")

  values: dict[str, Any] = Field(
    default_factory=dict, description="Pairs to put into the store"
  )

  @classmethod
  def from_yaml(cls, yaml_content: str) -> Seed:
    """Parse and validate a seed from YAML string.

    Args:
        yaml_content: YAML document

    Returns:
        Validated Seed instance

    Raises:
        ValueError: If YAML is invalid or doesn't match schema
    """
    try:
      data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
      raise ValueError(f"Invalid YAML syntax: {e}") from e

    if data is None:
      data = {}

    return cls.model_validate(data)

  @classmethod
  def from_yaml_file(cls, path: Path | str) -> Seed:
    """Load and validate a seed from a YAML file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If YAML is invalid or doesn't match schema
    """
    path = Path(path)
    if not path.exists():
      raise FileNotFoundError(f"Seed file not found: {path}")

    seed = cls.from_yaml(path.read_text(encoding="utf-8"))
    logger.debug("seed_loaded", path=str(path), keys=len(seed.values))
    return seed

  @classmethod
  def from_store(cls, store: Blink) -> Seed:
    """Snapshot the current contents of a store."""
    return cls(values=store.all())

  def to_store(self, store: Blink | None = None) -> Blink:
    """Put every value into `store` (or a new one) and return it."""
    if store is None:
      store = Blink()
    return store.put_many(self.values)

  def to_yaml(self) -> str:
    """Serialize the seed to YAML string."""
    return yaml.safe_dump(
      self.model_dump(), default_flow_style=False, sort_keys=False
    )
