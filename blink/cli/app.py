"""Core CLI app setup."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any, NoReturn

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console

if TYPE_CHECKING:
  from structlog.typing import FilteringBoundLogger

  from blink.core.store import Blink

from blink.core.errors import BlinkError
from blink.core.seed import Seed
from blink.core.wildcard import compile_pattern
from blink.logging_config import configure_logging

# stderr console for diagnostics, stdout console for the actual data
err_console = Console(stderr=True)
out_console = Console()


def get_logger() -> FilteringBoundLogger:
  """Configure logging and return a logger instance."""
  configure_logging()
  return structlog.get_logger()


def load_store(seed_path: Path) -> Blink:
  """Build a store from a seed file, exiting with code 1 if it can't be read."""
  log = get_logger()
  try:
    return Seed.from_yaml_file(seed_path).to_store()
  except (FileNotFoundError, ValueError, ValidationError, BlinkError) as e:
    log.error("seed_load_failed", path=str(seed_path), error=str(e))
    fail(e)


def fail(error: Exception) -> NoReturn:
  """Report a fatal error on stderr and exit with code 1."""
  err_console.print(f"[red]Fatal Error: {error}[/red]", soft_wrap=True)
  raise typer.Exit(code=1) from error


def print_data(data: Any) -> None:
  out_console.print_json(data=data, default=str)


SeedArg = Annotated[
  Path,
  typer.Argument(dir_okay=False, help="YAML seed file with a `values` mapping"),
]

app = typer.Typer(
  help="Blink: inspect wildcard and prefix lookups against a seeded store.",
  no_args_is_help=True,
)


@app.command()
def get(
  seed: SeedArg,
  key: Annotated[str, typer.Argument(help="Key or wildcard pattern")],
  default: Annotated[
    str | None, typer.Option("--default", "-d", help="Value when nothing matches.")
  ] = None,
):
  """
  Print the value for a key, or every pair matching a wildcard pattern.
  """
  store = load_store(seed)
  print_data(store.get(key, default))


@app.command()
def has(
  seed: SeedArg,
  key: Annotated[str, typer.Argument(help="Key or wildcard pattern")],
):
  """
  Print whether the key (or any key matching the pattern) is present.
  """
  store = load_store(seed)
  present = store.has(key)
  print_data(present)
  if not present:
    raise typer.Exit(code=1)


@app.command()
def prefix(
  seed: SeedArg,
  starting_with: Annotated[
    str, typer.Argument(help="Literal key prefix (not a pattern)")
  ] = "",
):
  """
  Print every pair whose key starts with the given prefix.
  """
  store = load_store(seed)
  print_data(store.all_starting_with(starting_with))


@app.command()
def increment(
  seed: SeedArg,
  key: Annotated[str, typer.Argument(help="Counter key")],
  by: Annotated[int, typer.Option("--by", "-b", help="Step to add.")] = 1,
):
  """
  Print the counter value after adding a step to the seeded value.
  """
  store = load_store(seed)
  try:
    print_data(store.increment(key, by))
  except BlinkError as e:
    get_logger().error("increment_failed", key=key, error=str(e))
    fail(e)


@app.command()
def match(
  pattern: Annotated[str, typer.Argument(help="Wildcard pattern")],
  keys: Annotated[list[str], typer.Argument(help="Keys to test")],
):
  """
  Print which of the given keys the pattern matches.
  """
  compiled = compile_pattern(pattern)
  print_data({key: compiled.matches(key) for key in keys})


if __name__ == "__main__":
  app()
