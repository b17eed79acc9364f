"""
Command-line interface for glimmer-jsx.
Converts a Glimmer AST (as dumped by `@glimmer/syntax`) to JSX source.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from glimmer_jsx.config import ResolverConfig
from glimmer_jsx.convert import to_jsx
from glimmer_jsx.errors import ConfigError, ResolveError

cli = typer.Typer(
	name="glimmer-jsx",
	help="Glimmer (Handlebars) to JSX converter",
	no_args_is_help=True,
)


@cli.callback()
def setup(
	verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
):
	"""Convert Glimmer template ASTs to JSX."""
	if verbose:
		logging.basicConfig(
			level=logging.DEBUG,
			format="%(message)s",
			handlers=[RichHandler(console=Console(stderr=True))],
		)


@cli.command("convert")
def convert(
	source: str = typer.Argument(
		..., help="Glimmer AST JSON file, or '-' to read from stdin"
	),
	output: Path | None = typer.Option(
		None, "--output", "-o", help="Write JSX to this file instead of stdout"
	),
):
	"""Convert a Glimmer AST JSON dump to JSX."""
	console = Console(stderr=True)

	try:
		data = _read_ast(source)
	except OSError as exc:
		console.log(f"❌ Cannot read {source}: {exc}", markup=False)
		raise typer.Exit(1) from None
	except json.JSONDecodeError as exc:
		console.log(f"❌ Invalid JSON in {source}: {exc}", markup=False)
		raise typer.Exit(1) from None
	except UnicodeDecodeError as exc:
		console.log(f"❌ {source} is not valid UTF-8: {exc}", markup=False)
		raise typer.Exit(1) from None

	if not isinstance(data, dict):
		console.log(f"❌ Expected a JSON object in {source}", markup=False)
		raise typer.Exit(1)

	try:
		code = to_jsx(data, config=ResolverConfig.from_env())
	except (ResolveError, ConfigError) as exc:
		console.log(f"❌ {exc}", markup=False)
		raise typer.Exit(1) from None

	if output is None:
		typer.echo(code)
		return

	output.write_text(code + "\n")
	console.log(f"✅ Wrote {output}", markup=False)


def _read_ast(source: str) -> Any:
	if source == "-":
		return json.loads(sys.stdin.read())
	return json.loads(Path(source).read_text(encoding="utf-8"))


def main():
	"""Main CLI entry point."""
	try:
		cli()
	except Exception:
		console = Console()
		console.print_exception()
		raise typer.Exit(1) from None
