"""Resolver settings, read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from glimmer_jsx.errors import ConfigError

ENV_GLIMMER_JSX_MAX_DEPTH = "GLIMMER_JSX_MAX_DEPTH"
ENV_GLIMMER_JSX_KEEP_EMPTY_TEXT = "GLIMMER_JSX_KEEP_EMPTY_TEXT"

# Each level of template nesting costs several Python frames, keep this well
# under the interpreter's recursion limit.
DEFAULT_MAX_DEPTH = 128

_FALSY = {"0", "false", "False", "no", "off"}
_TRUTHY = {"1", "true", "True", "yes", "on"}


@dataclass(slots=True, frozen=True)
class ResolverConfig:
	"""Settings for a single conversion.

	- max_depth: maximum nesting of statements/expressions before the resolver
	  gives up with MaxDepthExceeded
	- keep_empty_text: keep the zero-length JSXText pieces produced when
	  splitting text around adjacent braces
	"""

	max_depth: int = DEFAULT_MAX_DEPTH
	keep_empty_text: bool = True

	def __post_init__(self) -> None:
		if self.max_depth < 1:
			raise ConfigError(f"max_depth must be at least 1, got {self.max_depth}")

	@staticmethod
	def from_env(environ: Mapping[str, str] | None = None) -> ResolverConfig:
		environ = os.environ if environ is None else environ
		return ResolverConfig(
			max_depth=_parse_int(environ, ENV_GLIMMER_JSX_MAX_DEPTH, DEFAULT_MAX_DEPTH),
			keep_empty_text=_parse_bool(environ, ENV_GLIMMER_JSX_KEEP_EMPTY_TEXT, True),
		)


def _parse_int(environ: Mapping[str, str], name: str, default: int) -> int:
	raw = environ.get(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except ValueError:
		raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _parse_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
	raw = environ.get(name)
	if raw is None or raw == "":
		return default
	if raw in _TRUTHY:
		return True
	if raw in _FALSY:
		return False
	raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")


__all__ = [
	"DEFAULT_MAX_DEPTH",
	"ENV_GLIMMER_JSX_KEEP_EMPTY_TEXT",
	"ENV_GLIMMER_JSX_MAX_DEPTH",
	"ResolverConfig",
]
