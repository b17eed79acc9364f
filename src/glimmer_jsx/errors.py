from __future__ import annotations


class ResolveError(Exception):
	"""Base class for errors raised while converting a Glimmer tree to JSX.

	Any ResolveError abandons the whole conversion; no partial output is
	produced.
	"""


class UnsupportedTopLevelConstruct(ResolveError):
	"""A comment was found in statement (value) position."""

	node_type: str

	def __init__(self, node_type: str) -> None:
		self.node_type = node_type
		super().__init__(
			f"Top level comments are not supported ({node_type}). "
			+ "Comments can only appear as children of an element."
		)


class UnexpectedStatementKind(ResolveError):
	node_type: str

	def __init__(self, node_type: str) -> None:
		self.node_type = node_type
		super().__init__(f'Unexpected statement "{node_type}"')


class UnexpectedExpressionKind(ResolveError):
	"""An expression node the resolver doesn't know how to convert.

	`snapshot` holds a JSON dump of the offending node for diagnostics.
	"""

	node_type: str
	snapshot: str

	def __init__(self, node_type: str, snapshot: str) -> None:
		self.node_type = node_type
		self.snapshot = snapshot
		super().__init__(f"Unexpected mustache expression: {snapshot}")


class EmptyPathSegments(ResolveError):
	def __init__(self) -> None:
		super().__init__("Unexpected empty path expression parts")


class UnsupportedBlockHelper(ResolveError):
	name: str

	def __init__(self, name: str, reason: str | None = None) -> None:
		self.name = name
		message = f"Unsupported block helper {{{{#{name}}}}}"
		if reason:
			message += f": {reason}"
		super().__init__(message)


class MaxDepthExceeded(ResolveError):
	limit: int

	def __init__(self, limit: int) -> None:
		self.limit = limit
		super().__init__(
			f"Template nesting exceeds the maximum depth of {limit}. "
			+ "Raise GLIMMER_JSX_MAX_DEPTH if the template is trusted."
		)


class UnknownNodeType(ResolveError):
	"""Raised by the JSON loader for a `type` tag it doesn't recognize."""

	node_type: str

	def __init__(self, node_type: str) -> None:
		self.node_type = node_type
		super().__init__(f"Unknown Glimmer node type {node_type!r}")


class ConfigError(ValueError):
	"""Invalid configuration value (usually from the environment)."""


__all__ = [
	"ConfigError",
	"EmptyPathSegments",
	"MaxDepthExceeded",
	"ResolveError",
	"UnexpectedExpressionKind",
	"UnexpectedStatementKind",
	"UnknownNodeType",
	"UnsupportedBlockHelper",
	"UnsupportedTopLevelConstruct",
]
