"""
Glimmer -> JSX resolution core.

Converts Glimmer statements and expressions into the JS/JSX node AST.
Statements are resolved either as plain JS values (top level, attribute
values, block bodies) or as JSX children (inside an element).
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from glimmer_jsx import blocks, comments, elements
from glimmer_jsx.config import ResolverConfig
from glimmer_jsx.errors import (
	EmptyPathSegments,
	MaxDepthExceeded,
	UnexpectedExpressionKind,
	UnexpectedStatementKind,
	UnsupportedTopLevelConstruct,
)
from glimmer_jsx.glimmer import (
	BlockStatement,
	BooleanLiteral,
	CommentStatement,
	ElementNode,
	GlimmerNode,
	MustacheCommentStatement,
	MustacheStatement,
	NullLiteral,
	NumberLiteral,
	PathExpression,
	StringLiteral,
	SubExpression,
	TextNode,
	UndefinedLiteral,
	dump,
	node_type,
)
from glimmer_jsx.nodes import (
	Binary,
	Call,
	Child,
	ExprNode,
	Identifier,
	JSXExpressionContainer,
	JSXText,
	Literal,
	Member,
	Object,
	Property,
)

logger = logging.getLogger(__name__)

# Characters that open/close an expression container in JSX text
_JSX_SYNTAX_CHARS = re.compile(r"([{}])")

# Handlebars passes named arguments to helpers as `options.hash`
HASH_KEY = "hash"

# Arrow parameter for {{#each}} / {{#with}} bodies declared without `as |x|`
DEFAULT_BLOCK_PARAM = "item"


class Resolver:
	"""Resolve Glimmer nodes into JS/JSX nodes.

	One Resolver serves one top-level conversion. The element, fragment,
	block and comment conversions are reached through overridable methods
	so that subclasses can plug in their own.
	"""

	config: ResolverConfig
	_depth: int
	_root: str | None
	_locals: frozenset[str]

	def __init__(self, config: ResolverConfig | None = None) -> None:
		self.config = config if config is not None else ResolverConfig.from_env()
		self._depth = 0
		self._root = None
		self._locals = frozenset()

	@contextmanager
	def _nested(self) -> Iterator[None]:
		self._depth += 1
		try:
			if self._depth > self.config.max_depth:
				raise MaxDepthExceeded(self.config.max_depth)
			yield
		finally:
			self._depth -= 1

	# --- Statements ----------------------------------------------------------

	def resolve_statement(self, node: GlimmerNode) -> ExprNode:
		"""Resolve a statement into a plain (non-JSX-child) JS expression."""
		with self._nested():
			if isinstance(node, ElementNode):
				return self.convert_element(node)

			if isinstance(node, TextNode):
				return Literal(node.chars)

			if isinstance(node, MustacheStatement):
				if node.params:
					return self.resolve_helper(node)
				return self.resolve_expression(node.path)

			if isinstance(node, BlockStatement):
				return self.resolve_block(node)

			if isinstance(node, (CommentStatement, MustacheCommentStatement)):
				raise UnsupportedTopLevelConstruct(node.type)

			raise UnexpectedStatementKind(node_type(node))

	def resolve_child(self, node: GlimmerNode) -> Child | list[Child]:
		"""Resolve a statement into something that can sit in JSX children."""
		with self._nested():
			if isinstance(node, ElementNode):
				return self.convert_element(node)

			if isinstance(node, TextNode):
				return self.prepare_jsx_text(node.chars)

			if isinstance(node, (CommentStatement, MustacheCommentStatement)):
				return self.create_comment(node)

			# Values and helper calls go in an expression container
			return JSXExpressionContainer(self.resolve_statement(node))

	# --- Expressions ---------------------------------------------------------

	def resolve_expression(self, expr: GlimmerNode | None) -> ExprNode:
		"""Resolve a Glimmer expression (literal, path or sub-expression)."""
		with self._nested():
			if isinstance(expr, SubExpression):
				return self.resolve_helper(expr)

			if isinstance(expr, PathExpression):
				return self.resolve_path(expr)

			if isinstance(expr, (BooleanLiteral, NumberLiteral, StringLiteral)):
				return Literal(expr.value)

			if isinstance(expr, NullLiteral):
				return Literal(None)

			if isinstance(expr, UndefinedLiteral):
				return Identifier("undefined")

			raise UnexpectedExpressionKind(node_type(expr), _snapshot(expr))

	def resolve_path(self, expr: PathExpression) -> Identifier | Member:
		"""Resolve a path, grafting it onto the block value when one is in scope.

		Inside `{{#each rows}}`, `{{name}}` is `item.name` and `{{this}}` is
		`item`. `@args` and block params keep their own names.
		"""
		root = self._root
		local = bool(expr.parts) and expr.parts[0] in self._locals
		if root is None or expr.data or local:
			return create_path(expr.parts)
		if not expr.parts:
			return Identifier(root)
		return prepend_to_path(create_path(expr.parts), root)

	@contextmanager
	def block_scope(self, block_params: Sequence[str]) -> Iterator[list[str]]:
		"""Scope for a block body that receives a value, yields the arrow params.

		Declared block params shadow the context. Without any, the value is
		bound to `item` and becomes the root of paths in the body.
		"""
		saved = self._root, self._locals
		if block_params:
			params = list(block_params)
			self._locals = self._locals | set(params)
		else:
			params = [DEFAULT_BLOCK_PARAM]
			self._root = DEFAULT_BLOCK_PARAM
			self._locals = self._locals - {DEFAULT_BLOCK_PARAM}
		try:
			yield params
		finally:
			self._root, self._locals = saved

	def resolve_helper(self, node: MustacheStatement | SubExpression) -> Call:
		"""Resolve a helper invocation into `helper(...params, {hash: {...}})`."""
		args: list[ExprNode] = [self.resolve_expression(p) for p in node.params]

		# Helpers always take an options object last, named args live under "hash"
		hash_ = Object(
			[
				Property(pair.key, self.resolve_expression(pair.value))
				for pair in node.hash.pairs
			]
		)
		args.append(Object([Property(HASH_KEY, hash_)]))
		return Call(Identifier(self.helper_name(node.path)), args)

	# --- Children ------------------------------------------------------------

	def create_children(self, body: Sequence[GlimmerNode]) -> list[Child]:
		"""Resolve element children, flattening multi-node results in order."""
		children: list[Child] = []
		for statement in body:
			child = self.resolve_child(statement)
			if isinstance(child, list):
				children.extend(child)
			else:
				children.append(child)
		return children

	def create_root_children(self, body: Sequence[GlimmerNode]) -> ExprNode:
		"""Resolve a statement list into one expression.

		A single statement is resolved directly; anything else is wrapped in a
		fragment.
		"""
		if len(body) == 1:
			return self.resolve_statement(body[0])
		return self.create_fragment(self.create_children(body))

	def create_concat(self, parts: Sequence[GlimmerNode]) -> ExprNode:
		"""Fold attribute value parts into `a + b + c`."""
		acc: ExprNode | None = None
		for part in parts:
			value = self.resolve_statement(part)
			acc = value if acc is None else Binary(acc, "+", value)
		if acc is None:
			return Literal("")
		return acc

	def prepare_jsx_text(
		self, text: str
	) -> JSXText | list[JSXText | JSXExpressionContainer]:
		return prepare_jsx_text(text, keep_empty=self.config.keep_empty_text)

	def helper_name(self, path: GlimmerNode | None) -> str:
		return helper_name(path)

	# --- Collaborators -------------------------------------------------------

	def convert_element(self, node: ElementNode) -> ExprNode:
		return elements.convert_element(node, self)

	def create_fragment(self, children: Sequence[Child]) -> ExprNode:
		return elements.create_fragment(children)

	def resolve_block(self, node: BlockStatement) -> ExprNode:
		return blocks.resolve_block(node, self)

	def create_comment(
		self, node: CommentStatement | MustacheCommentStatement
	) -> JSXExpressionContainer:
		return comments.create_comment(node)


# =============================================================================
# Paths
# =============================================================================


def create_path(parts: Sequence[str]) -> Identifier | Member:
	"""Build `a.b.c` from ["a", "b", "c"]."""
	if not parts:
		raise EmptyPathSegments()

	acc: Identifier | Member = Identifier(parts[0])
	for part in parts[1:]:
		acc = append_to_path(acc, part)
	return acc


def append_to_path(path: Identifier | Member, name: str) -> Member:
	"""`path` -> `path.name`"""
	return Member(path, name)


def prepend_to_path(path: Identifier | Member, name: str) -> Member:
	"""`path` -> `name.path`"""
	return Member(Identifier(name), path)


def helper_name(path: GlimmerNode | None) -> str:
	"""Name a helper is called by, `undefined` when the path has none."""
	if isinstance(path, PathExpression) and path.original:
		return path.original
	if isinstance(path, StringLiteral):
		return path.value
	if isinstance(path, BooleanLiteral):
		return "true" if path.value else "false"
	if isinstance(path, NumberLiteral):
		value = path.value
		if isinstance(value, float) and value.is_integer():
			value = int(value)
		return str(value)
	logger.debug("Helper path %r has no name, calling `undefined`", path)
	return "undefined"


# =============================================================================
# Text
# =============================================================================


def prepare_jsx_text(
	text: str, *, keep_empty: bool = True
) -> JSXText | list[JSXText | JSXExpressionContainer]:
	"""Escape JSX syntax chars in text.

	`{` and `}` can't appear raw in JSX text, so the text is split around them
	and each brace becomes `{"{"}` / `{"}"}`. Text without braces is returned
	as a single JSXText.
	"""
	parts = _JSX_SYNTAX_CHARS.split(text)
	if len(parts) == 1:
		return JSXText(text)

	return [
		JSXExpressionContainer(Literal(part)) if part in ("{", "}") else JSXText(part)
		for part in parts
		if keep_empty or part
	]


def _snapshot(expr: Any) -> str:
	if isinstance(expr, GlimmerNode):
		return json.dumps(dump(expr))
	return json.dumps(expr, default=repr)


# =============================================================================
# Module-level entry points
# =============================================================================


def resolve_statement(
	node: GlimmerNode, config: ResolverConfig | None = None
) -> ExprNode:
	return Resolver(config).resolve_statement(node)


def resolve_element_child(
	node: GlimmerNode, config: ResolverConfig | None = None
) -> Child | list[Child]:
	return Resolver(config).resolve_child(node)


def resolve_expression(
	expr: GlimmerNode | None, config: ResolverConfig | None = None
) -> ExprNode:
	return Resolver(config).resolve_expression(expr)


def resolve_helper(
	node: MustacheStatement | SubExpression, config: ResolverConfig | None = None
) -> Call:
	return Resolver(config).resolve_helper(node)


def create_children(
	body: Sequence[GlimmerNode], config: ResolverConfig | None = None
) -> list[Child]:
	return Resolver(config).create_children(body)


def create_root_children(
	body: Sequence[GlimmerNode], config: ResolverConfig | None = None
) -> ExprNode:
	return Resolver(config).create_root_children(body)


def create_concat(
	parts: Sequence[GlimmerNode], config: ResolverConfig | None = None
) -> ExprNode:
	return Resolver(config).create_concat(parts)
