"""Glimmer (Handlebars) template AST.

Read-only mirror of the tree produced by `@glimmer/syntax`'s `preprocess()`.
Nodes are normally built from the parser's JSON dump with `load()`; `dump()`
goes the other way and is used for error snapshots.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, TypeAlias

from glimmer_jsx.errors import UnknownNodeType


class GlimmerNode:
	"""Base class for all Glimmer nodes. `type` is the Glimmer type tag."""

	__slots__: tuple[str, ...] = ()
	type: ClassVar[str]


# =============================================================================
# Expressions
# =============================================================================


@dataclass(slots=True, frozen=True)
class PathExpression(GlimmerNode):
	"""`foo.bar`, `this.foo`, `@arg.foo`

	`parts` excludes the `this` / `@` head marker, so `@arg.foo` has
	parts ("arg", "foo").
	"""

	original: str
	parts: tuple[str, ...] = ()
	this: bool = False
	data: bool = False
	type: ClassVar[str] = "PathExpression"


@dataclass(slots=True, frozen=True)
class StringLiteral(GlimmerNode):
	value: str
	type: ClassVar[str] = "StringLiteral"


@dataclass(slots=True, frozen=True)
class BooleanLiteral(GlimmerNode):
	value: bool
	type: ClassVar[str] = "BooleanLiteral"


@dataclass(slots=True, frozen=True)
class NumberLiteral(GlimmerNode):
	value: int | float
	type: ClassVar[str] = "NumberLiteral"


@dataclass(slots=True, frozen=True)
class NullLiteral(GlimmerNode):
	type: ClassVar[str] = "NullLiteral"


@dataclass(slots=True, frozen=True)
class UndefinedLiteral(GlimmerNode):
	type: ClassVar[str] = "UndefinedLiteral"


@dataclass(slots=True, frozen=True)
class HashPair(GlimmerNode):
	key: str
	value: Expression
	type: ClassVar[str] = "HashPair"


@dataclass(slots=True, frozen=True)
class Hash(GlimmerNode):
	"""Named arguments of a helper invocation: `key=value ...`"""

	pairs: tuple[HashPair, ...] = ()
	type: ClassVar[str] = "Hash"


@dataclass(slots=True, frozen=True)
class SubExpression(GlimmerNode):
	"""Nested helper call: `(helper a b key=c)`"""

	path: Expression | None
	params: tuple[Expression, ...] = ()
	hash: Hash = field(default_factory=Hash)
	type: ClassVar[str] = "SubExpression"


# =============================================================================
# Statements
# =============================================================================


@dataclass(slots=True, frozen=True)
class TextNode(GlimmerNode):
	chars: str
	type: ClassVar[str] = "TextNode"


@dataclass(slots=True, frozen=True)
class MustacheStatement(GlimmerNode):
	"""`{{path}}` or `{{helper a b key=c}}`. `trusting` is set for `{{{ }}}`."""

	path: Expression | None
	params: tuple[Expression, ...] = ()
	hash: Hash = field(default_factory=Hash)
	trusting: bool = False
	type: ClassVar[str] = "MustacheStatement"


@dataclass(slots=True, frozen=True)
class CommentStatement(GlimmerNode):
	"""HTML comment: `<!-- value -->`"""

	value: str
	type: ClassVar[str] = "CommentStatement"


@dataclass(slots=True, frozen=True)
class MustacheCommentStatement(GlimmerNode):
	"""Handlebars comment: `{{! value }}` or `{{!-- value --}}`"""

	value: str
	type: ClassVar[str] = "MustacheCommentStatement"


@dataclass(slots=True, frozen=True)
class ConcatStatement(GlimmerNode):
	"""Attribute value mixing text and mustaches: `class="a {{b}}"`"""

	parts: tuple[TextNode | MustacheStatement, ...] = ()
	type: ClassVar[str] = "ConcatStatement"


@dataclass(slots=True, frozen=True)
class AttrNode(GlimmerNode):
	name: str
	value: TextNode | MustacheStatement | ConcatStatement
	type: ClassVar[str] = "AttrNode"


@dataclass(slots=True, frozen=True)
class ElementModifierStatement(GlimmerNode):
	"""`<div {{on "click" this.go}}>`"""

	path: Expression | None
	params: tuple[Expression, ...] = ()
	hash: Hash = field(default_factory=Hash)
	type: ClassVar[str] = "ElementModifierStatement"


@dataclass(slots=True, frozen=True)
class ElementNode(GlimmerNode):
	tag: str
	attributes: tuple[AttrNode, ...] = ()
	children: tuple[Statement, ...] = ()
	modifiers: tuple[ElementModifierStatement, ...] = ()
	block_params: tuple[str, ...] = ()
	self_closing: bool = False
	type: ClassVar[str] = "ElementNode"


@dataclass(slots=True, frozen=True)
class Block(GlimmerNode):
	"""Body of a block statement, with its `as |a b|` parameters."""

	body: tuple[Statement, ...] = ()
	block_params: tuple[str, ...] = ()
	type: ClassVar[str] = "Block"


@dataclass(slots=True, frozen=True)
class BlockStatement(GlimmerNode):
	"""`{{#helper params}}program{{else}}inverse{{/helper}}`"""

	path: Expression | None
	params: tuple[Expression, ...] = ()
	hash: Hash = field(default_factory=Hash)
	program: Block = field(default_factory=Block)
	inverse: Block | None = None
	type: ClassVar[str] = "BlockStatement"


@dataclass(slots=True, frozen=True)
class Template(GlimmerNode):
	body: tuple[Statement, ...] = ()
	block_params: tuple[str, ...] = ()
	type: ClassVar[str] = "Template"


GlimmerLiteral: TypeAlias = (
	StringLiteral | BooleanLiteral | NumberLiteral | NullLiteral | UndefinedLiteral
)
Expression: TypeAlias = PathExpression | SubExpression | GlimmerLiteral
Statement: TypeAlias = (
	ElementNode
	| TextNode
	| MustacheStatement
	| BlockStatement
	| CommentStatement
	| MustacheCommentStatement
)

NODE_TYPES: dict[str, type[GlimmerNode]] = {
	cls.type: cls
	for cls in (
		PathExpression,
		StringLiteral,
		BooleanLiteral,
		NumberLiteral,
		NullLiteral,
		UndefinedLiteral,
		HashPair,
		Hash,
		SubExpression,
		TextNode,
		MustacheStatement,
		CommentStatement,
		MustacheCommentStatement,
		ConcatStatement,
		AttrNode,
		ElementModifierStatement,
		ElementNode,
		Block,
		BlockStatement,
		Template,
	)
}


def node_type(node: Any) -> str:
	"""Type tag of a node, falling back to the Python class name."""
	tag = getattr(node, "type", None)
	if isinstance(tag, str):
		return tag
	return type(node).__name__


# =============================================================================
# JSON
# =============================================================================


def load(data: Mapping[str, Any]) -> GlimmerNode:
	"""Build a node tree from the JSON form of a Glimmer AST.

	Source locations and any keys without a matching field are ignored.
	"""
	tag = data.get("type")
	cls = NODE_TYPES.get(tag) if isinstance(tag, str) else None
	if cls is None:
		raise UnknownNodeType(str(tag))

	if cls is PathExpression:
		return _load_path(data)

	kwargs: dict[str, Any] = {}
	for f in fields(cls):
		key = _camel(f.name)
		if key in data and data[key] is not None:
			kwargs[f.name] = _load_value(data[key])

	# Older parsers report `escaped` instead of `trusting`
	if cls is MustacheStatement and "trusting" not in data and "escaped" in data:
		kwargs["trusting"] = not data["escaped"]
	return cls(**kwargs)


def _load_value(value: Any) -> Any:
	if isinstance(value, Mapping):
		return load(value)  # pyright: ignore[reportUnknownArgumentType]
	if isinstance(value, list):
		return tuple(_load_value(v) for v in value)  # pyright: ignore[reportUnknownVariableType]
	return value


def _load_path(data: Mapping[str, Any]) -> PathExpression:
	head = data.get("head") or {}
	head_type = head.get("type")
	parts = data.get("parts")
	if parts is None:
		parts = []
		if head_type in ("VarHead", "AtHead"):
			parts.append(str(head.get("name", "")).lstrip("@"))
		parts.extend(data.get("tail") or [])
	this = data.get("this", head_type == "ThisHead")
	is_data = data.get("data", head_type == "AtHead")
	original = data.get("original")
	if original is None:
		prefix = "this." if this else ("@" if is_data else "")
		original = prefix + ".".join(parts) if parts else ("this" if this else "")
	return PathExpression(
		original=str(original),
		parts=tuple(str(p) for p in parts),
		this=bool(this),
		data=bool(is_data),
	)


def dump(node: GlimmerNode) -> dict[str, Any]:
	"""Inverse of `load()`: node tree to a JSON-compatible dict."""
	out: dict[str, Any] = {"type": node.type}
	for f in fields(node):  # pyright: ignore[reportArgumentType]
		out[_camel(f.name)] = _dump_value(getattr(node, f.name))
	return out


def _dump_value(value: Any) -> Any:
	if isinstance(value, GlimmerNode):
		return dump(value)
	if isinstance(value, tuple):
		return [_dump_value(v) for v in value]  # pyright: ignore[reportUnknownVariableType]
	return value


def _camel(name: str) -> str:
	head, *rest = name.split("_")
	return head + "".join(part.capitalize() for part in rest)


__all__ = [
	"AttrNode",
	"Block",
	"BlockStatement",
	"BooleanLiteral",
	"CommentStatement",
	"ConcatStatement",
	"ElementModifierStatement",
	"ElementNode",
	"Expression",
	"GlimmerLiteral",
	"GlimmerNode",
	"Hash",
	"HashPair",
	"MustacheCommentStatement",
	"MustacheStatement",
	"NODE_TYPES",
	"NullLiteral",
	"NumberLiteral",
	"PathExpression",
	"Statement",
	"StringLiteral",
	"SubExpression",
	"Template",
	"TextNode",
	"UndefinedLiteral",
	"dump",
	"load",
	"node_type",
]
