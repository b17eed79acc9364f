"""JavaScript/JSX output AST.

A small Babel-like node set. Every node can emit itself into a list of
string chunks; `emit()` joins them. The emitter only adds the parentheses
that precedence requires and applies no formatting policy.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypeAlias, override

# =============================================================================
# Base classes
# =============================================================================


class Node(ABC):
	"""Base class for all output nodes."""

	__slots__: tuple[str, ...] = ()

	@abstractmethod
	def emit(self, out: list[str]) -> None:
		"""Emit this node as JavaScript/JSX code into the output buffer."""


class ExprNode(Node, ABC):
	"""Base class for JS expressions (JSX elements and fragments included)."""

	__slots__: tuple[str, ...] = ()

	def precedence(self) -> int:
		"""Operator precedence (higher = binds tighter). Default: primary (20)."""
		return 20


class JSXNode(Node, ABC):
	"""Base class for nodes that only exist inside JSX: text, containers, attributes."""

	__slots__: tuple[str, ...] = ()


# =============================================================================
# Expression Nodes
# =============================================================================


@dataclass(slots=True)
class Identifier(ExprNode):
	"""JS identifier: x, foo, undefined"""

	name: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.name)


@dataclass(slots=True)
class Literal(ExprNode):
	"""JS literal: 42, "hello", true, null"""

	value: int | float | str | bool | None

	@override
	def emit(self, out: list[str]) -> None:
		if self.value is None:
			out.append("null")
		elif isinstance(self.value, bool):
			out.append("true" if self.value else "false")
		elif isinstance(self.value, str):
			out.append('"')
			out.append(_escape_string(self.value))
			out.append('"')
		else:
			out.append(str(self.value))


@dataclass(slots=True)
class Member(ExprNode):
	"""JS member access: obj.prop

	`prop` is normally a plain name. It can also be a whole path when a head
	segment was grafted on with `prepend_to_path`, in which case it emits as
	`obj.a.b`.
	"""

	obj: ExprNode
	prop: str | Identifier | Member

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.obj, out)
		out.append(".")
		if isinstance(self.prop, str):
			out.append(self.prop)
		else:
			self.prop.emit(out)


@dataclass(slots=True)
class Call(ExprNode):
	"""JS function call: fn(args)"""

	callee: ExprNode
	args: Sequence[ExprNode]

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.callee, out)
		out.append("(")
		for i, a in enumerate(self.args):
			if i > 0:
				out.append(", ")
			a.emit(out)
		out.append(")")


@dataclass(slots=True)
class Property(Node):
	"""Object property with a string key: "key": value"""

	key: str
	value: ExprNode

	@override
	def emit(self, out: list[str]) -> None:
		out.append('"')
		out.append(_escape_string(self.key))
		out.append('": ')
		self.value.emit(out)


@dataclass(slots=True)
class Object(ExprNode):
	"""JS object: { "key": value }"""

	props: Sequence[Property]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("{")
		for i, p in enumerate(self.props):
			if i > 0:
				out.append(", ")
			p.emit(out)
		out.append("}")


@dataclass(slots=True)
class Unary(ExprNode):
	"""JS unary expression: !x, -x"""

	op: str
	operand: ExprNode

	@override
	def precedence(self) -> int:
		return 17

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.op)
		_emit_paren(self.operand, "!", "unary", out)


@dataclass(slots=True)
class Binary(ExprNode):
	"""JS binary expression: x + y, a && b"""

	left: ExprNode
	op: str
	right: ExprNode

	@override
	def precedence(self) -> int:
		return _PRECEDENCE.get(self.op, 0)

	@override
	def emit(self, out: list[str]) -> None:
		_emit_paren(self.left, self.op, "left", out)
		out.append(" ")
		out.append(self.op)
		out.append(" ")
		_emit_paren(self.right, self.op, "right", out)


@dataclass(slots=True)
class Ternary(ExprNode):
	"""JS ternary expression: cond ? a : b"""

	cond: ExprNode
	then: ExprNode
	else_: ExprNode

	@override
	def precedence(self) -> int:
		return _PRECEDENCE["?:"]

	@override
	def emit(self, out: list[str]) -> None:
		_emit_paren(self.cond, "?:", "left", out)
		out.append(" ? ")
		self.then.emit(out)
		out.append(" : ")
		self.else_.emit(out)


@dataclass(slots=True)
class Arrow(ExprNode):
	"""JS arrow function: (x, i) => expr"""

	params: Sequence[str]
	body: ExprNode

	@override
	def precedence(self) -> int:
		return _PRECEDENCE["=>"]

	@override
	def emit(self, out: list[str]) -> None:
		if len(self.params) == 1:
			out.append(self.params[0])
		else:
			out.append("(")
			out.append(", ".join(self.params))
			out.append(")")
		out.append(" => ")
		# Object literal bodies would parse as a block
		if isinstance(self.body, Object):
			out.append("(")
			self.body.emit(out)
			out.append(")")
		else:
			self.body.emit(out)


# =============================================================================
# JSX Nodes
# =============================================================================


@dataclass(slots=True)
class JSXText(JSXNode):
	"""Literal text between JSX tags."""

	value: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(_escape_jsx_text(self.value))


@dataclass(slots=True)
class JSXEmptyExpression(JSXNode):
	"""Empty container contents, optionally holding a comment: {/* ... */}"""

	comment: str | None = None

	@override
	def emit(self, out: list[str]) -> None:
		if self.comment is None:
			return
		out.append("/*")
		out.append(self.comment.replace("*/", "* /"))
		out.append("*/")


@dataclass(slots=True)
class JSXExpressionContainer(JSXNode):
	"""JS expression embedded in JSX: {expr}"""

	expression: ExprNode | JSXEmptyExpression

	@override
	def emit(self, out: list[str]) -> None:
		out.append("{")
		self.expression.emit(out)
		out.append("}")


@dataclass(slots=True)
class JSXAttribute(JSXNode):
	"""name="text", name={expr}, or a bare boolean name."""

	name: str
	value: Literal | JSXExpressionContainer | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.name)
		if self.value is None:
			return
		if isinstance(self.value, Literal) and isinstance(self.value.value, str):
			out.append('="')
			out.append(_escape_jsx_attr(self.value.value))
			out.append('"')
		elif isinstance(self.value, Literal):
			out.append("={")
			self.value.emit(out)
			out.append("}")
		else:
			out.append("=")
			self.value.emit(out)


@dataclass(slots=True)
class JSXSpreadAttribute(JSXNode):
	"""{...expr} in attribute position."""

	argument: ExprNode

	@override
	def emit(self, out: list[str]) -> None:
		out.append("{...")
		self.argument.emit(out)
		out.append("}")


@dataclass(slots=True)
class JSXElement(ExprNode):
	"""<name attrs>children</name>, or <name attrs /> when self-closing."""

	name: str
	attributes: Sequence[JSXAttribute | JSXSpreadAttribute] = field(
		default_factory=list
	)
	children: Sequence[Child] = field(default_factory=list)
	self_closing: bool = False

	@override
	def emit(self, out: list[str]) -> None:
		out.append("<")
		out.append(self.name)
		for attr in self.attributes:
			out.append(" ")
			attr.emit(out)
		if self.self_closing and not self.children:
			out.append(" />")
			return
		out.append(">")
		for c in self.children:
			c.emit(out)
		out.append("</")
		out.append(self.name)
		out.append(">")


@dataclass(slots=True)
class JSXFragment(ExprNode):
	"""<>children</>"""

	children: Sequence[Child] = field(default_factory=list)

	@override
	def emit(self, out: list[str]) -> None:
		out.append("<>")
		for c in self.children:
			c.emit(out)
		out.append("</>")


Child: TypeAlias = JSXText | JSXExpressionContainer | JSXElement | JSXFragment


# =============================================================================
# Emit logic
# =============================================================================


def emit(node: Node) -> str:
	"""Emit a node as JavaScript/JSX code."""
	out: list[str] = []
	node.emit(out)
	return "".join(out)


# Operator precedence table (higher = binds tighter)
_PRECEDENCE: dict[str, int] = {
	# Unary
	"!": 17,
	# Multiplicative
	"*": 15,
	"/": 15,
	"%": 15,
	# Additive
	"+": 14,
	"-": 14,
	# Relational
	"<": 12,
	"<=": 12,
	">": 12,
	">=": 12,
	"===": 12,
	"!==": 12,
	# Logical
	"&&": 7,
	"||": 6,
	"??": 6,
	# Ternary
	"?:": 4,
	# Arrow
	"=>": 2,
}


def _escape_string(s: str) -> str:
	"""Escape for double-quoted JS string literals."""
	return (
		s.replace("\\", "\\\\")
		.replace('"', '\\"')
		.replace("\n", "\\n")
		.replace("\r", "\\r")
		.replace("\t", "\\t")
		.replace("\b", "\\b")
		.replace("\f", "\\f")
		.replace("\v", "\\v")
		.replace("\x00", "\\x00")
		.replace("\u2028", "\\u2028")
		.replace("\u2029", "\\u2029")
	)


def _escape_jsx_text(s: str) -> str:
	"""Escape text content for JSX."""
	return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_jsx_attr(s: str) -> str:
	"""Escape attribute value for JSX."""
	return s.replace("&", "&amp;").replace('"', "&quot;")


def _emit_paren(node: ExprNode, parent_op: str, side: str, out: list[str]) -> None:
	"""Emit child with parens if needed for precedence."""
	needs_parens = False
	if isinstance(node, Ternary) and parent_op != "?:":
		needs_parens = True
	else:
		child_prec = node.precedence()
		parent_prec = _PRECEDENCE.get(parent_op, 0)
		if child_prec < parent_prec:
			needs_parens = True
		elif child_prec == parent_prec and side != "unary":
			# Everything left in the table is left-associative
			needs_parens = side == "right" or isinstance(node, Ternary)

	if needs_parens:
		out.append("(")
		node.emit(out)
		out.append(")")
	else:
		node.emit(out)


def _emit_primary(node: ExprNode, out: list[str]) -> None:
	"""Emit with parens if not primary precedence."""
	if node.precedence() < 20:
		out.append("(")
		node.emit(out)
		out.append(")")
	else:
		node.emit(out)


__all__ = [
	"Arrow",
	"Binary",
	"Call",
	"Child",
	"ExprNode",
	"Identifier",
	"JSXAttribute",
	"JSXElement",
	"JSXEmptyExpression",
	"JSXExpressionContainer",
	"JSXFragment",
	"JSXNode",
	"JSXSpreadAttribute",
	"JSXText",
	"Literal",
	"Member",
	"Node",
	"Object",
	"Property",
	"Ternary",
	"Unary",
	"emit",
]
