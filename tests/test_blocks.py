"""
Tests for block statement conversion.
"""

import pytest
from glimmer_jsx.errors import UnsupportedBlockHelper
from glimmer_jsx.expressions import resolve_element_child, resolve_statement
from glimmer_jsx.glimmer import (
	Block,
	BlockStatement,
	ElementNode,
	MustacheStatement,
	PathExpression,
	SubExpression,
	TextNode,
)
from glimmer_jsx.nodes import Binary, Literal, Ternary, emit


def path(original: str) -> PathExpression:
	return PathExpression(original, tuple(original.split(".")))


def block(
	helper: str,
	*params,
	body=(),
	inverse=None,
	block_params=(),
) -> BlockStatement:
	return BlockStatement(
		path(helper),
		tuple(params),
		program=Block(tuple(body), tuple(block_params)),
		inverse=Block(tuple(inverse)) if inverse is not None else None,
	)


def render(node) -> str:
	return emit(resolve_statement(node))


# =============================================================================
# if / unless
# =============================================================================


class TestIf:
	def test_without_else(self):
		node = block("if", path("open"), body=[ElementNode("p")])
		assert render(node) == "open && <p></p>"

	def test_with_else(self):
		node = block(
			"if", path("user"), body=[TextNode("Hi")], inverse=[TextNode("Log in")]
		)
		result = resolve_statement(node)
		assert result == Ternary(
			resolve_statement(MustacheStatement(path("user"))),
			Literal("Hi"),
			Literal("Log in"),
		)
		assert emit(result) == 'user ? "Hi" : "Log in"'

	def test_sub_expression_condition(self):
		cond = SubExpression(path("eq"), (path("a"), path("b")))
		node = block("if", cond, body=[TextNode("same")])
		assert render(node) == 'eq(a, b, {"hash": {}}) && "same"'

	def test_multi_statement_body_is_fragment(self):
		node = block(
			"if",
			path("ok"),
			body=[TextNode("Hello "), MustacheStatement(path("name"))],
		)
		assert render(node) == "ok && <>Hello {name}</>"

	def test_empty_body_is_null(self):
		node = block("if", path("ok"), inverse=[TextNode("no")])
		assert render(node) == 'ok ? null : "no"'

	def test_else_if_chain(self):
		inner = block("if", path("b"), body=[TextNode("B")], inverse=[TextNode("C")])
		node = BlockStatement(
			path("if"),
			(path("a"),),
			program=Block((TextNode("A"),)),
			inverse=Block((inner,)),
		)
		assert render(node) == 'a ? "A" : b ? "B" : "C"'

	def test_requires_one_argument(self):
		with pytest.raises(UnsupportedBlockHelper, match="exactly one argument"):
			resolve_statement(block("if", body=[TextNode("x")]))

	def test_as_child_is_wrapped(self):
		node = block("if", path("open"), body=[ElementNode("p")])
		assert emit(resolve_element_child(node)) == "{open && <p></p>}"


class TestUnless:
	def test_without_else(self):
		node = block("unless", path("done"), body=[TextNode("pending")])
		result = resolve_statement(node)
		assert isinstance(result, Binary)
		assert emit(result) == '!done && "pending"'

	def test_with_else(self):
		node = block(
			"unless", path("a.b"), body=[TextNode("x")], inverse=[TextNode("y")]
		)
		assert render(node) == '!a.b ? "x" : "y"'


# =============================================================================
# each / with
# =============================================================================


class TestEach:
	def test_block_params(self):
		node = block(
			"each",
			path("items"),
			body=[ElementNode("li", children=(MustacheStatement(path("item.name")),))],
			block_params=["item", "index"],
		)
		assert render(node) == "items.map((item, index) => <li>{item.name}</li>)"

	def test_default_param_roots_body_paths(self):
		node = block("each", path("rows"), body=[MustacheStatement(path("name"))])
		assert render(node) == "rows.map(item => item.name)"

	def test_default_param_this(self):
		this = PathExpression("this", (), this=True)
		node = block("each", path("rows"), body=[MustacheStatement(this)])
		assert render(node) == "rows.map(item => item)"

	def test_default_param_this_member(self):
		node = block(
			"each",
			path("rows"),
			body=[MustacheStatement(PathExpression("this.id", ("id",), this=True))],
		)
		assert render(node) == "rows.map(item => item.id)"

	def test_default_param_keeps_args_and_helpers(self):
		arg = PathExpression("@format", ("format",), data=True)
		helper = MustacheStatement(path("fmt"), (path("price"), arg))
		node = block("each", path("rows"), body=[helper])
		assert (
			render(node) == 'rows.map(item => fmt(item.price, format, {"hash": {}}))'
		)

	def test_default_param_nested_if(self):
		inner = block("if", path("active"), body=[MustacheStatement(path("label"))])
		node = block("each", path("rows"), body=[inner])
		assert render(node) == "rows.map(item => item.active && item.label)"

	def test_outer_block_params_stay_bound(self):
		inner = block(
			"each",
			path("group.rows"),
			body=[
				MustacheStatement(path("group.title")),
				MustacheStatement(path("name")),
			],
		)
		node = block("each", path("groups"), body=[inner], block_params=["group"])
		assert render(node) == (
			"groups.map(group => group.rows.map(item => <>{group.title}{item.name}</>))"
		)

	def test_scope_ends_with_block(self):
		each = block("each", path("rows"), body=[MustacheStatement(path("name"))])
		node = ElementNode("ul", children=(each, MustacheStatement(path("footer"))))
		assert render(node) == "<ul>{rows.map(item => item.name)}{footer}</ul>"

	def test_else_resolves_in_outer_scope(self):
		node = block(
			"each",
			path("rows"),
			body=[MustacheStatement(path("name"))],
			inverse=[MustacheStatement(path("empty"))],
		)
		assert render(node) == "rows.length ? rows.map(item => item.name) : empty"

	def test_else_renders_when_empty(self):
		node = block(
			"each",
			path("list"),
			body=[TextNode("x")],
			inverse=[TextNode("Nothing")],
			block_params=["x"],
		)
		assert render(node) == 'list.length ? list.map(x => "x") : "Nothing"'


class TestWith:
	def test_default_param_roots_body_paths(self):
		node = block("with", path("user"), body=[MustacheStatement(path("name"))])
		assert render(node) == "(item => item.name)(user)"

	def test_with_block_param(self):
		node = block(
			"with",
			path("user.profile"),
			body=[MustacheStatement(path("p.name"))],
			block_params=["p"],
		)
		assert render(node) == "(p => p.name)(user.profile)"

	def test_with_else(self):
		node = block(
			"with",
			path("user"),
			body=[MustacheStatement(path("u.name"))],
			inverse=[TextNode("anonymous")],
			block_params=["u"],
		)
		assert render(node) == 'user ? (u => u.name)(user) : "anonymous"'


def test_unknown_block_helper():
	with pytest.raises(UnsupportedBlockHelper) as info:
		resolve_statement(block("let", path("x"), body=[TextNode("x")]))
	assert info.value.name == "let"
	assert "{{#let}}" in str(info.value)
