"""Block statement conversion: {{#if}}, {{#unless}}, {{#each}}, {{#with}}."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from glimmer_jsx.errors import UnsupportedBlockHelper
from glimmer_jsx.glimmer import Block, BlockStatement
from glimmer_jsx.nodes import (
	Arrow,
	Binary,
	Call,
	ExprNode,
	Literal,
	Member,
	Ternary,
	Unary,
)

if TYPE_CHECKING:
	from glimmer_jsx.expressions import Resolver

BlockHandler = Callable[[BlockStatement, "Resolver"], ExprNode]


def resolve_block(node: BlockStatement, ctx: Resolver) -> ExprNode:
	name = ctx.helper_name(node.path)
	handler = BLOCK_HELPERS.get(name)
	if handler is None:
		raise UnsupportedBlockHelper(name)
	return handler(node, ctx)


def resolve_if(node: BlockStatement, ctx: Resolver) -> ExprNode:
	"""{{#if c}}A{{else}}B{{/if}} -> c ? A : B, or c && A without else."""
	cond = _subject(node, ctx, "if")
	return _conditional(cond, node, ctx)


def resolve_unless(node: BlockStatement, ctx: Resolver) -> ExprNode:
	"""{{#unless c}}A{{/unless}} -> !c && A"""
	cond = Unary("!", _subject(node, ctx, "unless"))
	return _conditional(cond, node, ctx)


def resolve_each(node: BlockStatement, ctx: Resolver) -> ExprNode:
	"""{{#each list as |item i|}}A{{/each}} -> list.map((item, i) => A)

	Without block params the current item is `item` and the body's paths
	resolve against it. An {{else}} branch renders when the list is empty:
	list.length ? list.map(...) : B
	"""
	items = _subject(node, ctx, "each")
	with ctx.block_scope(node.program.block_params) as params:
		body = block_body(node.program, ctx)
	mapped = Call(Member(items, "map"), [Arrow(params, body)])
	if node.inverse is None:
		return mapped
	return Ternary(
		Member(_subject(node, ctx, "each"), "length"),
		mapped,
		block_body(node.inverse, ctx),
	)


def resolve_with(node: BlockStatement, ctx: Resolver) -> ExprNode:
	"""{{#with obj as |x|}}A{{/with}} -> (x => A)(obj)"""
	subject = _subject(node, ctx, "with")
	with ctx.block_scope(node.program.block_params) as params:
		body = block_body(node.program, ctx)
	call = Call(Arrow(params, body), [subject])
	if node.inverse is None:
		return call
	return Ternary(_subject(node, ctx, "with"), call, block_body(node.inverse, ctx))


def block_body(block: Block, ctx: Resolver) -> ExprNode:
	"""Resolve a block body as one expression. Empty bodies render nothing."""
	if not block.body:
		return Literal(None)
	return ctx.create_root_children(block.body)


def _subject(node: BlockStatement, ctx: Resolver, name: str) -> ExprNode:
	if len(node.params) != 1:
		raise UnsupportedBlockHelper(
			name, f"expected exactly one argument, got {len(node.params)}"
		)
	return ctx.resolve_expression(node.params[0])


def _conditional(cond: ExprNode, node: BlockStatement, ctx: Resolver) -> ExprNode:
	consequent = block_body(node.program, ctx)
	if node.inverse is None:
		return Binary(cond, "&&", consequent)
	return Ternary(cond, consequent, block_body(node.inverse, ctx))


BLOCK_HELPERS: dict[str, BlockHandler] = {
	"if": resolve_if,
	"unless": resolve_unless,
	"each": resolve_each,
	"with": resolve_with,
}
