"""
Tests for the Glimmer input AST and its JSON loader.
"""

import dataclasses

import pytest
from glimmer_jsx.errors import UnknownNodeType
from glimmer_jsx.glimmer import (
	AttrNode,
	BlockStatement,
	ConcatStatement,
	ElementNode,
	Hash,
	HashPair,
	MustacheStatement,
	NumberLiteral,
	PathExpression,
	StringLiteral,
	Template,
	TextNode,
	UndefinedLiteral,
	dump,
	load,
	node_type,
)

LOC = {"source": "(synthetic)", "start": {"line": 1, "column": 0}}


def test_load_text():
	assert load({"type": "TextNode", "chars": "hi", "loc": LOC}) == TextNode("hi")


def test_load_mustache_with_params_and_hash():
	node = load(
		{
			"type": "MustacheStatement",
			"path": {"type": "PathExpression", "original": "t", "parts": ["t"]},
			"params": [{"type": "StringLiteral", "value": "key", "original": "key"}],
			"hash": {
				"type": "Hash",
				"pairs": [
					{
						"type": "HashPair",
						"key": "count",
						"value": {"type": "NumberLiteral", "value": 2},
					}
				],
			},
			"trusting": False,
			"loc": LOC,
		}
	)
	assert node == MustacheStatement(
		PathExpression("t", ("t",)),
		(StringLiteral("key"),),
		Hash((HashPair("count", NumberLiteral(2)),)),
	)


def test_load_escaped_flag():
	node = load(
		{
			"type": "MustacheStatement",
			"path": {"type": "PathExpression", "original": "html", "parts": ["html"]},
			"escaped": False,
		}
	)
	assert isinstance(node, MustacheStatement)
	assert node.trusting is True


def test_load_path_from_head_and_tail():
	node = load(
		{
			"type": "PathExpression",
			"head": {"type": "AtHead", "name": "@user"},
			"tail": ["name"],
		}
	)
	assert node == PathExpression("@user.name", ("user", "name"), data=True)


def test_load_this_path():
	node = load(
		{
			"type": "PathExpression",
			"original": "this.title",
			"head": {"type": "ThisHead"},
			"tail": ["title"],
		}
	)
	assert node == PathExpression("this.title", ("title",), this=True)


def test_load_element():
	node = load(
		{
			"type": "ElementNode",
			"tag": "img",
			"selfClosing": True,
			"attributes": [
				{
					"type": "AttrNode",
					"name": "alt",
					"value": {"type": "TextNode", "chars": "logo"},
				}
			],
			"blockParams": [],
			"modifiers": [],
			"comments": [],
			"children": [],
		}
	)
	assert node == ElementNode(
		"img", (AttrNode("alt", TextNode("logo")),), self_closing=True
	)


def test_load_block_without_inverse():
	node = load(
		{
			"type": "BlockStatement",
			"path": {"type": "PathExpression", "original": "each", "parts": ["each"]},
			"params": [{"type": "PathExpression", "original": "items", "parts": ["items"]}],
			"hash": {"type": "Hash", "pairs": []},
			"program": {
				"type": "Block",
				"body": [{"type": "TextNode", "chars": "x"}],
				"blockParams": ["item", "i"],
			},
			"inverse": None,
		}
	)
	assert isinstance(node, BlockStatement)
	assert node.inverse is None
	assert node.program.block_params == ("item", "i")
	assert node.program.body == (TextNode("x"),)


def test_load_template():
	node = load({"type": "Template", "body": [], "blockParams": []})
	assert node == Template()


def test_load_unknown_type():
	with pytest.raises(UnknownNodeType, match="PartialStatement"):
		load({"type": "PartialStatement"})


def test_load_missing_type():
	with pytest.raises(UnknownNodeType):
		load({"chars": "x"})


def test_dump_round_trips_concat():
	node = ConcatStatement(
		(
			TextNode("btn "),
			MustacheStatement(PathExpression("kind", ("kind",))),
		)
	)
	data = dump(node)
	assert data["type"] == "ConcatStatement"
	assert data["parts"][1]["path"]["original"] == "kind"
	assert load(data) == node


def test_dump_uses_camel_case():
	data = dump(ElementNode("br", self_closing=True))
	assert data["selfClosing"] is True
	assert data["blockParams"] == []


def test_nodes_are_frozen():
	node = TextNode("a")
	with pytest.raises(dataclasses.FrozenInstanceError):
		node.chars = "b"  # pyright: ignore[reportAttributeAccessIssue]


def test_node_type():
	assert node_type(UndefinedLiteral()) == "UndefinedLiteral"
	assert node_type(3) == "int"
