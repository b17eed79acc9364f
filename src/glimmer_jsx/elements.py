"""Element and fragment conversion."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from glimmer_jsx.glimmer import AttrNode, ConcatStatement, ElementNode, TextNode
from glimmer_jsx.nodes import (
	Child,
	Identifier,
	JSXAttribute,
	JSXElement,
	JSXExpressionContainer,
	JSXFragment,
	JSXSpreadAttribute,
	Literal,
	Object,
	Property,
)

if TYPE_CHECKING:
	from glimmer_jsx.expressions import Resolver

logger = logging.getLogger(__name__)

# HTML attribute names that React spells differently
ATTRIBUTE_NAMES: dict[str, str] = {
	"class": "className",
	"for": "htmlFor",
}

# `<div ...attributes>` forwards the component's attributes
SPLATTRIBUTES = "...attributes"

_DASH_LETTER = re.compile(r"-([a-z])")


def convert_element(node: ElementNode, ctx: Resolver) -> JSXElement:
	"""Convert a Glimmer element to a JSX element.

	Attribute values are resolved as plain expressions, children as JSX
	children. Element modifiers have no JSX counterpart and are dropped.
	"""
	if node.modifiers:
		logger.debug(
			"Dropping %d modifier(s) on <%s>", len(node.modifiers), node.tag
		)
	attributes = [create_attribute(attr, ctx) for attr in node.attributes]
	children = ctx.create_children(node.children)
	return JSXElement(
		node.tag,
		attributes,
		children,
		self_closing=node.self_closing and not children,
	)


def create_fragment(children: Sequence[Child]) -> JSXFragment:
	return JSXFragment(list(children))


def create_attribute(
	attr: AttrNode, ctx: Resolver
) -> JSXAttribute | JSXSpreadAttribute:
	if attr.name == SPLATTRIBUTES:
		return JSXSpreadAttribute(Identifier("attributes"))

	name = ATTRIBUTE_NAMES.get(attr.name, attr.name)
	value = attr.value

	if isinstance(value, TextNode):
		if name == "style":
			return JSXAttribute(
				name, JSXExpressionContainer(create_style_object(value.chars))
			)
		return JSXAttribute(name, Literal(value.chars))

	if isinstance(value, ConcatStatement):
		return JSXAttribute(name, JSXExpressionContainer(ctx.create_concat(value.parts)))

	return JSXAttribute(name, JSXExpressionContainer(ctx.resolve_statement(value)))


def create_style_object(css: str) -> Object:
	"""Parse an inline style string into a React style object.

	"font-size: 12px; color: red" -> {"fontSize": "12px", "color": "red"}
	"""
	props: list[Property] = []
	for declaration in css.split(";"):
		prop, sep, value = declaration.partition(":")
		prop = prop.strip()
		if not sep or not prop:
			continue
		props.append(Property(style_property_name(prop), Literal(value.strip())))
	return Object(props)


def style_property_name(prop: str) -> str:
	"""CSS property name -> React style key."""
	# Custom properties are passed through untouched
	if prop.startswith("--"):
		return prop
	prop = prop.lower()
	if prop.startswith("-ms-"):
		prop = prop[1:]
	return _DASH_LETTER.sub(lambda m: m.group(1).upper(), prop)
