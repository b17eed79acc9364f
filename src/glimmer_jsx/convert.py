"""Top-level conversion of a whole template."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from glimmer_jsx.config import ResolverConfig
from glimmer_jsx.expressions import Resolver
from glimmer_jsx.glimmer import Block, GlimmerNode, Template, load
from glimmer_jsx.nodes import ExprNode, emit

logger = logging.getLogger(__name__)


def convert(
	template: GlimmerNode | Mapping[str, Any],
	*,
	config: ResolverConfig | None = None,
) -> ExprNode:
	"""Convert a Glimmer template (or its JSON dump) into a JSX expression.

	A template with a single top-level statement becomes that statement's
	expression; anything else is wrapped in a fragment. A bare statement is
	treated as a one-statement template.
	"""
	if isinstance(template, Mapping):
		template = load(template)
	if isinstance(template, (Template, Block)):
		body = template.body
	else:
		body = (template,)

	logger.debug("Converting template with %d top-level statement(s)", len(body))
	result = Resolver(config).create_root_children(body)
	logger.debug("Converted template to %s", type(result).__name__)
	return result


def to_jsx(
	template: GlimmerNode | Mapping[str, Any],
	*,
	config: ResolverConfig | None = None,
) -> str:
	"""Convert a Glimmer template and emit the result as JSX source."""
	return emit(convert(template, config=config))
