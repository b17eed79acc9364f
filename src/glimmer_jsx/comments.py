from __future__ import annotations

from glimmer_jsx.glimmer import CommentStatement, MustacheCommentStatement
from glimmer_jsx.nodes import JSXEmptyExpression, JSXExpressionContainer


def create_comment(
	node: CommentStatement | MustacheCommentStatement,
) -> JSXExpressionContainer:
	"""Comment in child position: {/* value */}"""
	return JSXExpressionContainer(JSXEmptyExpression(comment=node.value))
