"""Convert Glimmer (Handlebars) template ASTs into JSX ASTs."""

# Config
from glimmer_jsx.config import ResolverConfig as ResolverConfig

# Top-level conversion
from glimmer_jsx.convert import convert as convert
from glimmer_jsx.convert import to_jsx as to_jsx

# Errors
from glimmer_jsx.errors import ConfigError as ConfigError
from glimmer_jsx.errors import EmptyPathSegments as EmptyPathSegments
from glimmer_jsx.errors import MaxDepthExceeded as MaxDepthExceeded
from glimmer_jsx.errors import ResolveError as ResolveError
from glimmer_jsx.errors import UnexpectedExpressionKind as UnexpectedExpressionKind
from glimmer_jsx.errors import UnexpectedStatementKind as UnexpectedStatementKind
from glimmer_jsx.errors import UnknownNodeType as UnknownNodeType
from glimmer_jsx.errors import UnsupportedBlockHelper as UnsupportedBlockHelper
from glimmer_jsx.errors import (
	UnsupportedTopLevelConstruct as UnsupportedTopLevelConstruct,
)

# Resolution core
from glimmer_jsx.expressions import Resolver as Resolver
from glimmer_jsx.expressions import append_to_path as append_to_path
from glimmer_jsx.expressions import create_children as create_children
from glimmer_jsx.expressions import create_concat as create_concat
from glimmer_jsx.expressions import create_path as create_path
from glimmer_jsx.expressions import create_root_children as create_root_children
from glimmer_jsx.expressions import prepare_jsx_text as prepare_jsx_text
from glimmer_jsx.expressions import prepend_to_path as prepend_to_path
from glimmer_jsx.expressions import resolve_element_child as resolve_element_child
from glimmer_jsx.expressions import resolve_expression as resolve_expression
from glimmer_jsx.expressions import resolve_helper as resolve_helper
from glimmer_jsx.expressions import resolve_statement as resolve_statement

# Input AST
from glimmer_jsx.glimmer import dump as dump
from glimmer_jsx.glimmer import load as load

# Emit
from glimmer_jsx.nodes import emit as emit
