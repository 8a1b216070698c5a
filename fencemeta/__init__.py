"""Code fence metadata parsing and safe HTML data-* attribute mapping."""

from fencemeta.info_string import parse, parse_strict, serialize
from fencemeta.models import Attribute, ParseResult
from fencemeta.names import (
    from_attribute_name,
    from_property_name,
    property_to_attribute,
    to_attribute_name,
    to_property_name,
    to_safe_case,
    to_safe_name,
)
from fencemeta.parser import create_parser, parse_markdown, render_html
from fencemeta.plugins import code_meta_handler_plugin, code_meta_plugin, data_to_attrs_plugin
from fencemeta.predicates import AnyOf, Always, Custom, Equals, Matches, Predicate, as_predicate, evaluate
from fencemeta.projector import FenceNode, project, project_tokens
from fencemeta.renderer import DatasetRenderer
from fencemeta.sweep import sweep, sweep_token

__all__ = [
    # Info string
    "parse",
    "parse_strict",
    "serialize",
    "Attribute",
    "ParseResult",
    # Predicates
    "Predicate",
    "Always",
    "Equals",
    "Matches",
    "Custom",
    "AnyOf",
    "as_predicate",
    "evaluate",
    # Names
    "to_attribute_name",
    "from_attribute_name",
    "to_property_name",
    "from_property_name",
    "to_safe_case",
    "to_safe_name",
    "property_to_attribute",
    # Projection and sweep
    "FenceNode",
    "project",
    "project_tokens",
    "sweep",
    "sweep_token",
    # markdown-it
    "code_meta_plugin",
    "code_meta_handler_plugin",
    "data_to_attrs_plugin",
    "DatasetRenderer",
    "create_parser",
    "parse_markdown",
    "render_html",
]
