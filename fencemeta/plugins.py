"""markdown-it plugins wiring code fence metadata into the HTML output.

Two ways to project fence metadata:

- :func:`code_meta_plugin` adds a core rule that rewrites every fence token
  right after parsing, so later rules and ``SyntaxTreeNode`` consumers see the
  projected attributes.
- :func:`code_meta_handler_plugin` replaces the ``fence`` render rule and
  projects each token just before delegating to the actual renderer.

:func:`data_to_attrs_plugin` sweeps internal token data into attributes once
every other core rule has run.

Usage::

    md = MarkdownIt("commonmark", renderer_cls=DatasetRenderer)
    md.use(code_meta_plugin, include="caption")
    md.render('```python caption="Hello world"\\nprint(1)\\n```')
"""

from collections.abc import Callable

from loguru import logger
from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore

from fencemeta.info_string import parse
from fencemeta.predicates import PredicateLike, as_predicate
from fencemeta.projector import (
    DEFAULT_LANG_ATTR,
    FenceNode,
    InfoParser,
    language_attribute_name,
    project,
    project_tokens,
)
from fencemeta.sweep import NodeFilter, sweep

FenceHandler = Callable[..., str]


def _check_lang_attr(lang_attr: str | None) -> None:
    if lang_attr:
        language_attribute_name(lang_attr)


def code_meta_plugin(
    md: MarkdownIt,
    include: PredicateLike | None = False,
    lang_attr: str | None = DEFAULT_LANG_ATTR,
    parser: InfoParser = parse,
) -> None:
    """Project fence metadata into ``data-*`` attributes as a core rule."""
    _check_lang_attr(lang_attr)
    predicate = as_predicate(include)

    def code_meta(state: StateCore) -> None:
        count = project_tokens(state.tokens, lang_attr=lang_attr, include=predicate, parser=parser)
        if count:
            logger.debug(f"Projected metadata of {count} code block(s)")

    md.core.ruler.push("code_meta", code_meta)


def code_meta_handler_plugin(
    md: MarkdownIt,
    include: PredicateLike | None = False,
    lang_attr: str | None = DEFAULT_LANG_ATTR,
    parser: InfoParser = parse,
    handler: FenceHandler | None = None,
) -> None:
    """Project fence metadata at render time, then delegate to ``handler``.

    ``handler`` takes ``(tokens, idx, options, env)`` like any entry of
    ``md.renderer.rules``. By default it is the ``fence`` rule registered
    before this plugin.
    """
    _check_lang_attr(lang_attr)
    predicate = as_predicate(include)
    delegate = handler or md.renderer.rules["fence"]

    def render_fence(tokens, idx, options, env):
        project(FenceNode(tokens[idx]), lang_attr=lang_attr, include=predicate, parser=parser)
        return delegate(tokens, idx, options, env)

    md.renderer.rules["fence"] = render_fence


def data_to_attrs_plugin(
    md: MarkdownIt,
    node_filter: NodeFilter = None,
    data_filter: PredicateLike | None = False,
) -> None:
    """Move allowed ``token.meta`` entries into rendered attributes."""
    predicate = as_predicate(data_filter)

    def data_to_attrs(state: StateCore) -> None:
        sweep(state.tokens, node_filter=node_filter, data_filter=predicate)

    md.core.ruler.push("data_to_attrs", data_to_attrs)
