"""Markdown to HTML conversion using markdown-it-py.

Configures markdown-it with the plugins we need:
- CommonMark base
- GFM tables and strikethrough
- Footnotes
- Code fence metadata projected into data-* attributes

Raw HTML in the source is escaped, not passed through. The output is not
sanitized otherwise, so included data-* values still reach the page.
"""

from functools import partial

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.footnote import footnote_plugin

from fencemeta.config import Settings
from fencemeta.info_string import parse
from fencemeta.plugins import code_meta_plugin
from fencemeta.renderer import DatasetRenderer


def create_parser(settings: Settings | None = None) -> MarkdownIt:
    """Create configured markdown-it parser."""
    settings = settings or Settings()
    md = MarkdownIt("commonmark", {"html": False}, renderer_cls=DatasetRenderer)
    md.enable("table")
    md.enable("strikethrough")
    if settings.footnotes:
        md.use(footnote_plugin)
    md.use(
        code_meta_plugin,
        include=settings.include_predicate(),
        lang_attr=settings.lang_attr,
        parser=partial(parse, allow_flags=settings.allow_flags),
    )
    return md


# Singleton parser instance
_parser: MarkdownIt | None = None


def get_parser() -> MarkdownIt:
    """Get or create the singleton parser instance."""
    global _parser
    if _parser is None:
        _parser = create_parser()
    return _parser


def parse_markdown(text: str) -> SyntaxTreeNode:
    """Parse markdown text into AST.

    Args:
        text: Markdown text to parse

    Returns:
        Root SyntaxTreeNode of the AST, code blocks already projected
    """
    parser = get_parser()
    tokens = parser.parse(text)
    return SyntaxTreeNode(tokens)


def render_html(text: str, settings: Settings | None = None) -> str:
    """Convert markdown to HTML.

    Uses the shared parser unless explicit settings are given.
    """
    parser = create_parser(settings) if settings is not None else get_parser()
    return parser.render(text)
