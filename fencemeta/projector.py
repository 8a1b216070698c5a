"""Projection of parsed fence metadata into a code block's HTML attributes.

A fence token's ``info`` holds the language word followed by free-form
metadata. Projection parses the metadata, copies the included attributes into
``token.attrs`` as ``data-*`` attributes (rendered on the ``<code>`` element),
and rewrites ``info`` so only the unparsed remainder is left. Attributes the
predicate rejects are kept in ``token.meta``, which markdown-it never renders,
so that nothing parsed is lost.

# Security

This copies user-provided data into ``data-*`` attributes. Scripts on the page
reading those attributes can be exposed to XSS, so only include what they
expect.
"""

from collections.abc import Callable, Iterator, MutableMapping
from typing import Any

from loguru import logger
from markdown_it.token import Token

from fencemeta.info_string import parse
from fencemeta.models import ParseResult
from fencemeta.names import to_attribute_name
from fencemeta.predicates import PredicateLike, as_predicate, evaluate

InfoParser = Callable[[str], ParseResult]

DEFAULT_LANG_ATTR = "language"


class FenceNode:
    """Code block view over a markdown-it ``fence`` token."""

    def __init__(self, token: Token):
        self.token = token

    def _split_info(self) -> list[str]:
        return (self.token.info or "").strip().split(maxsplit=1)

    @property
    def language(self) -> str | None:
        parts = self._split_info()
        return parts[0] if parts else None

    @property
    def meta(self) -> str | None:
        parts = self._split_info()
        return parts[1].strip() if len(parts) == 2 else None

    @meta.setter
    def meta(self, value: str | None) -> None:
        language = self.language
        self.token.info = f"{language} {value}" if language and value else language or value or ""

    @property
    def properties(self) -> MutableMapping[str, Any]:
        """Rendered attributes."""
        return self.token.attrs

    @property
    def data(self) -> MutableMapping[str, Any]:
        """Internal data, not rendered."""
        return self.token.meta


def iter_tokens(tokens: list[Token]) -> Iterator[Token]:
    """Depth-first walk over a token stream, including inline children."""
    for token in tokens:
        yield token
        if token.children:
            yield from iter_tokens(token.children)


def iter_fences(tokens: list[Token]) -> Iterator[FenceNode]:
    for token in iter_tokens(tokens):
        if token.type == "fence":
            yield FenceNode(token)


def language_attribute_name(lang_attr: str) -> str:
    name = to_attribute_name(lang_attr)
    if name is None:
        raise ValueError(f"Invalid language attribute name: {lang_attr!r}")
    return name


def project(
    node: FenceNode,
    lang_attr: str | None = DEFAULT_LANG_ATTR,
    include: PredicateLike | None = False,
    parser: InfoParser = parse,
) -> None:
    """Parse the node's metadata and move included attributes into its properties.

    The language attribute is written first, regardless of ``include``, so a
    parsed attribute with the same name overrides it when included. A falsy
    ``lang_attr`` disables it.

    Projecting an already projected node is a no-op: its metadata only holds
    the unparsed remainder, which parses to nothing, and an existing language
    attribute (possibly an override) is kept.

    Raises:
        ValueError: if ``lang_attr`` is not a valid ``data-*`` suffix.
    """
    predicate = as_predicate(include)

    language = node.language
    if lang_attr and language:
        node.properties.setdefault(language_attribute_name(lang_attr), language)

    meta = node.meta
    if not meta:
        return

    result = parser(meta)
    for attr in result.attrs:
        if evaluate(predicate, attr.key, attr.value):
            name = to_attribute_name(attr.key)
            if name is not None:
                node.properties[name] = attr.value
                continue
            # Only reachable with a custom parser producing unsafe keys
            logger.debug(f"Cannot be made into a data attribute: {attr.key!r}")
        node.data[attr.key] = attr.value

    # Only the remainder stays in the info string
    node.meta = result.rest


def project_tokens(
    tokens: list[Token],
    lang_attr: str | None = DEFAULT_LANG_ATTR,
    include: PredicateLike | None = False,
    parser: InfoParser = parse,
) -> int:
    """Project every fence in a token stream. Returns the number of fences visited."""
    predicate = as_predicate(include)
    count = 0
    for node in iter_fences(tokens):
        project(node, lang_attr=lang_attr, include=predicate, parser=parser)
        count += 1
    return count
