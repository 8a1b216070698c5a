"""Promotion of internal token data into rendered ``data-*`` attributes.

markdown-it tokens carry a ``meta`` dict that plugins use for internal data
and that the renderer ignores. The sweep moves selected entries into the
token's ``attrs`` under a safe name, so they end up as ``data-*`` attributes
in the HTML. Nothing is moved unless ``data_filter`` allows it.
"""

from collections.abc import Callable

from loguru import logger
from markdown_it.token import Token

from fencemeta.names import to_safe_name
from fencemeta.predicates import PredicateLike, as_predicate, evaluate
from fencemeta.projector import iter_tokens

NodeFilter = str | Callable[[Token], bool] | None


def _node_matches(node_filter: NodeFilter, token: Token) -> bool:
    if node_filter is None:
        return True
    if isinstance(node_filter, str):
        return token.type == node_filter
    return bool(node_filter(token))


def sweep_token(token: Token, data_filter: PredicateLike | None = False) -> int:
    """Move the token's allowed data entries into its attributes.

    Entries whose key cannot be turned into a safe name are logged and stay in
    ``token.meta``. Returns the number of entries moved.
    """
    if not token.meta:
        return 0

    predicate = as_predicate(data_filter)
    kept: dict = {}
    moved = 0
    for key, value in token.meta.items():
        if not isinstance(key, str) or not evaluate(predicate, key, value):
            kept[key] = value
            continue

        name = to_safe_name(key)
        if name is None:
            logger.debug(f"Cannot be made into a data attribute: {key!r}")
            kept[key] = value
            continue

        token.attrs[name] = value
        moved += 1

    # Unmoved entries only
    token.meta = kept
    return moved


def sweep(
    tokens: list[Token],
    node_filter: NodeFilter = None,
    data_filter: PredicateLike | None = False,
) -> int:
    """Sweep every token matching ``node_filter``, nested children included.

    ``node_filter`` is None for all tokens, a token type, or a callable.
    Sweeping twice is the same as sweeping once. Returns the number of entries moved.
    """
    predicate = as_predicate(data_filter)
    return sum(sweep_token(token, predicate) for token in iter_tokens(tokens) if _node_matches(node_filter, token))
