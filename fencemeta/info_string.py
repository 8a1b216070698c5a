"""Parsing of code fence metadata, i.e. the info string minus the language word.

Keys have to be usable as the suffix of an HTML ``data-*`` attribute. Per the
WHATWG definition that is an XML ``Name`` without colons and without uppercase
letters, and MDN adds that it must not start with ``xml``. Keys are further
limited to ASCII, which leaves::

    [a-z_][a-z0-9_.-]*    (not starting with "xml")

Values come in three forms, tried in this order:

- Quoted: ``foo="bar baz" quote='say \\'hi\\''``. A quote preceded by a
  backslash does not close the value, and the escape is kept verbatim.
- Unquoted: ``hello=world foo=bar=baz`` parses two attributes; the value runs
  up to the next whitespace.
- Key only: ``foo bar`` parses two flags with empty values. The strict variant
  (``allow_flags=False``) requires an ``=`` after every key.

Scanning is forward-only. It stops at the first token that does not fit and
the remainder of the string is returned untouched in ``ParseResult.rest``.
"""

from collections.abc import Iterable

from fencemeta.exceptions import UnrepresentableValueError
from fencemeta.models import Attribute, ParseResult

_KEY_START = frozenset("abcdefghijklmnopqrstuvwxyz_")
_KEY_CHARS = _KEY_START | frozenset("0123456789.-")
_QUOTES = ('"', "'")
_ESCAPE = "\\"


def _skip_whitespace(meta: str, pos: int) -> int:
    while pos < len(meta) and meta[pos].isspace():
        pos += 1
    return pos


def _at_boundary(meta: str, pos: int) -> bool:
    return pos >= len(meta) or meta[pos].isspace()


def _read_key(meta: str, pos: int) -> int:
    """Return the end of the key starting at pos, or pos if there is none."""
    if pos >= len(meta) or meta[pos] not in _KEY_START or meta.startswith("xml", pos):
        return pos
    end = pos + 1
    while end < len(meta) and meta[end] in _KEY_CHARS:
        end += 1
    return end


def _read_quoted(meta: str, pos: int) -> int | None:
    """Return the index after the closing quote, or None if it is unterminated."""
    quote = meta[pos]
    end = pos + 1
    while end < len(meta):
        if meta[end] == quote and meta[end - 1] != _ESCAPE:
            return end + 1
        end += 1
    return None


def _read_unquoted(meta: str, pos: int) -> int:
    end = pos
    while end < len(meta) and not meta[end].isspace():
        end += 1
    return end


def parse(meta: str, *, allow_flags: bool = True) -> ParseResult:
    """Parse key/value attributes from the start of a code block's metadata.

    Never raises: malformed input ends the scan and lands in ``rest``. Keys are
    not deduplicated.
    """
    attrs: list[Attribute] = []
    pos = _skip_whitespace(meta, 0)

    while pos < len(meta):
        key_end = _read_key(meta, pos)
        if key_end == pos:
            break
        key = meta[pos:key_end]

        if key_end < len(meta) and meta[key_end] == "=":
            value_start = key_end + 1
            if value_start < len(meta) and meta[value_start] in _QUOTES:
                end = _read_quoted(meta, value_start)
                if end is None:
                    break
                value = meta[value_start + 1 : end - 1]
            else:
                end = _read_unquoted(meta, value_start)
                value = meta[value_start:end]
        elif allow_flags and _at_boundary(meta, key_end):
            end, value = key_end, ""
        else:
            break

        attrs.append(Attribute(key=key, value=value))
        pos = _skip_whitespace(meta, end)

    # Nothing parsed: the remainder is the input verbatim
    if not attrs and pos < len(meta):
        pos = 0

    return ParseResult(attrs=attrs, rest=meta[pos:] if pos < len(meta) else None)


def parse_strict(meta: str) -> ParseResult:
    """Variant of :func:`parse` without key-only flags."""
    return parse(meta, allow_flags=False)


def is_valid_key(key: str) -> bool:
    return bool(key) and _read_key(key, 0) == len(key)


def _can_quote(value: str, quote: str) -> bool:
    # The closing quote would be escaped by a trailing backslash
    if value.endswith(_ESCAPE):
        return False
    return all(i > 0 and value[i - 1] == _ESCAPE for i, ch in enumerate(value) if ch == quote)


def _format_attribute(attr: Attribute, allow_flags: bool) -> str:
    key, value = attr.key, attr.value
    if not is_valid_key(key):
        raise UnrepresentableValueError(key, value, message=f"Invalid attribute key: {key!r}")

    if not value:
        return key if allow_flags else f"{key}="
    if value[0] not in _QUOTES and not any(ch.isspace() for ch in value):
        return f"{key}={value}"
    for quote in _QUOTES:
        if _can_quote(value, quote):
            return f"{key}={quote}{value}{quote}"
    raise UnrepresentableValueError(key, value)


def serialize(attrs: Iterable[Attribute], *, allow_flags: bool = True) -> str:
    """Write attributes back as metadata text that :func:`parse` reads back identically.

    Raises:
        UnrepresentableValueError: for invalid keys, or values that no quoting
            form can carry (e.g. whitespace plus unescaped quotes of both kinds).
    """
    return " ".join(_format_attribute(attr, allow_flags) for attr in attrs)
