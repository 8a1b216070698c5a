"""Conversions between internal attribute names and HTML ``data-*`` names.

Two naming regimes are supported:

- attribute form, ``data-source-url``: the name is emitted as is. The suffix
  must be an XML ``Name`` without colons or uppercase, must not start with
  ``xml``, and is limited to ASCII.
- property form, ``dataSourceUrl``: an identifier following the
  ``HTMLElement.dataset`` naming convention, kebab-cased by the serializer
  when the HTML is written (see :func:`property_to_attribute`).

The forward maps are partial: a name outside the accepted grammar yields
``None`` and is never mangled into something that would fit.

Note that property names differing only by the case of their first character
(``foo`` and ``Foo``) map to the same ``dataFoo``; the inverse returns the
lowercase form.
"""

import re

ATTRIBUTE_PREFIX = "data-"
PROPERTY_PREFIX = "data"

_ATTRIBUTE_KEY = re.compile(r"(?!xml)[a-z_][a-z0-9_.-]*")
_PROPERTY_KEY = re.compile(r"[A-Za-z_]\w*", re.ASCII)
_PROPERTY_NAME = re.compile(r"data[A-Z_]\w*", re.ASCII)
_DASHED_LOWER = re.compile(r"-([a-z])")
_UPPER = re.compile(r"[A-Z]")


def to_attribute_name(key: str) -> str | None:
    """``source-url`` -> ``data-source-url``; None if the key is not a valid suffix."""
    if _ATTRIBUTE_KEY.fullmatch(key):
        return ATTRIBUTE_PREFIX + key
    return None


def from_attribute_name(name: str) -> str | None:
    if name.startswith(ATTRIBUTE_PREFIX):
        key = name.removeprefix(ATTRIBUTE_PREFIX)
        if _ATTRIBUTE_KEY.fullmatch(key):
            return key
    return None


def to_property_name(key: str) -> str | None:
    """``sourceUrl`` -> ``dataSourceUrl``; None if the key is not an identifier."""
    if _PROPERTY_KEY.fullmatch(key):
        return PROPERTY_PREFIX + key[0].upper() + key[1:]
    return None


def from_property_name(name: str) -> str | None:
    if _PROPERTY_NAME.fullmatch(name):
        key = name.removeprefix(PROPERTY_PREFIX)
        return key[0].lower() + key[1:]
    return None


def to_safe_case(key: str) -> str:
    """Camel-case dash-separated lowercase segments: ``source-url`` -> ``sourceUrl``.

    Anything else is left alone, so the result may still be rejected by
    :func:`to_property_name`.
    """
    return _DASHED_LOWER.sub(lambda m: m.group(1).upper(), key)


def to_safe_name(key: str) -> str | None:
    """Pick the serializable name for an internal key.

    The attribute form is preferred since it needs no case conversion.
    """
    return to_attribute_name(key) or to_property_name(to_safe_case(key))


def is_property_name(name: str) -> bool:
    return _PROPERTY_NAME.fullmatch(name) is not None


def property_to_attribute(name: str) -> str:
    """Kebab-case a property-form name: ``dataSourceUrl`` -> ``data-source-url``.

    Names that are not in property form are returned unchanged.
    """
    if not is_property_name(name):
        return name
    rest = _UPPER.sub(lambda m: "-" + m.group(0).lower(), name.removeprefix(PROPERTY_PREFIX))
    return PROPERTY_PREFIX + (rest if rest.startswith("-") else "-" + rest)
