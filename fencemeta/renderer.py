"""HTML renderer aware of property-form ``data*`` attribute names."""

from markdown_it.common.utils import escapeHtml
from markdown_it.renderer import RendererHTML
from markdown_it.token import Token

from fencemeta.names import property_to_attribute


class DatasetRenderer(RendererHTML):
    """Kebab-cases ``dataFooBar`` attributes to ``data-foo-bar`` when rendering.

    Other attribute names are written as is.
    """

    @staticmethod
    def renderAttrs(token: Token) -> str:
        result = ""
        for key, value in token.attrItems():
            result += " " + escapeHtml(property_to_attribute(key)) + '="' + escapeHtml(str(value)) + '"'
        return result
