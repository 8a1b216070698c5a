"""Tests for the markdown-it plugins and the dataset renderer."""

import pytest
from markdown_it import MarkdownIt
from markdown_it.token import Token

from fencemeta.plugins import code_meta_handler_plugin, code_meta_plugin, data_to_attrs_plugin
from fencemeta.renderer import DatasetRenderer

SOURCE = '```python caption="Hello world" linenos {.extra}\nprint("hi")\n```\n'


class TestCodeMetaPlugin:
    """Projection as a core rule, right after parsing."""

    def test_tokens_projected_after_parse(self):
        md = MarkdownIt("commonmark").use(code_meta_plugin, include="caption")
        token = md.parse(SOURCE)[0]
        assert token.attrs == {"data-language": "python", "data-caption": "Hello world"}
        assert token.info == "python {.extra}"
        assert token.meta == {"linenos": ""}

    def test_rendered_html(self):
        md = MarkdownIt("commonmark").use(code_meta_plugin, include="caption")
        html = md.render(SOURCE)
        assert 'data-language="python"' in html
        assert 'data-caption="Hello world"' in html
        assert 'class="language-python"' in html
        assert "linenos" not in html
        assert html.startswith("<pre><code ")

    def test_attribute_values_escaped(self):
        md = MarkdownIt("commonmark").use(code_meta_plugin, include=True)
        html = md.render("```html title='<b onclick=\"x\">'\n<i>\n```\n")
        assert 'data-title="&lt;b onclick=&quot;x&quot;&gt;"' in html
        assert "<b" not in html

    def test_default_projects_language_only(self):
        md = MarkdownIt("commonmark").use(code_meta_plugin)
        html = md.render(SOURCE)
        assert 'data-language="python"' in html
        assert "data-caption" not in html

    def test_language_disabled(self):
        md = MarkdownIt("commonmark").use(code_meta_plugin, lang_attr=None)
        assert md.render("```python\nx\n```\n") == '<pre><code class="language-python">x\n</code></pre>\n'

    def test_invalid_lang_attr_rejected_at_setup(self):
        with pytest.raises(ValueError):
            MarkdownIt("commonmark").use(code_meta_plugin, lang_attr="xml-lang")


class TestCodeMetaHandlerPlugin:
    """Projection inside the fence render rule."""

    def test_rendered_html(self):
        md = MarkdownIt("commonmark").use(code_meta_handler_plugin, include=["caption"])
        tokens = md.parse(SOURCE)
        assert tokens[0].attrs == {}
        html = md.renderer.render(tokens, md.options, {})
        assert 'data-caption="Hello world"' in html
        assert tokens[0].info == "python {.extra}"

    def test_rendering_twice_is_stable(self):
        md = MarkdownIt("commonmark").use(code_meta_handler_plugin, include=True)
        tokens = md.parse(SOURCE)
        first = md.renderer.render(tokens, md.options, {})
        second = md.renderer.render(tokens, md.options, {})
        assert first == second

    def test_rendering_twice_keeps_language_override(self):
        md = MarkdownIt("commonmark").use(code_meta_handler_plugin, include="language")
        tokens = md.parse("```python language=py3\nx\n```\n")
        first = md.renderer.render(tokens, md.options, {})
        second = md.renderer.render(tokens, md.options, {})
        assert 'data-language="py3"' in first
        assert first == second

    def test_custom_handler(self):
        seen = []

        def handler(tokens, idx, options, env):
            token = tokens[idx]
            seen.append(dict(token.attrs))
            return f"<figure>{token.content}</figure>"

        md = MarkdownIt("commonmark").use(code_meta_handler_plugin, include="caption", handler=handler)
        assert md.render(SOURCE) == '<figure>print("hi")\n</figure>'
        assert seen == [{"data-language": "python", "data-caption": "Hello world"}]

    def test_delegates_to_previous_rule(self):
        md = MarkdownIt("commonmark")

        def upper_fence(tokens, idx, options, env):
            return tokens[idx].content.upper()

        md.renderer.rules["fence"] = upper_fence
        md.use(code_meta_handler_plugin)
        assert md.render("```py\nabc\n```\n") == "ABC\n"


class TestDataToAttrsPlugin:
    """Sweep of leftover token data at the end of the core chain."""

    def test_excluded_fence_attributes_promoted(self):
        md = (
            MarkdownIt("commonmark", renderer_cls=DatasetRenderer)
            .use(code_meta_plugin, include="caption")
            .use(data_to_attrs_plugin, node_filter="fence", data_filter="linenos")
        )
        token = md.parse(SOURCE)[0]
        assert token.attrs["data-linenos"] == ""
        assert token.meta == {}

    def test_property_names_kebab_cased(self):
        def stash(state):
            for token in state.tokens:
                if token.type == "heading_open":
                    token.meta["sourceUrl"] = "https://example.com"

        md = MarkdownIt("commonmark", renderer_cls=DatasetRenderer)
        md.core.ruler.push("stash", stash)
        md.use(data_to_attrs_plugin, data_filter=True)
        assert md.render("# Title\n") == '<h1 data-source-url="https://example.com">Title</h1>\n'

    def test_nothing_moved_by_default(self):
        def stash(state):
            state.tokens[0].meta["secret"] = "x"

        md = MarkdownIt("commonmark")
        md.core.ruler.push("stash", stash)
        md.use(data_to_attrs_plugin)
        assert md.render("text\n") == "<p>text</p>\n"


class TestDatasetRenderer:
    def test_render_attrs(self):
        token = Token(type="x", tag="div", nesting=1, attrs={"id": "a", "dataFooBar": "1", "data-baz": "<"})
        assert DatasetRenderer.renderAttrs(token) == ' id="a" data-foo-bar="1" data-baz="&lt;"'
