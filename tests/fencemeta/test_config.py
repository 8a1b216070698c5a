"""Tests for settings and the command line entry point."""

import re

from fencemeta.__main__ import main
from fencemeta.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.include == ["caption"]
        assert settings.lang_attr == "language"
        assert settings.allow_flags is True
        assert settings.include_predicate() == ["caption"]

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("FENCEMETA_INCLUDE", '["caption", "title"]')
        monkeypatch.setenv("FENCEMETA_INCLUDE_PATTERN", "^x-")
        monkeypatch.setenv("FENCEMETA_ALLOW_FLAGS", "false")
        settings = Settings(_env_file=None)
        assert settings.include == ["caption", "title"]
        assert settings.allow_flags is False
        parts = settings.include_predicate()
        assert parts[:2] == ["caption", "title"]
        assert isinstance(parts[2], re.Pattern)


class TestMain:
    def test_file_to_file(self, tmp_path):
        source = tmp_path / "in.md"
        source.write_text('```python caption="Hi" source=x\npass\n```\n', encoding="utf-8")
        target = tmp_path / "out.html"
        assert main([str(source), "-o", str(target), "--include", "source"]) == 0
        html = target.read_text(encoding="utf-8")
        assert 'data-source="x"' in html
        assert "data-caption" not in html

    def test_stdout(self, tmp_path, capsys):
        source = tmp_path / "in.md"
        source.write_text("```rust\nfn main() {}\n```\n", encoding="utf-8")
        assert main([str(source), "--no-lang-attr"]) == 0
        out = capsys.readouterr().out
        assert out == '<pre><code class="language-rust">fn main() {}\n</code></pre>\n'

    def test_missing_input(self, tmp_path):
        assert main([str(tmp_path / "missing.md")]) == 1
