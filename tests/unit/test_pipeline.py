"""Unit tests for the snippet pipeline."""

from dataclasses import replace
from unittest.mock import Mock

import pytest
from PIL import Image

from snapgram.language_detection import LanguageTag
from snapgram.pipeline import PreparedSnippet, SnippetPipeline
from snapgram.rendering import CardOptions, CardRenderer, RenderedCard


@pytest.fixture
def pipeline(snapgram_config):
    """Create a pipeline from the test configuration."""
    return SnippetPipeline(snapgram_config)


class TestResolveLanguage:
    """Explicit versus detected languages."""

    def test_auto_detects(self, pipeline):
        """Test 'auto' and None both detect."""
        assert pipeline.resolve_language("<p>x</p>", "auto") == (LanguageTag.HTML, True)
        assert pipeline.resolve_language("<p>x</p>", None) == (LanguageTag.HTML, True)
        assert pipeline.resolve_language("<p>x</p>", " AUTO ") == (LanguageTag.HTML, True)

    def test_explicit_language_wins(self, pipeline):
        """Test a chosen language skips detection."""
        assert pipeline.resolve_language("<p>x</p>", "python") == (LanguageTag.PYTHON, False)
        assert pipeline.resolve_language("x", LanguageTag.CSS) == (LanguageTag.CSS, False)

    def test_unknown_language(self, pipeline):
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown language"):
            pipeline.resolve_language("x", "cobol")


class TestPrepare:
    """Detection plus formatting."""

    def test_detects_and_formats(self, pipeline):
        """Test a minified stylesheet is detected and reflowed."""
        snippet = pipeline.prepare(".box{color:red;}")
        assert snippet == PreparedSnippet(
            source=".box{color:red;}",
            code=".box {\n  color: red;\n}",
            language=LanguageTag.CSS,
            detected=True,
        )
        assert snippet.changed

    def test_format_disabled_per_call(self, pipeline):
        """Test formatting can be skipped for one call."""
        snippet = pipeline.prepare(".box{color:red;}", format_code=False)
        assert snippet.code == ".box{color:red;}"
        assert not snippet.changed

    def test_format_disabled_by_config(self, snapgram_config):
        """Test formatting follows the configuration by default."""
        config = replace(snapgram_config, format=replace(snapgram_config.format, enabled=False))
        snippet = SnippetPipeline(config).prepare(".box{color:red;}")
        assert snippet.code == ".box{color:red;}"

    def test_default_configuration(self):
        """Test a pipeline can be built without configuration."""
        snippet = SnippetPipeline().prepare("hello world 12345")
        assert snippet.language == LanguageTag.PLAINTEXT


class TestRender:
    """Handing prepared snippets to the renderer."""

    def test_render_uses_config_options(self, snapgram_config):
        """Test the renderer receives the formatted code, tag and configured options."""
        renderer = Mock(spec=CardRenderer)
        card = RenderedCard(image=Image.new("RGBA", (10, 10)), scale=1)
        renderer.render.return_value = card
        pipeline = SnippetPipeline(snapgram_config, renderer=renderer)

        snippet = pipeline.prepare("let x = 1;")
        assert pipeline.render(snippet) is card

        code, language, options = renderer.render.call_args.args
        assert code == "let x = 1;"
        assert language == LanguageTag.JAVASCRIPT
        assert options == CardOptions(font_size=14, theme="midnight", scale=1, padding=16)

    def test_card_options_overrides(self, pipeline):
        """Test overrides are applied on top of the configuration."""
        options = pipeline.card_options(title="demo", font_size=20)
        assert options.title == "demo"
        assert options.font_size == 20
        assert options.padding == 16
