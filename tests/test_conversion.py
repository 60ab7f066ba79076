"""Tests for markup normalization and text extraction."""

import pytest
from proofreader.conversion import MarkupNormalizer, TextExtractor
from proofreader.conversion.extractor import CssSelectorMatcher
from proofreader.conversion.markup import resolve_media_type
from proofreader.errors import ConfigurationError
from proofreader.models.config import SelectorConfig
from pydantic import ValidationError


def texts(units):
    return [unit.text for unit in units]


class TestMarkupNormalizer:
    """Tests for MarkupNormalizer."""

    def test_markdown_to_html(self):
        """Test Markdown sources are rendered."""
        normalizer = MarkupNormalizer()
        html = normalizer.normalize("README.md", "# Title\n\nThis is *very* good.")

        assert "<h1>Title</h1>" in html
        assert "<p>This is <em>very</em> good.</p>" in html

    def test_html_passthrough(self):
        """Test HTML sources are returned unchanged."""
        normalizer = MarkupNormalizer()
        html = "<p>Already *HTML*</p>"
        assert normalizer.normalize("index.html", html) is html

    def test_declared_media_type(self):
        """Test a declared Markdown type wins over an extensionless URL."""
        normalizer = MarkupNormalizer()
        html = normalizer.normalize("https://example.com/post", "*hi*", "text/markdown; charset=utf-8")
        assert "<em>hi</em>" in html

    def test_fenced_code(self):
        """Test fenced code ends up in <pre><code>."""
        normalizer = MarkupNormalizer()
        html = normalizer.to_html("Text\n\n```\nteh code\n```\n")
        assert "<pre><code>teh code" in html

    def test_resolve_media_type(self):
        """Test media type resolution."""
        assert resolve_media_type("notes.md") == "text/markdown"
        assert resolve_media_type("notes.md", "text/plain") == "text/markdown"
        assert resolve_media_type("page", "text/html; charset=utf-8") == "text/html"
        assert resolve_media_type("page") is None


class TestTextExtractor:
    """Tests for TextExtractor."""

    @pytest.fixture
    def extractor(self):
        return TextExtractor()

    def test_markdown_example(self, extractor):
        """Test the heading is excluded with a paragraph-only whitelist."""
        html = MarkupNormalizer().to_html("# Title\n\nThis is *very* good.")
        units = extractor.extract(html, SelectorConfig(whitelist=["p"]))

        assert texts(units) == ["This is very good."]
        assert units[0].index == 0

    def test_document_order(self, extractor):
        """Test units follow document order."""
        html = "<p>One</p><div><p>Two</p></div><ul><li>Three</li></ul>"
        units = extractor.extract(html, SelectorConfig(whitelist="p, li"))

        assert texts(units) == ["One", "Two", "Three"]
        assert [u.index for u in units] == [0, 1, 2]

    def test_innermost_match_owns_text(self, extractor):
        """Test nested whitelist matches do not overlap."""
        html = '<div class="c">Intro <p>Inner</p> outro</div>'
        units = extractor.extract(html, SelectorConfig(whitelist=[".c", "p"]))

        assert texts(units) == ["Intro outro", "Inner"]

    def test_blacklist_inside_whitelist(self, extractor):
        """Test blacklisted descendants are removed."""
        html = "<p>Run <code>rm -rf</code> now</p>"
        units = extractor.extract(html, SelectorConfig(whitelist=["p"], blacklist=["code"]))

        assert texts(units) == ["Run now"]

    def test_markdown_code_never_extracted(self, extractor):
        """Test code spans and blocks are skipped without a blacklist."""
        html = MarkupNormalizer().normalize("a.md", "Run `pip instal` now.\n\n```\nteh code\n```\n")
        units = extractor.extract(html, SelectorConfig(whitelist=["p"]))

        assert texts(units) == ["Run now."]

    def test_code_tags_skipped(self, extractor):
        """Test kbd, samp and pre content inside a unit is dropped."""
        html = "<div>Press <kbd>Ctrl</kbd> to see <samp>eror</samp><pre>x = 1</pre> here</div>"
        units = extractor.extract(html, SelectorConfig(whitelist=["div"]))

        assert texts(units) == ["Press to see here"]

    def test_control_characters_removed(self, extractor):
        """Test C0 control characters become whitespace."""
        html = "<p>\x00bad</p><p>one\x07two\x7f</p>"
        units = extractor.extract(html, SelectorConfig(whitelist=["p"]))

        assert texts(units) == ["bad", "one two"]

    def test_blacklist_wins_over_whitelist(self, extractor):
        """Test an element matching both lists is skipped."""
        html = '<p class="skip">Hidden</p><p>Shown</p>'
        units = extractor.extract(html, SelectorConfig(whitelist=["p"], blacklist=[".skip"]))

        assert texts(units) == ["Shown"]

    def test_scripts_and_comments_excluded(self, extractor):
        """Test non-visible content is never extracted."""
        html = "<p>Visible<script>var x;</script><!-- hidden --><style>p{}</style></p>"
        units = extractor.extract(html, SelectorConfig(whitelist=["p"]))

        assert texts(units) == ["Visible"]

    def test_block_tags_separate_words(self, extractor):
        """Test line breaks and blocks do not glue words together."""
        html = "<td>Name<br>Value</td><td><div>A</div><div>B</div></td>"
        units = extractor.extract(html, SelectorConfig(whitelist=["td"]))

        assert texts(units) == ["Name Value", "A B"]

    def test_whitespace_collapsed(self, extractor):
        """Test whitespace normalization and entity decoding."""
        html = "<p>  Fish\n\n &amp;   chips </p><p>   </p>"
        units = extractor.extract(html, SelectorConfig(whitelist=["p"]))

        assert texts(units) == ["Fish & chips"]

    def test_malformed_html(self, extractor):
        """Test lenient parsing of unclosed tags."""
        html = "<p>Unclosed <b>bold<p>Next"
        units = extractor.extract(html, SelectorConfig(whitelist=["p"]))

        assert "Next" in texts(units)
        assert any(t.startswith("Unclosed bold") for t in texts(units))

    def test_no_matches(self, extractor):
        """Test a document without whitelisted regions."""
        assert extractor.extract("<div>Nothing</div>", SelectorConfig(whitelist=["p"])) == []

    def test_invalid_selector(self, extractor):
        """Test invalid CSS raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            extractor.extract("<p>x</p>", SelectorConfig(whitelist=["p["]))

    def test_empty_whitelist_rejected(self, extractor):
        """Test an empty whitelist is a configuration error."""
        with pytest.raises(ValidationError):
            SelectorConfig(whitelist=[])
        with pytest.raises(ConfigurationError):
            extractor.extract("<p>x</p>", CssSelectorMatcher([]))

    def test_compiled_matchers(self, extractor):
        """Test passing precompiled matchers."""
        units = extractor.extract(
            '<li>Keep <span class="key">Ctrl</span></li>',
            CssSelectorMatcher(["li"]),
            CssSelectorMatcher([".key"]),
        )
        assert texts(units) == ["Keep"]
