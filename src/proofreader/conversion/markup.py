"""Source normalization: Markdown to HTML, HTML passed through."""

import logging
import mimetypes
from typing import Optional

import markdown

logger = logging.getLogger(__name__)

MARKDOWN_TYPES = frozenset({"text/markdown", "text/x-markdown"})

# Media types too generic to trust over the file extension
GENERIC_TYPES = frozenset({"", "text/plain", "application/octet-stream"})

for _ext in (".md", ".markdown", ".mdown", ".mkd", ".mkdn"):
    mimetypes.add_type("text/markdown", _ext)


def resolve_media_type(path: str, declared: Optional[str] = None) -> Optional[str]:
    """
    Decide the media type of a source.

    A specific declared type wins; otherwise the type is guessed from
    the path. Parameters such as ``; charset=utf-8`` are ignored.
    """
    if declared:
        media_type = declared.split(";", 1)[0].strip().lower()
        if media_type not in GENERIC_TYPES:
            return media_type

    guessed, _ = mimetypes.guess_type(path, strict=False)
    if guessed:
        return guessed
    if declared:
        return declared.split(";", 1)[0].strip().lower()
    return None


class MarkupNormalizer:
    """
    Turns document sources into HTML.

    Markdown is rendered with Python-Markdown; code spans and blocks end
    up in ``<code>``/``<pre>``, which the extractor never treats as
    text. Any other content is assumed to be HTML and returned unchanged.

    Example:
        normalizer = MarkupNormalizer()
        html = normalizer.normalize("README.md", "# Title\\n\\nBody")
    """

    def __init__(self, extensions: Optional[list[str]] = None) -> None:
        """
        Initialize the normalizer.

        Args:
            extensions: Python-Markdown extensions (defaults to fenced code and tables)
        """
        self._extensions = extensions if extensions is not None else ["fenced_code", "tables"]

    def is_markdown(self, path: str, media_type: Optional[str] = None) -> bool:
        return resolve_media_type(path, media_type) in MARKDOWN_TYPES

    def to_html(self, content: str) -> str:
        """Render Markdown to HTML."""
        # A fresh Markdown instance per call: instances are not thread-safe
        return markdown.markdown(content, extensions=self._extensions, output_format="html")

    def normalize(self, path: str, content: str, media_type: Optional[str] = None) -> str:
        """
        Return ``content`` as HTML.

        Args:
            path: File path or URL of the source (used to guess the type)
            content: Source text
            media_type: Declared media type, if known

        Returns:
            HTML string
        """
        if self.is_markdown(path, media_type):
            logger.debug(f"Rendering {path} from Markdown")
            return self.to_html(content)
        return content
