"""Loading documents from local files and URLs."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import aiohttp

from .. import __version__
from ..conversion.markup import resolve_media_type

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"proofreader/{__version__}"


@dataclass(frozen=True)
class Source:
    """
    A loaded document.

    Attributes:
        path: File path or URL the document came from
        content: Document text (empty when loading failed)
        media_type: Declared or guessed media type
        error: Why loading failed, None on success
    """

    path: str
    content: str = ""
    media_type: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_url(location: str) -> bool:
    return urlparse(location).scheme in ("http", "https")


class SourceLoader:
    """
    Loads documents to proofread.

    Locations are URLs (http/https) or file paths. Failures never raise:
    they are reported on ``Source.error`` so one bad location does not
    stop the others.

    Example:
        loader = SourceLoader()
        loader.add("README.md")
        loader.add("https://example.com/docs/")
        sources = await loader.load()
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str | None = None,
    ) -> None:
        """
        Initialize the loader.

        Args:
            timeout: Total timeout per URL in seconds
            user_agent: Custom User-Agent header
        """
        self._locations: list[str] = []
        self._timeout = timeout
        self._user_agent = user_agent or DEFAULT_USER_AGENT

    @property
    def locations(self) -> list[str]:
        return list(self._locations)

    def add(self, location: str) -> None:
        """Queue a file path or URL."""
        self._locations.append(location)

    def add_list(self, list_path: str | Path) -> None:
        """Queue every non-empty line of a file listing paths or URLs."""
        text = Path(list_path).read_text(encoding="utf-8")
        for line in text.splitlines():
            line = line.strip()
            if line:
                self.add(line)

    async def load(self) -> list[Source]:
        """Load every queued location, preserving order."""
        if not self._locations:
            return []

        timeout = aiohttp.ClientTimeout(total=self._timeout)
        async with aiohttp.ClientSession(
            timeout=timeout,
            headers={"User-Agent": self._user_agent},
        ) as session:
            return list(await asyncio.gather(*(self._load_one(session, loc) for loc in self._locations)))

    async def _load_one(self, session: aiohttp.ClientSession, location: str) -> Source:
        if is_url(location):
            return await self._fetch(session, location)
        return await asyncio.to_thread(self._read_file, location)

    async def _fetch(self, session: aiohttp.ClientSession, url: str) -> Source:
        try:
            async with session.get(url) as response:
                if response.status >= 400:
                    return Source(path=url, error=f"HTTP {response.status} {response.reason or ''}".strip())
                content = await response.text(errors="replace")
                content_type = response.headers.get("Content-Type")
                logger.debug(f"Fetched {url} ({len(content)} chars, {content_type})")
                return Source(
                    path=url,
                    content=content,
                    media_type=resolve_media_type(url, content_type),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug(f"Failed to fetch {url}: {e!r}")
            return Source(path=url, error=str(e) or e.__class__.__name__)

    def _read_file(self, location: str) -> Source:
        path = Path(location)
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug(f"Failed to read {location}: {e}")
            return Source(path=location, error=str(e))
        return Source(path=location, content=content, media_type=resolve_media_type(location))
