"""Public facade: Slack mrkdwn in, standard Markdown out.

A Converter owns its entity cache, so one instance should be shared by every
caller that wants to reuse resolved names. Concurrent ``convert`` calls on
the same instance are safe.
"""

import logging
import time
from collections.abc import Callable

from mrkdwn_converter.models.nodes import Document
from mrkdwn_converter.models.tokens import Token
from mrkdwn_converter.mrkdwn.cache import EntityCache
from mrkdwn_converter.mrkdwn.directory import DirectoryService
from mrkdwn_converter.mrkdwn.parser import parse
from mrkdwn_converter.mrkdwn.renderer import Renderer
from mrkdwn_converter.mrkdwn.tokenizer import tokenize

logger = logging.getLogger(__name__)


class Converter:
    """Converts Slack mrkdwn to Markdown, resolving IDs through ``directory``.

    Args:
        directory: Name lookups for user, channel and user-group IDs. When
            None, mentions render from their inline fallback text or raw ID.
        ttl: Seconds a resolved name stays cached. Defaults to
            ``Settings.mrkdwn_cache_ttl``.
        timer: Monotonic clock driving cache expiry.
    """

    def __init__(
        self,
        directory: DirectoryService | None = None,
        *,
        ttl: float | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl is None:
            # Lazy import so the converter works without settings in library use
            from mrkdwn_converter.config import get_settings

            ttl = get_settings().mrkdwn_cache_ttl
        self.directory = directory
        self.cache = EntityCache(ttl=ttl, timer=timer)
        self.renderer = Renderer(self.cache, directory)

    @property
    def ttl(self) -> float:
        return self.cache.ttl

    def tokenize(self, text: str | bytes) -> list[Token]:
        return tokenize(text)

    def parse(self, tokens: list[Token]) -> Document:
        return parse(tokens)

    async def render(self, doc: Document) -> str:
        return await self.renderer.render(doc)

    async def convert(self, text: str | bytes) -> str:
        """Convert one mrkdwn message to Markdown. Always returns a string."""
        tokens = self.tokenize(text)
        doc = self.parse(tokens)
        result = await self.render(doc)
        logger.debug("Converted %d token(s) into %d character(s)", len(tokens), len(result))
        return result
