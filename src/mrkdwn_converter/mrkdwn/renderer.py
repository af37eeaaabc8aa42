"""Render a mrkdwn AST as standard Markdown.

Identifier nodes are resolved against the entity cache first, then against
the directory service. Lookup failures are logged and never abort the
render: the node falls back to its inline text or its raw ID.
"""

import logging
from collections.abc import Awaitable, Callable

from mrkdwn_converter.models.nodes import (
    Blockquote,
    Bold,
    ChannelLink,
    CodeBlock,
    Container,
    DateFormat,
    Document,
    Emoji,
    InlineCode,
    Italic,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    SpecialMention,
    Strikethrough,
    Text,
    UnorderedList,
    UserGroupMention,
    UserMention,
)
from mrkdwn_converter.mrkdwn.cache import CHANNELS, USER_GROUPS, USERS, EntityCache
from mrkdwn_converter.mrkdwn.dates import format_date
from mrkdwn_converter.mrkdwn.directory import DirectoryService

logger = logging.getLogger(__name__)

SPECIAL_MENTIONS = {
    "here": "@here",
    "channel": "@channel",
    "everyone": "@everyone",
}


class Renderer:
    """Walks a Document and produces Markdown text."""

    def __init__(self, cache: EntityCache, directory: DirectoryService | None = None) -> None:
        self.cache = cache
        self.directory = directory

    async def render(self, doc: Document) -> str:
        """Render every top-level node in document order."""
        return await self._render_children(doc)

    async def _render_children(self, node: Container) -> str:
        parts = [await self.render_node(child) for child in node.children]
        return "".join(parts)

    async def render_node(self, node: Node) -> str:
        """Render a single node. Never raises for a failed name lookup."""
        if isinstance(node, Text):
            return node.content
        if isinstance(node, Bold):
            return "**" + await self._render_children(node) + "**"
        if isinstance(node, Italic):
            return "*" + await self._render_children(node) + "*"
        if isinstance(node, Strikethrough):
            return "~~" + await self._render_children(node) + "~~"
        if isinstance(node, InlineCode):
            return "`" + node.content + "`"
        if isinstance(node, CodeBlock):
            return "```\n" + node.content + "\n```"
        if isinstance(node, Blockquote):
            return "> " + await self._render_children(node)
        if isinstance(node, OrderedList):
            lines = []
            for i, child in enumerate(node.children, start=1):
                lines.append(f"{i}. {await self.render_node(child)}\n")
            return "".join(lines)
        if isinstance(node, UnorderedList):
            lines = []
            for child in node.children:
                lines.append(f"- {await self.render_node(child)}\n")
            return "".join(lines)
        if isinstance(node, (ListItem, Paragraph, Document)):
            return await self._render_children(node)
        if isinstance(node, UserMention):
            return await self.render_user_mention(node)
        if isinstance(node, ChannelLink):
            return await self.render_channel_link(node)
        if isinstance(node, UserGroupMention):
            return await self.render_user_group_mention(node)
        if isinstance(node, SpecialMention):
            return render_special_mention(node)
        if isinstance(node, DateFormat):
            return render_date_format(node)
        if isinstance(node, Link):
            return f"[{node.text}]({node.url})"
        if isinstance(node, Emoji):
            return f":{node.name}:"

        # Unreachable for parser output
        return f"[unknown: {type(node).__name__}]"

    async def render_user_mention(self, node: UserMention) -> str:
        lookup = self.directory.get_user_profile if self.directory is not None else None
        name = await self._resolve(USERS, node.user_id, lookup)
        return "@" + (name or node.fallback_text or node.user_id)

    async def render_channel_link(self, node: ChannelLink) -> str:
        lookup = self.directory.get_channel_name if self.directory is not None else None
        name = await self._resolve(CHANNELS, node.channel_id, lookup)
        return "#" + (name or node.fallback_text or node.channel_id)

    async def render_user_group_mention(self, node: UserGroupMention) -> str:
        lookup = self.directory.get_user_group_name if self.directory is not None else None
        name = await self._resolve(USER_GROUPS, node.group_id, lookup)
        return "@" + (name or node.fallback_text or node.group_id)

    async def _resolve(
        self,
        category: str,
        entity_id: str,
        lookup: Callable[[str], Awaitable[str]] | None,
    ) -> str:
        """Return the display name for ``entity_id``, or "" if unresolved.

        Cache hits skip the directory. Only non-empty names are cached, so
        empty results and failures are looked up again next time.
        """
        cached = self.cache.get(category, entity_id)
        if cached:
            return cached

        if lookup is None:
            return ""

        try:
            name = await lookup(entity_id)
        except Exception:
            logger.warning(
                "Failed to resolve %s ID %s",
                category,
                entity_id,
                exc_info=True,
                extra={"category": category, "entity_id": entity_id},
            )
            return ""

        if not name:
            logger.debug("No name available for %s ID %s", category, entity_id)
            return ""

        self.cache.set(category, entity_id, name)
        return name


def render_special_mention(node: SpecialMention) -> str:
    return SPECIAL_MENTIONS.get(node.kind, "@" + node.kind)


def render_date_format(node: DateFormat) -> str:
    """Render a date token, preferring its fallback text over the timestamp.

    ``node.link`` is used verbatim as the link target even when it carries a
    ``|fallback`` tail.
    """
    text = node.fallback or format_date(node.timestamp, node.format_token)
    if node.link:
        return f"[{text}]({node.link})"
    return text
