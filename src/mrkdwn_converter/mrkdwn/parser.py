"""Build the mrkdwn AST from a token list.

One token becomes one node. Span contents are not re-tokenized, so
formatting nested inside a bold or italic span passes through literally.
Any token whose payload cannot be extracted degrades to a Text node
carrying the raw token value.
"""

import re

from mrkdwn_converter.models.nodes import (
    Blockquote,
    Bold,
    ChannelLink,
    CodeBlock,
    DateFormat,
    Document,
    Emoji,
    InlineCode,
    Italic,
    Link,
    ListItem,
    Node,
    OrderedList,
    SpecialMention,
    Strikethrough,
    Text,
    UnorderedList,
    UserGroupMention,
    UserMention,
)
from mrkdwn_converter.models.tokens import Token, TokenType

# Content extraction, anchored at both ends via fullmatch
_BOLD = re.compile(r"\*(.+)\*")
_ITALIC = re.compile(r"_(.+)_")
_STRIKETHROUGH = re.compile(r"~(.+)~")
_INLINE_CODE = re.compile(r"`(.+)`")
_CODE_BLOCK = re.compile(r"```([\s\S]*)```")
_BLOCKQUOTE = re.compile(r">(.*)")
# List tokens carry their line break; it is not part of the item
_ORDERED_ITEM = re.compile(r"\d+\.\s+(.*)\n?", re.ASCII)
_UNORDERED_ITEM = re.compile(r"[*-]\s+(.*)\n?", re.ASCII)

_USER_MENTION = re.compile(r"<@([A-Z0-9]+)(\|([^>]+))?>")
_CHANNEL_LINK = re.compile(r"<#([A-Z0-9]+)(\|([^>]+))?>")
_USER_GROUP_MENTION = re.compile(r"<!subteam\^([A-Z0-9]+)(\|([^>]+))?>")
_SPECIAL_MENTION = re.compile(r"<!(here|channel|everyone)>")
# Possessive groups never give text back: "{date_long}|fallback" stays in the
# format group and "https://x|fallback" stays in the link group.
_DATE_FORMAT = re.compile(r"<!date\^(\d++)\^([^>\^]++)(\^([^>]++))?(\|([^>]++))?>", re.ASCII)
_SLACK_LINK = re.compile(r"<(https?://[^>|]+)\|([^>]+)>")
_MARKDOWN_LINK = re.compile(r"\[([^\]]+)\]\((https?://[^)]+)\)")
_EMOJI = re.compile(r":([a-zA-Z0-9_+-]+):")


def extract_content(value: str, pattern: re.Pattern[str]) -> str:
    """Return the first group of ``pattern`` matched against the whole value.

    Falls back to the raw value when the pattern does not match.
    """
    match = pattern.fullmatch(value)
    if match:
        return match.group(1)
    return value


def parse(tokens: list[Token]) -> Document:
    """Convert a token list into a Document. Total: one node per token."""
    doc = Document()
    for token in tokens:
        doc.children.append(parse_token(token))
    return doc


def parse_token(token: Token) -> Node:
    """Build the node for a single token."""
    value = token.value

    if token.type == TokenType.BOLD:
        return Bold(children=[Text(content=extract_content(value, _BOLD))])
    if token.type == TokenType.ITALIC:
        return Italic(children=[Text(content=extract_content(value, _ITALIC))])
    if token.type == TokenType.STRIKETHROUGH:
        return Strikethrough(children=[Text(content=extract_content(value, _STRIKETHROUGH))])
    if token.type == TokenType.INLINE_CODE:
        return InlineCode(content=extract_content(value, _INLINE_CODE))
    if token.type == TokenType.CODE_BLOCK:
        return CodeBlock(content=extract_content(value, _CODE_BLOCK))
    if token.type == TokenType.BLOCKQUOTE:
        content = extract_content(value, _BLOCKQUOTE).strip()
        return Blockquote(children=[Text(content=content)])
    if token.type == TokenType.ORDERED_LIST:
        item = ListItem(children=[Text(content=extract_content(value, _ORDERED_ITEM))])
        return OrderedList(children=[item])
    if token.type == TokenType.UNORDERED_LIST:
        item = ListItem(children=[Text(content=extract_content(value, _UNORDERED_ITEM))])
        return UnorderedList(children=[item])
    if token.type == TokenType.USER_MENTION:
        return parse_user_mention(value)
    if token.type == TokenType.CHANNEL_LINK:
        return parse_channel_link(value)
    if token.type == TokenType.USER_GROUP_MENTION:
        return parse_user_group_mention(value)
    if token.type == TokenType.SPECIAL_MENTION:
        return parse_special_mention(value)
    if token.type == TokenType.DATE_FORMAT:
        return parse_date_format(value)
    if token.type == TokenType.LINK:
        return parse_link(value)
    if token.type == TokenType.EMOJI:
        return parse_emoji(value)

    # TEXT, and ESCAPE which the tokenizer never emits
    return Text(content=value)


def parse_user_mention(value: str) -> Node:
    """Parse ``<@U123>`` / ``<@U123|name>``."""
    match = _USER_MENTION.fullmatch(value)
    if not match:
        return Text(content=value)
    return UserMention(user_id=match.group(1), fallback_text=match.group(3) or "")


def parse_channel_link(value: str) -> Node:
    """Parse ``<#C123>`` / ``<#C123|name>``."""
    match = _CHANNEL_LINK.fullmatch(value)
    if not match:
        return Text(content=value)
    return ChannelLink(channel_id=match.group(1), fallback_text=match.group(3) or "")


def parse_user_group_mention(value: str) -> Node:
    """Parse ``<!subteam^S123>`` / ``<!subteam^S123|@handle>``."""
    match = _USER_GROUP_MENTION.fullmatch(value)
    if not match:
        return Text(content=value)
    return UserGroupMention(group_id=match.group(1), fallback_text=match.group(3) or "")


def parse_special_mention(value: str) -> Node:
    match = _SPECIAL_MENTION.fullmatch(value)
    if not match:
        return Text(content=value)
    return SpecialMention(kind=match.group(1))


def parse_date_format(value: str) -> Node:
    """Parse ``<!date^timestamp^{token}^link|fallback>``.

    Link and fallback are optional. The groups are greedy, see _DATE_FORMAT.
    """
    match = _DATE_FORMAT.fullmatch(value)
    if not match:
        return Text(content=value)
    try:
        timestamp = int(match.group(1))
    except ValueError:
        # Digit strings past the interpreter's int conversion limit
        return Text(content=value)
    return DateFormat(
        timestamp=timestamp,
        format_token=match.group(2),
        link=match.group(4) or "",
        fallback=match.group(6) or "",
    )


def parse_link(value: str) -> Node:
    """Parse a Slack-style ``<url|text>`` or Markdown-style ``[text](url)`` link."""
    match = _SLACK_LINK.fullmatch(value)
    if match:
        return Link(url=match.group(1), text=match.group(2))

    match = _MARKDOWN_LINK.fullmatch(value)
    if match:
        return Link(url=match.group(2), text=match.group(1))

    return Text(content=value)


def parse_emoji(value: str) -> Node:
    match = _EMOJI.fullmatch(value)
    if not match:
        return Text(content=value)
    return Emoji(name=match.group(1))
