"""Pure function splitting raw mrkdwn into a flat token list.

Patterns are tried in priority order at every cursor position; the first one
that matches wins. Slack's angle-bracket sequences come first so that, for
example, ``<!here>`` is never read as a broken date token. When nothing
matches, a single character is emitted as TEXT, which is what lets any
unterminated construct fall through as literal text.
"""

import re

from mrkdwn_converter.models.tokens import Token, TokenType

# Patterns are applied with Pattern.match(text, pos), which anchors at pos.
# \Z is the end of the whole input, never the end of a line.
TOKEN_PATTERNS: tuple[tuple[re.Pattern[str], TokenType], ...] = (
    # <@U123ABCDE> or <@U123ABCDE|username>
    (re.compile(r"<@([A-Z0-9]+)(\|([^>]+))?>"), TokenType.USER_MENTION),
    # <#C123ABCDE> or <#C123ABCDE|channel-name>
    (re.compile(r"<#([A-Z0-9]+)(\|([^>]+))?>"), TokenType.CHANNEL_LINK),
    # <!subteam^S123ABCDE> or <!subteam^S123ABCDE|@handle>
    (re.compile(r"<!subteam\^([A-Z0-9]+)(\|([^>]+))?>"), TokenType.USER_GROUP_MENTION),
    # <!here>, <!channel>, <!everyone>
    (re.compile(r"<!(here|channel|everyone)>"), TokenType.SPECIAL_MENTION),
    # <!date^1697250654^{date_num}^https://link|fallback>
    (
        # Possessive groups: an unterminated tag fails in linear time
        re.compile(r"<!date\^(\d++)\^([^>\^]++)(\^([^>]++))?(\|([^>]++))?>", re.ASCII),
        TokenType.DATE_FORMAT,
    ),
    # <https://example.com|text>
    (re.compile(r"<(https?://[^>|]+)\|([^>]+)>"), TokenType.LINK),
    # [text](https://example.com)
    (re.compile(r"\[([^\]]+)\]\((https?://[^)]+)\)"), TokenType.LINK),
    # :emoji_name:
    (re.compile(r":([a-zA-Z0-9_+-]+):"), TokenType.EMOJI),
    (re.compile(r"```([\s\S]*?)```"), TokenType.CODE_BLOCK),
    (re.compile(r"`([^`]+)`"), TokenType.INLINE_CODE),
    (re.compile(r"\*([^*]+)\*"), TokenType.BOLD),
    (re.compile(r"_([^_]+)_"), TokenType.ITALIC),
    (re.compile(r"~([^~]+)~"), TokenType.STRIKETHROUGH),
    # > quote, only when nothing but the quote remains
    (re.compile(r">(.*)\Z"), TokenType.BLOCKQUOTE),
    # 1. item (line break included in the token)
    (re.compile(r"(\d+\.\s+.*?)(?:\n|\Z)", re.ASCII), TokenType.ORDERED_LIST),
    # * item or - item
    (re.compile(r"([*-]\s+.*?)(?:\n|\Z)", re.ASCII), TokenType.UNORDERED_LIST),
)


def _utf8_len(value: str) -> int:
    return len(value.encode("utf-8"))


def to_text(text: str | bytes) -> str:
    """Return ``text`` as a str holding only UTF-8 encodable code points.

    Invalid byte sequences and lone surrogates are dropped.
    """
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="ignore")
    return text.encode("utf-8", errors="ignore").decode("utf-8")


def _match_at(text: str, pos: int) -> tuple[re.Match[str], TokenType] | None:
    for pattern, token_type in TOKEN_PATTERNS:
        match = pattern.match(text, pos)
        if match:
            return match, token_type
    return None


def next_token(text: str, pos: int) -> Token | None:
    """Return the highest-priority token matching at character index ``pos``, or None.

    The token's offsets are UTF-8 byte offsets, like those from tokenize().
    """
    found = _match_at(text, pos)
    if found is None:
        return None
    match, token_type = found
    start = _utf8_len(text[:pos])
    return Token(
        type=token_type,
        value=match.group(0),
        start=start,
        end=start + _utf8_len(match.group(0)),
    )


def tokenize(text: str | bytes) -> list[Token]:
    """Break mrkdwn into tokens. Total: never raises, for any input.

    Input is cleaned with to_text() first, and token offsets are UTF-8 byte
    offsets into the cleaned text.
    """
    text = to_text(text)

    tokens: list[Token] = []
    pos = 0
    offset = 0
    while pos < len(text):
        found = _match_at(text, pos)
        if found is not None:
            match, token_type = found
            value = match.group(0)
            pos = match.end()
        else:
            token_type, value = TokenType.TEXT, text[pos]
            pos += 1

        width = _utf8_len(value)
        tokens.append(Token(type=token_type, value=value, start=offset, end=offset + width))
        offset += width

    return tokens
