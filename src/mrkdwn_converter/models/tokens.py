"""Lexical token model produced by the tokenizer."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TokenType(str, Enum):
    """Kinds of mrkdwn token, one per recognised construct."""

    TEXT = "text"
    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    INLINE_CODE = "inline_code"
    CODE_BLOCK = "code_block"
    BLOCKQUOTE = "blockquote"
    ORDERED_LIST = "ordered_list"
    UNORDERED_LIST = "unordered_list"
    USER_MENTION = "user_mention"
    CHANNEL_LINK = "channel_link"
    USER_GROUP_MENTION = "user_group_mention"
    SPECIAL_MENTION = "special_mention"
    DATE_FORMAT = "date_format"
    LINK = "link"
    EMOJI = "emoji"
    ESCAPE = "escape"  # reserved, never emitted


class Token(BaseModel):
    """A matched span of the input. Immutable once produced."""

    model_config = ConfigDict(frozen=True)

    type: TokenType
    value: str  # Raw matched text, delimiters included
    # UTF-8 byte offsets into the input after invalid sequences are dropped
    start: int
    end: int
