"""Token and AST models for the mrkdwn pipeline."""

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
    NodeType,
    OrderedList,
    Paragraph,
    SpecialMention,
    Strikethrough,
    Text,
    UnorderedList,
    UserGroupMention,
    UserMention,
)
from mrkdwn_converter.models.tokens import Token, TokenType

__all__ = [
    "Token",
    "TokenType",
    "Node",
    "NodeType",
    "Container",
    "Document",
    "Paragraph",
    "Text",
    "Bold",
    "Italic",
    "Strikethrough",
    "InlineCode",
    "CodeBlock",
    "Blockquote",
    "OrderedList",
    "UnorderedList",
    "ListItem",
    "UserMention",
    "ChannelLink",
    "UserGroupMention",
    "SpecialMention",
    "DateFormat",
    "Link",
    "Emoji",
]
