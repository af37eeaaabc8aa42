"""AST node types for parsed mrkdwn.

The node set is closed: the parser only ever builds the classes defined here,
and the renderer dispatches on them with isinstance checks. Container nodes
hold an ordered ``children`` list; leaf nodes carry only their payload.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class NodeType(str, Enum):
    """Kinds of AST node."""

    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    INLINE_CODE = "inline_code"
    CODE_BLOCK = "code_block"
    BLOCKQUOTE = "blockquote"
    ORDERED_LIST = "ordered_list"
    UNORDERED_LIST = "unordered_list"
    LIST_ITEM = "list_item"
    USER_MENTION = "user_mention"
    CHANNEL_LINK = "channel_link"
    USER_GROUP_MENTION = "user_group_mention"
    SPECIAL_MENTION = "special_mention"
    DATE_FORMAT = "date_format"
    LINK = "link"
    EMOJI = "emoji"


class Node:
    """Base class for every AST node."""

    node_type: ClassVar[NodeType]


# -- Containers --


@dataclass
class Container(Node):
    """A node whose rendering wraps the rendering of its children."""

    children: list[Node] = field(default_factory=list)


@dataclass
class Document(Container):
    node_type: ClassVar[NodeType] = NodeType.DOCUMENT


@dataclass
class Paragraph(Container):
    node_type: ClassVar[NodeType] = NodeType.PARAGRAPH


@dataclass
class Bold(Container):
    node_type: ClassVar[NodeType] = NodeType.BOLD


@dataclass
class Italic(Container):
    node_type: ClassVar[NodeType] = NodeType.ITALIC


@dataclass
class Strikethrough(Container):
    node_type: ClassVar[NodeType] = NodeType.STRIKETHROUGH


@dataclass
class Blockquote(Container):
    node_type: ClassVar[NodeType] = NodeType.BLOCKQUOTE


@dataclass
class OrderedList(Container):
    node_type: ClassVar[NodeType] = NodeType.ORDERED_LIST


@dataclass
class UnorderedList(Container):
    node_type: ClassVar[NodeType] = NodeType.UNORDERED_LIST


@dataclass
class ListItem(Container):
    node_type: ClassVar[NodeType] = NodeType.LIST_ITEM


# -- Leaves --


@dataclass
class Text(Node):
    node_type: ClassVar[NodeType] = NodeType.TEXT

    content: str


@dataclass
class InlineCode(Node):
    node_type: ClassVar[NodeType] = NodeType.INLINE_CODE

    content: str


@dataclass
class CodeBlock(Node):
    node_type: ClassVar[NodeType] = NodeType.CODE_BLOCK

    content: str


@dataclass
class UserMention(Node):
    node_type: ClassVar[NodeType] = NodeType.USER_MENTION

    user_id: str
    fallback_text: str = ""  # From <@U123|name>, empty when absent


@dataclass
class ChannelLink(Node):
    node_type: ClassVar[NodeType] = NodeType.CHANNEL_LINK

    channel_id: str
    fallback_text: str = ""


@dataclass
class UserGroupMention(Node):
    node_type: ClassVar[NodeType] = NodeType.USER_GROUP_MENTION

    group_id: str
    fallback_text: str = ""


@dataclass
class SpecialMention(Node):
    node_type: ClassVar[NodeType] = NodeType.SPECIAL_MENTION

    kind: str  # "here", "channel" or "everyone"


@dataclass
class DateFormat(Node):
    """A ``<!date^ts^{token}^link|fallback>`` token.

    ``link`` may contain a ``|fallback`` tail when Slack omits the closing
    bracket between them; it is kept as captured.
    """

    node_type: ClassVar[NodeType] = NodeType.DATE_FORMAT

    timestamp: int  # Unix seconds
    format_token: str
    link: str = ""
    fallback: str = ""


@dataclass
class Link(Node):
    node_type: ClassVar[NodeType] = NodeType.LINK

    url: str
    text: str


@dataclass
class Emoji(Node):
    node_type: ClassVar[NodeType] = NodeType.EMOJI

    name: str  # Shortcode without colons
