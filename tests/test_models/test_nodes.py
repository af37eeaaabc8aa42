"""Tests for AST node models."""

from mrkdwn_converter.models.nodes import (
    Bold,
    Container,
    DateFormat,
    Document,
    Italic,
    NodeType,
    OrderedList,
    Text,
    UserMention,
)


def test_node_types():
    assert Document.node_type == NodeType.DOCUMENT
    assert Text(content="x").node_type == NodeType.TEXT
    assert OrderedList().node_type == NodeType.ORDERED_LIST


def test_containers_default_to_independent_empty_children():
    a, b = Bold(), Bold()
    a.children.append(Text(content="x"))
    assert b.children == []
    assert isinstance(a, Container)


def test_same_payload_different_kind_not_equal():
    assert Bold(children=[Text(content="x")]) != Italic(children=[Text(content="x")])


def test_leaf_defaults():
    assert UserMention(user_id="U1").fallback_text == ""
    node = DateFormat(timestamp=0, format_token="{date}")
    assert (node.link, node.fallback) == ("", "")
