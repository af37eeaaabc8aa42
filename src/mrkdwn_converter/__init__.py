"""Slack mrkdwn to standard Markdown conversion with cached name resolution."""

from mrkdwn_converter.mrkdwn import Converter, DirectoryService

__all__ = [
    "Converter",
    "DirectoryService",
]
