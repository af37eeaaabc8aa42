"""mrkdwn pipeline: tokenizer -> parser -> renderer, fronted by Converter."""

from mrkdwn_converter.mrkdwn.cache import CHANNELS, USER_GROUPS, USERS, EntityCache
from mrkdwn_converter.mrkdwn.converter import Converter
from mrkdwn_converter.mrkdwn.dates import format_date
from mrkdwn_converter.mrkdwn.directory import DirectoryService
from mrkdwn_converter.mrkdwn.parser import parse
from mrkdwn_converter.mrkdwn.renderer import Renderer
from mrkdwn_converter.mrkdwn.tokenizer import tokenize

__all__ = [
    "CHANNELS",
    "Converter",
    "DirectoryService",
    "EntityCache",
    "format_date",
    "parse",
    "Renderer",
    "tokenize",
    "USER_GROUPS",
    "USERS",
]
