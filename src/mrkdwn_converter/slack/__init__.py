"""Slack Web API integration: ID-to-name directory and converter factory."""

from mrkdwn_converter.slack.directory import SlackDirectory, create_slack_converter

__all__ = [
    "create_slack_converter",
    "SlackDirectory",
]
