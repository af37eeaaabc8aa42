"""DirectoryService backed by the Slack Web API.

Resolves user, channel and user-group IDs with users.info / bots.info,
conversations.info and usergroups.list. Rate-limited calls are retried with
exponential backoff; any other SlackApiError propagates so the renderer can
log it and fall back to the inline mention text.
"""

import logging
from collections.abc import Awaitable, Callable

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from mrkdwn_converter.config import get_settings
from mrkdwn_converter.mrkdwn.converter import Converter

logger = logging.getLogger(__name__)


def _is_rate_limited(error: BaseException) -> bool:
    """True for Slack's ``ratelimited`` error (HTTP 429)."""
    if not isinstance(error, SlackApiError):
        return False
    response = error.response
    if response is None:
        return False
    return response.status_code == 429 or response.get("error") == "ratelimited"


@retry(
    retry=retry_if_exception(_is_rate_limited),
    wait=wait_exponential_jitter(initial=1, max=30, jitter=2),
    stop=stop_after_attempt(4),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
async def _call_slack(method: Callable[..., Awaitable], **kwargs) -> object:
    """Invoke a Slack Web API method, retrying while rate limited."""
    return await method(**kwargs)


class SlackDirectory:
    """Looks up display names for Slack IDs.

    Args:
        client: Slack client to use. When None, one is built on first lookup.
        token: Bot token for the built client. Defaults to
            ``Settings.slack_bot_token``.
    """

    def __init__(
        self, client: AsyncWebClient | None = None, *, token: str | None = None
    ) -> None:
        self._client = client
        self._token = token

    def _get_client(self) -> AsyncWebClient:
        if self._client is None:
            token = self._token if self._token is not None else get_settings().slack_bot_token
            self._client = AsyncWebClient(token=token)
        return self._client

    async def get_user_profile(self, user_id: str) -> str:
        """Return the best available name for a user or bot.

        Preference: profile display name, profile real name, account name,
        then bots.info name or app ID. Returns "" when none is found.
        """
        client = self._get_client()

        try:
            response = await _call_slack(client.users_info, user=user_id)
        except SlackApiError:
            logger.debug("users.info failed for %s, trying bots.info", user_id, exc_info=True)
        else:
            user = response.get("user") or {}
            profile = user.get("profile") or {}
            name = profile.get("display_name") or profile.get("real_name") or user.get("name")
            if name:
                return name

        # Bot users are not always visible to users.info
        try:
            response = await _call_slack(client.bots_info, bot=user_id)
        except SlackApiError:
            logger.debug("bots.info failed for %s", user_id, exc_info=True)
            return ""

        bot = response.get("bot") or {}
        return bot.get("name") or bot.get("app_id") or ""

    async def get_channel_name(self, channel_id: str) -> str:
        client = self._get_client()
        response = await _call_slack(client.conversations_info, channel=channel_id)
        channel = response.get("channel") or {}
        return channel.get("name") or ""

    async def get_user_group_name(self, group_id: str) -> str:
        """Return the handle of the user group with ``group_id``, or ""."""
        client = self._get_client()
        response = await _call_slack(client.usergroups_list)
        for group in response.get("usergroups") or []:
            if group.get("id") == group_id:
                return group.get("handle") or ""
        return ""


def create_slack_converter(
    client: AsyncWebClient | None = None,
    ttl: float | None = None,
    *,
    token: str | None = None,
) -> Converter:
    """Build a new Converter resolving names through the Slack Web API.

    Each call returns a fresh Converter with its own empty cache and, unless
    ``client`` is given, its own Slack client.
    """
    return Converter(SlackDirectory(client, token=token), ttl=ttl)
