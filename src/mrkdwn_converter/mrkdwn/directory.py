"""Directory service contract used to resolve Slack IDs to display names."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DirectoryService(Protocol):
    """Name lookups supplied by the host application.

    Each method returns the display name, or ``""`` when no name is
    available. Raising signals a failed lookup. Neither outcome is cached.
    """

    async def get_user_profile(self, user_id: str) -> str: ...

    async def get_channel_name(self, channel_id: str) -> str: ...

    async def get_user_group_name(self, group_id: str) -> str: ...
