"""Shared test fixtures."""

import pytest

from mrkdwn_converter.mrkdwn.converter import Converter


class FakeDirectory:
    """In-memory DirectoryService that records every lookup."""

    def __init__(self) -> None:
        self.users = {
            "U123ABCDE": "john.doe",
            "U456FGHIJ": "jane.smith",
        }
        self.channels = {
            "C123JKLMN": "general",
            "C456OPQRS": "random",
        }
        self.user_groups = {
            "S123FGHIJ": "engineers",
            "S456KLMNO": "designers",
        }
        self.failing: set[str] = set()
        self.calls: list[tuple[str, str]] = []

    def _lookup(self, kind: str, table: dict[str, str], entity_id: str) -> str:
        self.calls.append((kind, entity_id))
        if entity_id in self.failing:
            raise RuntimeError(f"lookup failed for {entity_id}")
        return table.get(entity_id, "")

    async def get_user_profile(self, user_id: str) -> str:
        return self._lookup("user", self.users, user_id)

    async def get_channel_name(self, channel_id: str) -> str:
        return self._lookup("channel", self.channels, channel_id)

    async def get_user_group_name(self, group_id: str) -> str:
        return self._lookup("user_group", self.user_groups, group_id)

    def count(self, kind: str, entity_id: str) -> int:
        return self.calls.count((kind, entity_id))


class FakeClock:
    """Manually advanced monotonic clock for cache expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def directory() -> FakeDirectory:
    return FakeDirectory()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def converter(directory: FakeDirectory, clock: FakeClock) -> Converter:
    """Converter with a 10-minute TTL driven by the fake clock."""
    return Converter(directory, ttl=600, timer=clock)
