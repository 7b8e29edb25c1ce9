# tests/conftest.py
from typing import List, Optional

import pytest

from catfetch.models.models import DiskUsage, NetworkAddress, UsageStats
from catfetch.services.system_query import SystemQuery

GIB = 1024 ** 3


class FakeSystemQuery(SystemQuery):
    """Canned answers. Any field set to None reads as unavailable."""

    def __init__(self, **overrides):
        self.facts = {
            "username": "alice",
            "host_name": "box",
            "os_name": "Ubuntu",
            "os_version": "22.04",
            "cpu_brand": "AMD Ryzen 7 5800X 8-Core Processor",
            "memory": UsageStats(total=16 * GIB, used=8 * GIB),
            "swap": UsageStats(total=2 * GIB, used=0),
            "disks": [DiskUsage(mount_point="/", fs_type="ext4", total=100 * GIB, used=95 * GIB)],
            "network_addresses": [NetworkAddress(interface="eth0", address="192.168.1.20", prefix_len=24)],
        }
        self.facts.update(overrides)

    def username(self) -> Optional[str]:
        return self.facts["username"]

    def host_name(self) -> Optional[str]:
        return self.facts["host_name"]

    def os_name(self) -> Optional[str]:
        return self.facts["os_name"]

    def os_version(self) -> Optional[str]:
        return self.facts["os_version"]

    def cpu_brand(self) -> Optional[str]:
        return self.facts["cpu_brand"]

    def memory(self) -> Optional[UsageStats]:
        return self.facts["memory"]

    def swap(self) -> Optional[UsageStats]:
        return self.facts["swap"]

    def disks(self) -> Optional[List[DiskUsage]]:
        return self.facts["disks"]

    def network_addresses(self) -> Optional[List[NetworkAddress]]:
        return self.facts["network_addresses"]


@pytest.fixture
def fake_query():
    return FakeSystemQuery()


@pytest.fixture
def make_query():
    return FakeSystemQuery


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in ("CATFETCH_CONFIG", "CATFETCH_LOG_LEVEL", "CATFETCH_LOG_FILE", "CATFETCH_LOGO_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
