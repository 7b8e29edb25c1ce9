# catfetch/services/system_query.py

import getpass
import ipaddress
import logging
import platform
import socket
from abc import ABC, abstractmethod
from typing import List, Optional

import psutil

from catfetch.models.models import DiskUsage, NetworkAddress, UsageStats

logger = logging.getLogger(__name__)

CPUINFO_PATH = "/proc/cpuinfo"


class SystemQuery(ABC):
    """One method per fact family. Each returns None when the fact is unavailable."""

    @abstractmethod
    def username(self) -> Optional[str]: ...

    @abstractmethod
    def host_name(self) -> Optional[str]: ...

    @abstractmethod
    def os_name(self) -> Optional[str]: ...

    @abstractmethod
    def os_version(self) -> Optional[str]: ...

    @abstractmethod
    def cpu_brand(self) -> Optional[str]: ...

    @abstractmethod
    def memory(self) -> Optional[UsageStats]: ...

    @abstractmethod
    def swap(self) -> Optional[UsageStats]: ...

    @abstractmethod
    def disks(self) -> Optional[List[DiskUsage]]: ...

    @abstractmethod
    def network_addresses(self) -> Optional[List[NetworkAddress]]: ...


class PsutilSystemQuery(SystemQuery):
    def __init__(self, cpuinfo_path: str = CPUINFO_PATH):
        self.cpuinfo_path = cpuinfo_path
        self._os_release = None

    def username(self) -> Optional[str]:
        try:
            return getpass.getuser() or None
        except (OSError, KeyError, ImportError) as e:
            logger.debug(f"Username lookup failed: {e}")
            return None

    def host_name(self) -> Optional[str]:
        try:
            return socket.gethostname() or None
        except OSError as e:
            logger.debug(f"Host name lookup failed: {e}")
            return None

    def _read_os_release(self) -> dict:
        if self._os_release is None:
            try:
                self._os_release = platform.freedesktop_os_release()
            except (OSError, AttributeError) as e:
                logger.debug(f"os-release unavailable: {e}")
                self._os_release = {}
        return self._os_release

    def os_name(self) -> Optional[str]:
        name = self._read_os_release().get("NAME")
        if name:
            return name
        return platform.system() or None

    def os_version(self) -> Optional[str]:
        version = self._read_os_release().get("VERSION_ID")
        if version:
            return version
        if platform.system() == "Darwin":
            return platform.mac_ver()[0] or None
        return platform.release() or None

    def cpu_brand(self) -> Optional[str]:
        try:
            with open(self.cpuinfo_path, "r", encoding="utf-8", errors="ignore") as f:
                for line in f:
                    key, _, value = line.partition(":")
                    if key.strip() in ("model name", "Hardware", "Processor") and value.strip():
                        return value.strip()
        except OSError as e:
            logger.debug(f"Could not read {self.cpuinfo_path}: {e}")
        return platform.processor() or None

    def memory(self) -> Optional[UsageStats]:
        try:
            mem = psutil.virtual_memory()
        except (OSError, RuntimeError) as e:
            logger.debug(f"Memory query failed: {e}")
            return None
        return UsageStats(total=mem.total, used=mem.total - mem.available)

    def swap(self) -> Optional[UsageStats]:
        try:
            swap = psutil.swap_memory()
        except (OSError, RuntimeError) as e:
            logger.debug(f"Swap query failed: {e}")
            return None
        return UsageStats(total=swap.total, used=swap.used)

    def disks(self) -> Optional[List[DiskUsage]]:
        try:
            partitions = psutil.disk_partitions(all=False)
        except (OSError, RuntimeError) as e:
            logger.debug(f"Disk partition query failed: {e}")
            return None

        disks = []
        for partition in partitions:
            try:
                usage = psutil.disk_usage(partition.mountpoint)
            except (OSError, RuntimeError) as e:
                # cdrom drives without media, revoked mounts
                logger.debug(f"Skipping {partition.mountpoint}: {e}")
                continue
            disks.append(DiskUsage(
                mount_point=partition.mountpoint,
                fs_type=partition.fstype,
                total=usage.total,
                used=usage.used,
            ))
        return disks

    def network_addresses(self) -> Optional[List[NetworkAddress]]:
        try:
            interfaces = psutil.net_if_addrs()
        except (OSError, RuntimeError) as e:
            logger.debug(f"Network interface query failed: {e}")
            return None

        addresses = []
        for name, snics in interfaces.items():
            for snic in snics:
                if snic.family != socket.AF_INET:
                    continue
                addresses.append(NetworkAddress(
                    interface=name,
                    address=snic.address,
                    prefix_len=netmask_to_prefix(snic.netmask),
                ))
        return addresses


def netmask_to_prefix(netmask: Optional[str]) -> int:
    if not netmask:
        return 32
    try:
        return ipaddress.IPv4Network(f"0.0.0.0/{netmask}").prefixlen
    except ValueError:
        return 32
