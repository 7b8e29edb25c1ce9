# catfetch/collector/system_info.py

import logging
from typing import Iterable, List, Optional

from catfetch.config import Config
from catfetch.models.models import DiskUsage, InfoLine, NetworkAddress, UsageStats
from catfetch.services.system_query import SystemQuery
from catfetch.ui.palette import (
    IDENTITY_COLOR,
    LABEL_COLOR,
    color_rows,
    colorize,
    colorize_percentage,
)

logger = logging.getLogger(__name__)

GIB = 1024 ** 3
UNKNOWN = "Unknown"
UNKNOWN_NETWORK = "unknown"
SEPARATOR = "━"


def to_gib(num_bytes: int) -> float:
    return num_bytes / GIB


def percentage(used: float, total: float) -> float:
    if not total:
        return 0.0
    return used / total * 100.0


def format_usage(used: int, total: int) -> str:
    """'U >> T GB (P%)' with the percentage colored by emphasis."""
    return (
        f"{to_gib(used):.2f} >> {to_gib(total):.2f} GB "
        f"{colorize_percentage(percentage(used, total))}"
    )


def format_stats(stats: Optional[UsageStats]) -> str:
    if stats is None:
        return UNKNOWN
    return format_usage(stats.used, stats.total)


def format_networks(addresses: Optional[Iterable[NetworkAddress]], excluded: Iterable[str]) -> str:
    if addresses is None:
        return UNKNOWN_NETWORK
    excluded = list(excluded)
    entries = [
        address.display()
        for address in addresses
        if not any(fragment in address.interface for fragment in excluded)
    ]
    return ", ".join(entries) if entries else UNKNOWN_NETWORK


def format_disk(disk: DiskUsage) -> str:
    return f"{disk.mount_point} {format_usage(disk.used, disk.total)} {disk.fs_type}"


def identity(query: SystemQuery) -> str:
    return f"{query.username() or UNKNOWN}@{query.host_name() or UNKNOWN}"


def collect_info(query: SystemQuery, config: Optional[Config] = None) -> List[InfoLine]:
    """Gather every fact from the query service as ordered display lines."""
    config = config or Config()

    user_info = identity(query)
    os_name = query.os_name() or UNKNOWN
    os_version = query.os_version() or UNKNOWN

    lines = [
        InfoLine(value=colorize(user_info, IDENTITY_COLOR)),
        InfoLine(value=SEPARATOR * len(user_info)),
        InfoLine(label="sys ", value=f"{os_name} {os_version}"),
        InfoLine(label="cpu ", value=query.cpu_brand() or UNKNOWN),
        InfoLine(label="mem ", value=format_stats(query.memory())),
        InfoLine(label="swap", value=format_stats(query.swap())),
        InfoLine(label="net ", value=format_networks(query.network_addresses(), config.excluded_interfaces)),
    ]

    disks = query.disks() or []
    if len(disks) > config.disk_limit:
        logger.debug(f"Showing {config.disk_limit} of {len(disks)} disks")
    for disk in disks[:config.disk_limit]:
        lines.append(InfoLine(label="disk", value=format_disk(disk)))

    lines.append(InfoLine(value=""))
    lines.extend(InfoLine(value=row) for row in color_rows())
    return lines


def render_line(line: InfoLine) -> str:
    if line.label is None:
        return line.value
    return f"{colorize(line.label, LABEL_COLOR)}: {line.value}"


def format_info(lines: Iterable[InfoLine]) -> str:
    return "\n".join(render_line(line) for line in lines)


def get_system_info(query: SystemQuery, config: Optional[Config] = None) -> str:
    """Returns the info block as a single multi-line string."""
    return format_info(collect_info(query, config))
