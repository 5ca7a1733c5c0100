"""Core state shared by GlusterFS drivers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class GFSDriver:
    """Holds the GlusterFS servers used for volume operations."""

    servers: list[str] = field(default_factory=list)

    def __init__(self, servers: Iterable[str] = ()) -> None:
        self.servers = list(servers)