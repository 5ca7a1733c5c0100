"""Requests, records and the driver interface for volume management."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CreateRequest:
    """A request to create a volume.

    Common options are ``servers`` (comma separated server list) and
    ``glusteropts`` (raw mount options).
    """

    name: str
    options: dict[str, str] | None = field(default_factory=dict)

    def validate(self) -> CreateRequest:
        """Check required fields; return the request, raise ValueError if invalid."""
        if not self.name:
            raise ValueError("volume name cannot be empty")
        if self.options is None:
            raise ValueError("options cannot be nil")
        return self


@dataclass
class MountRequest:
    """A request to mount an existing volume at a mount point."""

    name: str
    mountpoint: str

    def validate(self) -> MountRequest:
        """Check required fields; return the request, raise ValueError if invalid."""
        if not self.name:
            raise ValueError("volume name cannot be empty")
        if not self.mountpoint:
            raise ValueError("mount point cannot be empty")
        return self


@dataclass
class Volume:
    """A volume known to the driver."""

    name: str
    mountpoint: str = ""
    status: dict[str, Any] = field(default_factory=dict)


@dataclass
class Capability:
    """Capabilities reported by a driver."""

    scope: str = ""


class VolumeDriver(ABC):
    """Operations every volume driver provides."""

    @abstractmethod
    def validate(self, req: CreateRequest | None) -> None:
        """Raise if the creation request is not acceptable."""

    @abstractmethod
    def mount_options(self, req: CreateRequest | None) -> list[str] | None:
        """Return the command line options used to mount the volume."""

    @abstractmethod
    def pre_mount(self, req: MountRequest | None) -> None:
        """Prepare for mounting; raise if the mount cannot proceed."""

    @abstractmethod
    def post_mount(self, req: MountRequest | None) -> None:
        """Check and report on a completed mount."""