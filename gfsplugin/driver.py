"""GlusterFS volume driver: request validation and mount option assembly."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from gfsplugin.base import GFSDriver
from gfsplugin.errors import MountError, ValidationError
from gfsplugin.volume import CreateRequest, MountRequest, VolumeDriver

log = logging.getLogger(__name__)


def append_volume_options(args: Iterable[str], volume_name: str) -> list[str]:
    """Return ``args`` extended with the volfile id and optional subdir mount."""
    result = list(args)
    if not volume_name:
        log.warning("append_volume_options called with empty volume name")
        return result

    volume, sep, subdir = volume_name.partition("/")
    result.append(f"--volfile-id={volume}")
    if sep:
        result.append(f"--subdir-mount=/{subdir}")
    return result


class GlusterDriver(GFSDriver, VolumeDriver):
    """Volume driver that mounts GlusterFS volumes for containers."""

    def validate(self, req: CreateRequest | None) -> None:
        """Raise ValidationError unless exactly one server source is configured."""
        if req is None:
            raise ValidationError("create request cannot be nil")

        options = req.options or {}
        servers_in_opts = "servers" in options
        glusteropts_in_opts = "glusteropts" in options

        if self.servers and (servers_in_opts or glusteropts_in_opts):
            raise ValidationError("SERVERS is set, options are not allowed")
        if servers_in_opts and glusteropts_in_opts:
            raise ValidationError("servers is set, glusteropts are not allowed")
        if not self.servers and not servers_in_opts and not glusteropts_in_opts:
            raise ValidationError(
                "One of SERVERS, driver_opts.servers or driver_opts.glusteropts "
                "must be specified"
            )

    def mount_options(self, req: CreateRequest | None) -> list[str] | None:
        """Return the glusterfs command line options for the volume."""
        if req is None:
            log.warning("mount_options called with nil request")
            return None

        options = req.options or {}
        if self.servers:
            args = [arg for server in self.servers for arg in ("-s", server)]
            args = append_volume_options(args, req.name)
        elif "servers" in options:
            args = [
                arg for server in options["servers"].split(",") for arg in ("-s", server)
            ]
            args = append_volume_options(args, req.name)
        else:
            args = options.get("glusteropts", "").split(" ")

        args.append("--logger=syslog")
        return args

    def pre_mount(self, req: MountRequest | None) -> None:
        """Raise MountError if the mount point is missing or inaccessible."""
        if req is None:
            raise MountError("mount request cannot be nil", None)
        try:
            os.stat(req.mountpoint)
        except OSError as err:
            raise MountError(
                f"mount point {req.mountpoint} is not accessible", err
            ) from err

    def post_mount(self, req: MountRequest | None) -> None:
        """Log whether the mount point is accessible after mounting."""
        if req is None:
            log.warning("post_mount called with nil request")
            return
        try:
            os.stat(req.mountpoint)
        except OSError as err:
            log.error(
                "Mount point %s is not accessible after mount: %s", req.mountpoint, err
            )
            return
        log.info("successfully mounted volume %s at %s", req.name, req.mountpoint)