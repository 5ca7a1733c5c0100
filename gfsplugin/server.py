"""Unix socket listener through which the container engine reaches the plugin."""

from __future__ import annotations

import logging
import os
import shutil
import socket
import threading

from gfsplugin.errors import PluginError
from gfsplugin.volume import VolumeDriver

log = logging.getLogger(__name__)

SOCKET_DIR = "/run/docker/plugins"
SOCKET_NAME = "glusterfs.sock"


def _remove_all(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
        return
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass


def _handle_connection(conn: socket.socket, driver: VolumeDriver) -> None:
    with conn:
        try:
            peer = conn.getpeername()
        except OSError:
            peer = ""
        log.info("New connection from %s", peer)


def start_unix_socket(
    driver: VolumeDriver, root: str, socket_dir: str = SOCKET_DIR
) -> None:
    """Create the plugin socket and serve connections until the process ends."""
    try:
        os.makedirs(socket_dir, mode=0o755, exist_ok=True)
    except OSError as err:
        raise PluginError(f"failed to create socket directory: {err}") from err

    socket_path = os.path.join(socket_dir, SOCKET_NAME)
    try:
        _remove_all(socket_path)
    except OSError as err:
        raise PluginError(f"failed to remove existing socket: {err}") from err

    listener = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    with listener:
        try:
            listener.bind(socket_path)
            listener.listen()
        except OSError as err:
            raise PluginError(f"failed to create Unix socket: {err}") from err

        try:
            os.chmod(socket_path, 0o660)
        except OSError as err:
            raise PluginError(f"failed to set socket permissions: {err}") from err

        log.info("Starting Unix socket server at %s (mount root %s)", socket_path, root)

        while True:
            try:
                conn, _ = listener.accept()
            except OSError as err:
                if listener.fileno() == -1:
                    break
                log.error("Error accepting connection: %s", err)
                continue
            threading.Thread(
                target=_handle_connection, args=(conn, driver), daemon=True
            ).start()