"""Start the system log daemon that the mount helper logs to."""

from __future__ import annotations

import logging
import subprocess
import time

from gfsplugin.errors import PluginError

log = logging.getLogger(__name__)


def start_syslog() -> subprocess.Popen:
    """Launch ``rsyslogd -n`` in the background and return its process."""
    try:
        process = subprocess.Popen(["rsyslogd", "-n"])
    except OSError as err:
        raise PluginError(f"failed to start rsyslog: {err}") from err

    # Give the daemon a moment to come up.
    time.sleep(0.1)

    log.info("rsyslog daemon started successfully")
    return process