"""GlusterFS volume plugin for Docker: request checks, mount arguments and a socket listener."""

__version__ = "0.1.0"