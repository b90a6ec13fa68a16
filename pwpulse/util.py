"""Process and host information helpers."""

from __future__ import annotations

import getpass
import os
import socket
import sys
import time
from typing import Optional

__all__ = [
    "PATH_SEP_CHAR",
    "path_get_filename",
    "msleep",
    "get_user_name",
    "get_host_name",
    "get_fqdn",
    "get_binary_name",
]

PATH_SEP_CHAR = "/"


def path_get_filename(path: Optional[str]) -> Optional[str]:
    """Return the part of ``path`` after its last separator."""
    if path is None:
        return None
    return path.rsplit(PATH_SEP_CHAR, 1)[-1]


def msleep(milliseconds: int) -> None:
    """Sleep for the given number of milliseconds."""
    time.sleep(milliseconds / 1000)


def get_user_name() -> str:
    """Name of the user running the process."""
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


def get_host_name() -> str:
    """Name of this host."""
    return socket.gethostname()


def get_fqdn() -> str:
    """Host name, as reported by get_host_name."""
    return get_host_name()


def get_binary_name() -> str:
    """Base name of the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return os.path.basename(program)