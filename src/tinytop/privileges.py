"""Who is the process running as, and is it elevated?"""

from __future__ import annotations

import getpass
import os


def sudo_user() -> str:
    """The invoking user when running under sudo, else ``""``."""
    return os.getenv("SUDO_USER", "")


def is_sudo() -> bool:
    if sudo_user():
        return True
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None:
        return False
    return geteuid() == 0


def current_user() -> str:
    return getpass.getuser()


def identity() -> tuple[str, bool, str]:
    """(user, elevated, message) for the startup log line.

    Under sudo the original user is reported rather than ``root``.
    """
    try:
        user = current_user()
    except (KeyError, OSError) as e:
        user = str(e)

    elevated = is_sudo()
    if not elevated:
        return user, False, "Running as regular user"
    return sudo_user() or user, True, "Running with sudo privileges"
