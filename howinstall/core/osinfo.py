"""Local operating system facts used to pick an install command.

Public exports:
    OSRelease: The name / pretty name / id triple from os-release
    detect_os_release: Read the triple for the running system
    is_superuser: Whether the process runs with root privileges
"""

import logging
import os
from dataclasses import dataclass

import distro

from howinstall.errors import OSInfoUnavailable

logger = logging.getLogger(__name__)

OS_RELEASE_FIELDS = ("name", "pretty_name", "id")


@dataclass(frozen=True)
class OSRelease:
    """
    Release metadata of the running Linux distribution.

    Attributes:
        name: NAME field ('Ubuntu', 'Arch Linux')
        pretty_name: PRETTY_NAME field ('Ubuntu 22.04.3 LTS')
        id: ID field ('ubuntu', 'arch')
    """
    name: str
    pretty_name: str
    id: str


def detect_os_release() -> OSRelease:
    """
    Read the os-release triple of the running system.

    Uses the `distro` package, which parses /etc/os-release (or
    /usr/lib/os-release) without shelling out.

    Returns:
        OSRelease: Detected release metadata

    Raises:
        OSInfoUnavailable: If any of NAME, PRETTY_NAME or ID is missing
    """
    info = distro.os_release_info()
    missing = [field for field in OS_RELEASE_FIELDS if not info.get(field)]
    if missing:
        raise OSInfoUnavailable(missing)

    release = OSRelease(
        name=info["name"],
        pretty_name=info["pretty_name"],
        id=info["id"],
    )
    logger.debug("Detected OS release: %s", release)
    return release


def is_superuser() -> bool:
    """Return True when the effective user id is root."""
    return os.geteuid() == 0
