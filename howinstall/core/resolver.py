"""Install command resolution for how-install.

Picks the single install command that applies to a platform, either an
explicitly chosen distro or the detected OS release.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from howinstall.core.extractor import InstallCommandIndex
from howinstall.core.osinfo import OSRelease
from howinstall.errors import NotFoundForPlatform

logger = logging.getLogger(__name__)

SUDO_PREFIX = "sudo "


class LinuxDistro(str, Enum):
    """Distros selectable with --distro."""
    
    DEBIAN = "debian"
    UBUNTU = "ubuntu"
    ALPINE = "alpine"
    ARCH = "arch"
    KALI = "kali"
    CENTOS = "centos"
    FEDORA = "fedora"
    RASPBIAN = "raspbian"
    DOCKER = "docker"
    
    @property
    def display_name(self) -> str:
        """Label the lookup page uses for this distro."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    LinuxDistro.DEBIAN: "Debian",
    LinuxDistro.UBUNTU: "Ubuntu",
    LinuxDistro.ALPINE: "Alpine",
    LinuxDistro.ARCH: "Arch",
    LinuxDistro.KALI: "Kali",
    LinuxDistro.CENTOS: "CentOS",
    LinuxDistro.FEDORA: "Fedora",
    LinuxDistro.RASPBIAN: "Raspbian",
    LinuxDistro.DOCKER: "Docker",
}


@dataclass(frozen=True)
class PlatformDescriptor:
    """Which platform to install for.
    
    Exactly one of ``distro`` (explicit override) or ``os_release``
    (detected) is set. Use the ``explicit`` and ``detected`` constructors.
    """
    
    distro: Optional[LinuxDistro] = None
    os_release: Optional[OSRelease] = None
    
    def __post_init__(self):
        if (self.distro is None) == (self.os_release is None):
            raise ValueError("PlatformDescriptor needs exactly one of distro or os_release")
    
    @classmethod
    def explicit(cls, distro: LinuxDistro) -> "PlatformDescriptor":
        """Descriptor for a user-selected distro."""
        return cls(distro=distro)
    
    @classmethod
    def detected(cls, os_release: OSRelease) -> "PlatformDescriptor":
        """Descriptor for the detected OS release."""
        return cls(os_release=os_release)
    
    def candidates(self) -> list[str]:
        """Index keys to try, in priority order."""
        if self.distro is not None:
            return [self.distro.display_name]
        return [self.os_release.name, self.os_release.pretty_name, self.os_release.id]
    
    def describe(self) -> str:
        """Human description for messages."""
        if self.distro is not None:
            return self.distro.display_name
        return self.os_release.pretty_name


def resolve(index: InstallCommandIndex, platform: PlatformDescriptor) -> str:
    """Pick the install command for a platform.
    
    Keys are compared exactly; there is no case folding or partial
    matching. An explicit distro is looked up alone, the detected OS tries
    its name, pretty name and id in that order.
    
    Args:
        index: Install commands extracted from the lookup page
        platform: Platform to resolve for
        
    Returns:
        The install command, without privilege prefix
        
    Raises:
        NotFoundForPlatform: If no candidate key is in the index
    """
    for key in platform.candidates():
        command = index.get(key)
        if command is not None:
            logger.debug("Resolved %s via %r", index.command, key)
            return command
    
    if platform.distro is not None:
        raise NotFoundForPlatform(index.command, distro=platform.describe())
    raise NotFoundForPlatform(index.command, os_description=platform.describe())


def sudo_prefix(is_root: bool) -> str:
    """Privilege prefix for the install command."""
    return "" if is_root else SUDO_PREFIX
