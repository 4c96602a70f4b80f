"""Error types raised by how-install.

The core raises these; only the CLI turns them into output and exit codes.
"""

from typing import Iterable, Optional


class HowInstallError(Exception):
    """Base class for all how-install errors."""


class NotFoundForPlatform(HowInstallError):
    """No install instruction matched the requested platform.
    
    Attributes:
        command: The command that was looked up.
        distro: Display string of the explicit distro override, if any.
        os_description: Pretty name of the detected OS, if no override.
    """
    
    def __init__(
        self,
        command: str,
        distro: Optional[str] = None,
        os_description: Optional[str] = None,
    ):
        self.command = command
        self.distro = distro
        self.os_description = os_description
        
        if distro is not None:
            message = f"{command} not found for {distro}"
        else:
            message = (
                f"Failed to find install command for {command!r} "
                f"on OS {os_description!r}"
            )
        super().__init__(message)


class MalformedDocument(HowInstallError):
    """The lookup page is missing an element every install block must have."""
    
    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Malformed lookup page for {command!r}: {reason}")


class OSInfoUnavailable(HowInstallError):
    """Local OS release metadata could not be read."""
    
    def __init__(self, missing_fields: Iterable[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(
            "Failed to get Linux OS release info "
            f"(missing: {', '.join(self.missing_fields)})"
        )
