"""Extraction and resolution of install commands."""

from .extractor import InstallCommandIndex, InstallEntry, extract
from .osinfo import OSRelease, detect_os_release, is_superuser
from .resolver import LinuxDistro, PlatformDescriptor, resolve, sudo_prefix

__all__ = [
    # Extraction
    "InstallCommandIndex",
    "InstallEntry",
    "extract",
    # Local OS
    "OSRelease",
    "detect_os_release",
    "is_superuser",
    # Resolution
    "LinuxDistro",
    "PlatformDescriptor",
    "resolve",
    "sudo_prefix",
]
