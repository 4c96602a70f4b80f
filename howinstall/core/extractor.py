"""Install instruction extraction for how-install.

Turns a command-not-found.com lookup page into an index of install
commands keyed by every alias the page gives for each platform.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterator, Optional

from bs4 import BeautifulSoup, Tag

from howinstall.errors import MalformedDocument

logger = logging.getLogger(__name__)

# Visible install blocks; hidden ones carry the Bootstrap d-none class
INSTALL_BLOCK_SELECTOR = ".command-install:not(.d-none)"

# Class marker carrying the short platform id, e.g. "install-alpine"
PLATFORM_CLASS_PREFIX = "install-"

OS_ATTRIBUTE = "data-os"


@dataclass(frozen=True)
class InstallEntry:
    """One install instruction block found on a lookup page.

    Attributes:
        display_name: Human label for the platform ("Ubuntu")
        os_attribute: Secondary alias from the block's data-os attribute, may be empty
        platform_id: Short identifier from the install-* class ("docker")
        command: Shell command text, stripped
    """

    display_name: str
    os_attribute: str
    platform_id: str
    command: str

    @property
    def aliases(self) -> list[str]:
        """Non-empty aliases this entry is reachable under."""
        candidates = [self.display_name, self.os_attribute, self.platform_id]
        return [alias for alias in candidates if alias]


class InstallCommandIndex(Mapping):
    """Read-only mapping from alias to install command.

    Aliases are exact, case-sensitive strings. When several entries share
    an alias, the entry that came later in the document wins.

    Example:
        index = InstallCommandIndex("curl", entries)
        index["Ubuntu"]  # 'apt-get install curl'
    """

    def __init__(self, command: str, entries: Optional[list[InstallEntry]] = None):
        """Build the index.

        Args:
            command: The command name the lookup page was fetched for
            entries: Install entries in document order
        """
        self.command = command
        self.entries = tuple(entries or ())
        self._commands: dict[str, str] = {}

        for entry in self.entries:
            for alias in entry.aliases:
                previous = self._commands.get(alias)
                if previous is not None and previous != entry.command:
                    logger.debug(
                        "Alias %r for %s overwritten: %r -> %r",
                        alias, command, previous, entry.command,
                    )
                self._commands[alias] = entry.command

    def __getitem__(self, alias: str) -> str:
        return self._commands[alias]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"InstallCommandIndex(command={self.command!r}, aliases={len(self)})"

    @property
    def platforms(self) -> list[str]:
        """Display names of all platforms on the page, in document order."""
        names: list[str] = []
        for entry in self.entries:
            if entry.display_name and entry.display_name not in names:
                names.append(entry.display_name)
        return names


def extract(document_markup: str, queried_command: str) -> InstallCommandIndex:
    """Build an install command index from a lookup page.

    A block without an install-* class is skipped. A block without a
    <dt> label or <dd> command aborts the whole extraction, since the
    page is then not in the shape the lookup site produces.

    Args:
        document_markup: HTML of the lookup page for queried_command
        queried_command: Command the page was fetched for

    Returns:
        InstallCommandIndex over all visible install blocks

    Raises:
        MalformedDocument: If a block is missing its label or command
    """
    soup = BeautifulSoup(document_markup, "html.parser")

    entries = []
    for block in soup.select(INSTALL_BLOCK_SELECTOR):
        entry = _parse_block(block, queried_command)
        if entry is not None:
            entries.append(entry)

    index = InstallCommandIndex(queried_command, entries)
    logger.debug(
        "Extracted %d install entries (%d aliases) for %s",
        len(entries), len(index), queried_command,
    )
    return index


def _parse_block(block: Tag, queried_command: str) -> Optional[InstallEntry]:
    """Parse one install block, or return None if it has no platform id."""
    display_name = _display_name(block, queried_command)
    os_attribute = block.get(OS_ATTRIBUTE) or ""

    platform_id = _platform_id(block)
    if platform_id is None:
        logger.debug("Skipping install block %r without platform id", display_name)
        return None

    detail = block.find("dd")
    if detail is None:
        raise MalformedDocument(
            queried_command, f"install block {display_name!r} has no <dd> command"
        )

    return InstallEntry(
        display_name=display_name,
        os_attribute=os_attribute,
        platform_id=platform_id,
        command=detail.get_text().strip(),
    )


def _display_name(block: Tag, queried_command: str) -> str:
    """Trailing text of the block's first <dt>, stripped."""
    descriptor = block.find("dt")
    if descriptor is None:
        raise MalformedDocument(queried_command, "install block has no <dt> label")

    texts = list(descriptor.strings)
    if not texts:
        raise MalformedDocument(queried_command, "install block <dt> label has no text")

    return texts[-1].strip()


def _platform_id(block: Tag) -> Optional[str]:
    """Suffix of the first install-* class on the block."""
    for css_class in block.get("class", []):
        if css_class.startswith(PLATFORM_CLASS_PREFIX):
            return css_class[len(PLATFORM_CLASS_PREFIX):]
    return None
