"""tldr usage notes for how-install.

Looks a command up in the tldr-pages repository so a short usage summary
can be shown before the install instruction.
"""

import logging
from typing import Optional

import requests

from howinstall.config import HowInstallConfig

logger = logging.getLogger(__name__)


class TldrClient:
    """Fetches tldr pages.
    
    Usage notes are optional output, so lookup failures are logged and
    reported as "no page" instead of raising.
    """
    
    def __init__(
        self,
        config: Optional[HowInstallConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.
        
        Args:
            config: Configuration; defaults are used if not provided.
            session: Optional requests session to reuse.
        """
        self.config = config or HowInstallConfig()
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = self.config.user_agent
    
    def page_urls(self, command: str) -> list[str]:
        """Candidate page URLs, in platform order."""
        base = self.config.tldr_base_url.rstrip("/")
        name = command.lower()
        return [f"{base}/{platform}/{name}.md" for platform in self.config.tldr_platforms]
    
    def get_page(self, command: str) -> Optional[str]:
        """Get the tldr page for a command.
        
        Args:
            command: Command name.
            
        Returns:
            Page markdown, or None if no platform has a page.
        """
        for url in self.page_urls(command):
            try:
                response = self.session.get(url, timeout=self.config.request_timeout)
            except requests.RequestException as e:
                logger.warning("tldr lookup failed for %s: %s", command, e)
                return None
            
            if response.status_code == 404:
                continue
            if not response.ok:
                logger.warning(
                    "tldr lookup for %s returned HTTP %d", command, response.status_code
                )
                return None
            
            logger.debug("Found tldr page %s", url)
            return response.text
        
        return None
