"""Lookup page retrieval for how-install."""

import logging
from typing import Optional

import requests

from howinstall.config import HowInstallConfig

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetches the install page for a command.
    
    HTTP and connection errors are not handled here; they propagate as
    ``requests.RequestException`` and end the run.
    
    Example:
        fetcher = PageFetcher(config)
        html = fetcher.fetch("curl")
    """
    
    def __init__(
        self,
        config: Optional[HowInstallConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the fetcher.
        
        Args:
            config: Configuration; defaults are used if not provided.
            session: Optional requests session to reuse.
        """
        self.config = config or HowInstallConfig()
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = self.config.user_agent
    
    def fetch(self, command: str) -> str:
        """Download the install page for a command.
        
        Args:
            command: Command name to look up.
            
        Returns:
            Page HTML.
            
        Raises:
            requests.RequestException: On connection failure or HTTP error status.
        """
        url = self.config.page_url(command)
        logger.info("Fetching %s", url)
        
        response = self.session.get(url, timeout=self.config.request_timeout)
        response.raise_for_status()
        
        logger.debug("Fetched %d bytes from %s", len(response.content), url)
        return response.text
