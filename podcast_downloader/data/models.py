"""
Episode data model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Episode:
    """A feed item that can be downloaded: its title and enclosure URL."""

    title: str
    media_url: str

    def label(self, index: int) -> str:
        """Menu label shown by the episode selector, e.g. '1. Pilot'."""
        return f"{index}. {self.title}"
