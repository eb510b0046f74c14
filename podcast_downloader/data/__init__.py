"""
Feed data modules.
"""

from podcast_downloader.data.models import Episode
from podcast_downloader.data.collection import fetch_episodes, parse_episodes, get_rss_content

__all__ = [
    'Episode',
    'fetch_episodes',
    'parse_episodes',
    'get_rss_content',
]
