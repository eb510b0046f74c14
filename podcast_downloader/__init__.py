"""
Podcast Downloader - Download podcast episodes from RSS feeds.

This package provides functionality to:
- Fetch an RSS feed and list its most recent episodes
- Let the user pick an episode from an interactive menu
- Download the episode's media file with a progress bar
"""

__version__ = '0.1.0'

# Import config
from podcast_downloader import config

# Import errors
from podcast_downloader.errors import (
    PodcastDownloaderError,
    NetworkError,
    FeedParseError,
    StorageError,
    SelectionError
)

# Import data modules
from podcast_downloader.data.models import Episode
from podcast_downloader.data.collection import fetch_episodes, parse_episodes, get_rss_content

# Import download modules
from podcast_downloader.download.utils import sanitize_filename, get_extension_from_url
from podcast_downloader.download.downloader import download_episode, get_episode_file_path
from podcast_downloader.download.progress import TqdmProgress

# Import selection
from podcast_downloader.selection import choose_one, build_options, find_selected_episode

# Import logging configuration
from podcast_downloader.logging_config import (
    setup_logging,
    get_logger,
    configure_logging
)

__all__ = [
    # Config
    'config',
    # Errors
    'PodcastDownloaderError',
    'NetworkError',
    'FeedParseError',
    'StorageError',
    'SelectionError',
    # Data
    'Episode',
    'fetch_episodes',
    'parse_episodes',
    'get_rss_content',
    # Download
    'sanitize_filename',
    'get_extension_from_url',
    'download_episode',
    'get_episode_file_path',
    'TqdmProgress',
    # Selection
    'choose_one',
    'build_options',
    'find_selected_episode',
    # Logging
    'setup_logging',
    'get_logger',
    'configure_logging',
]
