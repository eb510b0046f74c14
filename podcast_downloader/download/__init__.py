"""
Download operations modules.
"""

from podcast_downloader.download.utils import sanitize_filename, get_extension_from_url
from podcast_downloader.download.downloader import download_episode, get_episode_file_path
from podcast_downloader.download.progress import TqdmProgress

__all__ = [
    'sanitize_filename',
    'get_extension_from_url',
    'download_episode',
    'get_episode_file_path',
    'TqdmProgress',
]
