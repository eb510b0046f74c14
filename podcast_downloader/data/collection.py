"""
Data collection functions for fetching an RSS feed and extracting episodes.
"""

import traceback
from typing import List, Optional

import feedparser
import requests

from podcast_downloader.data.models import Episode
from podcast_downloader.errors import FeedParseError, NetworkError

# Set up logging
from podcast_downloader.logging_config import setup_logging
logger = setup_logging(__name__)

# feedparser sets bozo for these even when the document itself parsed fine
_BENIGN_BOZO_EXCEPTIONS = (
    feedparser.CharacterEncodingOverride,
    feedparser.NonXMLContentType,
)


def get_rss_content(rss_url: str) -> bytes:
    """
    Download the raw RSS feed body.

    Parameters:
    rss_url: URL of the RSS feed

    Returns:
    bytes: RSS feed content

    Raises:
    NetworkError: If the request fails or the body cannot be read
    """
    try:
        logger.debug(f"Downloading RSS feed: {rss_url}")
        response = requests.get(rss_url)
        response.raise_for_status()
        content = response.content
    except requests.RequestException as e:
        logger.error(f"Failed to download RSS feed {rss_url}: {e}")
        logger.debug(traceback.format_exc())
        raise NetworkError(f"Failed to fetch RSS feed: {e}") from e

    logger.info(f"Downloaded RSS feed: {rss_url} ({len(content):,} bytes)")
    return content


def _get_enclosure_url(entry) -> Optional[str]:
    """Return the URL of the entry's first enclosure, or None."""
    for enclosure in entry.get('enclosures', []):
        href = enclosure.get('href')
        if href:
            return href
    return None


def parse_episodes(content: bytes, limit: int) -> List[Episode]:
    """
    Parse an RSS document and extract up to `limit` episodes.

    At most `limit` raw items are considered, in document order. Items
    without a title or an enclosure URL are skipped, so the result can be
    shorter than `limit`.

    Parameters:
    content: RSS document body
    limit: Maximum number of feed items to consider

    Returns:
    List[Episode]: Episodes in feed order (possibly empty)

    Raises:
    FeedParseError: If the content is not a well-formed feed
    """
    feed = feedparser.parse(content)

    if feed.bozo and not isinstance(feed.bozo_exception, _BENIGN_BOZO_EXCEPTIONS):
        logger.error(f"Feed parsing encountered an error: {feed.bozo_exception}")
        raise FeedParseError(f"Failed to parse RSS feed: {feed.bozo_exception}")
    version = feed.get('version', '')
    if not version.startswith('rss'):
        logger.error(f"Document was not recognised as an RSS feed (format: {version or 'unknown'})")
        raise FeedParseError("Failed to parse RSS feed: not an RSS document")

    episodes = []
    for entry in feed.entries[:limit]:
        title = entry.get('title')
        media_url = _get_enclosure_url(entry)
        if not title or not media_url:
            logger.debug(f"Skipping feed item without title or enclosure: {entry.get('id', '')}")
            continue
        episodes.append(Episode(title=title, media_url=media_url))

    logger.info(f"Found {len(episodes)} episode(s) in {min(limit, len(feed.entries))} feed item(s)")
    return episodes


def fetch_episodes(url: str, limit: int) -> List[Episode]:
    """
    Fetch an RSS feed and return its most recent episodes.

    Parameters:
    url: RSS feed URL
    limit: Maximum number of feed items to consider

    Returns:
    List[Episode]: Episodes in feed order (possibly empty)

    Raises:
    NetworkError: If the feed cannot be downloaded
    FeedParseError: If the feed body is malformed

    Example:
        >>> episodes = fetch_episodes("https://feeds.example.com/podcast.rss", 10)
        >>> [episode.title for episode in episodes]
        ['Episode 12', 'Episode 11']
    """
    content = get_rss_content(url)
    return parse_episodes(content, limit)
