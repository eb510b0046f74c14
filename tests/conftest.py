"""
Shared test fixtures.

Provides:
- Sample RSS documents
- Fake requests responses for the feed and for media streams
"""

from unittest.mock import MagicMock

import pytest
import requests


SAMPLE_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Cozy Up</title>
    <link>https://example.com/</link>
    <description>A sample podcast</description>
    <item>
      <title>Episode 3: The Finale</title>
      <enclosure url="https://cdn.example.com/ep3.mp3" length="3000" type="audio/mpeg"/>
    </item>
    <item>
      <title>Bonus: No Audio</title>
      <link>https://example.com/bonus</link>
    </item>
    <item>
      <enclosure url="https://cdn.example.com/untitled.mp3" length="100" type="audio/mpeg"/>
    </item>
    <item>
      <title>Episode 2: The Middle</title>
      <enclosure url="https://cdn.example.com/ep2.m4a?token=abc" length="2000" type="audio/mp4"/>
    </item>
    <item>
      <title>Episode 1: Pilot</title>
      <enclosure url="https://cdn.example.com/ep1.mp3" length="1000" type="audio/mpeg"/>
    </item>
  </channel>
</rss>
"""


def make_feed_response(content: bytes = SAMPLE_FEED) -> MagicMock:
    """Fake response for a feed GET."""
    response = MagicMock()
    response.content = content
    response.raise_for_status.return_value = None
    return response


def make_media_response(chunks, content_length=None) -> MagicMock:
    """
    Fake streaming response yielding `chunks` from iter_content().

    content_length defaults to the total size of the chunks; pass False to
    omit the Content-Length header.
    """
    response = MagicMock()
    response.raise_for_status.return_value = None
    if content_length is None:
        content_length = sum(len(chunk) for chunk in chunks)
    response.headers = {} if content_length is False else {'Content-Length': str(content_length)}
    response.iter_content.return_value = iter(chunks)
    return response


def make_http_error_response(status: int = 404) -> MagicMock:
    response = MagicMock()
    response.raise_for_status.side_effect = requests.HTTPError(f"{status} Client Error")
    return response


@pytest.fixture
def sample_feed() -> bytes:
    return SAMPLE_FEED


@pytest.fixture
def downloads_dir(tmp_path):
    """Downloads folder path inside a temporary directory (not created)."""
    return tmp_path / 'podcast-downloads'


@pytest.fixture
def feed_response():
    return make_feed_response


@pytest.fixture
def media_response():
    return make_media_response


@pytest.fixture
def http_error_response():
    return make_http_error_response
