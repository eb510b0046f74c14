"""
Exceptions raised by Podcast Downloader.

Every failure is fatal to the current run: operations wrap the underlying
library exception in one of these classes with a readable message, and the
CLI reports it and exits with a nonzero status.
"""


class PodcastDownloaderError(Exception):
    """Base class for all Podcast Downloader errors."""
    pass


class NetworkError(PodcastDownloaderError):
    """Raised when a request cannot be sent, read, or lacks a content length."""
    pass


class FeedParseError(PodcastDownloaderError):
    """Raised when the feed body is not a well-formed RSS document."""
    pass


class StorageError(PodcastDownloaderError):
    """Raised when the download directory or output file cannot be written."""
    pass


class SelectionError(PodcastDownloaderError):
    """Raised when the episode prompt fails or its answer matches no episode."""
    pass
