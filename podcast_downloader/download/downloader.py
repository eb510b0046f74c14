"""
Episode download functions.
"""

import traceback
from pathlib import Path
from typing import Callable, Optional

import requests

from podcast_downloader import config
from podcast_downloader.data.models import Episode
from podcast_downloader.download.utils import sanitize_filename, get_extension_from_url
from podcast_downloader.errors import NetworkError, StorageError

# Set up logging
from podcast_downloader.logging_config import setup_logging
logger = setup_logging(__name__)

ProgressCallback = Callable[[int, int], None]

# Ask for the body as-is so the bytes written match Content-Length
MEDIA_REQUEST_HEADERS = {'Accept-Encoding': 'identity'}


def _ensure_downloads_folder(downloads_folder: str) -> Path:
    """
    Create the downloads folder (and missing parents) if it doesn't exist.

    Raises:
    StorageError: If the folder cannot be created
    """
    folder = Path(downloads_folder)
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create downloads folder '{downloads_folder}': {e}")
        logger.debug(traceback.format_exc())
        raise StorageError(f"Failed to create download directory '{downloads_folder}': {e}") from e
    return folder


def get_episode_file_path(episode: Episode, downloads_folder: Optional[str] = None) -> Path:
    """
    Compute where an episode will be saved: <folder>/<sanitized title>.<extension>.
    """
    if downloads_folder is None:
        downloads_folder = config.DOWNLOADS_FOLDER
    filename = sanitize_filename(episode.title)
    extension = get_extension_from_url(episode.media_url)
    return Path(downloads_folder) / f"{filename}.{extension}"


def _get_content_length(response: requests.Response) -> int:
    content_length = response.headers.get('Content-Length')
    try:
        return int(content_length)
    except (TypeError, ValueError):
        raise NetworkError("Failed to get content length: unknown content length") from None


def download_episode(
    episode: Episode,
    downloads_folder: Optional[str] = None,
    on_progress: Optional[ProgressCallback] = None,
    chunk_size: Optional[int] = None
) -> Path:
    """
    Download an episode's media file with progress reporting.

    The response is streamed in fixed-size chunks. After each chunk is
    written, ``on_progress(bytes_downloaded, total_size)`` is called. An
    existing file with the same name is overwritten. If the download fails
    part way, the partial file is left on disk.

    Parameters:
    episode: Episode to download
    downloads_folder: Folder to save downloads (default: config.DOWNLOADS_FOLDER)
    on_progress: Optional callback receiving (bytes_downloaded, total_size)
    chunk_size: Read size in bytes (default: config.CHUNK_SIZE)

    Returns:
    Path of the written file

    Raises:
    NetworkError: If the request fails, the stream breaks, or the server
        sends no Content-Length
    StorageError: If the folder or file cannot be created or written
    """
    if downloads_folder is None:
        downloads_folder = config.DOWNLOADS_FOLDER
    if chunk_size is None:
        chunk_size = config.CHUNK_SIZE

    _ensure_downloads_folder(downloads_folder)
    file_path = get_episode_file_path(episode, downloads_folder)

    try:
        logger.debug(f"Requesting {episode.media_url}")
        response = requests.get(episode.media_url, stream=True, headers=MEDIA_REQUEST_HEADERS)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Failed to start download of {episode.media_url}: {e}")
        logger.debug(traceback.format_exc())
        raise NetworkError(f"Failed to start download: {e}") from e

    with response:
        total_size = _get_content_length(response)
        logger.info(f"Downloading {total_size:,} bytes to {file_path}")

        try:
            f = open(file_path, 'wb')
        except OSError as e:
            logger.error(f"Failed to create output file '{file_path}': {e}")
            logger.debug(traceback.format_exc())
            raise StorageError(f"Failed to create output file '{file_path}': {e}") from e

        downloaded = 0
        with f:
            chunks = response.iter_content(chunk_size=chunk_size)
            while True:
                try:
                    chunk = next(chunks, b'')
                except requests.RequestException as e:
                    logger.error(f"Failed to read download chunk from {episode.media_url}: {e}")
                    logger.debug(traceback.format_exc())
                    raise NetworkError(f"Failed to read download chunk: {e}") from e

                if not chunk:
                    break

                try:
                    f.write(chunk)
                except OSError as e:
                    logger.error(f"File system error writing {file_path}: {e}")
                    logger.debug(traceback.format_exc())
                    raise StorageError(f"Failed to write to file '{file_path}': {e}") from e

                downloaded += len(chunk)
                if on_progress is not None:
                    on_progress(downloaded, total_size)

    logger.info(f"Successfully downloaded {episode.media_url} to {file_path}")
    return file_path
