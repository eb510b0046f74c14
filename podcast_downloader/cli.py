"""
Command Line Interface for Podcast Downloader.
"""

import argparse
import sys
from typing import Callable, List, Optional

from podcast_downloader import __version__, config
from podcast_downloader import (
    fetch_episodes,
    download_episode,
    choose_one,
    build_options,
    find_selected_episode,
    TqdmProgress,
    PodcastDownloaderError,
)
from podcast_downloader.download.downloader import ProgressCallback

BANNER = r"""
╔═══════════════════════════════════════════════════════╗
║                                                       ║
║   ██████╗  ██████╗ ██████╗  ██████╗ █████╗ ███████╗   ║
║   ██╔══██╗██╔═══██╗██╔══██╗██╔════╝██╔══██╗██╔════╝   ║
║   ██████╔╝██║   ██║██║  ██║██║     ███████║███████╗   ║
║   ██╔═══╝ ██║   ██║██║  ██║██║     ██╔══██║╚════██║   ║
║   ██║     ╚██████╔╝██████╔╝╚██████╗██║  ██║███████║   ║
║   ╚═╝      ╚═════╝ ╚═════╝  ╚═════╝╚═╝  ╚═╝╚══════╝   ║
║                                                       ║
║{title:^55}║
║                                                       ║
╚═══════════════════════════════════════════════════════╝
"""


def display_banner():
    """Print the program banner."""
    print(BANNER.format(title=f"Podcast Downloader v{__version__}"))


def non_negative_int(value: str) -> int:
    """argparse type for the episode limit."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid episode count: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"episode count must be 0 or more, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='podcast-downloader',
        description='Podcast Downloader - Download podcast episodes from RSS feeds',
    )
    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'%(prog)s {__version__}',
        help='Print version'
    )
    parser.add_argument(
        '-n', '--limit',
        type=non_negative_int,
        default=config.DEFAULT_EPISODE_LIMIT,
        help=f'Number of episodes to display (default: {config.DEFAULT_EPISODE_LIMIT})'
    )
    return parser


def run(
    limit: int,
    feed_url: Optional[str] = None,
    downloads_folder: Optional[str] = None,
    chooser: Optional[Callable[[List[str]], str]] = None,
    on_progress: Optional[ProgressCallback] = None
) -> None:
    """
    Fetch the feed, let the user pick an episode, and download it.

    Parameters:
    limit: Number of feed items to list
    feed_url: RSS feed URL (default: config.FEED_URL)
    downloads_folder: Folder to save downloads (default: config.DOWNLOADS_FOLDER)
    chooser: Function picking one menu entry (default: interactive prompt)
    on_progress: Progress callback (default: tqdm progress bar)

    Raises:
    PodcastDownloaderError: On any fetch, parse, selection or download failure
    """
    if feed_url is None:
        feed_url = config.FEED_URL
    if chooser is None:
        chooser = choose_one

    print("Fetching RSS feed...\n")
    episodes = fetch_episodes(feed_url, limit)

    if not episodes:
        print("No episodes found in the feed.")
        return

    selection = chooser(build_options(episodes))
    episode = find_selected_episode(episodes, selection)

    print(f"\nDownloading: {episode.title}")

    if on_progress is None:
        with TqdmProgress() as progress:
            file_path = download_episode(episode, downloads_folder, on_progress=progress)
    else:
        file_path = download_episode(episode, downloads_folder, on_progress=on_progress)

    print(f"Saved to: {file_path}")
    print("\n✓ Download complete!")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    # Parse arguments before the banner so -v/--help print cleanly
    args = build_parser().parse_args(argv)

    display_banner()

    try:
        run(args.limit)
        return 0

    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user.", file=sys.stderr)
        return 130
    except PodcastDownloaderError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
