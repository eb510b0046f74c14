"""
Interactive episode selection.
"""

from typing import List, Optional, Sequence

import questionary

from podcast_downloader import config
from podcast_downloader.data.models import Episode
from podcast_downloader.errors import SelectionError

# Set up logging
from podcast_downloader.logging_config import setup_logging
logger = setup_logging(__name__)


def choose_one(options: List[str], message: Optional[str] = None) -> str:
    """
    Ask the user to pick one of `options` from an arrow-key menu.

    Parameters:
    options: Menu entries, in display order
    message: Prompt text (default: config.SELECT_PROMPT)

    Returns:
    The chosen entry

    Raises:
    SelectionError: If the prompt fails or is cancelled
    """
    if message is None:
        message = config.SELECT_PROMPT

    try:
        answer = questionary.select(message, choices=options).ask()
    except Exception as e:
        logger.error(f"Episode prompt failed: {e}")
        raise SelectionError(f"Failed to get user selection: {e}") from e

    # ask() returns None when the prompt is cancelled with Ctrl-C
    if answer is None:
        raise SelectionError("Failed to get user selection")
    return answer


def build_options(episodes: Sequence[Episode]) -> List[str]:
    """Numbered menu labels, starting at 1."""
    return [episode.label(index) for index, episode in enumerate(episodes, 1)]


def find_selected_episode(episodes: Sequence[Episode], selection: str) -> Episode:
    """
    Map a chosen menu label back to its episode.

    Returns the first episode whose title appears in `selection`.

    Raises:
    SelectionError: If no episode title matches
    """
    for episode in episodes:
        if episode.title in selection:
            return episode
    raise SelectionError(f"Could not find selected episode: {selection!r}")
