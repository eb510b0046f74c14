"""
Tests for interactive episode selection.
"""

from unittest.mock import patch

import pytest

from podcast_downloader.data.models import Episode
from podcast_downloader.errors import SelectionError
from podcast_downloader.selection import choose_one, build_options, find_selected_episode


EPISODES = [
    Episode("The Finale", "https://cdn.example.com/ep3.mp3"),
    Episode("The Middle", "https://cdn.example.com/ep2.mp3"),
    Episode("Pilot", "https://cdn.example.com/ep1.mp3"),
]


class TestBuildOptions:

    def test_numbered_from_one(self):
        assert build_options(EPISODES) == ["1. The Finale", "2. The Middle", "3. Pilot"]

    def test_empty(self):
        assert build_options([]) == []


class TestFindSelectedEpisode:

    def test_matches_title_in_label(self):
        assert find_selected_episode(EPISODES, "2. The Middle") is EPISODES[1]

    def test_first_substring_match_wins(self):
        episodes = [Episode("Part", "https://a/1.mp3"), Episode("Part 2", "https://a/2.mp3")]
        assert find_selected_episode(episodes, "2. Part 2") is episodes[0]

    def test_no_match_raises(self):
        with pytest.raises(SelectionError, match="Could not find selected episode"):
            find_selected_episode(EPISODES, "9. Something else")


@patch('podcast_downloader.selection.questionary.select')
class TestChooseOne:

    def test_returns_answer(self, mock_select):
        mock_select.return_value.ask.return_value = "3. Pilot"

        assert choose_one(["1. The Finale", "3. Pilot"]) == "3. Pilot"
        mock_select.assert_called_once_with(
            "Select an episode to download:", choices=["1. The Finale", "3. Pilot"]
        )

    def test_custom_message(self, mock_select):
        mock_select.return_value.ask.return_value = "a"

        choose_one(["a"], message="Pick one:")

        mock_select.assert_called_once_with("Pick one:", choices=["a"])

    def test_cancelled_prompt_raises(self, mock_select):
        mock_select.return_value.ask.return_value = None

        with pytest.raises(SelectionError, match="Failed to get user selection"):
            choose_one(["a"])

    def test_prompt_failure_raises(self, mock_select):
        mock_select.return_value.ask.side_effect = OSError("not a terminal")

        with pytest.raises(SelectionError, match="not a terminal"):
            choose_one(["a"])
