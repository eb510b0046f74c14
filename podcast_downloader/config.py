"""
Configuration constants for Podcast Downloader.
"""

# Feed Configuration
FEED_URL = 'https://omny.fm/shows/cozy-up/playlists/doctor.rss'
DEFAULT_EPISODE_LIMIT = 10  # Number of episodes listed when -n/--limit is omitted

# Download Configuration
DOWNLOADS_FOLDER = 'podcast-downloads'
CHUNK_SIZE = 8192

# Selection Prompt
SELECT_PROMPT = 'Select an episode to download:'

# Logging Configuration
LOG_LEVEL = 'WARNING'  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_FILE = None  # Set to a file path to enable file logging, None for console only
