"""
Download utility functions.
"""

# Characters that are not allowed in filenames on common filesystems
INVALID_FILENAME_CHARS = '/\\:*?"<>|'


def sanitize_filename(filename: str) -> str:
    """
    Replace characters that are invalid in filenames with '-'.

    Every other character, including non-ASCII text, is kept as-is.
    Leading and trailing whitespace is removed afterwards.

    Parameters:
    filename: Original filename, usually an episode title

    Returns:
    Sanitized filename safe for filesystem use

    Example:
        >>> sanitize_filename("test*file?")
        'test-file-'
    """
    for char in INVALID_FILENAME_CHARS:
        filename = filename.replace(char, '-')
    return filename.strip()


def get_extension_from_url(url: str) -> str:
    """
    Guess a file extension from a media URL.

    The query string is dropped and the text after the last '.' is returned
    in lower case. A URL without any '.' yields the whole (query-stripped)
    URL, e.g. 'http://example/podcast'.

    Parameters:
    url: Media URL

    Returns:
    Lower-cased extension without the leading dot
    """
    path = url.split('?', 1)[0]
    return path.split('.')[-1].lower()
