"""
Utility Functions
Prepare status text the way it is signed and sent.
"""
import unicodedata

MAX_STATUS_LENGTH = 280


def prepare_status(text: str, max_length: int = MAX_STATUS_LENGTH) -> str:
    """
    Normalize status text and check it can be posted.

    Surrounding whitespace is stripped and the text is NFC-normalized, so the
    length is counted on the same characters that get percent-encoded and
    signed. Control characters other than newline are rejected.

    Args:
        text: Raw status text
        max_length: Maximum allowed length in characters

    Returns:
        The text to post

    Raises:
        ValueError: if the text is empty, too long or holds control characters
    """
    status = unicodedata.normalize('NFC', text.strip())
    if not status:
        raise ValueError("status text is empty")
    if len(status) > max_length:
        raise ValueError(f"status text is {len(status)} characters, limit is {max_length}")
    for char in status:
        if char != '\n' and unicodedata.category(char) == 'Cc':
            raise ValueError(f"status text contains control character {char!r}")
    return status
