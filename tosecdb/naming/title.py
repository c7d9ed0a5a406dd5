"""Title and version flag extraction from the title segment."""

import re
from typing import Optional, Tuple

# 'v1.0', 'V2', 'Rev1', 'rev.2b' ...
VERSION_PATTERN = re.compile(r'^(?:[vV]|[Rr][Ee][Vv])[.0-9]')


def is_version(word: str) -> bool:
    """Check if a title word is a version flag."""
    return VERSION_PATTERN.match(word) is not None


def classify_title(segment: str) -> Tuple[str, str]:
    """
    Split the title segment into title and version flag.

    Words are whitespace separated. The last word shaped like a version
    becomes the version flag; every other word stays in the title, in order.

    Args:
        segment: Text of the ROM name before the first '('

    Returns:
        (title, version_flag), either possibly empty
    """
    words = []
    version: Optional[str] = None

    for word in segment.split():
        if is_version(word):
            version = word
        else:
            words.append(word)

    return ' '.join(words), version or ""
