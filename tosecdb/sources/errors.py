"""ROM source errors."""


class SourceError(Exception):
    """ROM source errors."""
    pass


class NotReadableDirectoryError(SourceError):
    """Path is not a directory, or cannot be listed."""
    pass


class NotReadableFileError(SourceError):
    """Path is not a regular file, or cannot be read."""
    pass


class UnknownSourceError(SourceError):
    """Path is neither a ROM directory nor a datfile."""
    pass
