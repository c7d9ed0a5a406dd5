"""Output errors."""


class OutputError(Exception):
    """Output directory or file cannot be written."""
    pass


class OutputDirectoryError(OutputError):
    """Output directory cannot be created."""
    pass


class OutputWriteError(OutputError):
    """ROM list, CSV or JSON file cannot be written."""
    pass
