"""Error types raised by the sweep-dir pipeline."""


class SweepError(Exception):
    """Base class for every fatal sweep-dir failure"""

    operation = "sweep"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DirectoryOpenError(SweepError):
    """The target directory is missing, not a directory, or unreadable"""

    operation = "open directory"

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to open directory '{path}': {reason}")
        self.path = path
        self.reason = reason


class IterationError(SweepError):
    """Listing failed after the directory was opened"""

    operation = "list files"

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to list files in '{path}': {reason}")
        self.path = path
        self.reason = reason


class ResourceError(SweepError):
    """Memory ran out while grouping or sorting"""

    operation = "build report"

    def __init__(self, stage: str):
        super().__init__(f"Out of memory while trying to {stage}")
        self.stage = stage
