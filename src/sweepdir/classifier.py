"""
Directory entry classification
Only regular files take part in grouping
"""

import os
from enum import Enum


class FileKind(Enum):
    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


def classify(entry: os.DirEntry) -> FileKind:
    """Map a directory entry to its kind without following symlinks"""
    if entry.is_symlink():
        return FileKind.SYMLINK
    if entry.is_file(follow_symlinks=False):
        return FileKind.REGULAR
    if entry.is_dir(follow_symlinks=False):
        return FileKind.DIRECTORY
    return FileKind.OTHER
