"""
Directory scanner for sweep-dir
Lists the immediate regular files of one directory with their extensions
"""

import os
import logging
from dataclasses import dataclass
from typing import List

from .classifier import FileKind, classify
from .errors import DirectoryOpenError, IterationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScannedFile:
    """A regular file found by the scanner"""

    name: str
    extension: str


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def extension_of(name: str) -> str:
    """Return the suffix starting at the last dot, or "" when there is none.

    A dot in the first position does not mark an extension, so ".bashrc"
    has no extension while "archive.tar.gz" has ".gz".
    """
    index = name.rfind(".")
    if index <= 0:
        return ""
    return name[index:]


def _reason(error: OSError) -> str:
    return error.strerror or error.__class__.__name__


def scan(directory: str, include_hidden: bool = False) -> List[ScannedFile]:
    """Scan one directory level and return its qualifying regular files.

    Args:
        directory: Path of the directory to scan
        include_hidden: Keep files whose name starts with a dot

    Returns:
        The scanned files in the order the OS listed them

    Raises:
        DirectoryOpenError: The directory could not be opened
        IterationError: Listing failed part way through
    """
    try:
        handle = os.scandir(directory)
    except OSError as e:
        logger.debug(f"scandir({directory!r}) failed: {e}")
        raise DirectoryOpenError(str(directory), _reason(e)) from e

    files = []
    skipped = 0
    with handle:
        try:
            for entry in handle:
                kind = classify(entry)
                if kind is not FileKind.REGULAR:
                    logger.debug(f"Skipping {entry.name} ({kind.value})")
                    skipped += 1
                    continue
                if is_hidden(entry.name) and not include_hidden:
                    logger.debug(f"Skipping hidden file {entry.name}")
                    skipped += 1
                    continue
                files.append(ScannedFile(entry.name, extension_of(entry.name)))
        except OSError as e:
            logger.debug(f"Iteration of {directory!r} failed: {e}")
            raise IterationError(str(directory), _reason(e)) from e

    logger.info(f"Scanned {directory}: {len(files)} files kept, {skipped} entries skipped")
    return files
