"""Run options for sweep-dir."""

from dataclasses import dataclass
from typing import List, Optional

DEFAULT_DIRECTORY = "."


@dataclass
class ScanOptions:
    """Settings for a single scan, built from the command line"""

    directory: str = DEFAULT_DIRECTORY
    include_hidden: bool = False
    verbose: bool = False


def resolve_options(tokens: Optional[List[str]] = None,
                    include_hidden: bool = False,
                    verbose: bool = False) -> ScanOptions:
    """Build ScanOptions from the leftover command-line tokens.

    Every token names the directory; when several are given the last one wins.
    """
    directory = tokens[-1] if tokens else DEFAULT_DIRECTORY
    return ScanOptions(directory=directory, include_hidden=include_hidden, verbose=verbose)
