"""
Report rendering for sweep-dir
Groups and filenames are sorted byte-wise so the output never depends on
the order the OS listed the directory in
"""

import os
from io import StringIO
from typing import List

from .grouper import ExtensionIndex
from .options import ScanOptions

NO_FILES_MESSAGE = "No files found in the directory."


def sort_bytewise(names) -> List[str]:
    """Sort strings by their filesystem byte encoding"""
    return sorted(names, key=os.fsencode)


def display_label(extension: str) -> str:
    """Strip the leading dot of an extension; "" is shown as-is"""
    if extension.startswith("."):
        return extension[1:]
    return extension


def render_report(index: ExtensionIndex, verbose: bool = False) -> str:
    """Render the grouped listing as one block of text.

    Args:
        index: Extension to filenames mapping built by the grouper
        verbose: Append a "Total files: N" line after each group

    Returns:
        The complete report, ending with a newline
    """
    if not index:
        return f"{NO_FILES_MESSAGE}\n"

    out = StringIO()
    for extension in sort_bytewise(index):
        files = index[extension]
        out.write(f"{display_label(extension)}:\n")
        for name in sort_bytewise(files):
            out.write(f"- {name}\n")
        if verbose:
            out.write(f"Total files: {len(files)}\n")
        out.write("\n")
    return out.getvalue()


def verbose_header(options: ScanOptions) -> str:
    hidden = "true" if options.include_hidden else "false"
    return (
        f"Scanning directory: {options.directory}\n"
        f"Including hidden files: {hidden}\n"
    )
