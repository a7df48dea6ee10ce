import logging
from typing import Dict, Iterable, List

from .scanner import ScannedFile

logger = logging.getLogger(__name__)

ExtensionIndex = Dict[str, List[str]]


def build_index(scanned: Iterable[ScannedFile]) -> ExtensionIndex:
    """Group scanned filenames by extension, keeping scan order within a group"""
    index: ExtensionIndex = {}
    for item in scanned:
        group = index.get(item.extension)
        if group is None:
            group = []
            index[item.extension] = group
        group.append(item.name)

    logger.debug(f"Built index with {len(index)} extensions")
    return index
