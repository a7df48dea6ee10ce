"""sweep-dir: list the files of a directory grouped by extension"""

__version__ = "0.1.0"
