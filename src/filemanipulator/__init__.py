"""filemanipulator — per-field batch editing of tab-separated text files.

Reads a file line by line, applies an ordered plan of field commands and
prints only the lines that changed.
"""

from filemanipulator.version import __version__

__all__: list[str] = ["__version__"]
