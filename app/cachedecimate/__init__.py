"""cache-decimate - Disk-space guardian for file cache directories.

Evicts the least-recently-accessed files of a cache directory when the
volume hosting it runs low on free space.
"""

__version__ = "0.1.0"
