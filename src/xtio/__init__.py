"""xtio — foundation I/O layer.

Leveled, colorized, buffered logging (log, warn, dev, err, debug, report)
plus filesystem conveniences (listing, reading, path shortening).
"""

from xtio._version import __version__, __app_name__

__all__ = ["__version__", "__app_name__"]
