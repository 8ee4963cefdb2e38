"""Process-wide output and filesystem shortcuts for xtio.

Module-level log(), warn(), dev(), err(), debug() and report() forward to
the OutputManager singleton, so call sites can log without holding a
manager. Filesystem helpers are pulled into the same namespace and bound
to a FileSystem that shares that singleton.

Also re-exports the log_lib and fs_lib public API for convenience imports.
"""

from typing import Optional

# Re-export log_lib and fs_lib public API for commands
from xtio.lib.log_lib import (                       # noqa: F401
    OutputManager, OutputConfig, OutputBuffer, Severity,
    init_output, get_output, trace,
)
from xtio.lib.fs_lib import (                        # noqa: F401
    FileSystem, ErrorPolicy, FileSystemError, FsResult,
    by_line, normalize, reduce, shorten,
)


def log(*args):
    """General output, grey with a <<LOG>> prefix."""
    get_output().log(*args)


def warn(*args):
    get_output().warn(*args)


def dev(*args):
    get_output().dev(*args)


def err(*args):
    get_output().err(*args)


def debug(*args):
    """Debug output, only shown when debugging is enabled."""
    get_output().debug(*args)


def report(data, title=None, description=None):
    """Write a bordered key/value report block."""
    get_output().report(data, title, description)


# =============================================================================
# Filesystem singleton
# =============================================================================

_filesystem: Optional[FileSystem] = None


def init_filesystem(policy: ErrorPolicy = ErrorPolicy.SUPPRESS_AND_LOG,
                    base_path: Optional[str] = None) -> FileSystem:
    """Initialize the module-level FileSystem.

    The instance warns through whatever OutputManager singleton is
    current when a failure happens.
    """
    global _filesystem
    _filesystem = FileSystem(policy=policy, base_path=base_path)
    return _filesystem


def get_filesystem() -> FileSystem:
    """Get the module-level FileSystem, creating a default if needed."""
    global _filesystem
    if _filesystem is None:
        _filesystem = FileSystem()
    return _filesystem


async def list_files(path, extension=None):
    return await get_filesystem().list_files(path, extension)


async def read_file(path, filename=None, callback=None):
    return await get_filesystem().read_file(path, filename, callback)
