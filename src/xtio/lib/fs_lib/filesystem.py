"""
FileSystem — convenience file I/O for extensions and objects.

Directory listing with extension filtering, path normalization and
display shortening, line splitting and best-effort file reading.

Reading operations are coroutines; the blocking primitive runs in a
worker thread via ``asyncio.to_thread``, so two outstanding calls may
complete in either order. Each comes in two flavors:

    scan_directory / load_file   strict, return an FsResult
    list_files / read_file       apply the ErrorPolicy (default: warn
                                 and return [] or "")

The pure helpers (normalize, shorten, by_line, reduce) are synchronous
and never raise on malformed input.
"""

import asyncio
import os
from typing import Callable, List, Optional

from xtio.lib.log_lib import OutputManager, get_output, trace

from .result import ErrorPolicy, FileSystemError, FsError, FsResult


DEFAULT_SHORTEN_MAX = 3

ReadCallback = Callable[[str], None]


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------
def normalize(path):
    """Resolve ``.`` and ``..`` and collapse redundant separators."""
    return os.path.normpath(path)


def shorten(path, max_slashes=DEFAULT_SHORTEN_MAX):
    """Shorten a long path to at most ``max_slashes`` slashes from the end.

    Leading segments are stripped and replaced with an ellipsis. A leading
    '/' on an absolute path is dropped without counting as a segment. The
    result is for display only and cannot be turned back into the path.

        shorten('/usr/local/lib/node/xt/io.js')  ->  '.../node/xt/io.js'
    """
    if max_slashes is None:
        max_slashes = DEFAULT_SHORTEN_MAX
    if not isinstance(path, str):
        return path

    count = path.count('/')
    if not count or count <= max_slashes:
        return path

    to_remove = count - max_slashes
    removed = 0
    rest = path
    while removed < to_remove:
        i = rest.find('/')
        if i == -1:
            break
        if i == 0:
            rest = rest[1:]
        else:
            rest = rest[i:]
            removed += 1

    return f"...{rest}"


def by_line(text) -> List[str]:
    """Split a string into lines on '\\n'. Non-strings and '' give []."""
    if not text or not isinstance(text, str):
        return []
    return text.split('\n')


def reduce(files, extension) -> List[str]:
    """Keep only filenames ending in ``extension``.

    An empty or missing ``files`` is returned as is ([] for None). A
    non-string ``extension`` filters nothing.
    """
    if not files:
        return files if files is not None else []
    if not isinstance(extension, str):
        return list(files)
    return [f for f in files
            if isinstance(f, str) and f.endswith(extension)]


@trace
def _listdir(path) -> List[str]:
    return os.listdir(path)


@trace
def _read_text(path) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------
class FileSystem:
    """Filesystem operations bound to an output manager and error policy.

    Args:
        output: OutputManager that receives warnings for masked failures.
            Defaults to the module singleton, resolved at use.
        policy: What to do when an operation fails.
        base_path: Directory everything else resolves from
            (default: working directory at construction).
    """

    normalize = staticmethod(normalize)
    shorten = staticmethod(shorten)
    by_line = staticmethod(by_line)
    reduce = staticmethod(reduce)

    def __init__(self, output: Optional[OutputManager] = None,
                 policy: ErrorPolicy = ErrorPolicy.SUPPRESS_AND_LOG,
                 base_path: Optional[str] = None):
        self._output = output
        self.policy = policy
        self.base_path = base_path if base_path is not None else os.getcwd()

    @property
    def output(self) -> OutputManager:
        return self._output if self._output is not None else get_output()

    def _settle(self, result: FsResult):
        """Apply the error policy to a strict result."""
        if result.ok:
            return result.value
        if self.policy is ErrorPolicy.RAISE:
            raise FileSystemError(result.error)
        self.output.warn(str(result.error))
        return result.value

    # -- directories ------------------------------------------------------

    async def scan_directory(self, path, extension: Optional[str] = None
                             ) -> FsResult[List[str]]:
        """List a directory, sorted by name, without masking failures."""
        try:
            path = normalize(path)
            names = await asyncio.to_thread(_listdir, path)
        except (OSError, TypeError, ValueError) as e:
            return FsResult.failure(FsError.from_exception(e, path), [])

        names = sorted(names)
        if isinstance(extension, str):
            names = reduce(names, extension)
        return FsResult.success(names)

    async def list_files(self, path, extension: Optional[str] = None
                         ) -> List[str]:
        """List filenames in ``path``, optionally only those ending in
        ``extension``. A failed read yields [] and one warning."""
        return self._settle(await self.scan_directory(path, extension))

    # -- files ------------------------------------------------------------

    async def load_file(self, path, filename: Optional[str] = None
                        ) -> FsResult[str]:
        """Read a UTF-8 file without masking failures."""
        target = path
        try:
            target = normalize(os.path.join(path, filename) if filename
                               else os.fspath(path))
            text = await asyncio.to_thread(_read_text, target)
        except (OSError, TypeError, ValueError) as e:
            return FsResult.failure(FsError.from_exception(e, target), "")
        return FsResult.success(text)

    async def read_file(self, path, filename=None,
                        callback: Optional[ReadCallback] = None) -> str:
        """Read the contents of ``path`` (or ``path``/``filename``).

        ``callback``, when given, receives the text. The two-argument form
        ``read_file(path, callback)`` is accepted. A failed read yields ""
        and one warning, so an empty file and a failure look the same.
        """
        if callback is None and callable(filename):
            callback, filename = filename, None
        text = self._settle(await self.load_file(path, filename))
        if callback is not None:
            callback(text)
        return text

    def __repr__(self):
        return (f"FileSystem(base_path={self.base_path!r}, "
                f"policy={self.policy.value})")
