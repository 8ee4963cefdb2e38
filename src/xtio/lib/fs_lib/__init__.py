"""
fs_lib — filesystem conveniences with explicit error handling.

Public API:
    FileSystem       — facade bound to an output manager and error policy
    normalize        — platform path normalization
    shorten          — display-friendly path truncation
    by_line          — split text into lines
    reduce           — filter filenames by extension
    FsResult         — value or categorized failure
    FsError          — categorized failure
    FsErrorKind      — failure categories
    ErrorPolicy      — SUPPRESS_AND_LOG or RAISE
    FileSystemError  — raised under ErrorPolicy.RAISE
"""

from .filesystem import (
    FileSystem, normalize, shorten, by_line, reduce, DEFAULT_SHORTEN_MAX,
)
from .result import (
    FsResult, FsError, FsErrorKind, ErrorPolicy, FileSystemError, categorize,
)

__all__ = [
    'FileSystem', 'normalize', 'shorten', 'by_line', 'reduce',
    'DEFAULT_SHORTEN_MAX',
    'FsResult', 'FsError', 'FsErrorKind', 'ErrorPolicy', 'FileSystemError',
    'categorize',
]
