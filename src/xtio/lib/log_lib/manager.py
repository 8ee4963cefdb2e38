"""
OutputManager — the severity-tagged logging core.

Every entry point (log, warn, dev, err, debug, report) builds a fresh
OutputBuffer from the severity table, inspects its arguments, and writes
the rendered result to the sink in a single write. Nothing is returned to
the caller; all effects are observable only on the sink.

Configuration is explicit: an OutputConfig carries the sink, the
debugging flag, the color switch, the style table and the inspection
depth. Build one at startup and hand it to whatever needs to log.

    ←── always ──────────────────────────────── gated ──→
    log  warn  dev  err  report                   debug
                                       (config.debugging)
"""

import sys
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, TextIO

from .buffer import OutputBuffer
from .inspector import DEFAULT_MAX_DEPTH, inspect
from .severity import SEVERITY_STYLES, Severity, SeverityStyle


DEFAULT_REPORT_TITLE = "reported content"
DEFAULT_REPORT_DESCRIPTION = "auto-generated report"

# Report values stay on their key's line however wide they get.
REPORT_VALUE_WIDTH = sys.maxsize


@dataclass
class OutputConfig:
    """Process-wide output settings, built once and injected.

    Attributes:
        file: Sink receiving rendered output (default: stdout at write time)
        debugging: When False, debug() produces no output at all
        color: When False, output is plain text without ANSI codes
        styles: Severity -> (color, prefix) table
        max_depth: Nesting depth used when inspecting structured values
    """
    file: Optional[TextIO] = None
    debugging: bool = False
    color: bool = True
    styles: Mapping[Severity, SeverityStyle] = field(
        default_factory=lambda: SEVERITY_STYLES)
    max_depth: int = DEFAULT_MAX_DEPTH


class OutputManager:
    """Central coordinator for severity-tagged output.

    Usage::

        out = OutputManager(OutputConfig(debugging=True))
        out.log("loaded", 3, "extensions")
        out.warn(err)
        out.debug({"query": q})
        out.report({"host": "db1", "port": 5432}, "connection")
    """

    def __init__(self, config: Optional[OutputConfig] = None):
        self.config = config if config is not None else OutputConfig()

    # -- sink -------------------------------------------------------------

    def out(self) -> TextIO:
        """Return the sink. Resolved lazily so captured stdout is honored."""
        return self.config.file if self.config.file is not None else sys.stdout

    def buff(self, severity: Optional[Severity] = None,
             separator: str = " ") -> OutputBuffer:
        """Return a new buffer, styled for ``severity`` when given.

        Log calls may run back-to-back, so a buffer is never reused.
        """
        if severity is None:
            return OutputBuffer.create(separator=separator,
                                       colorize_output=self.config.color)
        return OutputBuffer.for_severity(severity, self.config.styles,
                                         separator=separator,
                                         colorize_output=self.config.color)

    def _write(self, text: str) -> None:
        self.out().write(text + "\n")

    def _console(self, buffer: OutputBuffer, args) -> None:
        if not args:
            return
        for text in inspect(*args, max_depth=self.config.max_depth):
            buffer.push(text)
        self._write(buffer.flush())

    # -- severities -------------------------------------------------------

    def emit(self, severity: Severity, *args: Any) -> None:
        """Write ``args`` at ``severity``. REPORT is not valid here."""
        if severity is Severity.REPORT:
            raise ValueError("Use report() for REPORT severity")
        if severity is Severity.DEBUG and not self.config.debugging:
            return
        self._console(self.buff(severity), args)

    def log(self, *args: Any) -> None:
        """General output. Non-string arguments are inspected."""
        self.emit(Severity.LOG, *args)

    def warn(self, *args: Any) -> None:
        self.emit(Severity.WARN, *args)

    def dev(self, *args: Any) -> None:
        self.emit(Severity.DEV, *args)

    def err(self, *args: Any) -> None:
        self.emit(Severity.ERROR, *args)

    def debug(self, *args: Any) -> None:
        """Diagnostic output, silent unless ``config.debugging`` is set."""
        self.emit(Severity.DEBUG, *args)

    def report(self, data: Optional[Mapping[str, Any]],
               title: Optional[str] = DEFAULT_REPORT_TITLE,
               description: Optional[str] = DEFAULT_REPORT_DESCRIPTION) -> None:
        """Write a bordered block of key/value pairs.

        Layout::

            <blank>
            -- <title>
            <description>
              key: value        (pairs whose value is None are skipped)
            <border>            ('-' * len(title))
        """
        title = title or DEFAULT_REPORT_TITLE
        description = description or DEFAULT_REPORT_DESCRIPTION
        buffer = self.buff(Severity.REPORT, separator="\n")
        buffer.push("").push(f"-- {title}").push(description)
        for key, value in (data or {}).items():
            if value is None:
                continue
            buffer.push("  {key}: {value}".format(
                key=key, value=inspect(value, max_depth=self.config.max_depth,
                                       max_width=REPORT_VALUE_WIDTH)[0]))
        buffer.push("-" * len(title))
        self._write(buffer.flush())

    @property
    def debugging(self) -> bool:
        return self.config.debugging


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(debugging: bool = False, color: bool = True,
                file: Optional[TextIO] = None,
                max_depth: int = DEFAULT_MAX_DEPTH,
                config: Optional[OutputConfig] = None) -> OutputManager:
    """Initialize the module-level OutputManager singleton.

    Call once at program startup after configuration is resolved. Pass
    a ready OutputConfig, or the individual settings to build one.

    Returns:
        The initialized OutputManager instance
    """
    global _manager

    if config is None:
        config = OutputConfig(file=file, debugging=debugging,
                              color=color, max_depth=max_depth)
    _manager = OutputManager(config)
    return _manager


def get_output() -> OutputManager:
    """Get the module-level OutputManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
