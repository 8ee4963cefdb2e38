"""
OutputBuffer — per-call accumulator rendered once to the sink.

A buffer holds ordered text segments, one buffer-wide color and an
optional prefix label. It is never shared between log calls; each call
builds its own, flushes it and drops it.

Usage::

    b = OutputBuffer.create().set('color', 'yellow').set('prefix', '<<WARN>>')
    b.push("disk almost full").push("93%")
    b.flush()   # -> "<<WARN>> disk almost full 93%" (ANSI yellow)
"""

from typing import List, Mapping, Optional

from rich.color import ColorSystem
from rich.errors import StyleError
from rich.style import Style

from .severity import SEVERITY_STYLES, Severity, SeverityStyle, style_for


def colorize(text: str, color: Optional[str]) -> str:
    """Wrap text in the ANSI codes for a rich color name."""
    if not color or not text:
        return text
    try:
        style = Style.parse(color)
    except StyleError:
        # unknown color name, leave the line plain
        return text
    # wraps the text as is; tabs and control characters are not touched
    return style.render(text, color_system=ColorSystem.STANDARD)


class OutputBuffer:
    """Ordered, colorable, prefixable accumulator of text segments.

    Only ``color`` and ``prefix`` can be set. ``flush()`` renders the
    prefix followed by all segments, joined by ``separator``, and drains
    the segments. Flushing again without a push returns the same string.
    """

    KEYS = ('color', 'prefix')

    def __init__(self, color: Optional[str] = None,
                 prefix: Optional[str] = None,
                 separator: str = " ",
                 colorize_output: bool = True):
        self.color = color
        self.prefix = prefix
        self.separator = separator
        self.colorize_output = colorize_output
        self._segments: List[str] = []
        self._rendered: Optional[str] = None

    @classmethod
    def create(cls, **kwargs) -> "OutputBuffer":
        """Return a new, empty buffer."""
        return cls(**kwargs)

    @classmethod
    def for_severity(cls, severity: Severity,
                     styles: Mapping[Severity, SeverityStyle] = SEVERITY_STYLES,
                     **kwargs) -> "OutputBuffer":
        """Return a buffer pre-configured with a severity's color and prefix."""
        style = style_for(severity, styles)
        return cls(color=style.color, prefix=style.prefix, **kwargs)

    @property
    def segments(self) -> List[str]:
        """Copy of the pending segments."""
        return list(self._segments)

    def set(self, key: str, value: Optional[str]) -> "OutputBuffer":
        """Set ``color`` or ``prefix``. Returns self for chaining."""
        if key not in self.KEYS:
            raise KeyError(f"Unknown buffer property: {key!r}")
        setattr(self, key, value)
        self._rendered = None
        return self

    def push(self, text: str) -> "OutputBuffer":
        """Append a segment. Returns self for chaining."""
        self._segments.append(str(text))
        self._rendered = None
        return self

    def flush(self) -> str:
        """Render prefix and segments to one string and drain the segments."""
        if self._rendered is not None and not self._segments:
            return self._rendered
        parts = [self.prefix] if self.prefix else []
        parts.extend(self._segments)
        self._segments = []
        text = self.separator.join(parts)
        if self.colorize_output:
            text = colorize(text, self.color)
        self._rendered = text
        return text

    def __repr__(self):
        return (f"OutputBuffer(color={self.color!r}, prefix={self.prefix!r}, "
                f"segments={len(self._segments)})")
