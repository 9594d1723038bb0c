"""Whitespace and control-character cleanup shared by every format."""

import re

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F-\x9F]")
_HORIZONTAL_WS = re.compile(r"[^\S\n]+")
_SPACE_AROUND_NEWLINE = re.compile(r" ?\n ?")
_BLANK_LINE_RUN = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """Return ``text`` cleaned for transmission to a model.

    Control characters are dropped, runs of spaces and tabs become one space,
    consecutive blank lines collapse to a single blank line and the result
    is trimmed.
    """
    if not text:
        return ""
    cleaned = text.replace("\r\n", "\n").replace("\r", "\n")
    cleaned = _CONTROL_CHARS.sub("", cleaned)
    cleaned = _HORIZONTAL_WS.sub(" ", cleaned)
    cleaned = _SPACE_AROUND_NEWLINE.sub("\n", cleaned)
    cleaned = _BLANK_LINE_RUN.sub("\n\n", cleaned)
    return cleaned.strip()
