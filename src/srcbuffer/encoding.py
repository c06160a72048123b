from __future__ import annotations

import codecs
import logging
import re

from .errors import InvalidByteSequenceError, UnresolvableEncodingError


logger = logging.getLogger(__name__)

# Marker for documents declared as raw bytes; their bytes are carried over unchanged.
BINARY = "binary"

_BOM = b"\xef\xbb\xbf"

_FIRST_TWO_LINES_RE = re.compile(rb"\A(.*)\n?(.*\n)?")

_ENCODING_RE = re.compile(
    rb"""
    \#.*coding\s*[:=]\s*
    (
        # there is a dedicated UTF8-MAC alias
        (utf8-mac)
    |
        # emacs compat suffix, stripped
        ([A-Za-z0-9_-]+?)(-unix|-dos|-mac)
    |
        ([A-Za-z0-9_-]+)
    )
    """,
    re.VERBOSE,
)

_ALIASES = {
    "binary": BINARY,
    "ascii-8bit": BINARY,
    "utf8-mac": "utf-8",
}


def resolve_encoding(name: str) -> str:
    """Map an encoding name to its canonical codec name.

    Raises UnresolvableEncodingError when Python knows no such codec or the
    codec does not decode bytes to text.
    """
    alias = _ALIASES.get(name.lower())
    if alias is not None:
        return alias
    try:
        canonical = codecs.lookup(name).name
    except LookupError:
        raise UnresolvableEncodingError(encoding=name) from None
    try:
        # codecs such as base64 exist but do not decode bytes to text
        b"".decode(canonical)
    except LookupError:
        raise UnresolvableEncodingError(encoding=name) from None
    except UnicodeError:
        # a text codec that rejects input; reported when decoding
        pass
    return canonical


def recognize_encoding(text: bytes | str) -> str | None:
    """Find the encoding declared by a magic comment on the first two lines.

    Returns None for empty input or when there is no declaration.
    """
    if isinstance(text, str):
        text = text.encode("utf-8")
    if not text:
        return None

    m = _FIRST_TWO_LINES_RE.match(text)
    first_line, second_line = m.group(1), m.group(2)

    if first_line.startswith(_BOM):
        return "utf-8"
    if first_line[:2] == b"#!":
        encoding_line = second_line
    else:
        encoding_line = first_line

    if encoding_line is None:
        return None
    decl = _ENCODING_RE.search(encoding_line)
    if decl is None:
        return None

    name = (decl.group(2) or decl.group(3) or decl.group(5)).decode("ascii")
    encoding = resolve_encoding(name)
    logger.debug("magic comment declares %r (resolved to %s)", name, encoding)
    return encoding


def reencode(raw: bytes, encoding: str = "utf-8") -> str:
    """Decode raw document bytes to text.

    `encoding` is what the caller believes the bytes are in; it is used only
    when the document carries no declaration of its own.
    """
    detected = recognize_encoding(raw)
    target = resolve_encoding(encoding) if detected is None else detected
    if target == BINARY:
        # one code point per byte, so offsets stay byte offsets
        target = "latin-1"

    try:
        text = raw.decode(target)
    except UnicodeError as e:
        raise InvalidByteSequenceError(encoding=target, reason=str(e)) from e
    logger.debug("decoded %d bytes as %s", len(raw), target)
    return text
