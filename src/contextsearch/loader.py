from __future__ import annotations
import logging
import os
from typing import IO, Union

from .config import ENCODING, ENCODING_ERRORS

log = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", IO[str], IO[bytes]]


def _describe(source: Source) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return getattr(source, "name", None) or type(source).__name__


def _read_path(path: Union[str, "os.PathLike[str]"], encoding: str, errors: str) -> str:
    # newline="" keeps \r\n and lone \r exactly as stored on disk
    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


def _read_handle(handle: IO, encoding: str, errors: str) -> str:
    data = handle.read()
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode(encoding, errors)
    return data


def read_text(source: Source,
              encoding: str | None = None,
              errors: str | None = None) -> str:
    """
    Read the whole source into one string.
    source: a filesystem path (str / PathLike) or an open readable handle
    (text or binary). Handles are read but not closed.
    OSError (missing file, permission denied, stream fault) propagates.
    """
    enc = encoding or ENCODING
    errs = errors or ENCODING_ERRORS
    name = _describe(source)
    try:
        if isinstance(source, (str, os.PathLike)):
            text = _read_path(source, enc, errs)
        elif hasattr(source, "read"):
            text = _read_handle(source, enc, errs)
        else:
            raise TypeError(f"read_text(): expected a path or readable handle, got {type(source).__name__}")
    except OSError as exc:
        log.error("Failed to read %s: %s", name, exc)
        raise
    log.info("Loaded %s (%d characters)", name, len(text))
    return text
