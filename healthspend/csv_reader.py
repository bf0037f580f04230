"""Line-oriented CSV reading for the spending dataset."""

from __future__ import annotations

import codecs
import io
import os
import re
from typing import Iterator, List

# Comma followed by an even number of double quotes up to end of line,
# i.e. a comma that is not inside a quoted field
_FIELD_SEPARATOR = re.compile(r',(?=(?:[^"]*"[^"]*")*[^"]*$)')

ENCODINGS_TO_TRY = ["utf-8-sig", "utf-8", "mac_roman", "latin1"]


def split_line(line: str) -> List[str]:
    """
    Split one CSV line into fields on commas outside double quotes.

    Quote characters are kept in the field text, so a quoted field such as
    '"Other Health, Residential, and Personal Care"' comes back verbatim.
    Trailing empty fields are dropped.

    Args:
        line: Raw text line, with or without its line terminator

    Returns:
        List of field strings
    """
    fields = _FIELD_SEPARATOR.split(line.rstrip("\r\n"))
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def _decodes_cleanly(path: str, encoding: str, chunk_size: int) -> bool:
    decoder = codecs.getincrementaldecoder(encoding)()
    try:
        with open(path, "rb") as fh:
            for chunk in iter(lambda: fh.read(chunk_size), b""):
                decoder.decode(chunk, final=False)
        decoder.decode(b"", final=True)
    except UnicodeDecodeError:
        return False
    return True


def detect_encoding(path: str, chunk_size: int = 65536) -> str:
    """
    Pick the first encoding that decodes the whole file.

    The file is streamed in chunks, so a stray byte deep in the file is seen
    before reading starts. latin1 decodes any byte sequence, so it is the
    effective fallback.
    """
    for encoding in ENCODINGS_TO_TRY:
        if _decodes_cleanly(path, encoding, chunk_size):
            return encoding
    return ENCODINGS_TO_TRY[-1]


def read_rows(path: str) -> Iterator[List[str]]:
    """
    Yield the split fields of every data line, skipping the header line.

    The file is opened on first iteration and closed when the generator is
    exhausted or closed, including when the consumer raises mid-loop.

    Args:
        path: CSV file path

    Raises:
        FileNotFoundError: If file doesn't exist
        IsADirectoryError: If path is a directory instead of file
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")
    if os.path.isdir(path):
        raise IsADirectoryError(f"Directory passed where a file was expected: {path}")

    encoding = detect_encoding(path)
    with io.open(path, "r", encoding=encoding) as fh:
        # Header row carries column names only
        if fh.readline() == "":
            return
        for line in fh:
            yield split_line(line)


__all__ = [
    "split_line",
    "detect_encoding",
    "read_rows",
]
