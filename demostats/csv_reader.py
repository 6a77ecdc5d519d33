"""Reading demography records from comma separated files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from itertools import islice
from typing import BinaryIO, Iterator

from .errors import DemographyError, ErrorCode
from .records import DemographyRecord

DELIMITER = ","
MAX_LINE_LENGTH = 1024
FIELD_COUNT = 7

_C_WHITESPACE = " \t\n\v\f\r"
_LEADING_SPACE = r"[ \t\n\v\f\r]*"
_INT_RE = re.compile(_LEADING_SPACE + r"([+-]?\d+)")
_FLOAT_RE = re.compile(
    _LEADING_SPACE
    + r"(?:"
    + r"(?P<hex>[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)"
    + r"|(?P<dec>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)"
    + r"|(?P<special>[+-]?(?:inf(?:inity)?|nan))"
    + r")",
    re.IGNORECASE,
)


@dataclass
class LoadResult:
    """Records read from a file together with line counts.

    ``status`` is the outcome of the last data line read.
    """

    records: list[DemographyRecord] = field(default_factory=list)
    total_rows: int = 0
    error_rows: int = 0
    status: ErrorCode = ErrorCode.OK

    @property
    def valid_rows(self) -> int:
        return len(self.records)


def trim_whitespace(text):
    """Strip the ASCII whitespace characters from both ends of ``text``."""
    return text.strip(_C_WHITESPACE)


def split_line(line):
    """Split ``line`` on commas, dropping empty fields, keeping at most seven."""
    tokens = (token for token in line.split(DELIMITER) if token)
    return list(islice(tokens, FIELD_COUNT))


def _invalid(message: str) -> DemographyError:
    return DemographyError(ErrorCode.INVALID_DATA_ERROR, message)


def _parse_int(token: str) -> int:
    match = _INT_RE.match(token)
    if match is None:
        raise _invalid(f"not an integer: {token!r}")
    return int(match.group(1))


def _parse_float(token: str) -> float:
    match = _FLOAT_RE.match(token)
    if match is None:
        raise _invalid(f"not a number: {token!r}")
    if match.group("hex") is not None:
        return float.fromhex(match.group("hex"))
    return float(match.group("dec") or match.group("special"))


def parse_line(line):
    """Parse one data line into a record, raising DemographyError if it is malformed."""
    tokens = split_line(line)
    if len(tokens) != FIELD_COUNT:
        raise _invalid(f"expected {FIELD_COUNT} fields, got {len(tokens)}")
    year_token, region_token, *rate_tokens = tokens
    year = _parse_int(year_token)
    region = trim_whitespace(region_token)
    rates = [_parse_float(token) for token in rate_tokens]
    return DemographyRecord(year, region, *rates)


def _read_chunks(stream: BinaryIO) -> Iterator[bytes]:
    """Yield lines of at most MAX_LINE_LENGTH - 1 bytes; longer lines come in pieces."""
    while chunk := stream.readline(MAX_LINE_LENGTH - 1):
        yield chunk


def read_demography_data(path):
    """Read the file at ``path``, skipping its header line."""
    try:
        stream = open(os.fspath(path), "rb")
    except OSError as exc:
        raise DemographyError(ErrorCode.FILE_OPEN_ERROR, "Error opening file.") from exc

    result = LoadResult()
    with stream:
        chunks = _read_chunks(stream)
        if next(chunks, None) is not None:
            result.total_rows += 1

        for chunk in chunks:
            result.total_rows += 1
            if len(chunk) == MAX_LINE_LENGTH - 1 and not chunk.endswith(b"\n"):
                result.error_rows += 1
                result.status = ErrorCode.INVALID_DATA_ERROR
                continue
            try:
                record = parse_line(chunk.decode("utf-8", errors="replace"))
            except DemographyError as exc:
                result.error_rows += 1
                result.status = exc.code
            else:
                result.records.append(record)
                result.status = ErrorCode.OK
    return result