"""Reading and writing of semicolon-separated record files."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from os import PathLike
from typing import Optional, Union

DELIMITER = ";"
# A field plus its delimiter is cut to this many characters when written.
FIELD_LIMIT = 199
# A written line (without its newline) never reaches this many characters.
LINE_LIMIT = 20000

_log = logging.getLogger(__name__)

PathType = Union[str, "PathLike[str]"]


class CsvWriteError(OSError):
    """Raised when a record file cannot be written."""


def parse_line(line: str) -> list[str]:
    """Split one line into its fields.

    Empty fields are dropped, and parsing stops at a field that starts with a
    newline, so a trailing delimiter before the line end leaves no extra field.
    """
    fields = []
    for token in line.split(DELIMITER):
        if not token:
            continue
        if token.startswith("\n"):
            break
        fields.append(token)
    return fields


def parse_csv_file(path: PathType) -> list[list[str]]:
    """Read every line of a record file into a list of field lists.

    Raises OSError if the file cannot be opened.
    """
    with open(path, encoding="utf-8") as handle:
        return [parse_line(line) for line in handle]


def format_row(fields: Iterable[Optional[str]]) -> str:
    """Join fields into one line, each followed by the delimiter.

    ``None`` fields are skipped; over-long fields are cut short and a field
    that would push the line past its limit ends the line.
    """
    line = ""
    for field in fields:
        if field is None:
            continue
        piece = f"{field}{DELIMITER}"[:FIELD_LIMIT]
        if len(line) + len(piece) >= LINE_LIMIT:
            _log.warning("line too long, remaining fields dropped")
            break
        line += piece
    return line


def write_csv_file(path: PathType, rows: Iterable[Sequence[Optional[str]]]) -> None:
    """Write rows to a record file, one line per row.

    The file is opened (and truncated) first; CsvWriteError is raised if it
    cannot be opened or if there are no rows to write.
    """
    rows = list(rows)
    try:
        with open(path, "w", encoding="utf-8") as handle:
            if not rows:
                raise CsvWriteError(f"no rows to write to {path}")
            for row in rows:
                handle.write(format_row(row) + "\n")
    except CsvWriteError:
        raise
    except OSError as exc:
        raise CsvWriteError(str(exc)) from exc