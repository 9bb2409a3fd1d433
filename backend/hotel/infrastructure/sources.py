from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Iterator, List

from ..domain.errors import SourceOpenError, SourceReadError
from ..domain.repositories import AttributeSource, RoomRecordSource
from ..domain.services import parse_attribute_lines
from ..models import RoomAttribute

QUOTE = '"'


class FileAttributeSource(AttributeSource):
    def __init__(self, path: str | Path, *, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    @property
    def name(self) -> str:
        return str(self.path)

    def read_attributes(self) -> List[RoomAttribute]:
        try:
            fh = self.path.open(encoding=self.encoding)
        except OSError as exc:
            raise SourceOpenError(f"attributes load err: {exc}", path=self.path) from exc
        with fh:
            try:
                return list(parse_attribute_lines(fh))
            except (OSError, UnicodeDecodeError) as exc:
                raise SourceReadError(f"attributes load err [fatal]: {self.path}: {exc}", path=self.path) from exc


class _LineRecorder:
    """Iterates a text file and keeps the raw lines consumed since the last `take`."""

    def __init__(self, fh: Iterable[str]) -> None:
        self._lines = iter(fh)
        self._pending: List[str] = []

    def __iter__(self) -> "_LineRecorder":
        return self

    def __next__(self) -> str:
        line = next(self._lines)
        self._pending.append(line)
        return line

    def take(self) -> str:
        raw = "".join(self._pending)
        self._pending.clear()
        return raw


def find_bare_quote(raw: str) -> int | None:
    """
    Return the offset of the first quote that appears inside a non-quoted
    field of `raw`, or None. A quote is only legal as the first character of
    a field, or doubled inside a quoted field.
    """
    in_quotes = False
    field_start = True
    i = 0
    while i < len(raw):
        ch = raw[i]
        if in_quotes:
            if ch == QUOTE:
                if raw.startswith(QUOTE, i + 1):
                    i += 2
                    continue
                in_quotes = False
        elif ch == QUOTE:
            if not field_start:
                return i
            in_quotes = True
        field_start = not in_quotes and ch in ",\r\n"
        i += 1
    return None


class CsvRoomSource(RoomRecordSource):
    """
    Comma-separated room list. The first record is the header; every later
    record must have the same number of fields as the header, and blank lines
    are ignored. Structural problems, including a quote inside a non-quoted
    field, are raised as SourceReadError.
    """

    def __init__(self, path: str | Path, *, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    @property
    def name(self) -> str:
        return str(self.path)

    def read_records(self) -> Iterator[tuple[int, list[str]]]:
        try:
            fh = self.path.open(encoding=self.encoding, newline="")
        except OSError as exc:
            raise SourceOpenError(f"rooms load err: {exc}", path=self.path) from exc
        with fh:
            lines = _LineRecorder(fh)
            reader = csv.reader(lines, strict=True)
            expected_fields: int | None = None
            try:
                for record in reader:
                    raw = lines.take()
                    if not record:
                        continue
                    if find_bare_quote(raw) is not None:
                        raise SourceReadError(
                            f"load err [fatal]: {self.path}: record on line {reader.line_num}: "
                            'bare " in non-quoted field',
                            path=self.path,
                        )
                    if expected_fields is None:
                        expected_fields = len(record)
                        continue
                    if len(record) != expected_fields:
                        raise SourceReadError(
                            f"load err [fatal]: {self.path}: record on line {reader.line_num}: "
                            f"wrong number of fields (expected {expected_fields}, got {len(record)})",
                            path=self.path,
                        )
                    yield reader.line_num, record
            except (csv.Error, OSError, UnicodeDecodeError) as exc:
                raise SourceReadError(
                    f"load err [fatal]: {self.path}: line {reader.line_num}: {exc}",
                    path=self.path,
                ) from exc
