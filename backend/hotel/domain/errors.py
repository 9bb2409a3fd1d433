from __future__ import annotations

from pathlib import Path
from typing import Optional


class HotelError(Exception):
    """Base class for every error raised by the room inventory."""


class InvalidDateError(HotelError, ValueError):
    pass


class RecordParseError(HotelError, ValueError):
    """A room record could not be turned into a Room."""

    def __init__(self, message: str, *, field: Optional[str] = None, value: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class SourceError(HotelError):
    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class SourceOpenError(SourceError):
    pass


class SourceReadError(SourceError):
    pass


class RoomNotFoundError(HotelError, LookupError):
    def __init__(self, room_id: int) -> None:
        super().__init__(f"room {room_id} not found")
        self.room_id = room_id
