from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from ..models import RoomAttribute


class AttributeSource(Protocol):
    name: str

    def read_attributes(self) -> Iterable[RoomAttribute]: ...


class RoomRecordSource(Protocol):
    name: str

    def read_records(self) -> Iterable[tuple[int, Sequence[str]]]:
        """Yield (line number, record) for every data record, header excluded."""
        ...
