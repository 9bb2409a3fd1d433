from __future__ import annotations

import threading
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from .domain.errors import RecordParseError, RoomNotFoundError, SourceError
from .domain.repositories import AttributeSource, RoomRecordSource
from .domain.services import collect_rooms, merge_rooms, parse_room_record
from .infrastructure.sources import CsvRoomSource, FileAttributeSource
from .models import Room, RoomAttribute, RoomNumber, RoomSnapshot, RoomState
from .utils.correlation import correlation_scope
from .utils.load_log import emit_load_log
from .utils.rwlock import ReadWriteLock

AttributeInput = Union[str, Path, AttributeSource]
RoomInput = Union[str, Path, RoomRecordSource]


def _attribute_source(source: AttributeInput) -> AttributeSource:
    if isinstance(source, (str, Path)):
        return FileAttributeSource(source)
    return source


def _room_source(source: RoomInput) -> RoomRecordSource:
    if isinstance(source, (str, Path)):
        return CsvRoomSource(source)
    return source


class Hotel:
    """
    In-memory registry of rooms and the attribute vocabulary.

    The room mapping and vocabulary are guarded by a reader/writer lock. Loads
    parse outside that lock and merge in one exclusive step, so a failed load
    leaves the registry untouched. Whole load calls are serialized by a
    separate mutex. Rooms never leave the registry: reads return snapshots and
    mutations go through the registry by room number.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._load_lock = threading.Lock()
        self._rooms: dict[RoomNumber, Room] = {}
        self._attributes: list[RoomAttribute] = []

    @classmethod
    def from_data(
        cls,
        attribute_source: AttributeInput,
        room_source: RoomInput,
        *,
        strict: bool = False,
        strict_attributes: bool = False,
    ) -> "Hotel":
        """
        Build a Hotel from an attribute list and a room list.

        Open and read failures are always raised. Malformed room records are
        dropped unless `strict` is set, in which case the first one is raised.
        No Hotel is returned when any error occurs.
        """
        hotel = cls()
        hotel.load_attributes(attribute_source)
        hotel.load_rooms(room_source, strict=strict, strict_attributes=strict_attributes)
        return hotel

    def load_attributes(self, source: AttributeInput) -> int:
        src = _attribute_source(source)
        with self._load_lock, correlation_scope():
            try:
                attrs = list(src.read_attributes())
            except SourceError as exc:
                emit_load_log(action="attributes.load_failed", source=src.name, level="error", message=str(exc))
                raise
            with self._lock.write():
                self._attributes.extend(attrs)
            emit_load_log(action="attributes.loaded", source=src.name, count=len(attrs))
        return len(attrs)

    def load_rooms(self, source: RoomInput, *, strict: bool = False, strict_attributes: bool = False) -> int:
        """Parse every room record from `source` and merge them in. Returns the number of rooms merged."""
        src = _room_source(source)
        with self._load_lock, correlation_scope():
            vocabulary = self.attributes()
            try:
                parsed = collect_rooms(
                    self._parse_records(src, vocabulary, strict=strict, strict_attributes=strict_attributes)
                )
            except (SourceError, RecordParseError) as exc:
                emit_load_log(action="rooms.load_failed", source=src.name, level="error", message=str(exc))
                raise

            with self._lock.write():
                overwritten = merge_rooms(self._rooms, parsed)
            emit_load_log(
                action="rooms.loaded",
                source=src.name,
                count=len(parsed),
                extra={"overwritten": overwritten} if overwritten else None,
            )
        return len(parsed)

    def _parse_records(
        self,
        src: RoomRecordSource,
        vocabulary: Iterable[RoomAttribute],
        *,
        strict: bool,
        strict_attributes: bool,
    ) -> Iterator[Room]:
        for line, record in src.read_records():
            try:
                yield parse_room_record(record, vocabulary, strict_attributes=strict_attributes)
            except RecordParseError as exc:
                if strict:
                    raise RecordParseError(
                        f"load err: room parse err: {src.name}: line {line}: {exc}",
                        field=exc.field,
                        value=exc.value,
                    ) from exc
                emit_load_log(
                    action="rooms.record_skipped",
                    source=src.name,
                    level="warning",
                    line=line,
                    message=str(exc),
                )

    @property
    def num_rooms(self) -> int:
        with self._lock.read():
            return len(self._rooms)

    def __len__(self) -> int:
        return self.num_rooms

    def __contains__(self, room_id: object) -> bool:
        with self._lock.read():
            return room_id in self._rooms

    def attributes(self) -> tuple[RoomAttribute, ...]:
        with self._lock.read():
            return tuple(self._attributes)

    def room_numbers(self) -> List[RoomNumber]:
        with self._lock.read():
            return sorted(self._rooms)

    def room(self, room_id: RoomNumber) -> RoomSnapshot:
        return self._get(room_id).snapshot()

    def rooms(self) -> List[RoomSnapshot]:
        with self._lock.read():
            rooms = [self._rooms[room_id] for room_id in sorted(self._rooms)]
        return [room.snapshot() for room in rooms]

    def add_room_attribute(self, room_id: RoomNumber, attr: RoomAttribute) -> None:
        self._get(room_id).add_attribute(attr)
        emit_load_log(action="room.attribute_added", room_id=room_id, extra={"attribute": attr})

    def set_room_state(self, room_id: RoomNumber, state: RoomState) -> None:
        room = self._get(room_id)
        previous = room.state
        room.set_state(state)
        emit_load_log(
            action="room.state_changed",
            room_id=room_id,
            extra={"state_from": previous, "state_to": RoomState(state)},
        )

    def room_satisfies(self, room_id: RoomNumber, attrs: Iterable[RoomAttribute]) -> bool:
        return self._get(room_id).satisfies(attrs)

    def find_rooms(self, attrs: Iterable[RoomAttribute] = ()) -> List[RoomSnapshot]:
        """Snapshots of every room having all of `attrs`, ordered by room number."""
        wanted = list(attrs)
        with self._lock.read():
            rooms = [self._rooms[room_id] for room_id in sorted(self._rooms)]
        return [room.snapshot() for room in rooms if room.satisfies(wanted)]

    def _get(self, room_id: RoomNumber) -> Room:
        with self._lock.read():
            room: Optional[Room] = self._rooms.get(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room
