from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Optional

from .utils.rwlock import ReadWriteLock

RoomNumber = int
RoomAttribute = str


class RoomState(StrEnum):
    OCCUPIED = "OCCUPIED"
    UNAVAILABLE = "UNAVAILABLE"
    FREE = "FREE"


@dataclass(frozen=True)
class RoomSnapshot:
    room_id: RoomNumber
    price: int
    state: Optional[RoomState]
    attributes: frozenset[RoomAttribute]


class Room:
    """
    A hotel room: its number, price, current state and set of attributes.

    The room number never changes. Price, state and attributes are guarded by
    a per-room reader/writer lock, so `satisfies` calls run concurrently while
    `add_attribute` and `set_state` are exclusive.
    """

    def __init__(
        self,
        room_id: RoomNumber,
        *,
        price: int = 0,
        state: Optional[RoomState] = None,
        attributes: Iterable[RoomAttribute] = (),
    ) -> None:
        self._lock = ReadWriteLock()
        self._id = room_id
        self._price = price
        self._state = state
        self._attrs: set[RoomAttribute] = set(attributes)

    @property
    def id(self) -> RoomNumber:
        # immutable, no lock needed
        return self._id

    @property
    def price(self) -> int:
        with self._lock.read():
            return self._price

    @property
    def state(self) -> Optional[RoomState]:
        with self._lock.read():
            return self._state

    def set_state(self, state: RoomState) -> None:
        state = RoomState(state)
        with self._lock.write():
            self._state = state

    def add_attribute(self, attr: RoomAttribute) -> None:
        with self._lock.write():
            self._attrs.add(attr)

    def satisfies(self, attrs: Iterable[RoomAttribute]) -> bool:
        """Return True if the room has every attribute in `attrs` (vacuously True when empty)."""
        with self._lock.read():
            return all(attr in self._attrs for attr in attrs)

    def attributes(self) -> frozenset[RoomAttribute]:
        with self._lock.read():
            return frozenset(self._attrs)

    def snapshot(self) -> RoomSnapshot:
        with self._lock.read():
            return RoomSnapshot(
                room_id=self._id,
                price=self._price,
                state=self._state,
                attributes=frozenset(self._attrs),
            )

    def __repr__(self) -> str:
        return f"Room(id={self._id!r})"
