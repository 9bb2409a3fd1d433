from typing import List, Optional, Sequence

from ..models import RoomSnapshot, RoomState
from ..registry import Hotel


def search_rooms(
    hotel: Hotel,
    *,
    attributes: Sequence[str] = (),
    state: Optional[RoomState] = None,
    max_price: Optional[int] = None,
) -> List[RoomSnapshot]:
    rooms = hotel.find_rooms(attributes)
    items: List[RoomSnapshot] = []
    for room in rooms:
        if state is not None and room.state != state:
            continue
        if max_price is not None and room.price > max_price:
            continue
        items.append(room)
    return items


def get_room(hotel: Hotel, *, room_id: int) -> RoomSnapshot:
    return hotel.room(room_id)


def add_attribute(hotel: Hotel, *, room_id: int, attribute: str) -> RoomSnapshot:
    if not attribute:
        raise ValueError("attribute must not be empty")
    hotel.add_room_attribute(room_id, attribute)
    return hotel.room(room_id)


def change_state(hotel: Hotel, *, room_id: int, state: RoomState) -> RoomSnapshot:
    hotel.set_room_state(room_id, state)
    return hotel.room(room_id)
