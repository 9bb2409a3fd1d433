from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from ..deps import get_hotel
from ..domain.errors import RoomNotFoundError
from ..models import RoomState
from ..registry import Hotel
from ..schemas import AttributeAdd, RoomRead, StateUpdate
from ..usecases import rooms as room_usecase

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.get("", response_model=List[RoomRead])
async def list_rooms(
    attribute: List[str] = Query(default=[], description="Required attributes (repeatable)"),
    state: Optional[RoomState] = Query(default=None),
    max_price: Optional[int] = Query(default=None, ge=0),
    hotel: Hotel = Depends(get_hotel),
) -> list[RoomRead]:
    rooms = room_usecase.search_rooms(hotel, attributes=attribute, state=state, max_price=max_price)
    return [RoomRead.from_snapshot(room=room) for room in rooms]


@router.get("/{room_id}", response_model=RoomRead)
async def get_room(
    room_id: int = Path(..., ge=0),
    hotel: Hotel = Depends(get_hotel),
) -> RoomRead:
    try:
        room = room_usecase.get_room(hotel, room_id=room_id)
    except RoomNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="room not found")
    return RoomRead.from_snapshot(room=room)


@router.post("/{room_id}/attributes", response_model=RoomRead)
async def add_room_attribute(
    payload: AttributeAdd,
    room_id: int = Path(..., ge=0),
    hotel: Hotel = Depends(get_hotel),
) -> RoomRead:
    try:
        room = room_usecase.add_attribute(hotel, room_id=room_id, attribute=payload.attribute)
    except RoomNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="room not found")
    return RoomRead.from_snapshot(room=room)


@router.put("/{room_id}/state", response_model=RoomRead)
async def change_room_state(
    payload: StateUpdate,
    room_id: int = Path(..., ge=0),
    hotel: Hotel = Depends(get_hotel),
) -> RoomRead:
    try:
        room = room_usecase.change_state(hotel, room_id=room_id, state=payload.state)
    except RoomNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="room not found")
    return RoomRead.from_snapshot(room=room)
