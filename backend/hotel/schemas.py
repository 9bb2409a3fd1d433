from typing import List, Optional

from pydantic import BaseModel, Field

from .domain.date import Date
from .models import RoomSnapshot, RoomState


class RoomRead(BaseModel):
    room_id: int
    price: int
    state: Optional[RoomState]
    attributes: List[str]

    @classmethod
    def from_snapshot(cls, *, room: RoomSnapshot) -> "RoomRead":
        return cls(
            room_id=room.room_id,
            price=room.price,
            state=room.state,
            attributes=sorted(room.attributes),
        )


class AttributeAdd(BaseModel):
    attribute: str = Field(min_length=1)


class StateUpdate(BaseModel):
    state: RoomState


class VocabularyRead(BaseModel):
    attributes: List[str]


class DateRead(BaseModel):
    day: int
    month: int
    year: int
    text: str

    @classmethod
    def from_domain(cls, *, date: Date) -> "DateRead":
        return cls(**date.to_dict(), text=str(date))
