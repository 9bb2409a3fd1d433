import json
from typing import Iterator, Sequence

import pytest
from hotel.domain.errors import RoomNotFoundError
from hotel.models import RoomState
from hotel.registry import Hotel
from hotel.utils import load_log


class FakeRooms:
    name = "fake"

    def __init__(self, records: Sequence[Sequence[str]]) -> None:
        self.records = records

    def read_records(self) -> Iterator[tuple[int, Sequence[str]]]:
        for offset, record in enumerate(self.records, start=2):
            yield offset, record


class FakeAttributes:
    name = "fake"

    def read_attributes(self) -> list[str]:
        return ["sea-view", "balcony", "smoking"]


class RecordingLogger:
    def __init__(self) -> None:
        self.payloads: list[dict] = []

    def log(self, level: int, message: str) -> None:
        self.payloads.append(json.loads(message))


@pytest.fixture
def logger(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    recorder = RecordingLogger()
    monkeypatch.setattr(load_log, "_load_logger", recorder)
    return recorder


@pytest.fixture
def hotel(logger: RecordingLogger) -> Hotel:
    return Hotel.from_data(
        FakeAttributes(),
        FakeRooms(
            [
                ["3", "150", "FREE", "sea-view,balcony"],
                ["1", "100", "OCCUPIED", "smoking"],
                ["2", "120", "FREE", "sea-view"],
            ]
        ),
    )


def test_rooms_are_sorted_snapshots(hotel: Hotel) -> None:
    assert [room.room_id for room in hotel.rooms()] == [1, 2, 3]


def test_unknown_room_raises(hotel: Hotel) -> None:
    with pytest.raises(RoomNotFoundError, match="room 99 not found"):
        hotel.room(99)
    with pytest.raises(RoomNotFoundError):
        hotel.add_room_attribute(99, "sea-view")
    with pytest.raises(RoomNotFoundError):
        hotel.room_satisfies(99, [])


def test_add_room_attribute_goes_through_registry(hotel: Hotel, logger: RecordingLogger) -> None:
    assert not hotel.room_satisfies(2, ["sea-view", "balcony"])
    hotel.add_room_attribute(2, "balcony")
    assert hotel.room_satisfies(2, ["sea-view", "balcony"])
    assert logger.payloads[-1]["action"] == "room.attribute_added"
    assert logger.payloads[-1]["room_id"] == 2


def test_snapshots_do_not_leak_mutation(hotel: Hotel) -> None:
    snap = hotel.room(1)
    hotel.add_room_attribute(1, "balcony")
    assert "balcony" not in snap.attributes
    assert "balcony" in hotel.room(1).attributes


def test_set_room_state(hotel: Hotel, logger: RecordingLogger) -> None:
    hotel.set_room_state(1, RoomState.FREE)
    assert hotel.room(1).state == RoomState.FREE
    payload = logger.payloads[-1]
    assert payload["action"] == "room.state_changed"
    assert payload["state_from"] == "OCCUPIED"
    assert payload["state_to"] == "FREE"


def test_find_rooms(hotel: Hotel) -> None:
    assert [r.room_id for r in hotel.find_rooms(["sea-view"])] == [2, 3]
    assert [r.room_id for r in hotel.find_rooms(["sea-view", "balcony"])] == [3]
    assert [r.room_id for r in hotel.find_rooms()] == [1, 2, 3]
    assert hotel.find_rooms(["jacuzzi"]) == []


def test_contains(hotel: Hotel) -> None:
    assert 1 in hotel
    assert 4 not in hotel


def test_load_events_share_correlation_id_within_a_load(logger: RecordingLogger) -> None:
    hotel = Hotel()
    hotel.load_rooms(FakeRooms([["1", "x", "FREE", ""], ["2", "10", "FREE", ""]]))
    skipped, loaded = logger.payloads[-2:]
    assert skipped["action"] == "rooms.record_skipped"
    assert skipped["level"] == "warning"
    assert loaded["action"] == "rooms.loaded"
    assert loaded["count"] == 1
    assert skipped["correlation_id"] == loaded["correlation_id"]
