import threading

import pytest
from hotel.models import Room, RoomSnapshot, RoomState


def test_new_room_has_zero_values() -> None:
    room = Room(12)
    assert room.id == 12
    assert room.price == 0
    assert room.state is None
    assert room.attributes() == frozenset()


def test_satisfies_empty_is_always_true() -> None:
    assert Room(1).satisfies([])
    assert Room(1, attributes=["a"]).satisfies([])


def test_satisfies_requires_every_attribute() -> None:
    room = Room(1)
    room.add_attribute("a")
    assert room.satisfies(["a"])
    assert not room.satisfies(["a", "b"])
    room.add_attribute("b")
    assert room.satisfies(["a", "b"])
    assert room.satisfies(["b", "a", "a"])


def test_add_attribute_is_idempotent() -> None:
    room = Room(1)
    room.add_attribute("sea-view")
    room.add_attribute("sea-view")
    assert room.attributes() == frozenset({"sea-view"})


def test_set_state_accepts_any_transition() -> None:
    room = Room(1, state=RoomState.OCCUPIED)
    room.set_state(RoomState.UNAVAILABLE)
    assert room.state == RoomState.UNAVAILABLE
    room.set_state(RoomState.OCCUPIED)
    assert room.state == RoomState.OCCUPIED
    room.set_state("FREE")  # type: ignore[arg-type]
    assert room.state is RoomState.FREE


def test_set_state_rejects_unknown_value() -> None:
    room = Room(1)
    with pytest.raises(ValueError):
        room.set_state("CLEANING")  # type: ignore[arg-type]
    assert room.state is None


def test_snapshot_is_detached_copy() -> None:
    room = Room(5, price=80, state=RoomState.FREE, attributes=["a"])
    snap = room.snapshot()
    room.add_attribute("b")
    assert snap == RoomSnapshot(room_id=5, price=80, state=RoomState.FREE, attributes=frozenset({"a"}))
    assert room.snapshot().attributes == frozenset({"a", "b"})


def test_concurrent_readers_and_writers() -> None:
    room = Room(1)
    attrs = [f"attr-{i}" for i in range(200)]
    errors: list[BaseException] = []
    start = threading.Barrier(8)

    def writer(chunk: list[str]) -> None:
        start.wait()
        for attr in chunk:
            room.add_attribute(attr)

    def reader() -> None:
        start.wait()
        try:
            for _ in range(500):
                room.satisfies(attrs[:5])
                room.satisfies([])
        except BaseException as exc:  # pragma: no cover - surfaced by the assert below
            errors.append(exc)

    threads = [threading.Thread(target=writer, args=(attrs[i::4],)) for i in range(4)]
    threads += [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert not errors
    assert all(not t.is_alive() for t in threads)
    assert room.satisfies(attrs)
    assert len(room.attributes()) == 200
