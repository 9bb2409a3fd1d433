from __future__ import annotations

import re
from typing import Iterable, Iterator, Mapping, MutableMapping, Sequence

from ..models import Room, RoomAttribute, RoomNumber, RoomState
from .errors import RecordParseError

ENTRY_ID = 0
ENTRY_PRICE = 1
ENTRY_STATE = 2
ENTRY_ATTRIBUTES = 3
RECORD_LEN = 4

ATTRIBUTE_SEPARATOR = ","
COMMENT_MARKER = "#"

_UINT64_MAX = 2**64 - 1
_UNSIGNED_RE = re.compile(r"[0-9]+")


def parse_unsigned(text: str, *, field: str) -> int:
    """Parse base-10 unsigned integer text; no sign, whitespace or separators allowed."""
    if not _UNSIGNED_RE.fullmatch(text):
        raise RecordParseError(
            f"invalid record ({field}: '{text}'): not an unsigned integer",
            field=field,
            value=text,
        )
    value = int(text)
    if value > _UINT64_MAX:
        raise RecordParseError(
            f"invalid record ({field}: '{text}'): value out of range",
            field=field,
            value=text,
        )
    return value


def parse_state(text: str) -> RoomState:
    try:
        return RoomState(text)
    except ValueError as exc:
        raise RecordParseError(
            f"invalid record (state: '{text}'): unrecognized state",
            field="state",
            value=text,
        ) from exc


def parse_room_record(
    record: Sequence[str],
    vocabulary: Iterable[RoomAttribute] = (),
    *,
    strict_attributes: bool = False,
) -> Room:
    """
    Build a Room from a 4-field record: id, price, state, comma-joined attributes.

    Attribute segments are kept verbatim (no trimming, empty segments included).
    The vocabulary is only enforced when `strict_attributes` is set, in which
    case any non-empty attribute missing from it is rejected.
    """
    if len(record) != RECORD_LEN:
        raise RecordParseError(
            f"invalid record: expected {RECORD_LEN} entries, got {len(record)}",
            field="record",
        )
    room_id = parse_unsigned(record[ENTRY_ID], field="id")
    price = parse_unsigned(record[ENTRY_PRICE], field="price")
    state = parse_state(record[ENTRY_STATE])
    attrs = record[ENTRY_ATTRIBUTES].split(ATTRIBUTE_SEPARATOR)

    if strict_attributes:
        known = set(vocabulary)
        for attr in attrs:
            if attr and attr not in known:
                raise RecordParseError(
                    f"invalid record (attributes: '{attr}'): unknown attribute",
                    field="attributes",
                    value=attr,
                )

    return Room(room_id, price=price, state=state, attributes=attrs)


def parse_attribute_lines(lines: Iterable[str]) -> Iterator[RoomAttribute]:
    """Yield the first whitespace-delimited token of each line, skipping blank and comment lines."""
    for line in lines:
        tokens = line.split(maxsplit=1)
        if not tokens or tokens[0] == COMMENT_MARKER:
            continue
        yield tokens[0]


def collect_rooms(rooms: Iterable[Room]) -> dict[RoomNumber, Room]:
    """Key rooms by number; when a number repeats, the last room in iteration order wins."""
    collected: dict[RoomNumber, Room] = {}
    for room in rooms:
        collected[room.id] = room
    return collected


def merge_rooms(target: MutableMapping[RoomNumber, Room], incoming: Mapping[RoomNumber, Room]) -> list[RoomNumber]:
    """
    Merge `incoming` into `target`, replacing rooms whose number is already present.
    Returns the numbers that were overwritten, in ascending order.
    """
    overwritten = sorted(room_id for room_id in incoming if room_id in target)
    target.update(incoming)
    return overwritten
