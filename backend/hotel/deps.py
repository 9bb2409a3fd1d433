from functools import lru_cache

from .config import get_settings
from .registry import Hotel


@lru_cache
def _load_hotel() -> Hotel:
    settings = get_settings()
    return Hotel.from_data(
        settings.attribute_data,
        settings.room_data,
        strict=settings.strict_load,
        strict_attributes=settings.strict_attributes,
    )


def get_hotel() -> Hotel:
    return _load_hotel()
