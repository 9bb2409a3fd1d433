from functools import lru_cache
from pathlib import Path
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseModel):
    attribute_data: str = Field(default=str(DATA_DIR / "attributes.txt"))
    room_data: str = Field(default=str(DATA_DIR / "rooms.csv"))
    strict_load: bool = Field(default=False)
    strict_attributes: bool = Field(default=False)


@lru_cache
def get_settings() -> Settings:
    return Settings(
        attribute_data=os.getenv("HOTEL_ATTRIBUTE_DATA", Settings.model_fields["attribute_data"].default),
        room_data=os.getenv("HOTEL_ROOM_DATA", Settings.model_fields["room_data"].default),
        strict_load=bool(int(os.getenv("HOTEL_STRICT_LOAD", "0"))),
        strict_attributes=bool(int(os.getenv("HOTEL_STRICT_ATTRIBUTES", "0"))),
    )
