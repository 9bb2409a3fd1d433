from fastapi import APIRouter, Depends

from ..deps import get_hotel
from ..registry import Hotel
from ..schemas import VocabularyRead

router = APIRouter(prefix="/attributes", tags=["attributes"])


@router.get("", response_model=VocabularyRead)
async def list_attributes(hotel: Hotel = Depends(get_hotel)) -> VocabularyRead:
    return VocabularyRead(attributes=list(hotel.attributes()))
