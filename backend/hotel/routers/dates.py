from fastapi import APIRouter, HTTPException, Path, status

from ..domain.date import Date
from ..domain.errors import InvalidDateError
from ..schemas import DateRead

router = APIRouter(prefix="/dates", tags=["dates"])


@router.get("/{year}/{month}/{day}", response_model=DateRead)
async def check_date(
    year: int = Path(...),
    month: int = Path(...),
    day: int = Path(...),
) -> DateRead:
    try:
        date = Date.new(year, month, day)
    except InvalidDateError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return DateRead.from_domain(date=date)
