from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from .routers import attributes, dates, rooms
from .utils.correlation import generate_correlation_id, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"

app = FastAPI(title="Hotel Inventory API")


async def request_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    request_id = request.headers.get(REQUEST_ID_HEADER) or generate_correlation_id()
    set_correlation_id(request_id)
    try:
        response = await call_next(request)
    finally:
        set_correlation_id(None)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


app.middleware("http")(request_id_middleware)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(rooms.router)
app.include_router(attributes.router)
app.include_router(dates.router)
