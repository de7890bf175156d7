import asyncio
from collections.abc import AsyncGenerator

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, StreamingResponse

from edge_pages.api.routes import ROUTED_METHODS
from edge_pages.config.settings import Settings
from edge_pages.models.countdown import CountdownFrame
from edge_pages.services.countdown import CountdownTimer

logger = structlog.get_logger(__name__)
router = APIRouter()


async def countdown_events(settings: Settings) -> AsyncGenerator[str, None]:
    """
    Yield one server-sent event per timer frame until the terminal frame.

    The timer is cancelled when the generator is closed, including when the
    client disconnects mid-stream.
    """
    frames: asyncio.Queue[CountdownFrame] = asyncio.Queue()
    timer = CountdownTimer(
        settings.countdown_target_ms,
        frames.put_nowait,
        final_message=settings.countdown_final_message,
        period=settings.countdown_tick_seconds,
    )
    timer.start()

    try:
        while True:
            frame = await frames.get()
            yield f"data: {frame.model_dump_json()}\n\n"
            if frame.finished:
                break
    finally:
        timer.cancel()


@router.get(
    "/countdown/stream",
    summary="Countdown event stream",
    description="""
    Server-sent events carrying the remaining days, hours, minutes and
    seconds once per tick. The stream closes after the final message.
    """,
    tags=["Countdown"],
)
async def countdown_stream(request: Request) -> StreamingResponse:
    settings: Settings = request.app.state.settings
    logger.info("Countdown stream opened", target=settings.countdown_target.isoformat())

    return StreamingResponse(
        countdown_events(settings),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache"},
    )


@router.api_route(
    "/{path:path}",
    methods=ROUTED_METHODS,
    response_class=HTMLResponse,
    summary="Countdown page",
    tags=["Pages"],
)
async def countdown_page(request: Request) -> HTMLResponse:
    """Serve the countdown page for every other path."""
    return HTMLResponse(content=request.app.state.document)
