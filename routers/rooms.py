from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from dependencies import get_backend, get_registry
from logging_config import get_logger
from pages import index_page
from schemas.rooms import RoomResponse

logger = get_logger(__name__)

rooms_router = APIRouter(tags=["rooms"])


@rooms_router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index():
    return index_page()


@rooms_router.get("/session")
async def default_session():
    return RedirectResponse(url="/room/session", status_code=302)


@rooms_router.get("/room/{name}", response_model=RoomResponse, response_model_exclude_none=True)
async def get_room(
    name: str,
    request: Request,
    registry=Depends(get_registry),
    backend=Depends(get_backend),
):
    """
    Return the session and a fresh token for a room, creating the session on first access.

    Every call issues a new token. The response carries `roomname` only when
    the room already existed before this request.
    """
    client_host = request.client.host if request.client else "unknown"
    logger.info(f"Room request for {name} from {client_host}")

    room = await registry.get_or_create_session(name)
    if room.created:
        logger.info(f"First access to room {name}, session {room.session_id}")
    else:
        logger.debug(f"Room {name} already mapped to session {room.session_id}")

    return RoomResponse(
        room_name=None if room.created else room.room_name,
        api_key=backend.api_key,
        session_id=room.session_id,
        token=room.token,
    )
