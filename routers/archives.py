from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import HTMLResponse, RedirectResponse

from dependencies import get_backend, get_registry
from logging_config import get_logger
from pages import archive_pending_page
from schemas.archives import ErrorResponse, StartArchiveRequest

logger = get_logger(__name__)

archives_router = APIRouter(
    prefix="/archive",
    tags=["archives"],
    responses={500: {"model": ErrorResponse}},
)


@archives_router.post("/start")
async def start_archive(
    body: StartArchiveRequest,
    registry=Depends(get_registry),
    backend=Depends(get_backend),
):
    # The archive is named after the room that owns the session, when there is one
    room_name = registry.find_room_by_session_id(body.session_id)
    logger.info(f"Starting archive for session {body.session_id} (room: {room_name})")
    archive = await backend.start_archive(
        body.session_id,
        name=room_name,
        resolution=body.resolution,
        output_mode=body.output_mode,
        has_video=body.has_video,
    )
    logger.info(f"Archive {archive.get('id')} started for session {body.session_id}")
    return archive


@archives_router.post("/{archive_id}/stop")
async def stop_archive(archive_id: str, backend=Depends(get_backend)):
    logger.info(f"Attempting to stop archive: {archive_id}")
    return await backend.stop_archive(archive_id)


@archives_router.get("/{archive_id}/view")
async def view_archive(archive_id: str, backend=Depends(get_backend)):
    """Redirect to the recording once it is available, otherwise show a pending page."""
    logger.info(f"Attempting to view archive: {archive_id}")
    archive = await backend.get_archive(archive_id)
    status = archive.get("status")
    logger.info(f"Archive {archive_id} status: {status}")
    # An available archive without a url cannot be redirected to yet
    if status == "available" and archive.get("url"):
        return RedirectResponse(url=archive["url"], status_code=302)
    return HTMLResponse(archive_pending_page())


@archives_router.get("/{archive_id}")
async def get_archive(archive_id: str, backend=Depends(get_backend)):
    logger.info(f"Attempting to fetch archive: {archive_id}")
    return await backend.get_archive(archive_id)


@archives_router.get("")
async def list_archives(
    response: Response,
    count: Optional[int] = Query(None, description="Page size, provider default when omitted"),
    offset: Optional[int] = Query(None, description="Number of archives to skip"),
    backend=Depends(get_backend),
):
    logger.info(f"Attempting to list archives (count={count}, offset={offset})")
    archives, total = await backend.list_archives(count=count, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return archives
