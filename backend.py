import asyncio
import os
from functools import partial
from typing import Optional

from fastapi.encoders import jsonable_encoder
from opentok import MediaModes, OpenTok, OutputModes
from opentok.exceptions import OpenTokException

from constants import (
    TOKBOX_API_KEY_ENV,
    TOKBOX_DASHBOARD_URL,
    TOKBOX_SECRET_ENV,
    get_provider_credentials,
)
from logging_config import get_logger

logger = get_logger(__name__)


class ProviderError(Exception):
    """A call to the video platform failed.

    `operation` is the SDK call name used in the error body, e.g. "startArchive".
    """

    def __init__(self, operation: str, cause, status_code: int = 500):
        super().__init__(f"{operation} error:{cause}")
        self.operation = operation
        self.cause = cause
        self.status_code = status_code

    @property
    def message(self) -> str:
        return f"{self.operation} error:{self.cause}"


def require_credentials():
    """Return (api_key, api_secret) or stop the process with a diagnostic banner."""
    api_key, api_secret = get_provider_credentials()
    if not api_key or not api_secret:
        banner = "=" * 105
        logger.error(banner)
        logger.error(f"Missing {TOKBOX_API_KEY_ENV} or {TOKBOX_SECRET_ENV}")
        logger.error(f"Find the appropriate values for these by logging into your TokBox Dashboard at: {TOKBOX_DASHBOARD_URL}")
        logger.error(f"Then add them to {os.path.abspath('.env')} or as environment variables")
        logger.error(banner)
        raise SystemExit(1)
    return api_key, api_secret


def archive_to_dict(archive) -> dict:
    # Archive.attrs() keeps enum members (output_mode, stream_mode); encode them to plain values
    return jsonable_encoder(archive.attrs())


class OpenTokBackend:
    def __init__(self, api_key: str, api_secret: str, client: Optional[OpenTok] = None):
        self.api_key = api_key
        self.client = client or OpenTok(api_key, api_secret)
        logger.info(f"Initializing OpenTokBackend for api key {api_key}")

    @classmethod
    def from_env(cls) -> "OpenTokBackend":
        api_key, api_secret = require_credentials()
        return cls(api_key, api_secret)

    async def _call(self, operation: str, func, *args, status_code: int = 500, **kwargs):
        """Run a blocking SDK call in the default executor and await it."""
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, partial(func, *args, **kwargs))
        except OpenTokException as e:
            raise ProviderError(operation, e, status_code=status_code) from e

    async def create_session(self, media_mode: str = "routed") -> str:
        logger.debug(f"Creating provider session with media mode {media_mode}")
        try:
            mode = MediaModes[media_mode]
        except KeyError:
            raise ProviderError("createSession", f"unknown media mode {media_mode!r}", status_code=503) from None
        session = await self._call("createSession", self.client.create_session, media_mode=mode, status_code=503)
        logger.debug(f"Provider session {session.session_id} created")
        return session.session_id

    def generate_token(self, session_id: str) -> str:
        # Tokens are signed locally, no network round trip
        try:
            return self.client.generate_token(session_id)
        except OpenTokException as e:
            raise ProviderError("generateToken", e) from e

    async def start_archive(
        self,
        session_id: str,
        name: Optional[str] = None,
        resolution: Optional[str] = None,
        output_mode: Optional[str] = None,
        has_video: Optional[bool] = None,
    ) -> dict:
        options = {"name": name}
        if resolution is not None:
            options["resolution"] = resolution
        if has_video is not None:
            options["has_video"] = has_video
        if output_mode is not None:
            try:
                options["output_mode"] = OutputModes[output_mode]
            except KeyError:
                raise ProviderError("startArchive", f"unknown output mode {output_mode!r}") from None
        logger.debug(f"Starting archive for session {session_id} with options {options}")
        archive = await self._call("startArchive", self.client.start_archive, session_id, **options)
        return archive_to_dict(archive)

    async def stop_archive(self, archive_id: str) -> dict:
        archive = await self._call("stopArchive", self.client.stop_archive, archive_id)
        return archive_to_dict(archive)

    async def get_archive(self, archive_id: str) -> dict:
        archive = await self._call("getArchive", self.client.get_archive, archive_id)
        return archive_to_dict(archive)

    async def list_archives(self, count: Optional[int] = None, offset: Optional[int] = None):
        """Return (archives, total) where total is the provider's count across all pages."""
        archive_list = await self._call("listArchives", self.client.list_archives, offset=offset, count=count)
        archives = [archive_to_dict(archive) for archive in archive_list.items]
        return archives, archive_list.count
