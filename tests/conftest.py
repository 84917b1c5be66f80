import asyncio
import itertools

import pytest
from fastapi.testclient import TestClient

from app import create_app
from backend import ProviderError


class FakeBackend:
    """In-memory stand-in for OpenTokBackend."""

    api_key = "46000000"

    def __init__(self):
        self.created_sessions = []
        self.start_calls = []
        self.archives = {}
        self.failing = set()
        self.create_delay = 0
        self._token_counter = itertools.count(1)
        self._archive_counter = itertools.count(1)

    def _check(self, operation, status_code=500):
        if operation in self.failing:
            raise ProviderError(operation, "Unexpected response from OpenTok", status_code=status_code)

    async def create_session(self, media_mode="routed"):
        self._check("createSession", status_code=503)
        await asyncio.sleep(self.create_delay)
        session_id = f"1_MX40NjAwMDAwMH5-session-{len(self.created_sessions) + 1}"
        self.created_sessions.append((session_id, media_mode))
        return session_id

    def generate_token(self, session_id):
        return f"T1==token-{session_id}-{next(self._token_counter)}"

    async def start_archive(self, session_id, name=None, resolution=None, output_mode=None, has_video=None):
        self._check("startArchive")
        self.start_calls.append(
            {
                "session_id": session_id,
                "name": name,
                "resolution": resolution,
                "output_mode": output_mode,
                "has_video": has_video,
            }
        )
        archive_id = f"archive-{next(self._archive_counter)}"
        archive = {
            "id": archive_id,
            "session_id": session_id,
            "name": name,
            "status": "started",
            "url": None,
            "resolution": resolution or "640x480",
            "output_mode": output_mode or "composed",
            "has_video": True if has_video is None else has_video,
        }
        self.archives[archive_id] = archive
        return dict(archive)

    def _lookup(self, operation, archive_id):
        self._check(operation)
        if archive_id not in self.archives:
            raise ProviderError(operation, "Archive not found")
        return self.archives[archive_id]

    async def stop_archive(self, archive_id):
        archive = self._lookup("stopArchive", archive_id)
        archive["status"] = "stopped"
        return dict(archive)

    async def get_archive(self, archive_id):
        return dict(self._lookup("getArchive", archive_id))

    async def list_archives(self, count=None, offset=None):
        self._check("listArchives")
        archives = list(self.archives.values())
        start = offset or 0
        end = start + count if count is not None else None
        return [dict(a) for a in archives[start:end]], len(archives)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def client(backend):
    with TestClient(create_app(backend=backend)) as c:
        yield c
