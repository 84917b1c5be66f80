import asyncio
from dataclasses import dataclass
from typing import Dict, Optional

from logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class RoomSession:
    room_name: str
    session_id: str
    token: str
    created: bool = False


class RoomSessionRegistry:
    """Maps room names to provider session ids for the lifetime of the process.

    Entries are never expired or removed; a restart forgets every room. The
    first request for a room creates the provider session under a per-room
    lock, so concurrent first requests share one session. Rooms that already
    have a session are served without locking. A creation lock lives only
    while some request is waiting on or holding it.
    """

    def __init__(self, backend, media_mode: str = "routed"):
        self.backend = backend
        self.media_mode = media_mode
        self._sessions: Dict[str, str] = {}
        self._creation_locks: Dict[str, asyncio.Lock] = {}
        self._lock_holders: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, room_name: str) -> bool:
        return room_name in self._sessions

    def get_session_id(self, room_name: str) -> Optional[str]:
        return self._sessions.get(room_name)

    async def get_or_create_session(self, room_name: str) -> RoomSession:
        if not room_name:
            raise ValueError("room name must not be empty")

        created = False
        session_id = self._sessions.get(room_name)
        if session_id is None:
            lock = self._creation_locks.setdefault(room_name, asyncio.Lock())
            self._lock_holders[room_name] = self._lock_holders.get(room_name, 0) + 1
            try:
                async with lock:
                    # Another request may have created it while we waited
                    session_id = self._sessions.get(room_name)
                    if session_id is None:
                        logger.info(f"Creating a provider session for room {room_name}")
                        session_id = await self.backend.create_session(self.media_mode)
                        self._sessions[room_name] = session_id
                        created = True
                        logger.info(f"Room {room_name} mapped to session {session_id}")
            finally:
                # Drop the lock once no request references it, whether creation succeeded or failed
                self._lock_holders[room_name] -= 1
                if not self._lock_holders[room_name]:
                    del self._lock_holders[room_name]
                    del self._creation_locks[room_name]

        token = self.backend.generate_token(session_id)
        return RoomSession(room_name=room_name, session_id=session_id, token=token, created=created)

    def find_room_by_session_id(self, session_id: str) -> Optional[str]:
        """Reverse lookup by linear scan; the most recently mapped room wins."""
        found = None
        for room_name, mapped_id in self._sessions.items():
            if mapped_id == session_id:
                found = room_name
        return found
