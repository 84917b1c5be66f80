from fastapi import Request

from backend import OpenTokBackend
from registry import RoomSessionRegistry


def get_backend(request: Request) -> OpenTokBackend:
    return request.app.state.backend


def get_registry(request: Request) -> RoomSessionRegistry:
    return request.app.state.registry
