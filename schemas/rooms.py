from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class RoomResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Omitted on the request that created the session
    room_name: Optional[str] = Field(None, alias="roomname")
    api_key: str = Field(alias="apiKey")
    session_id: str = Field(alias="sessionId")
    token: str
