from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class StartArchiveRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    resolution: Optional[str] = None
    output_mode: Optional[str] = Field(None, alias="outputMode")
    has_video: Optional[bool] = Field(None, alias="hasVideo")


class ErrorResponse(BaseModel):
    error: str
