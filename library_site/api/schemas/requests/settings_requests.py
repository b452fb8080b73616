"""Settings request schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class SettingUpdateRequest(BaseModel):
    """Request payload for writing one site setting."""

    value: Optional[str] = Field(None, description="New value; any string")


__all__ = ["SettingUpdateRequest"]
