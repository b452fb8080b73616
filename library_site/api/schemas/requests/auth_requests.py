"""Admin login request schema."""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials a client wants to check before caching them."""

    username: Optional[str] = Field(None, description="Admin username")
    password: Optional[str] = Field(None, description="Admin password")


__all__ = ["LoginRequest"]
