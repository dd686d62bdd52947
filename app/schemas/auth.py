"""
Pydantic schemas for authentication
"""
from pydantic import BaseModel, Field


class UserCredentials(BaseModel):
    """Username/password pair used by register and login"""
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class MessageResponse(BaseModel):
    message: str
