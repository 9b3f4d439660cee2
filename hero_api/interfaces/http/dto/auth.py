from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LoginRequestDTO(BaseModel):
    # absent fields fall through to the credential check and fail there
    username: str = ""
    password: str = ""

    model_config = ConfigDict(strict=True)


class LoginResponseDTO(BaseModel):
    token: str


class MessageDTO(BaseModel):
    message: str
