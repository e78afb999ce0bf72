"""Pydantic schemas for user accounts."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    password_hash: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1)
    role: str | None = None


class UserUpdate(BaseModel):
    """Every field is optional; absent fields keep their stored value."""

    email: str | None = Field(None, min_length=3, max_length=320)
    password_hash: str | None = Field(None, min_length=1)
    full_name: str | None = Field(None, min_length=1)
    role: str | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str
    full_name: str
    role: str
    created_at: datetime
    updated_at: datetime


class UserListResponse(BaseModel):
    items: list[UserResponse]
    limit: int
    offset: int
