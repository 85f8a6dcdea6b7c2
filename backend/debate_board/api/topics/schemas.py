"""Pydantic request schemas for the Topics API."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TopicCreateIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    content: str = ""
    author: Optional[str] = None
    category: str = ""
    user_id: Optional[str] = Field(default=None, alias="userId")


class ReplyCreateIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: str = ""
    author: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")
