"""Pydantic shapes of the JSON records exchanged with durable storage and the REST surface."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .domain.topic import ANONYMOUS, Category, parse_timestamp


class ReplyRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    author: str = ANONYMOUS
    content: str
    date: str
    user_id: Optional[str] = Field(default=None, alias="userId")

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        parse_timestamp(value)
        return value


class TopicRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: int
    title: str
    content: str
    author: str = ANONYMOUS
    category: Category
    date: str
    replies: List[ReplyRecord] = Field(default_factory=list)
    user_id: Optional[str] = Field(default=None, alias="userId")

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        parse_timestamp(value)
        return value


TopicList = TypeAdapter(List[TopicRecord])
