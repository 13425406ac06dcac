from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from ..user.schemas import UserSummary


class NewsCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    is_published: bool = Field(True, alias="isPublished")

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class NewsUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    is_published: Optional[bool] = Field(None, alias="isPublished")

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1)

    class Config:
        str_strip_whitespace = True


class ReplyResponse(BaseModel):
    id: str
    user: Optional[UserSummary] = None
    content: str
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        populate_by_name = True


class CommentResponse(BaseModel):
    id: str
    user: Optional[UserSummary] = None
    content: str
    replies: List[ReplyResponse] = []
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        populate_by_name = True


class NewsResponse(BaseModel):
    id: str
    title: str
    content: str
    image: str
    author: Optional[UserSummary] = None
    likes: List[str] = []
    comments: List[CommentResponse] = []
    is_published: bool = Field(..., alias="isPublished")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        populate_by_name = True
