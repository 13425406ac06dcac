# Schema cho user: input nhận cả camelCase lẫn snake_case, output dùng camelCase

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, Literal
from datetime import datetime


class UserBase(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    first_name: str = Field(..., min_length=1, alias="firstName")
    last_name: str = Field(..., min_length=1, alias="lastName")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")

    class Config:
        populate_by_name = True


class UserCreate(UserBase):
    password: str


class UserUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, alias="firstName")
    last_name: Optional[str] = Field(None, min_length=1, alias="lastName")
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(None, alias="phoneNumber")

    class Config:
        populate_by_name = True


class Login(BaseModel):
    # Chấp nhận username hoặc email
    username: str
    password: str


class UserResponse(BaseModel):
    id: str
    username: str
    email: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    role: Literal["user", "admin"]
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class UserSummary(BaseModel):
    """Thông tin hiển thị của tác giả bài viết, bình luận và trả lời"""
    id: str
    username: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")

    class Config:
        from_attributes = True
        populate_by_name = True


class AuthResponse(BaseModel):
    token: str
    user: UserResponse
