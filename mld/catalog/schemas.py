from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime


class CatalogItemBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    type_detail: str = Field(..., min_length=1)
    features: List[str] = []
    specifications: Dict[str, str] = {}
    is_active: bool = Field(True, alias="isActive")

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class CatalogItemCreate(CatalogItemBase):
    pass


class CatalogItemUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    type_detail: Optional[str] = Field(None, min_length=1)
    features: Optional[List[str]] = None
    specifications: Optional[Dict[str, str]] = None
    is_active: Optional[bool] = Field(None, alias="isActive")

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class CatalogItemResponse(CatalogItemBase):
    id: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class ImageCatalogItemResponse(CatalogItemResponse):
    image: str
