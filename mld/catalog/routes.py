from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session
from typing import List, Optional
from ..core.auth import get_current_user
from ..core.database import get_db
from ..core.exceptions import ValidationError
from ..core.forms import parse_json_object_field, parse_list_field, validate_form
from ..core.uploads import save_image
from ..user.models import User
from .kinds import CATALOG_KINDS, CatalogKind
from .schemas import CatalogItemCreate, CatalogItemUpdate
from . import crud
import logging

logger = logging.getLogger(__name__)


def _form_data(title, description, price, type_detail, features, specifications, is_active) -> dict:
    return {
        "title": title,
        "description": description,
        "price": price,
        "type_detail": type_detail,
        "features": parse_list_field(features, "features"),
        "specifications": parse_json_object_field(specifications, "specifications"),
        "is_active": is_active,
    }


def build_catalog_router(kind: CatalogKind) -> APIRouter:
    """
    Tạo router CRUD cho một loại catalog.

    Đọc (list, get) là public; tạo, sửa, xóa cần đăng nhập. Loại có ảnh
    (CCTV, NanoBeam) nhận multipart/form-data với file trong field "image",
    loại không có ảnh (gói Internet) nhận JSON body.
    """
    router = APIRouter(tags=[f"Catalog: {kind.name}"])
    response_model = kind.response_model

    @router.get("", response_model=List[response_model])
    async def list_items(
        active_only: Optional[bool] = None,
        type_detail: Optional[str] = None,
        db: Session = Depends(get_db)
    ):
        if active_only is None:
            active_only = kind.active_only_default
        return crud.list_items(db, kind, active_only=active_only, type_detail=type_detail)

    @router.get("/{item_id}", response_model=response_model)
    async def get_item(item_id: str, db: Session = Depends(get_db)):
        return crud.get_item(db, kind, item_id)

    if kind.has_image:
        @router.post("", response_model=response_model, status_code=status.HTTP_201_CREATED)
        async def create_item(
            title: Optional[str] = Form(None),
            description: Optional[str] = Form(None),
            price: Optional[str] = Form(None),
            type_detail: Optional[str] = Form(None),
            features: Optional[List[str]] = Form(None),
            specifications: Optional[str] = Form(None),
            is_active: Optional[str] = Form(None, alias="isActive"),
            image: Optional[UploadFile] = File(None),
            current_user: User = Depends(get_current_user),
            db: Session = Depends(get_db)
        ):
            item = validate_form(CatalogItemCreate, _form_data(
                title, description, price, type_detail, features, specifications, is_active
            ))
            kind.check_type_detail(item.type_detail)
            if image is None or not image.filename:
                raise ValidationError("image: an image file is required")
            image_path = await save_image(image, kind.upload_namespace)
            return crud.create_item(db, kind, item, image=image_path)

        @router.api_route("/{item_id}", methods=["PUT", "PATCH"], response_model=response_model)
        async def update_item(
            item_id: str,
            title: Optional[str] = Form(None),
            description: Optional[str] = Form(None),
            price: Optional[str] = Form(None),
            type_detail: Optional[str] = Form(None),
            features: Optional[List[str]] = Form(None),
            specifications: Optional[str] = Form(None),
            is_active: Optional[str] = Form(None, alias="isActive"),
            image: Optional[UploadFile] = File(None),
            current_user: User = Depends(get_current_user),
            db: Session = Depends(get_db)
        ):
            db_item = crud.get_item(db, kind, item_id)
            item_update = validate_form(CatalogItemUpdate, _form_data(
                title, description, price, type_detail, features, specifications, is_active
            ))
            kind.check_type_detail(item_update.type_detail)
            image_path = await save_image(image, kind.upload_namespace)
            return crud.update_item(db, kind, db_item, item_update, image=image_path)
    else:
        @router.post("", response_model=response_model, status_code=status.HTTP_201_CREATED)
        async def create_item(
            item: CatalogItemCreate,
            current_user: User = Depends(get_current_user),
            db: Session = Depends(get_db)
        ):
            kind.check_type_detail(item.type_detail)
            return crud.create_item(db, kind, item)

        @router.api_route("/{item_id}", methods=["PUT", "PATCH"], response_model=response_model)
        async def update_item(
            item_id: str,
            item_update: CatalogItemUpdate,
            current_user: User = Depends(get_current_user),
            db: Session = Depends(get_db)
        ):
            db_item = crud.get_item(db, kind, item_id)
            kind.check_type_detail(item_update.type_detail)
            return crud.update_item(db, kind, db_item, item_update)

    @router.delete("/{item_id}")
    async def delete_item(
        item_id: str,
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db)
    ):
        db_item = crud.get_item(db, kind, item_id)
        crud.delete_item(db, kind, db_item)
        logger.info(f"{kind.name} item {item_id} deleted by user {current_user.id}")
        return {"message": f"{kind.label} deleted successfully"}

    return router


routers = {kind.name: build_catalog_router(kind) for kind in CATALOG_KINDS}
