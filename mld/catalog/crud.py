from sqlalchemy.orm import Session
from typing import List, Optional
from .kinds import CatalogKind
from .schemas import CatalogItemCreate, CatalogItemUpdate
from ..core.exceptions import NotFound
import logging

logger = logging.getLogger(__name__)


def list_items(db: Session, kind: CatalogKind, active_only: bool = False, type_detail: Optional[str] = None) -> List:
    model = kind.model
    query = db.query(model)
    if active_only:
        query = query.filter(model.is_active == True)
    if type_detail:
        query = query.filter(model.type_detail == type_detail)
    return query.order_by(model.created_at.desc()).all()


def get_item(db: Session, kind: CatalogKind, item_id: str):
    """
    Lấy một item theo id

    Raises:
        NotFound: Nếu không có item với id này
    """
    item = db.query(kind.model).filter(kind.model.id == item_id).first()
    if not item:
        raise NotFound(f"{kind.label} not found")
    return item


def _commit(db: Session, item, action: str, kind: CatalogKind, image: Optional[str] = None):
    try:
        db.commit()
        db.refresh(item)
    except Exception as e:
        db.rollback()
        logger.error(f"Error {action} {kind.name} item: {str(e)}")
        if image:
            logger.warning(f"Uploaded image {image} is left on disk without a {kind.name} item")
        raise


def create_item(db: Session, kind: CatalogKind, item: CatalogItemCreate, image: Optional[str] = None):
    db_item = kind.model(**item.model_dump())
    if kind.has_image:
        db_item.image = image
    db.add(db_item)
    _commit(db, db_item, "creating", kind, image)
    logger.info(f"Created {kind.name} item {db_item.id}")
    return db_item


def update_item(db: Session, kind: CatalogKind, db_item, item_update: CatalogItemUpdate, image: Optional[str] = None):
    """
    Cập nhật một phần các trường của item.
    Chỉ các trường được gửi lên mới bị thay thế, image mới thay cho image cũ.
    """
    update_data = item_update.model_dump(exclude_unset=True, exclude_none=True)
    for key, value in update_data.items():
        setattr(db_item, key, value)
    if image and kind.has_image:
        db_item.image = image
    _commit(db, db_item, "updating", kind, image)
    logger.info(f"Updated {kind.name} item {db_item.id}")
    return db_item


def delete_item(db: Session, kind: CatalogKind, db_item) -> None:
    item_id = db_item.id
    if kind.soft_delete:
        db_item.is_active = False
    else:
        db.delete(db_item)
    try:
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting {kind.name} item {item_id}: {str(e)}")
        raise
    logger.info(f"Deleted {kind.name} item {item_id} ({'soft' if kind.soft_delete else 'hard'})")
