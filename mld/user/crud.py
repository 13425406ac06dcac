from sqlalchemy.orm import Session
from typing import Dict, Iterable, Optional
from .models import User
from .schemas import UserCreate, UserUpdate
from ..core.security import hash_password
import logging

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_users_by_ids(db: Session, user_ids: Iterable[str]) -> Dict[str, User]:
    """
    Lấy nhiều user trong một truy vấn, trả về dict theo id

    Dùng để hiển thị tên tác giả của bài viết, bình luận và trả lời.
    """
    ids = {user_id for user_id in user_ids if user_id}
    if not ids:
        return {}
    return {user.id: user for user in db.query(User).filter(User.id.in_(ids)).all()}


def admin_exists(db: Session) -> bool:
    return db.query(User.id).filter(User.role == "admin").first() is not None


def create_user(db: Session, user: UserCreate, role: str = "user") -> User:
    """
    Tạo người dùng mới, mật khẩu được mã hóa trước khi lưu

    Args:
        db: Phiên database
        user: Thông tin đăng ký
        role: "user" khi đăng ký, "admin" khi setup

    Returns:
        User: Người dùng đã được tạo
    """
    db_user = User(
        username=user.username,
        email=user.email,
        password=hash_password(user.password),
        first_name=user.first_name,
        last_name=user.last_name,
        phone_number=user.phone_number,
        role=role,
    )
    try:
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating user {user.username}: {str(e)}")
        raise
    return db_user


def update_user(db: Session, db_user: User, user_update: UserUpdate) -> User:
    update_data = user_update.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        # Chỉ số điện thoại được phép xóa về rỗng
        if value is None and key != "phone_number":
            continue
        setattr(db_user, key, value)
    try:
        db.commit()
        db.refresh(db_user)
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating user {db_user.id}: {str(e)}")
        raise
    return db_user
