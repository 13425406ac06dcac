from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone
from typing import Optional
from sqlalchemy.orm import Session
from . import config
from .database import get_db
from .exceptions import Forbidden, Unauthenticated
from ..user.models import User
import logging

# auto_error=False để mọi lỗi xác thực đều trả về cùng một thông báo
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)

logger = logging.getLogger(__name__)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Tạo JWT token với thời hạn sử dụng

    Args:
        data: Các claim cần mã hóa (ít nhất là "sub")
        expires_delta: Thời hạn token, mặc định lấy từ cấu hình

    Returns:
        str: Token đã ký
    """
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def create_user_token(user: User) -> str:
    return create_access_token({"sub": user.id, "role": user.role})


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Lấy người dùng hiện tại từ bearer token

    Raises:
        Unauthenticated: Thiếu header, chữ ký sai, token hết hạn hoặc user không còn tồn tại
    """
    if not token:
        logger.info("Authentication failed: missing or malformed Authorization header")
        raise Unauthenticated()

    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    except JWTError as e:
        logger.info(f"Authentication failed: {str(e)}")
        raise Unauthenticated()

    user_id = payload.get("sub")
    if user_id is None:
        logger.info("Authentication failed: token has no subject")
        raise Unauthenticated()

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        logger.info(f"Authentication failed: user {user_id} no longer exists")
        raise Unauthenticated()

    return user


def require_role(role: str):
    """
    Dependency factory kiểm tra vai trò của người dùng đã xác thực

    Args:
        role: Vai trò bắt buộc, ví dụ "admin"

    Returns:
        function: Dependency dùng với FastAPI, trả về User hiện tại
    """
    async def _require_role(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role != role:
            logger.warning(f"User {current_user.id} ({current_user.username}) with role {current_user.role} tried to access a resource requiring role '{role}'")
            raise Forbidden(f"Only {role} users can access this endpoint")
        return current_user

    return _require_role


def is_owner_or_admin(user: User, owner_id: Optional[str]) -> bool:
    return user.role == "admin" or (owner_id is not None and owner_id == user.id)
