from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from ..core.database import get_db
from ..core.auth import create_user_token, get_current_user
from ..core.exceptions import Unauthenticated, ValidationError
from ..core.security import verify_password
from ..user.models import User
from ..user.schemas import AuthResponse, Login, UserCreate, UserResponse, UserUpdate
from ..user.crud import admin_exists, create_user, get_user_by_email, get_user_by_username, update_user
import logging

router = APIRouter(prefix="/api/auth", tags=["Authentication"])

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def _check_new_account(db: Session, user: UserCreate):
    if get_user_by_username(db, user.username) or get_user_by_email(db, user.email):
        raise ValidationError("Username or email already exists")
    if len(user.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(user: UserCreate, db: Session = Depends(get_db)):
    _check_new_account(db, user)
    new_user = create_user(db, user, role="user")
    logger.info(f"User registered: {new_user.id} ({new_user.username})")
    return AuthResponse(token=create_user_token(new_user), user=UserResponse.model_validate(new_user))


@router.post("/login", response_model=AuthResponse)
async def login(login_data: Login, db: Session = Depends(get_db)):
    # Kiểm tra xem đầu vào là email hay username
    if "@" in login_data.username:
        user = get_user_by_email(db, login_data.username)
    else:
        user = get_user_by_username(db, login_data.username)

    if not user or not verify_password(login_data.password, user.password):
        logger.info(f"Failed login attempt for {login_data.username!r}")
        raise Unauthenticated("Invalid credentials")

    return AuthResponse(token=create_user_token(user), user=UserResponse.model_validate(user))


@router.post("/setup", status_code=status.HTTP_201_CREATED)
async def setup_admin(user: UserCreate, db: Session = Depends(get_db)):
    """
    Tạo tài khoản admin đầu tiên.
    Chỉ thành công khi hệ thống chưa có admin nào.
    """
    if admin_exists(db):
        raise ValidationError("Admin user already exists")
    _check_new_account(db, user)
    admin = create_user(db, user, role="admin")
    logger.info(f"Initial admin created: {admin.id} ({admin.username})")
    return {"message": "Admin user created successfully"}


@router.get("/me", response_model=UserResponse)
@router.get("/profile", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("/me", response_model=UserResponse)
@router.put("/profile", response_model=UserResponse)
async def update_profile(
    user_update: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    # Kiểm tra email đã được người khác sử dụng chưa
    if user_update.email and user_update.email != current_user.email:
        existing = get_user_by_email(db, user_update.email)
        if existing and existing.id != current_user.id:
            raise ValidationError("Email already in use")

    return update_user(db, current_user, user_update)
