# Import models và schemas cho user
from .models import User
from .schemas import UserCreate, UserUpdate, UserResponse, UserSummary

# Export crud functions
from .crud import (
    get_user,
    get_user_by_username,
    get_user_by_email,
    get_users_by_ids,
    admin_exists,
    create_user,
    update_user,
)
