import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, TIMESTAMP
from ..core.database import Base


def new_id() -> str:
    return uuid.uuid4().hex


# Timestamp tính ở Python để có độ chính xác micro giây, SQLite CURRENT_TIMESTAMP chỉ tới giây
def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(Base):
    __tablename__ = "users"
    id = Column(String(32), primary_key=True, default=new_id)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(100), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone_number = Column(String(30))
    role = Column(String(20), nullable=False, default="user")
    created_at = Column(TIMESTAMP, default=utcnow)
    updated_at = Column(TIMESTAMP, default=utcnow, onupdate=utcnow)
