# Import các module cơ bản
from .database import get_db, Base, engine, SessionLocal
from .security import hash_password, verify_password

__all__ = [
    'Base', 'engine', 'get_db', 'SessionLocal',
    'verify_password', 'hash_password',
]

# Không import từ auth.py để tránh circular import
# Các module khác nên import trực tiếp từ core.auth
