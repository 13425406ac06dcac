import os
from pathlib import Path
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

# Tìm file .env ở thư mục gốc của repo
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    logger.info(f"Loading environment from: {env_path}")
    load_dotenv(dotenv_path=env_path, override=False)

# Cấu hình cơ bản
DEBUG = os.getenv("DEBUG", "False").lower() == "true"
PORT = int(os.getenv("PORT", "5000"))

# Cấu hình JWT
_DEFAULT_SECRET_KEY = "mld-development-secret-key"
SECRET_KEY = os.getenv("SECRET_KEY") or _DEFAULT_SECRET_KEY
if SECRET_KEY == _DEFAULT_SECRET_KEY:
    logger.warning("SECRET_KEY is not set, using the development fallback")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(24 * 60)))

# Cấu hình database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./mld.db")

# Cấu hình upload
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
UPLOAD_URL_PREFIX = "/uploads"
MAX_UPLOAD_SIZE = int(os.getenv("MAX_UPLOAD_SIZE", str(5 * 1024 * 1024)))
