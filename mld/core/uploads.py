import aiofiles
import os
import random
import time
import logging
from fastapi import UploadFile
from typing import Optional
from . import config
from .exceptions import FileTooLarge, InvalidFile

# Cấu hình logging
logger = logging.getLogger(__name__)

# Thư mục con theo loại tài nguyên
CCTV = "cctv"
NANOBEAM = "nanobeam"
NEWS = "news"
NAMESPACES = (CCTV, NANOBEAM, NEWS)

CHUNK_SIZE = 64 * 1024


def _size_label(size: int) -> str:
    if size % (1024 * 1024) == 0:
        return f"{size // (1024 * 1024)}MB"
    if size % 1024 == 0:
        return f"{size // 1024}KB"
    return f"{size} bytes"


def _unique_filename(original_filename: Optional[str]) -> str:
    extension = os.path.splitext(original_filename or "")[1].lower()
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{extension}"


async def _read_limited(file: UploadFile, limit: int) -> bytes:
    # Đọc tối đa limit + 1 byte để phát hiện file quá lớn mà không đọc hết
    chunks = []
    total = 0
    while True:
        chunk = await file.read(CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > limit:
            raise FileTooLarge(f"File size too large. Maximum size is {_size_label(limit)}.")
        chunks.append(chunk)
    return b"".join(chunks)


async def save_image(file: Optional[UploadFile], namespace: str) -> Optional[str]:
    """
    Kiểm tra và lưu một file ảnh vào thư mục upload

    Args:
        file (UploadFile): File ảnh trong field "image", có thể None
        namespace (str): Thư mục con (cctv, nanobeam, news)

    Returns:
        Optional[str]: Đường dẫn public dạng /uploads/<namespace>/<file>, None nếu không có file

    Raises:
        InvalidFile: Content type không phải image/*
        FileTooLarge: File vượt quá MAX_UPLOAD_SIZE
    """
    if file is None or not file.filename:
        return None
    if namespace not in NAMESPACES:
        raise ValueError(f"Unknown upload namespace: {namespace}")

    # Kiểm tra kiểu file
    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        logger.info(f"Rejected upload {file.filename!r} with content type {content_type!r}")
        raise InvalidFile()

    # Kiểm tra toàn bộ nội dung trước khi ghi xuống đĩa
    content = await _read_limited(file, config.MAX_UPLOAD_SIZE)

    directory = os.path.join(config.UPLOAD_DIR, namespace)
    os.makedirs(directory, exist_ok=True)

    filename = _unique_filename(file.filename)
    async with aiofiles.open(os.path.join(directory, filename), "wb") as out_file:
        await out_file.write(content)

    logger.info(f"Saved upload {file.filename!r} as {namespace}/{filename} ({len(content)} bytes)")
    return f"{config.UPLOAD_URL_PREFIX}/{namespace}/{filename}"
