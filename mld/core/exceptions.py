"""
Các lỗi nghiệp vụ dùng chung, mỗi lỗi gắn với một HTTP status code
"""

from typing import Dict, Optional
from fastapi import status


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"

    def __init__(self, detail: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        self.detail = detail or self.default_detail
        self.headers = headers
        super().__init__(self.detail)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request data"


class InvalidFile(ValidationError):
    default_detail = "Only image files are allowed!"


class FileTooLarge(ValidationError):
    default_detail = "File size too large."


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Please authenticate"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not authorized to perform this action"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"


class ServerError(AppError):
    pass
