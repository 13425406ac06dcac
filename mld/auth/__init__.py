"""
Auth module: đăng ký, đăng nhập, setup admin đầu tiên và hồ sơ cá nhân
"""

from .routes import router

__all__ = ["router"]
