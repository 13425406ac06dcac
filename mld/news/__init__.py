"""
News module: bài viết, like, bình luận và trả lời
"""

from .models import NewsPost
from .routes import router

__all__ = ["router", "NewsPost"]
