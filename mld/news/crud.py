from sqlalchemy import or_
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional
from .models import NewsPost
from .schemas import NewsCreate, NewsUpdate
from ..core.exceptions import NotFound
from ..user.crud import get_users_by_ids
from ..user.schemas import UserSummary
import logging

logger = logging.getLogger(__name__)


def get_news(db: Session, news_id: str) -> NewsPost:
    news = db.query(NewsPost).filter(NewsPost.id == news_id).first()
    if not news:
        raise NotFound("News post not found")
    return news


def list_published_news(db: Session, q: Optional[str] = None) -> List[NewsPost]:
    """
    Danh sách bài viết đã publish, mới nhất trước.
    Có thể lọc theo từ khóa trong tiêu đề hoặc nội dung.
    """
    query = db.query(NewsPost).filter(NewsPost.is_published == True)
    if q and q.strip():
        pattern = f"%{q.strip()}%"
        query = query.filter(or_(NewsPost.title.ilike(pattern), NewsPost.content.ilike(pattern)))
    return query.order_by(NewsPost.created_at.desc()).all()


def save_news(db: Session, news: NewsPost, action: str, image: Optional[str] = None) -> NewsPost:
    try:
        db.commit()
        db.refresh(news)
    except Exception as e:
        db.rollback()
        logger.error(f"Error {action} news post: {str(e)}")
        if image:
            logger.warning(f"Uploaded image {image} is left on disk without a news post")
        raise
    return news


def create_news(db: Session, news: NewsCreate, image: str, author_id: str) -> NewsPost:
    db_news = NewsPost(
        title=news.title,
        content=news.content,
        is_published=news.is_published,
        image=image,
        author_id=author_id,
        likes=[],
        comments=[],
    )
    db.add(db_news)
    return save_news(db, db_news, "creating", image)


def update_news(db: Session, db_news: NewsPost, news_update: NewsUpdate, image: Optional[str] = None) -> NewsPost:
    for key, value in news_update.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_news, key, value)
    if image:
        db_news.image = image
    return save_news(db, db_news, "updating", image)


def delete_news(db: Session, db_news: NewsPost) -> None:
    # Comment và reply nằm trong cùng row nên bị xóa theo
    try:
        db.delete(db_news)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting news post: {str(e)}")
        raise


def _summary(users: Dict[str, Any], user_id: Optional[str]) -> Optional[UserSummary]:
    user = users.get(user_id) if user_id else None
    return UserSummary.model_validate(user) if user else None


def to_response(db: Session, news: NewsPost, users: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Chuyển NewsPost thành dict cho NewsResponse, thay user id của tác giả,
    người bình luận và người trả lời bằng thông tin hiển thị.
    Có thể truyền sẵn users đã lấy để tránh truy vấn lại.
    """
    if users is None:
        users = get_users_by_ids(db, news.author_ids())
    return {
        "id": news.id,
        "title": news.title,
        "content": news.content,
        "image": news.image,
        "author": _summary(users, news.author_id),
        "likes": list(news.likes or []),
        "comments": [
            {
                "id": comment["id"],
                "user": _summary(users, comment.get("user")),
                "content": comment["content"],
                "created_at": comment["createdAt"],
                "replies": [
                    {
                        "id": reply["id"],
                        "user": _summary(users, reply.get("user")),
                        "content": reply["content"],
                        "created_at": reply["createdAt"],
                    }
                    for reply in comment.get("replies", [])
                ],
            }
            for comment in news.comments or []
        ],
        "is_published": news.is_published,
        "created_at": news.created_at,
        "updated_at": news.updated_at,
    }


def to_response_list(db: Session, news_list: List[NewsPost]) -> List[Dict[str, Any]]:
    # Một truy vấn user cho cả danh sách
    user_ids = [user_id for news in news_list for user_id in news.author_ids()]
    users = get_users_by_ids(db, user_ids)
    return [to_response(db, news, users) for news in news_list]
