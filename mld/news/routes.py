from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session
from typing import List, Optional
from ..core.auth import get_current_user, is_owner_or_admin, require_role
from ..core.database import get_db
from ..core.exceptions import Forbidden, NotFound, ValidationError
from ..core.forms import validate_form
from ..core.uploads import NEWS, save_image
from ..user.models import User
from .schemas import CommentCreate, NewsCreate, NewsResponse, NewsUpdate
from . import crud
import logging

router = APIRouter(prefix="/api/news", tags=["News"])

# Tạo logger
logger = logging.getLogger(__name__)

require_admin = require_role("admin")


@router.get("", response_model=List[NewsResponse])
async def list_news(q: Optional[str] = None, db: Session = Depends(get_db)):
    return crud.to_response_list(db, crud.list_published_news(db, q))


@router.get("/{news_id}", response_model=NewsResponse)
async def get_news(news_id: str, db: Session = Depends(get_db)):
    return crud.to_response(db, crud.get_news(db, news_id))


@router.post("", response_model=NewsResponse, status_code=status.HTTP_201_CREATED)
async def create_news(
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    is_published: Optional[str] = Form(None, alias="isPublished"),
    image: Optional[UploadFile] = File(None),
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    news = validate_form(NewsCreate, {"title": title, "content": content, "is_published": is_published})
    if image is None or not image.filename:
        raise ValidationError("image: an image file is required")
    image_path = await save_image(image, NEWS)
    db_news = crud.create_news(db, news, image_path, current_user.id)
    logger.info(f"News post {db_news.id} created by admin {current_user.id}")
    return crud.to_response(db, db_news)


@router.put("/{news_id}", response_model=NewsResponse)
async def update_news(
    news_id: str,
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    is_published: Optional[str] = Form(None, alias="isPublished"),
    image: Optional[UploadFile] = File(None),
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    db_news = crud.get_news(db, news_id)
    news_update = validate_form(NewsUpdate, {"title": title, "content": content, "is_published": is_published})
    image_path = await save_image(image, NEWS)
    db_news = crud.update_news(db, db_news, news_update, image_path)
    logger.info(f"News post {news_id} updated by admin {current_user.id}")
    return crud.to_response(db, db_news)


@router.delete("/{news_id}")
async def delete_news(
    news_id: str,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    db_news = crud.get_news(db, news_id)
    crud.delete_news(db, db_news)
    logger.info(f"News post {news_id} deleted by admin {current_user.id}")
    return {"message": "News post deleted successfully"}


@router.post("/{news_id}/like", response_model=NewsResponse)
async def toggle_like(
    news_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Like hoặc bỏ like bài viết.
    Cùng một endpoint cho cả hai chiều, dựa trên việc user đã like hay chưa.
    """
    db_news = crud.get_news(db, news_id)
    db_news.toggle_like(current_user.id)
    db_news = crud.save_news(db, db_news, "liking")
    return crud.to_response(db, db_news)


@router.post("/{news_id}/comment", response_model=NewsResponse)
async def add_comment(
    news_id: str,
    comment: CommentCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    db_news = crud.get_news(db, news_id)
    db_news.add_comment(current_user.id, comment.content)
    crud.save_news(db, db_news, "commenting on")
    # Đọc lại bài viết để response phản ánh đúng thay đổi vừa ghi
    return crud.to_response(db, crud.get_news(db, news_id))


@router.delete("/{news_id}/comment/{comment_id}", response_model=NewsResponse)
async def delete_comment(
    news_id: str,
    comment_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    db_news = crud.get_news(db, news_id)
    comment = db_news.find_comment(comment_id)
    if comment is None:
        raise NotFound("Comment not found")

    if not is_owner_or_admin(current_user, comment.get("user")):
        logger.warning(f"User {current_user.id} with role {current_user.role} tried to delete comment {comment_id} of user {comment.get('user')}")
        raise Forbidden("Not authorized to delete this comment")

    db_news.remove_comment(comment_id)
    crud.save_news(db, db_news, "deleting comment of")
    logger.info(f"Comment {comment_id} deleted from news post {news_id} by user {current_user.id}")
    return crud.to_response(db, crud.get_news(db, news_id))


@router.post("/{news_id}/comment/{comment_id}/reply", response_model=NewsResponse)
async def add_reply(
    news_id: str,
    comment_id: str,
    reply: CommentCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    db_news = crud.get_news(db, news_id)
    if db_news.find_comment(comment_id) is None:
        raise NotFound("Comment not found")

    db_news.add_reply(comment_id, current_user.id, reply.content)
    crud.save_news(db, db_news, "replying on")
    return crud.to_response(db, crud.get_news(db, news_id))


@router.delete("/{news_id}/comment/{comment_id}/reply/{reply_id}", response_model=NewsResponse)
async def delete_reply(
    news_id: str,
    comment_id: str,
    reply_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    db_news = crud.get_news(db, news_id)
    if db_news.find_comment(comment_id) is None:
        raise NotFound("Comment not found")
    reply = db_news.find_reply(comment_id, reply_id)
    if reply is None:
        raise NotFound("Reply not found")

    if not is_owner_or_admin(current_user, reply.get("user")):
        logger.warning(f"User {current_user.id} with role {current_user.role} tried to delete reply {reply_id} of user {reply.get('user')}")
        raise Forbidden("Not authorized to delete this reply")

    db_news.remove_reply(comment_id, reply_id)
    crud.save_news(db, db_news, "deleting reply of")
    logger.info(f"Reply {reply_id} deleted from comment {comment_id} by user {current_user.id}")
    return crud.to_response(db, crud.get_news(db, news_id))
