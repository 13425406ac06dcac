"""
Bài viết tin tức và các bình luận, trả lời nhúng bên trong.

Comment và reply không có bảng riêng: chúng là các dict trong cột JSON
`comments` của NewsPost, mỗi phần tử có `id` duy nhất trong phạm vi cha của nó.
Mọi thay đổi đi qua các method của NewsPost. Các method luôn gán lại một list
mới cho cột JSON vì SQLAlchemy không theo dõi thay đổi bên trong list/dict.
"""

import copy
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, String, Text, Boolean, JSON, TIMESTAMP, ForeignKey
from ..core.database import Base
from ..user.models import new_id, utcnow


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class NewsPost(Base):
    __tablename__ = "news"
    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(255), nullable=False, index=True)
    content = Column(Text, nullable=False)
    image = Column(String(255), nullable=False)
    author_id = Column(String(32), ForeignKey("users.id"), nullable=False)
    likes = Column(JSON, nullable=False, default=list)
    comments = Column(JSON, nullable=False, default=list)
    is_published = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP, default=utcnow, index=True)
    updated_at = Column(TIMESTAMP, default=utcnow, onupdate=utcnow)

    # Likes

    def toggle_like(self, user_id: str) -> bool:
        """Thêm user vào likes nếu chưa có, ngược lại bỏ ra. Trả về True nếu đã like."""
        likes = list(self.likes or [])
        if user_id in likes:
            likes.remove(user_id)
            liked = False
        else:
            likes.append(user_id)
            liked = True
        self.likes = likes
        return liked

    # Comments

    def find_comment(self, comment_id: str) -> Optional[Dict[str, Any]]:
        for comment in self.comments or []:
            if comment["id"] == comment_id:
                return comment
        return None

    def add_comment(self, user_id: str, content: str) -> Dict[str, Any]:
        comment = {
            "id": new_id(),
            "user": user_id,
            "content": content,
            "replies": [],
            "createdAt": _now_iso(),
        }
        self.comments = copy.deepcopy(self.comments or []) + [comment]
        return comment

    def remove_comment(self, comment_id: str) -> None:
        # Xóa comment thì các reply của nó cũng mất theo
        self.comments = [copy.deepcopy(c) for c in self.comments or [] if c["id"] != comment_id]

    # Replies

    def find_reply(self, comment_id: str, reply_id: str) -> Optional[Dict[str, Any]]:
        comment = self.find_comment(comment_id)
        if comment is None:
            return None
        for reply in comment.get("replies", []):
            if reply["id"] == reply_id:
                return reply
        return None

    def add_reply(self, comment_id: str, user_id: str, content: str) -> Dict[str, Any]:
        reply = {
            "id": new_id(),
            "user": user_id,
            "content": content,
            "createdAt": _now_iso(),
        }
        self.comments = self._map_comment(
            comment_id, lambda c: {**c, "replies": c.get("replies", []) + [reply]}
        )
        return reply

    def remove_reply(self, comment_id: str, reply_id: str) -> None:
        self.comments = self._map_comment(
            comment_id,
            lambda c: {**c, "replies": [r for r in c.get("replies", []) if r["id"] != reply_id]},
        )

    def _map_comment(self, comment_id: str, update) -> List[Dict[str, Any]]:
        comments = copy.deepcopy(self.comments or [])
        return [update(c) if c["id"] == comment_id else c for c in comments]

    def author_ids(self) -> List[str]:
        """Tất cả user id cần hiển thị tên: tác giả, người bình luận, người trả lời"""
        ids = [self.author_id]
        for comment in self.comments or []:
            ids.append(comment.get("user"))
            ids.extend(reply.get("user") for reply in comment.get("replies", []))
        return ids
