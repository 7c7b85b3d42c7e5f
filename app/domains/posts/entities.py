from datetime import datetime
from typing import Optional


class Post:
    """Сущность поста домена Posts"""

    def __init__(
        self,
        id: str,
        title: str,
        user_id: str,
        content: str = "",
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.content = content
        self.user_id = user_id
        self.created_at = created_at
        self.updated_at = updated_at

    def __eq__(self, other) -> bool:
        if not isinstance(other, Post):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Post(id={self.id}, title={self.title!r}, user_id={self.user_id})"
