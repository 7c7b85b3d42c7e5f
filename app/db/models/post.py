import uuid

from sqlalchemy import Column, DateTime, String, Text

from app.db.base import Base


def generate_post_id() -> str:
    return uuid.uuid4().hex


class Post(Base):
    __tablename__ = "posts"

    id = Column(String(32), primary_key=True, default=generate_post_id)
    title = Column(String(100), nullable=False)
    content = Column(Text, nullable=False, default="")
    # Владелец задается один раз при создании
    user_id = Column(String(255), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
