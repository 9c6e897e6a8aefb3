from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from taskboard.db.base import Base, EntityMixin, TimestampMixin


class User(Base, EntityMixin, TimestampMixin):
    __tablename__ = "users"
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(String(1024), nullable=False)
