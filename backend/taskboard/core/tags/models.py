from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from taskboard.db.base import Base, EntityMixin, TimestampMixin


class Tag(Base, EntityMixin, TimestampMixin):
    __tablename__ = "tags"
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(50), nullable=False)
