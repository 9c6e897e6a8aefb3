from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from taskboard.db.base import Base, EntityMixin, TimestampMixin


class BoardColumn(Base, EntityMixin, TimestampMixin):
    __tablename__ = "board_columns"
    name: Mapped[str] = mapped_column(String(100), nullable=False)
