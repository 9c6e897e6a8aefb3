from datetime import date
from typing import Any

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from taskboard.db.base import Base, EntityMixin, JSONDocument, TimestampMixin, utcnow


def today() -> date:
    return utcnow().date()


class Task(Base, EntityMixin, TimestampMixin):
    __tablename__ = "tasks"
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    link: Mapped[str] = mapped_column(String(2048), nullable=False)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True, default=today)
    comments: Mapped[list[str] | None] = mapped_column(JSONDocument, nullable=True)
    # snapshots of the referenced records taken when the task was written
    tags: Mapped[list[dict[str, Any]]] = mapped_column(JSONDocument, nullable=False, default=list)
    assignee: Mapped[dict[str, Any] | None] = mapped_column(JSONDocument, nullable=True)
    column: Mapped[dict[str, Any] | None] = mapped_column(JSONDocument, nullable=True)
    # plain text rendered from the snapshots, matched by the list filters
    tags_text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    assignee_text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    column_text: Mapped[str] = mapped_column(Text, nullable=False, default="")
