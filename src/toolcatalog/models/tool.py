from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey, Index, Text, DateTime, func, select
from sqlalchemy.orm import Mapped, mapped_column, relationship, column_property

from toolcatalog.models.base import Base

BADGES = ("Novo", "Atualizado")

# Free-text columns of a detail record, written as-is by the upsert
DETAIL_FIELDS = (
    "owner",
    "owner_contact",
    "update_schedule",
    "data_source",
    "data_source_url",
    "access_requirements",
    "tags",
    "content_md",
    "changelog_md",
    "content_html",
    "changelog_html",
)


class Tool(Base):
    __tablename__ = "tools"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(Text)
    category: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    description: Mapped[str] = mapped_column(Text)
    image_url: Mapped[Optional[str]] = mapped_column("imageUrl", Text, nullable=True)
    link_url: Mapped[str] = mapped_column("linkUrl", Text)
    badge: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    # No cascade: the service deletes the detail row before the tool
    details: Mapped[Optional["ToolDetail"]] = relationship(back_populates="tool", uselist=False)


class ToolDetail(Base):
    __tablename__ = "tool_details"
    __table_args__ = (Index("idx_tool_details_slug", "slug", unique=True),)

    id: Mapped[int] = mapped_column(primary_key=True)
    tool_id: Mapped[int] = mapped_column(ForeignKey("tools.id"), unique=True)
    slug: Mapped[str] = mapped_column(Text)
    owner: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    owner_contact: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    update_schedule: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    data_source: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    data_source_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    access_requirements: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tags: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    content_md: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    changelog_md: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    content_html: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    changelog_html: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )

    tool: Mapped["Tool"] = relationship(back_populates="details")


# Slug of the tool's detail page (or None), loaded with every Tool row
Tool.details_slug = column_property(
    select(ToolDetail.slug)
    .where(ToolDetail.tool_id == Tool.id)
    .correlate_except(ToolDetail)
    .scalar_subquery()
)
