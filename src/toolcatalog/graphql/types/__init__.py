"""
GraphQL types with manual definitions for proper async support.

Conversions from the SQLAlchemy models happen in plain functions so that no
lazy relationship is ever touched outside the session that loaded it; the
detail record is only exposed when the resolver loaded it explicitly.
"""
import strawberry
from datetime import datetime

from toolcatalog import models


@strawberry.type
class ToolDetail:
    id: int
    tool_id: int
    slug: str
    owner: str | None
    owner_contact: str | None
    update_schedule: str | None
    data_source: str | None
    data_source_url: str | None
    access_requirements: str | None
    tags: str | None
    content_md: str | None
    changelog_md: str | None
    content_html: str | None
    changelog_html: str | None
    updated_at: datetime | None


@strawberry.type
class Tool:
    id: int
    title: str
    category: str | None
    description: str
    image_url: str | None
    link_url: str
    badge: str | None
    created_at: datetime | None
    details_slug: str | None

    _details: strawberry.Private[models.ToolDetail | None] = None

    @strawberry.field
    def details(self) -> ToolDetail | None:
        if self._details is None:
            return None
        return detail_from_model(self._details)


def detail_from_model(detail: models.ToolDetail) -> ToolDetail:
    return ToolDetail(
        id=detail.id,
        tool_id=detail.tool_id,
        slug=detail.slug,
        owner=detail.owner,
        owner_contact=detail.owner_contact,
        update_schedule=detail.update_schedule,
        data_source=detail.data_source,
        data_source_url=detail.data_source_url,
        access_requirements=detail.access_requirements,
        tags=detail.tags,
        content_md=detail.content_md,
        changelog_md=detail.changelog_md,
        content_html=detail.content_html,
        changelog_html=detail.changelog_html,
        updated_at=detail.updated_at,
    )


def tool_from_model(tool: models.Tool, details: models.ToolDetail | None = None) -> Tool:
    """Convert SQLAlchemy Tool model to Strawberry Tool type.

    Args:
        tool: The SQLAlchemy Tool model
        details: Its detail record, when the caller loaded it.
    """
    return Tool(
        id=tool.id,
        title=tool.title,
        category=tool.category,
        description=tool.description,
        image_url=tool.image_url,
        link_url=tool.link_url,
        badge=tool.badge,
        created_at=tool.created_at,
        details_slug=tool.details_slug,
        _details=details,
    )
