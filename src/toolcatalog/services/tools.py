"""
Tool CRUD over an injected async session.

Every function takes the session as its first argument; the REST router gets
it from ``get_session`` and GraphQL resolvers open one from the session
factory.
"""
import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from toolcatalog.core.exceptions import NotFound, ValidationError
from toolcatalog.core.init_settings import settings
from toolcatalog.models import BADGES, Tool, ToolDetail

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("title", "category", "description", "image_url", "link_url", "badge")

# Wire names used in error messages
_FIELD_LABELS = {"link_url": "linkUrl", "image_url": "imageUrl"}


def _clean_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Validate incoming tool fields and return the column values to write."""
    required = ["title", "description", "link_url"]
    if settings.CATEGORY_REQUIRED:
        required.append("category")

    missing = [name for name in required if not str(fields.get(name) or "").strip()]
    if missing:
        labels = ", ".join(_FIELD_LABELS.get(name, name) for name in missing)
        raise ValidationError(f"Required fields missing: {labels}")

    badge = fields.get("badge") or None
    if badge is not None and badge not in BADGES:
        raise ValidationError(f"Invalid badge {badge!r}; expected one of {', '.join(BADGES)}")

    values = {name: fields.get(name) for name in MUTABLE_FIELDS}
    values["badge"] = badge
    values["category"] = values["category"] or None
    values["image_url"] = values["image_url"] or None
    return values


async def list_tools(session: AsyncSession) -> list[Tool]:
    """All tools, newest first."""
    result = await session.execute(select(Tool).order_by(Tool.id.desc()))
    return list(result.scalars().all())


async def get_tool(session: AsyncSession, tool_id: int) -> Tool:
    tool = await session.get(Tool, tool_id)
    if tool is None:
        raise NotFound("Tool not found", tool_id)
    return tool


async def create_tool(session: AsyncSession, fields: Mapping[str, Any]) -> Tool:
    tool = Tool(**_clean_fields(fields))
    session.add(tool)
    await session.commit()
    await session.refresh(tool)
    logger.info("Tool created: %s (%s)", tool.title, tool.badge or "no badge")
    return tool


async def update_tool(session: AsyncSession, tool_id: int, fields: Mapping[str, Any]) -> Tool:
    """Replace every mutable field of an existing tool."""
    tool = await get_tool(session, tool_id)
    for name, value in _clean_fields(fields).items():
        setattr(tool, name, value)
    await session.commit()
    await session.refresh(tool)
    logger.info("Tool updated: %s (%s)", tool.title, tool.badge or "no badge")
    return tool


async def delete_tool(session: AsyncSession, tool_id: int) -> None:
    """Delete a tool together with its detail record, if it has one."""
    await session.execute(delete(ToolDetail).where(ToolDetail.tool_id == tool_id))
    result = await session.execute(delete(Tool).where(Tool.id == tool_id))
    if result.rowcount == 0:
        await session.rollback()
        raise NotFound("Tool not found", tool_id)
    await session.commit()
    logger.info("Tool %s and its details (if any) deleted", tool_id)


async def list_categories(session: AsyncSession) -> list[str]:
    """Distinct non-empty categories, sorted case-insensitively."""
    result = await session.execute(select(Tool.category).distinct())
    names = {(name or "").strip() for name in result.scalars().all()}
    return sorted((name for name in names if name), key=str.casefold)
