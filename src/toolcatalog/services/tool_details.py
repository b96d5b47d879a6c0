"""
Detail pages: one optional ToolDetail per Tool, published under a slug.
"""
import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from toolcatalog.core.exceptions import Conflict, NotFound, ValidationError
from toolcatalog.models import DETAIL_FIELDS, Tool, ToolDetail
from toolcatalog.services import slug as slugs

logger = logging.getLogger(__name__)


async def _slug_holder(session: AsyncSession, slug: str) -> int | None:
    """tool_id of the detail currently using ``slug``."""
    return await session.scalar(select(ToolDetail.tool_id).where(ToolDetail.slug == slug))


async def get_tool_detail_by_tool_id(session: AsyncSession, tool_id: int) -> ToolDetail | None:
    return await session.scalar(select(ToolDetail).where(ToolDetail.tool_id == tool_id))


async def get_tool_detail_by_slug(session: AsyncSession, slug: str) -> ToolDetail:
    """Detail record with its tool loaded, for the public page."""
    stmt = (
        select(ToolDetail)
        .where(ToolDetail.slug == slug)
        .options(selectinload(ToolDetail.tool))
    )
    detail = await session.scalar(stmt)
    if detail is None:
        raise NotFound("Details not found", slug)
    return detail


async def upsert_tool_detail(
    session: AsyncSession,
    fields: Mapping[str, Any],
    *,
    retry_on_race: bool = True,
) -> tuple[ToolDetail, bool]:
    """Create or update the detail record of ``fields["tool_id"]``.

    Returns the persisted row and whether it was created.

    The existence check and the insert are not atomic. When two callers
    insert a detail for the same tool, the unique constraint on ``tool_id``
    rejects the second one; that caller retries once as an update.
    """
    tool_id = fields.get("tool_id")
    if not tool_id:
        raise ValidationError("tool_id is required")

    slug = slugs.normalize(fields.get("slug"))
    if not slugs.is_valid(slug):
        raise ValidationError(
            "Invalid slug. Use lowercase letters, digits and hyphens (min 3 chars)."
        )

    if await session.get(Tool, tool_id) is None:
        raise NotFound("Tool not found", tool_id)

    holder = await _slug_holder(session, slug)
    if holder is not None and holder != tool_id:
        raise Conflict(f"Slug already in use: {slug}")

    values = {name: fields.get(name) for name in DETAIL_FIELDS}
    detail = await get_tool_detail_by_tool_id(session, tool_id)
    created = detail is None
    if created:
        detail = ToolDetail(tool_id=tool_id, slug=slug, **values)
        session.add(detail)
    else:
        detail.slug = slug
        for name, value in values.items():
            setattr(detail, name, value)
        detail.updated_at = func.now()

    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        if created and retry_on_race and await _slug_holder(session, slug) in (None, tool_id):
            logger.warning("Concurrent insert of details for tool %s, retrying as update", tool_id)
            return await upsert_tool_detail(session, fields, retry_on_race=False)
        raise Conflict(f"Slug already in use: {slug}") from exc

    await session.refresh(detail)
    logger.info(
        "Tool details %s: tool_id=%s slug=%s",
        "created" if created else "updated",
        tool_id,
        slug,
    )
    return detail, created
