"""
REST API routes for the tool catalog.

Handlers stay thin: they translate HTTP into service calls and service
results into response models. Errors raised by the services are rendered by
the exception handlers in ``toolcatalog.main``.
"""
from fastapi import APIRouter, Depends, File, Request, Response, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from toolcatalog.core.database import get_session
from toolcatalog.core.exceptions import ValidationError
from toolcatalog.core.init_settings import settings
from toolcatalog.models import DETAIL_FIELDS, ToolDetail
from toolcatalog.rest.schemas import (
    ToolIn,
    ToolResponse,
    ToolDetailIn,
    ToolDetailResponse,
    ToolPageResponse,
    UploadResponse,
)
from toolcatalog.services import tool_details, tools, uploads

router = APIRouter(prefix="/api", tags=["REST API"])


@router.get("/health")
async def health():
    return {"ok": True}


# =============================================================================
# Tools
# =============================================================================

@router.get("/tools", response_model=list[ToolResponse])
async def list_tools(session: AsyncSession = Depends(get_session)):
    """List all tools, newest first, with the slug of their detail page."""
    return await tools.list_tools(session)


@router.get("/tools/{tool_id}", response_model=ToolResponse)
async def get_tool(tool_id: int, session: AsyncSession = Depends(get_session)):
    return await tools.get_tool(session, tool_id)


@router.post("/tools", response_model=ToolResponse, status_code=status.HTTP_201_CREATED)
async def create_tool(payload: ToolIn, session: AsyncSession = Depends(get_session)):
    return await tools.create_tool(session, payload.model_dump())


@router.put("/tools/{tool_id}", response_model=ToolResponse)
async def update_tool(
    tool_id: int,
    payload: ToolIn,
    session: AsyncSession = Depends(get_session),
):
    return await tools.update_tool(session, tool_id, payload.model_dump())


@router.delete("/tools/{tool_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tool(tool_id: int, session: AsyncSession = Depends(get_session)):
    """Delete a tool; its detail record goes first."""
    await tools.delete_tool(session, tool_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Tool details
# =============================================================================

@router.post("/tool-details", response_model=ToolDetailResponse)
async def upsert_tool_detail(
    payload: ToolDetailIn,
    response: Response,
    session: AsyncSession = Depends(get_session),
):
    """Create (201) or update (200) the detail record of ``tool_id``."""
    detail, created = await tool_details.upsert_tool_detail(session, payload.model_dump())
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return detail


@router.get("/tool-details/by-tool/{tool_id}", response_model=ToolDetailResponse | None)
async def get_tool_detail_by_tool(tool_id: int, session: AsyncSession = Depends(get_session)):
    """Detail record for the admin editor; null when the tool has none."""
    return await tool_details.get_tool_detail_by_tool_id(session, tool_id)


@router.get("/tool-details/{slug}", response_model=ToolPageResponse)
async def get_tool_page(slug: str, session: AsyncSession = Depends(get_session)):
    """Tool fields joined with its details, for the public detail page."""
    detail = await tool_details.get_tool_detail_by_slug(session, slug)
    return tool_page_from_model(detail)


def tool_page_from_model(detail: ToolDetail) -> ToolPageResponse:
    tool = detail.tool
    return ToolPageResponse(
        tool_id=tool.id,
        title=tool.title,
        category=tool.category,
        description=tool.description,
        image_url=tool.image_url,
        link_url=tool.link_url,
        badge=tool.badge,
        details_id=detail.id,
        slug=detail.slug,
        updated_at=detail.updated_at,
        **{name: getattr(detail, name) for name in DETAIL_FIELDS},
    )


# =============================================================================
# Uploads
# =============================================================================

@router.post("/upload", response_model=UploadResponse)
async def upload_image(request: Request, image: UploadFile | None = File(default=None)):
    """Store one file sent as the ``image`` form field and return its public URL."""
    if image is None or not image.filename:
        raise ValidationError("No file uploaded")
    data = await image.read()
    filename = await uploads.store_upload(settings.UPLOAD_DIR, image.filename, data)
    return UploadResponse(url=str(request.url_for("uploads", path=f"/{filename}")))
