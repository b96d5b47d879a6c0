"""Pydantic models for REST API requests and responses.

Tools use the camelCase wire names the admin UI posts (``imageUrl``, ``linkUrl``,
``detailsSlug``); detail records are snake_case.
"""
from datetime import datetime
from pydantic import AliasChoices, BaseModel, Field


class ToolIn(BaseModel):
    """Tool fields as posted by the admin form.

    Everything is optional here so that missing values reach the service and
    come back as a 400 with the list of missing fields.
    """
    title: str | None = None
    category: str | None = None
    description: str | None = None
    image_url: str | None = Field(
        default=None, validation_alias=AliasChoices("imageUrl", "image_url")
    )
    link_url: str | None = Field(
        default=None, validation_alias=AliasChoices("linkUrl", "link_url")
    )
    badge: str | None = None


class ToolResponse(BaseModel):
    id: int
    title: str
    category: str | None = None
    description: str
    image_url: str | None = Field(default=None, serialization_alias="imageUrl")
    link_url: str = Field(serialization_alias="linkUrl")
    badge: str | None = None
    created_at: datetime | None = None
    details_slug: str | None = Field(default=None, serialization_alias="detailsSlug")

    model_config = {"from_attributes": True}


class ToolDetailIn(BaseModel):
    tool_id: int | None = None
    slug: str | None = None
    owner: str | None = None
    owner_contact: str | None = None
    update_schedule: str | None = None
    data_source: str | None = None
    data_source_url: str | None = None
    access_requirements: str | None = None
    tags: str | None = None
    content_md: str | None = None
    changelog_md: str | None = None
    content_html: str | None = None
    changelog_html: str | None = None


class ToolDetailResponse(BaseModel):
    id: int
    tool_id: int
    slug: str
    owner: str | None = None
    owner_contact: str | None = None
    update_schedule: str | None = None
    data_source: str | None = None
    data_source_url: str | None = None
    access_requirements: str | None = None
    tags: str | None = None
    content_md: str | None = None
    changelog_md: str | None = None
    content_html: str | None = None
    changelog_html: str | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class ToolPageResponse(BaseModel):
    """Tool joined with its detail record - what the public detail page renders."""
    tool_id: int = Field(serialization_alias="toolId")
    title: str
    category: str | None = None
    description: str
    image_url: str | None = Field(default=None, serialization_alias="imageUrl")
    link_url: str = Field(serialization_alias="linkUrl")
    badge: str | None = None
    details_id: int = Field(serialization_alias="detailsId")
    slug: str
    owner: str | None = None
    owner_contact: str | None = None
    update_schedule: str | None = None
    data_source: str | None = None
    data_source_url: str | None = None
    access_requirements: str | None = None
    tags: str | None = None
    content_md: str | None = None
    changelog_md: str | None = None
    content_html: str | None = None
    changelog_html: str | None = None
    updated_at: datetime | None = None


class UploadResponse(BaseModel):
    url: str
