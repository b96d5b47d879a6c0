"""
Rendering of the public detail page.

Detail content is written by admins through a rich-text editor and is not
trusted: every HTML fragment, including HTML produced from Markdown, goes
through ``sanitize`` before it is handed to a page.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import markdown
import nh3

# Metadata shown above the body, in display order
METADATA_LABELS = (
    ("owner", "Owner"),
    ("owner_contact", "Contact"),
    ("update_schedule", "Update schedule"),
    ("data_source", "Data source"),
    ("data_source_url", "Data source link"),
    ("access_requirements", "Access requirements"),
)


def sanitize(html: str) -> str:
    """Strip scripts, event handlers and javascript: URLs from an HTML fragment."""
    return nh3.clean(html)


def render_markdown(text: str) -> str:
    return sanitize(markdown.markdown(text))


def render_rich_text(html: str | None, md: str | None) -> str | None:
    """HTML wins over Markdown when both are present; None when neither is."""
    if html:
        return sanitize(html)
    if md:
        return render_markdown(md)
    return None


def split_tags(tags: str | None) -> list[str]:
    return [tag.strip() for tag in (tags or "").split(",") if tag.strip()]


@dataclass(frozen=True)
class DetailView:
    title: str
    slug: str
    description: str = ""
    badge: str | None = None
    image_url: str | None = None
    link_url: str | None = None
    metadata: list[tuple[str, str]] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    body_html: str | None = None
    changelog_html: str | None = None
    updated_at: str | None = None


def render_detail(page: Mapping[str, Any]) -> DetailView:
    """Build the detail page from the joined tool + details payload."""
    return DetailView(
        title=page["title"],
        slug=page["slug"],
        description=page.get("description") or "",
        badge=page.get("badge"),
        image_url=page.get("imageUrl"),
        link_url=page.get("linkUrl"),
        metadata=[(label, page[key]) for key, label in METADATA_LABELS if page.get(key)],
        tags=split_tags(page.get("tags")),
        body_html=render_rich_text(page.get("content_html"), page.get("content_md")),
        changelog_html=render_rich_text(page.get("changelog_html"), page.get("changelog_md")),
        updated_at=page.get("updated_at"),
    )
