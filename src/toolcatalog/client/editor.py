"""
Admin editor: form state for a tool and its optional detail page.

State never changes in place. ``reduce`` takes the current ``EditorState``
and an action and returns the next state; the async helpers at the bottom
drive the API and fold the outcome back into a state value.

Saving writes the tool first. The detail record is only written when at
least one detail field was filled in, using the id of the tool just saved
and a slug derived from the title when the slug field was left blank.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from toolcatalog.client.api import CatalogClient, ClientError
from toolcatalog.services.slug import normalize

TOOL_FORM_FIELDS = ("title", "category", "description", "imageUrl", "linkUrl", "badge")
DETAIL_FORM_FIELDS = (
    "slug",
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

Form = Mapping[str, str]


def _empty_form(fields: tuple[str, ...]) -> Form:
    return MappingProxyType({name: "" for name in fields})


def _form_from(record: Mapping[str, Any] | None, fields: tuple[str, ...]) -> Form:
    record = record or {}
    return MappingProxyType({name: str(record.get(name) or "") for name in fields})


EMPTY_TOOL_FORM = _empty_form(TOOL_FORM_FIELDS)
EMPTY_DETAIL_FORM = _empty_form(DETAIL_FORM_FIELDS)


@dataclass(frozen=True)
class EditorState:
    tool: Form = field(default_factory=lambda: EMPTY_TOOL_FORM)
    details: Form = field(default_factory=lambda: EMPTY_DETAIL_FORM)
    editing_id: int | None = None
    error: str = ""

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def has_detail_content(self) -> bool:
        return any(value.strip() for value in self.details.values())


# =============================================================================
# Actions
# =============================================================================

@dataclass(frozen=True)
class SetToolField:
    name: str
    value: str


@dataclass(frozen=True)
class SetDetailField:
    name: str
    value: str


@dataclass(frozen=True)
class StartEdit:
    tool: Mapping[str, Any]
    details: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class ImageUploaded:
    url: str


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Reset:
    pass


def _set(form: Form, fields: tuple[str, ...], name: str, value: str) -> Form:
    if name not in fields:
        raise KeyError(f"Unknown form field: {name}")
    return MappingProxyType({**form, name: value})


def reduce(state: EditorState, action) -> EditorState:
    if isinstance(action, SetToolField):
        return replace(state, tool=_set(state.tool, TOOL_FORM_FIELDS, action.name, action.value))
    if isinstance(action, SetDetailField):
        return replace(
            state, details=_set(state.details, DETAIL_FORM_FIELDS, action.name, action.value)
        )
    if isinstance(action, StartEdit):
        return EditorState(
            tool=_form_from(action.tool, TOOL_FORM_FIELDS),
            details=_form_from(action.details, DETAIL_FORM_FIELDS),
            editing_id=action.tool["id"],
        )
    if isinstance(action, ImageUploaded):
        return replace(state, tool=_set(state.tool, TOOL_FORM_FIELDS, "imageUrl", action.url))
    if isinstance(action, Failed):
        return replace(state, error=action.message)
    if isinstance(action, Reset):
        return EditorState()
    raise TypeError(f"Unknown editor action: {action!r}")


# =============================================================================
# Payloads
# =============================================================================

def tool_payload(state: EditorState) -> dict[str, Any]:
    payload: dict[str, Any] = dict(state.tool)
    payload["badge"] = payload["badge"] or None
    return payload


def detail_payload(state: EditorState, tool_id: int) -> dict[str, Any]:
    payload: dict[str, Any] = {name: value or None for name, value in state.details.items()}
    payload["slug"] = state.details["slug"].strip() or normalize(state.tool["title"])
    payload["tool_id"] = tool_id
    return payload


# =============================================================================
# API flows
# =============================================================================

async def load_for_edit(api: CatalogClient, tool_id: int) -> EditorState:
    """Editor state for an existing tool; a failed detail load leaves that form empty."""
    tool = await api.get_tool(tool_id)
    try:
        details = await api.get_tool_detail_by_tool(tool_id)
    except ClientError:
        details = None
    return reduce(EditorState(), StartEdit(tool, details))


async def submit(api: CatalogClient, state: EditorState) -> tuple[EditorState, dict | None]:
    """Save the tool and, when filled in, its details.

    Returns the next state and the saved tool. On failure the tool is None
    and the state carries the error message. If only the detail write failed,
    the state switches to editing the tool that was saved so a retry does not
    create it twice.
    """
    try:
        if state.is_editing:
            saved = await api.update_tool(state.editing_id, tool_payload(state))
        else:
            saved = await api.create_tool(tool_payload(state))
    except ClientError as exc:
        return reduce(state, Failed(exc.message)), None

    if state.has_detail_content:
        try:
            await api.upsert_tool_detail(detail_payload(state, saved["id"]))
        except ClientError as exc:
            return replace(state, editing_id=saved["id"], error=exc.message), None

    return EditorState(), saved


async def upload_image(
    api: CatalogClient, state: EditorState, content: bytes, filename: str
) -> EditorState:
    try:
        url = await api.upload_image(content, filename)
    except ClientError as exc:
        return reduce(state, Failed(f"Image upload failed: {exc.message}"))
    return reduce(state, ImageUploaded(url))


async def remove(api: CatalogClient, tool_id: int) -> None:
    await api.delete_tool(tool_id)
