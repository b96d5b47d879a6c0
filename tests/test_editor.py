import pytest

from toolcatalog.client import ClientError
from toolcatalog.client.editor import (
    DETAIL_FORM_FIELDS,
    TOOL_FORM_FIELDS,
    EditorState,
    Failed,
    ImageUploaded,
    Reset,
    SetDetailField,
    SetToolField,
    StartEdit,
    detail_payload,
    load_for_edit,
    reduce,
    remove,
    submit,
    tool_payload,
    upload_image,
)


def fill(state, **fields):
    for name, value in fields.items():
        state = reduce(state, SetToolField(name, value))
    return state


def filled_form(title="Mapa de Agências"):
    return fill(
        EditorState(),
        title=title,
        category="Rede",
        description="Mapa interativo.",
        linkUrl="https://example.com/mapa",
    )


# =============================================================================
# Reducer
# =============================================================================

def test_set_field_returns_new_state():
    state = EditorState()
    changed = reduce(state, SetToolField("title", "Novo"))
    assert changed.tool["title"] == "Novo"
    assert state.tool["title"] == ""
    with pytest.raises(TypeError):
        changed.tool["title"] = "mutated"


def test_default_state_starts_from_empty_forms():
    state = EditorState()
    assert state == EditorState()
    assert set(state.tool) == set(TOOL_FORM_FIELDS)
    assert set(state.details) == set(DETAIL_FORM_FIELDS)
    assert not any(state.tool.values())
    assert not state.is_editing


def test_unknown_field_is_rejected():
    with pytest.raises(KeyError):
        reduce(EditorState(), SetToolField("nope", "x"))


def test_unknown_action_is_rejected():
    with pytest.raises(TypeError):
        reduce(EditorState(), object())


def test_start_edit_loads_both_forms():
    tool = {"id": 7, "title": "T", "description": "D", "linkUrl": "L", "badge": None}
    details = {"slug": "t-page", "owner": "Ana", "tags": None}
    state = reduce(EditorState(), StartEdit(tool, details))
    assert state.editing_id == 7
    assert state.is_editing
    assert state.tool["title"] == "T"
    assert state.tool["badge"] == ""
    assert state.details["slug"] == "t-page"
    assert state.details["tags"] == ""
    assert state.has_detail_content


def test_start_edit_without_details():
    state = reduce(EditorState(), StartEdit({"id": 1, "title": "T"}, None))
    assert not state.has_detail_content


def test_image_failure_and_reset():
    state = reduce(EditorState(), ImageUploaded("http://x/uploads/1-a.png"))
    assert state.tool["imageUrl"] == "http://x/uploads/1-a.png"
    state = reduce(state, Failed("boom"))
    assert state.error == "boom"
    assert reduce(state, Reset()) == EditorState()


def test_payloads():
    state = filled_form()
    assert tool_payload(state)["badge"] is None
    assert tool_payload(state)["linkUrl"] == "https://example.com/mapa"

    state = reduce(state, SetDetailField("owner", "Equipe"))
    payload = detail_payload(state, 42)
    assert payload["tool_id"] == 42
    assert payload["slug"] == "mapa-de-agencias"
    assert payload["owner"] == "Equipe"
    assert payload["tags"] is None

    state = reduce(state, SetDetailField("slug", "meu-mapa"))
    assert detail_payload(state, 42)["slug"] == "meu-mapa"


# =============================================================================
# API flows
# =============================================================================

@pytest.mark.anyio
async def test_submit_creates_tool_without_details(api):
    state, saved = await submit(api, filled_form("Sem Detalhes"))
    assert saved is not None
    assert state == EditorState()
    assert await api.get_tool_detail_by_tool(saved["id"]) is None


@pytest.mark.anyio
async def test_submit_creates_tool_and_details(api):
    state = filled_form("Mapa Completo")
    state = reduce(state, SetDetailField("content_md", "# Mapa"))
    state, saved = await submit(api, state)
    assert state.error == ""

    detail = await api.get_tool_detail_by_tool(saved["id"])
    assert detail["slug"] == "mapa-completo"
    assert detail["content_md"] == "# Mapa"

    page = await api.get_tool_page("mapa-completo")
    assert page["title"] == "Mapa Completo"


@pytest.mark.anyio
async def test_edit_flow_updates_tool_and_details(api):
    state = reduce(filled_form("Editável"), SetDetailField("slug", "editavel"))
    _, saved = await submit(api, state)

    state = await load_for_edit(api, saved["id"])
    assert state.editing_id == saved["id"]
    assert state.details["slug"] == "editavel"

    state = reduce(state, SetToolField("title", "Editável v2"))
    state = reduce(state, SetDetailField("owner", "Ana"))
    state, updated = await submit(api, state)
    assert updated["id"] == saved["id"]
    assert updated["title"] == "Editável v2"

    detail = await api.get_tool_detail_by_tool(saved["id"])
    assert detail["owner"] == "Ana"
    assert detail["slug"] == "editavel"


@pytest.mark.anyio
async def test_submit_reports_validation_error(api):
    state = fill(EditorState(), title="Incompleto")
    next_state, saved = await submit(api, state)
    assert saved is None
    assert "description" in next_state.error
    assert next_state.tool == state.tool


@pytest.mark.anyio
async def test_detail_failure_switches_to_editing(api):
    first = reduce(filled_form("Dono do Slug"), SetDetailField("slug", "slug-ocupado"))
    await submit(api, first)

    second = reduce(filled_form("Intruso"), SetDetailField("slug", "slug-ocupado"))
    state, saved = await submit(api, second)
    assert saved is None
    assert "slug-ocupado" in state.error
    assert state.is_editing

    tool = await api.get_tool(state.editing_id)
    assert tool["title"] == "Intruso"


@pytest.mark.anyio
async def test_upload_image_into_form(api):
    state = await upload_image(api, EditorState(), b"img", "foto.jpg")
    assert state.tool["imageUrl"].endswith("-foto.jpg")
    assert state.error == ""


@pytest.mark.anyio
async def test_remove_tool(api):
    _, saved = await submit(api, filled_form("Descartável"))
    await remove(api, saved["id"])
    with pytest.raises(ClientError) as excinfo:
        await api.get_tool(saved["id"])
    assert excinfo.value.status_code == 404


@pytest.mark.anyio
async def test_tool_page_slug_stays_one_path_segment(api):
    with pytest.raises(ClientError) as excinfo:
        await api.get_tool_page("../tools")
    assert excinfo.value.status_code == 404
